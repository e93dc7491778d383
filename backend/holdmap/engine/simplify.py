"""Douglas-Peucker polyline simplification over pixel points."""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from holdmap.engine.config import SIMPLIFICATION_EPSILON
from holdmap.engine.primitives import Point


def perpendicular_distance(point: Point, line_start: Point, line_end: Point) -> float:
    """Distance from ``point`` to the infinite line through the two endpoints.

    Falls back to point-to-point distance when the endpoints coincide.
    """
    dx = float(line_end.x - line_start.x)
    dy = float(line_end.y - line_start.y)
    norm = math.sqrt(dx * dx + dy * dy)

    if norm == 0.0:
        px = float(point.x - line_start.x)
        py = float(point.y - line_start.y)
        return math.sqrt(px * px + py * py)

    numerator = abs(
        dy * point.x - dx * point.y + line_end.x * line_start.y - line_end.y * line_start.x
    )
    return numerator / norm


def _chord_distances(coords: NDArray[np.float64], first: int, last: int) -> NDArray[np.float64]:
    """Distances of ``coords[first + 1:last]`` from the chord ``first -> last``."""
    sx, sy = coords[first]
    ex, ey = coords[last]
    dx = ex - sx
    dy = ey - sy
    interior = coords[first + 1 : last]
    px = interior[:, 0]
    py = interior[:, 1]

    norm = np.sqrt(dx * dx + dy * dy)
    if norm == 0.0:
        return np.hypot(px - sx, py - sy)
    return np.abs(dy * px - dx * py + ex * sy - ey * sx) / norm


def simplify_polygon(
    points: Sequence[Point],
    epsilon: float = SIMPLIFICATION_EPSILON,
) -> list[Point]:
    """Douglas-Peucker simplification of an ordered point sequence.

    Keeps the first and last points. A range is split at its farthest point
    from the chord when that distance is strictly greater than ``epsilon``,
    otherwise its interior is dropped. Uses an explicit stack of index
    ranges; the result matches the recursive formulation, including the
    first-maximum tie-break.
    """
    if epsilon <= 0:
        raise ValueError(f"epsilon must be positive, got {epsilon}")
    if len(points) < 3:
        return list(points)

    coords = np.array(points, dtype=np.float64).reshape(-1, 2)
    keep = np.zeros(len(points), dtype=bool)
    keep[0] = keep[-1] = True
    stack = [(0, len(points) - 1)]

    while stack:
        first, last = stack.pop()
        if last - first < 2:
            continue

        distances = _chord_distances(coords, first, last)
        offset = int(np.argmax(distances))
        if distances[offset] > epsilon:
            max_index = first + 1 + offset
            keep[max_index] = True
            stack.append((first, max_index))
            stack.append((max_index, last))

    return [p for p, kept in zip(points, keep) if kept]
