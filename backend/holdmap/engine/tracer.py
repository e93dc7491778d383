"""Moore-neighbourhood boundary tracing.

Directions are indexed clockwise from north:

    7 0 1
    6 . 2
    5 4 3
"""

from __future__ import annotations

from dataclasses import dataclass, field

from holdmap.engine.config import MAX_CONTOUR_POINTS
from holdmap.engine.primitives import Point, Region

DIRECTION_X = (0, 1, 1, 1, 0, -1, -1, -1)
DIRECTION_Y = (-1, -1, 0, 1, 1, 1, 0, -1)


@dataclass
class TraceResult:
    """Traced boundary plus whether the length cap cut it short."""

    points: list[Point] = field(default_factory=list)
    truncated: bool = False


def find_start_point(region: Region) -> Point | None:
    """Topmost pixel of the region, leftmost among ties."""
    if region.is_empty:
        return None
    return min(region.pixels, key=lambda p: (p.y, p.x))


def next_boundary_point(
    pixel_set: frozenset[Point],
    current: Point,
    search_start: int,
) -> tuple[Point, int] | None:
    """First region pixel clockwise from ``search_start`` around ``current``."""
    for i in range(8):
        direction = (search_start + i) % 8
        candidate = Point(current.x + DIRECTION_X[direction], current.y + DIRECTION_Y[direction])
        if candidate in pixel_set:
            return candidate, direction
    return None


def trace_contour(region: Region, max_points: int = MAX_CONTOUR_POINTS) -> TraceResult:
    """Walk the outer boundary of ``region`` clockwise.

    Stops on returning to the start pixel, on an isolated pixel, or once
    ``max_points`` points were emitted. Points may repeat where the boundary
    doubles back over one-pixel-wide protrusions.
    """
    start = find_start_point(region)
    if start is None:
        return TraceResult()

    pixel_set = region.pixel_set
    contour: list[Point] = []
    current = start
    direction = 0
    first_move = True

    while True:
        contour.append(current)

        search_start = 0 if first_move else (direction + 5) % 8
        found = next_boundary_point(pixel_set, current, search_start)
        if found is None:
            return TraceResult(points=contour)

        current, direction = found
        first_move = False
        if current == start:
            return TraceResult(points=contour)

        if len(contour) >= max_points:
            return TraceResult(points=contour, truncated=True)


def trace_boundary(region: Region, max_points: int = MAX_CONTOUR_POINTS) -> list[Point]:
    """Ordered boundary pixels of ``region``, empty for an empty region."""
    return trace_contour(region, max_points).points
