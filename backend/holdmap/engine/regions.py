"""Connected-component extraction over a binary hold map.

Scans the grid row-major (top-to-bottom, then left-to-right) and flood fills
every unvisited foreground pixel into a 4-connected region. The order regions
are returned in is the order their seed pixel was scanned, which is what hold
ids are assigned from.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray

from holdmap.engine.classifier import foreground_mask
from holdmap.engine.config import DetectionConfig
from holdmap.engine.primitives import Point, Region

logger = logging.getLogger(__name__)


def extract_regions(
    grid: NDArray[np.uint8],
    config: DetectionConfig | None = None,
) -> list[Region]:
    """Partition the foreground pixels of ``grid`` into 4-connected regions."""
    config = config or DetectionConfig()
    mask = foreground_mask(grid, config.white_threshold)
    visited = np.zeros(mask.shape, dtype=np.bool_)
    height, width = mask.shape

    regions: list[Region] = []
    for y in range(height):
        for x in range(width):
            if visited[y, x] or not mask[y, x]:
                continue
            region = flood_fill(mask, visited, x, y)
            if region.is_empty:
                continue
            regions.append(region)

    logger.debug("Extracted %d regions from %dx%d grid", len(regions), width, height)
    return regions


def flood_fill(
    mask: NDArray[np.bool_],
    visited: NDArray[np.bool_],
    start_x: int,
    start_y: int,
) -> Region:
    """Stack-based 4-connected fill from (start_x, start_y).

    Marks every pixel it collects in ``visited``. Candidates are validated
    when popped, so a pixel pushed twice is still collected once.
    """
    height, width = mask.shape
    pixels: list[Point] = []
    stack = [Point(start_x, start_y)]

    while stack:
        point = stack.pop()
        x, y = point
        if x < 0 or x >= width or y < 0 or y >= height:
            continue
        if visited[y, x] or not mask[y, x]:
            continue

        visited[y, x] = True
        pixels.append(point)

        stack.append(Point(x + 1, y))
        stack.append(Point(x - 1, y))
        stack.append(Point(x, y + 1))
        stack.append(Point(x, y - 1))

    return Region(pixels=pixels)
