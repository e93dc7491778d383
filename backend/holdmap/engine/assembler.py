"""Hold assembly: runs extraction, tracing and simplification over a whole map image."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable

import numpy as np
from numpy.typing import NDArray

from holdmap.engine.config import DetectionConfig
from holdmap.engine.primitives import Region
from holdmap.engine.regions import extract_regions
from holdmap.engine.simplify import simplify_polygon
from holdmap.engine.tracer import trace_contour
from holdmap.models.holds import DEFAULT_VERSION, Hold, HoldConfiguration, PolygonPoint

logger = logging.getLogger(__name__)


def bounding_box(region: Region) -> tuple[int, int, int, int]:
    """Axis-aligned (x, y, width, height) covering every pixel of ``region``."""
    min_x, min_y, max_x, max_y = region.extrema()
    return min_x, min_y, max_x - min_x + 1, max_y - min_y + 1


def build_hold(hold_id: int, region: Region, config: DetectionConfig | None = None) -> Hold:
    """Bounding box plus simplified outline for one region."""
    config = config or DetectionConfig()
    x, y, width, height = bounding_box(region)

    trace = trace_contour(region, config.max_contour_points)
    if trace.truncated:
        logger.warning(
            "Hold %d: boundary trace hit the %d point cap at (%d, %d); outline is partial",
            hold_id,
            config.max_contour_points,
            x,
            y,
        )

    simplified = simplify_polygon(trace.points, config.simplification_epsilon)
    return Hold(
        id=hold_id,
        x=x,
        y=y,
        width=width,
        height=height,
        polygon=tuple(PolygonPoint(x=p.x, y=p.y) for p in simplified),
    )


def assemble_holds(regions: Iterable[Region], config: DetectionConfig | None = None) -> list[Hold]:
    """One hold per non-empty region, ids in discovery order starting at 0."""
    config = config or DetectionConfig()
    holds: list[Hold] = []
    for region in regions:
        if region.is_empty:
            continue
        holds.append(build_hold(len(holds), region, config))
    return holds


def detect_holds(
    grid: NDArray[np.uint8],
    wall_image_ref: str,
    version: str = DEFAULT_VERSION,
    config: DetectionConfig | None = None,
) -> HoldConfiguration:
    """Detect every hold in a binary map image (white holds on black)."""
    config = config or DetectionConfig()
    start = time.perf_counter()

    regions = extract_regions(grid, config)
    t_regions = time.perf_counter()
    logger.debug("  regions: %d in %.1fms", len(regions), (t_regions - start) * 1000)

    holds = assemble_holds(regions, config)
    elapsed = (time.perf_counter() - start) * 1000
    logger.debug("  outlines: %d in %.1fms", len(holds), (time.perf_counter() - t_regions) * 1000)

    height, width = grid.shape[:2]
    logger.info("Detection complete: %d holds in %dx%d map in %.0fms", len(holds), width, height, elapsed)

    return HoldConfiguration(
        wall_image=wall_image_ref,
        image_width=width,
        image_height=height,
        holds=tuple(holds),
        version=version,
    )
