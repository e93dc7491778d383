"""holdmap-preprocess: detect holds in a map image and write holds.json.

Usage:
    holdmap-preprocess map.png wall.jpg -o holds.json -v v2
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from holdmap.engine.assembler import detect_holds
from holdmap.engine.config import MAX_CONTOUR_POINTS, SIMPLIFICATION_EPSILON, WHITE_THRESHOLD, DetectionConfig
from holdmap.errors import HoldmapError
from holdmap.models.holds import DEFAULT_VERSION
from holdmap.utils.imaging import ensure_wall_image_matches, load_pixel_grid
from holdmap.utils.storage import save_configuration

logger = logging.getLogger("holdmap.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="holdmap-preprocess",
        description="Detect climbing holds in a binary map image (white holds on black background)",
    )
    parser.add_argument("map_image", help="Path to the binary map image")
    parser.add_argument("wall_image", help="Path to the wall photo; resized in place to match the map")
    parser.add_argument("-o", "--output", default="holds.json", help="Output JSON path (default: holds.json)")
    parser.add_argument(
        "-v", "--version", dest="version_id", default=DEFAULT_VERSION,
        help=f"Version identifier for the image set (default: {DEFAULT_VERSION})",
    )
    parser.add_argument(
        "--epsilon", type=float, default=SIMPLIFICATION_EPSILON,
        help=f"Polygon simplification tolerance in pixels (default: {SIMPLIFICATION_EPSILON})",
    )
    parser.add_argument(
        "--threshold", type=int, default=WHITE_THRESHOLD,
        help=f"Channel value a pixel must exceed to count as hold (default: {WHITE_THRESHOLD})",
    )
    parser.add_argument(
        "--max-contour-points", type=int, default=MAX_CONTOUR_POINTS,
        help=f"Boundary trace length cap (default: {MAX_CONTOUR_POINTS})",
    )
    parser.add_argument("--log-level", default="INFO", help="Logging level (default: INFO)")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    map_path = Path(args.map_image)
    wall_path = Path(args.wall_image)
    if not map_path.exists():
        logger.error("Map image not found at: %s", map_path)
        return 1
    if not wall_path.exists():
        logger.error("Wall image not found at: %s", wall_path)
        return 1

    try:
        config = DetectionConfig(
            white_threshold=args.threshold,
            simplification_epsilon=args.epsilon,
            max_contour_points=args.max_contour_points,
        )
    except ValueError as e:
        logger.error("Invalid detection settings: %s", e)
        return 2

    logger.info("Processing map image: %s", map_path)
    logger.info("Wall image: %s", wall_path)

    try:
        grid = load_pixel_grid(map_path)
        height, width = grid.shape[:2]
        ensure_wall_image_matches(wall_path, width, height)
        result = detect_holds(grid, wall_path.name, version=args.version_id, config=config)
    except HoldmapError:
        logger.exception("Error processing images")
        return 1

    logger.info("Detected %d holds", len(result.holds))
    for hold in result.holds:
        logger.info(
            "  Hold #%d: position=(%d, %d), size=(%dx%d), %d vertices",
            hold.id, hold.x, hold.y, hold.width, hold.height, len(hold.polygon),
        )

    out = save_configuration(result, args.output)
    logger.info("Configuration saved to: %s", out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
