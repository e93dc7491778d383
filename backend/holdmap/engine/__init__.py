"""Hold detection and hit-testing engine."""

from holdmap.engine.assembler import assemble_holds, bounding_box, build_hold, detect_holds
from holdmap.engine.classifier import foreground_mask, is_foreground
from holdmap.engine.config import DetectionConfig
from holdmap.engine.display import DisplayParameters, compute_display_parameters
from holdmap.engine.hit_test import find_hit, find_hit_id, point_in_polygon
from holdmap.engine.primitives import Point, Region
from holdmap.engine.regions import extract_regions
from holdmap.engine.simplify import perpendicular_distance, simplify_polygon
from holdmap.engine.tracer import trace_boundary, trace_contour

__all__ = [
    "assemble_holds",
    "bounding_box",
    "build_hold",
    "detect_holds",
    "foreground_mask",
    "is_foreground",
    "DetectionConfig",
    "DisplayParameters",
    "compute_display_parameters",
    "find_hit",
    "find_hit_id",
    "point_in_polygon",
    "Point",
    "Region",
    "extract_regions",
    "perpendicular_distance",
    "simplify_polygon",
    "trace_boundary",
    "trace_contour",
]
