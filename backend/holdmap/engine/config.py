"""Detection configuration: controls thresholding, tracing and simplification."""

from __future__ import annotations

from dataclasses import dataclass

# A channel must be strictly above this value for a pixel to count as hold.
WHITE_THRESHOLD = 200

# Douglas-Peucker tolerance in image pixels. Higher = smoother, fewer vertices.
SIMPLIFICATION_EPSILON = 8.0

# Hard cap on traced boundary length; guarantees termination on odd shapes.
MAX_CONTOUR_POINTS = 10000


@dataclass
class DetectionConfig:
    """Knobs for one detection run."""

    white_threshold: int = WHITE_THRESHOLD
    simplification_epsilon: float = SIMPLIFICATION_EPSILON
    max_contour_points: int = MAX_CONTOUR_POINTS

    def __post_init__(self) -> None:
        if not 0 <= self.white_threshold <= 255:
            raise ValueError(f"white_threshold must be in [0, 255], got {self.white_threshold}")
        if self.simplification_epsilon <= 0:
            raise ValueError(
                f"simplification_epsilon must be positive, got {self.simplification_epsilon}"
            )
        if self.max_contour_points < 1:
            raise ValueError(f"max_contour_points must be >= 1, got {self.max_contour_points}")
