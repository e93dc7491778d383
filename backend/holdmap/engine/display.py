"""Aspect-preserving fit of an image into a display viewport (letterbox/pillarbox)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DisplayParameters:
    """Image-to-display affine transform: display = image * scale + offset."""

    scale_x: float
    scale_y: float
    offset_x: float
    offset_y: float

    @property
    def is_valid(self) -> bool:
        return self.scale_x > 0 and self.scale_y > 0


INVALID_DISPLAY = DisplayParameters(0.0, 0.0, 0.0, 0.0)


def compute_display_parameters(
    viewport_width: float,
    viewport_height: float,
    image_width: float,
    image_height: float,
) -> DisplayParameters:
    """Scale and offset that fit the image inside the viewport, centered.

    Returns ``INVALID_DISPLAY`` for an empty viewport or image; check
    ``is_valid`` before using the result.
    """
    if viewport_width <= 0 or viewport_height <= 0:
        return INVALID_DISPLAY
    if image_width <= 0 or image_height <= 0:
        return INVALID_DISPLAY

    image_aspect = image_width / image_height
    viewport_aspect = viewport_width / viewport_height

    if viewport_aspect > image_aspect:
        # Viewport is wider: height-constrained, centered horizontally
        displayed_height = float(viewport_height)
        displayed_width = displayed_height * image_aspect
        offset_x = (viewport_width - displayed_width) / 2.0
        offset_y = 0.0
    else:
        # Viewport is taller: width-constrained, centered vertically
        displayed_width = float(viewport_width)
        displayed_height = displayed_width / image_aspect
        offset_x = 0.0
        offset_y = (viewport_height - displayed_height) / 2.0

    return DisplayParameters(
        scale_x=displayed_width / image_width,
        scale_y=displayed_height / image_height,
        offset_x=offset_x,
        offset_y=offset_y,
    )


def displayed_size(
    params: DisplayParameters, image_width: float, image_height: float
) -> tuple[float, float]:
    return image_width * params.scale_x, image_height * params.scale_y


def to_image_space(
    point: tuple[float, float], params: DisplayParameters
) -> tuple[float, float] | None:
    """Map a display coordinate back to image pixels; None if params are invalid."""
    if not params.is_valid:
        return None
    x, y = point
    return (x - params.offset_x) / params.scale_x, (y - params.offset_y) / params.scale_y


def to_display_space(point: tuple[float, float], params: DisplayParameters) -> tuple[float, float]:
    x, y = point
    return x * params.scale_x + params.offset_x, y * params.scale_y + params.offset_y
