"""API response models."""

from __future__ import annotations

from holdmap.models.holds import CamelModel


class HealthResponse(CamelModel):
    status: str = "ok"
    version: str = "0.1.0"
    default_version: str = "v1"


class DisplayResponse(CamelModel):
    scale_x: float
    scale_y: float
    offset_x: float
    offset_y: float
    valid: bool


class HitTestResponse(CamelModel):
    hold_id: int | None = None
    valid: bool = True
    image_x: float | None = None
    image_y: float | None = None
