"""API request models."""

from __future__ import annotations

from pydantic import Field

from holdmap.models.holds import DEFAULT_VERSION, CamelModel, HoldConfiguration


class DetectRequest(CamelModel):
    image: str = Field(..., description="Base64-encoded binary map image (white holds on black)")
    wall_image: str = Field(..., description="File name of the wall photo the map belongs to")
    version: str = Field(default=DEFAULT_VERSION, description="Version identifier for the image set")
    epsilon: float | None = Field(default=None, gt=0, description="Simplification tolerance override")
    threshold: int | None = Field(default=None, ge=0, le=255, description="White threshold override")


class DisplayRequest(CamelModel):
    viewport_width: float = Field(..., description="Viewport width in display units")
    viewport_height: float = Field(..., description="Viewport height in display units")
    image_width: int = Field(..., description="Image width in pixels")
    image_height: int = Field(..., description="Image height in pixels")


class HitTestRequest(CamelModel):
    configuration: HoldConfiguration
    viewport_width: float = Field(..., description="Viewport width in display units")
    viewport_height: float = Field(..., description="Viewport height in display units")
    x: float = Field(..., description="Click x in viewport coordinates")
    y: float = Field(..., description="Click y in viewport coordinates")
