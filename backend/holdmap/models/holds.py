"""Hold configuration data model: the interchange document between detection and consumers.

Attributes are snake_case in Python and camelCase on the wire
(``wallImage``, ``imageWidth``, ...).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Version tag written into every generated configuration unless overridden.
# Bump it when a new wall image set is published.
DEFAULT_VERSION = "v1"


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PolygonPoint(CamelModel):
    model_config = ConfigDict(frozen=True)

    x: int
    y: int


class Hold(CamelModel):
    model_config = ConfigDict(frozen=True)

    id: int
    x: int
    y: int
    width: int
    height: int
    # Empty polygon = no contour; consumers fall back to the bounding box.
    polygon: tuple[PolygonPoint, ...] = ()

    @property
    def has_polygon(self) -> bool:
        """True when the polygon can enclose area (at least 3 vertices)."""
        return len(self.polygon) >= 3


class HoldConfiguration(CamelModel):
    model_config = ConfigDict(frozen=True)

    wall_image: str
    image_width: int = Field(..., ge=0)
    image_height: int = Field(..., ge=0)
    holds: tuple[Hold, ...] = ()
    version: str = DEFAULT_VERSION

    @property
    def hold_ids(self) -> set[int]:
        return {hold.id for hold in self.holds}


class SelectedHolds(CamelModel):
    selected_ids: list[int] = Field(default_factory=list)
