"""Pixel-space value types shared by the detection stages."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from typing import NamedTuple


class Point(NamedTuple):
    """Integer pixel coordinate, origin top-left."""

    x: int
    y: int


@dataclass
class Region:
    """One 4-connected foreground component, pixels in flood-fill order."""

    pixels: list[Point] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.pixels)

    def __contains__(self, point: object) -> bool:
        return point in self.pixel_set

    @cached_property
    def pixel_set(self) -> frozenset[Point]:
        return frozenset(self.pixels)

    @property
    def is_empty(self) -> bool:
        return not self.pixels

    def extrema(self) -> tuple[int, int, int, int]:
        """(min_x, min_y, max_x, max_y) over the region's pixels."""
        if not self.pixels:
            raise ValueError("empty region has no extrema")
        xs = [p.x for p in self.pixels]
        ys = [p.y for p in self.pixels]
        return min(xs), min(ys), max(xs), max(ys)
