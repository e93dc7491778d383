"""Shared test fixtures: synthetic hold maps built with numpy."""

from __future__ import annotations

import io

import numpy as np
import pytest
from PIL import Image

WHITE = (255, 255, 255)


def make_grid(
    width: int,
    height: int,
    rects: list[tuple[int, int, int, int]] | None = None,
    pixels: list[tuple[int, int]] | None = None,
    color: tuple[int, int, int] = WHITE,
) -> np.ndarray:
    """Black (H, W, 3) grid with white rectangles (x0, y0, x1, y1 inclusive) and pixels."""
    grid = np.zeros((height, width, 3), dtype=np.uint8)
    for x0, y0, x1, y1 in rects or []:
        grid[y0 : y1 + 1, x0 : x1 + 1] = color
    for x, y in pixels or []:
        grid[y, x] = color
    return grid


def make_disk(width: int, height: int, cx: float, cy: float, r: float) -> np.ndarray:
    yy, xx = np.mgrid[0:height, 0:width]
    grid = np.zeros((height, width, 3), dtype=np.uint8)
    grid[(xx - cx) ** 2 + (yy - cy) ** 2 <= r * r] = WHITE
    return grid


def png_bytes(grid: np.ndarray) -> bytes:
    buf = io.BytesIO()
    Image.fromarray(grid).save(buf, format="PNG")
    return buf.getvalue()


# 10x10 map with one 4x4 hold covering (3, 3)-(6, 6)
SQUARE_CONTOUR = [
    (3, 3), (4, 3), (5, 3), (6, 3),
    (6, 4), (6, 5), (6, 6),
    (5, 6), (4, 6), (3, 6),
    (3, 5), (3, 4),
]


@pytest.fixture
def square_grid() -> np.ndarray:
    return make_grid(10, 10, rects=[(3, 3, 6, 6)])


@pytest.fixture
def two_squares_grid() -> np.ndarray:
    return make_grid(10, 10, rects=[(1, 1, 2, 2), (6, 5, 7, 6)])


@pytest.fixture
def random_grid() -> np.ndarray:
    rng = np.random.default_rng(7)
    mask = rng.random((40, 60)) > 0.55
    grid = np.zeros((40, 60, 3), dtype=np.uint8)
    grid[mask] = WHITE
    return grid
