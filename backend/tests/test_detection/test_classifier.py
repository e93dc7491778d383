"""Tests for foreground classification."""

from __future__ import annotations

import numpy as np
import pytest

from holdmap.engine.classifier import foreground_mask, is_foreground


@pytest.mark.parametrize(
    "sample, expected",
    [
        ((255, 255, 255), True),
        ((201, 201, 201), True),
        ((200, 255, 255), False),
        ((255, 200, 255), False),
        ((255, 255, 200), False),
        ((0, 0, 0), False),
        ((255, 255, 255, 0), True),
    ],
)
def test_is_foreground(sample, expected):
    assert is_foreground(sample) is expected


def test_custom_threshold():
    assert is_foreground((120, 130, 140), threshold=100)
    assert not is_foreground((120, 130, 140), threshold=120)


def test_mask_agrees_with_per_pixel_decision():
    rng = np.random.default_rng(3)
    grid = rng.integers(150, 256, size=(12, 17, 3), dtype=np.uint8)
    mask = foreground_mask(grid)
    for y in range(grid.shape[0]):
        for x in range(grid.shape[1]):
            assert mask[y, x] == is_foreground(grid[y, x])


def test_mask_ignores_alpha_channel():
    grid = np.full((2, 2, 4), 255, dtype=np.uint8)
    grid[..., 3] = 0
    assert foreground_mask(grid).all()


def test_mask_rejects_non_rgb_grid():
    with pytest.raises(ValueError):
        foreground_mask(np.zeros((4, 4), dtype=np.uint8))
