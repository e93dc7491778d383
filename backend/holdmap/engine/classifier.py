"""Foreground/background decision for raw pixel samples."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from holdmap.engine.config import WHITE_THRESHOLD


def is_foreground(sample: Sequence[int] | NDArray[np.uint8], threshold: int = WHITE_THRESHOLD) -> bool:
    """True iff the red, green and blue channels all exceed ``threshold``.

    Extra channels (alpha) are ignored.
    """
    return int(sample[0]) > threshold and int(sample[1]) > threshold and int(sample[2]) > threshold


def foreground_mask(grid: NDArray[np.uint8], threshold: int = WHITE_THRESHOLD) -> NDArray[np.bool_]:
    """Vectorized ``is_foreground`` over an (H, W, C) pixel grid."""
    if grid.ndim != 3 or grid.shape[2] < 3:
        raise ValueError(f"expected an (H, W, 3|4) pixel grid, got shape {grid.shape}")
    return np.all(grid[:, :, :3] > threshold, axis=2)
