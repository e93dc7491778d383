"""Image decoding and wall/map size reconciliation (Pillow)."""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import BinaryIO

import numpy as np
from numpy.typing import NDArray
from PIL import Image, UnidentifiedImageError

from holdmap.errors import ImageLoadError

logger = logging.getLogger(__name__)

_WRITABLE_FORMATS = {"png": "PNG", "jpg": "JPEG", "jpeg": "JPEG"}

ImageSource = str | Path | bytes | BinaryIO


def _open(source: ImageSource) -> Image.Image:
    if isinstance(source, (bytes, bytearray)):
        source = io.BytesIO(source)
    try:
        return Image.open(source)
    except (OSError, UnidentifiedImageError, ValueError, Image.DecompressionBombError) as e:
        raise ImageLoadError(f"Cannot open image: {e}") from e


def load_pixel_grid(source: ImageSource) -> NDArray[np.uint8]:
    """Decode an image into an (H, W, 3) uint8 RGB grid."""
    with _open(source) as img:
        try:
            return np.array(img.convert("RGB"), dtype=np.uint8)
        except (OSError, ValueError, Image.DecompressionBombError) as e:
            raise ImageLoadError(f"Cannot decode image: {e}") from e


def ensure_wall_image_matches(
    wall_image_path: str | Path,
    target_width: int,
    target_height: int,
) -> bool:
    """Resize the wall photo in place to the map's dimensions if they differ.

    Returns True when the file was rewritten. Unknown extensions are written
    as PNG under the same name.
    """
    path = Path(wall_image_path)
    with _open(path) as img:
        width, height = img.size
        if (width, height) == (target_width, target_height):
            logger.info("Wall image dimensions match map dimensions (%dx%d)", width, height)
            return False

        logger.info(
            "Wall image dimensions (%dx%d) differ from map (%dx%d); resizing",
            width,
            height,
            target_width,
            target_height,
        )
        resized = img.convert("RGB").resize(
            (target_width, target_height), Image.Resampling.BICUBIC
        )

    fmt = _WRITABLE_FORMATS.get(path.suffix.lower().lstrip("."), "PNG")
    try:
        resized.save(path, format=fmt)
    except OSError as e:
        raise ImageLoadError(f"Cannot write resized wall image to {path}: {e}") from e

    logger.info("Wall image resized and saved to %s", path)
    return True
