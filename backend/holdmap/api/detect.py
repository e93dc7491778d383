"""POST /api/detect: binary map image in, hold configuration out."""

from __future__ import annotations

import base64
import binascii
import logging

from fastapi import APIRouter, Depends, HTTPException

from holdmap.config import Settings
from holdmap.dependencies import get_settings
from holdmap.engine.assembler import detect_holds
from holdmap.errors import ImageLoadError
from holdmap.models.holds import HoldConfiguration
from holdmap.models.requests import DetectRequest
from holdmap.utils.imaging import load_pixel_grid

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/detect", response_model=HoldConfiguration)
def detect(req: DetectRequest, settings: Settings = Depends(get_settings)) -> HoldConfiguration:
    # Sync endpoint: FastAPI runs it in the threadpool, detection is CPU-bound.
    try:
        raw = base64.b64decode(req.image, validate=True)
    except binascii.Error as e:
        raise HTTPException(status_code=422, detail=f"image is not valid base64: {e}") from e

    try:
        grid = load_pixel_grid(raw)
    except ImageLoadError as e:
        logger.warning("Rejected detect request: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e

    config = settings.detection_config(
        simplification_epsilon=req.epsilon,
        white_threshold=req.threshold,
    )
    return detect_holds(grid, req.wall_image, version=req.version, config=config)
