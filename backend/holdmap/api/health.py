"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from holdmap import __version__
from holdmap.config import Settings
from holdmap.dependencies import get_settings
from holdmap.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(settings: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(status="ok", version=__version__, default_version=settings.default_version)
