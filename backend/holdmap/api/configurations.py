"""GET /api/configurations/{version}: serve a stored hold configuration."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from holdmap.config import Settings
from holdmap.dependencies import get_settings
from holdmap.errors import ConfigurationLoadError
from holdmap.models.holds import HoldConfiguration
from holdmap.utils.storage import load_versioned_configuration

router = APIRouter()


@router.get("/configurations/{version}", response_model=HoldConfiguration)
def get_configuration(version: str, settings: Settings = Depends(get_settings)) -> HoldConfiguration:
    try:
        return load_versioned_configuration(settings.data_dir, version)
    except ConfigurationLoadError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
