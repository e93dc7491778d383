"""Master API router: mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from holdmap.api import configurations, detect, health, hit_test

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(detect.router)
api_router.include_router(hit_test.router)
api_router.include_router(configurations.router)
