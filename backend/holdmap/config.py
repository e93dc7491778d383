"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings

from holdmap.engine.config import DetectionConfig


class Settings(BaseSettings):
    holdmap_env: str = "development"
    holdmap_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:8080"]

    # Versioned wall data: <data_dir>/<version>/holds.json
    data_dir: str = "data"
    default_version: str = "v1"

    # Detection defaults
    white_threshold: int = Field(200, ge=0, le=255)
    simplification_epsilon: float = Field(8.0, gt=0)
    max_contour_points: int = Field(10000, ge=1)

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    def detection_config(self, **overrides: float | int | None) -> DetectionConfig:
        """DetectionConfig from these settings; ``None`` overrides are ignored."""
        values = {
            "white_threshold": self.white_threshold,
            "simplification_epsilon": self.simplification_epsilon,
            "max_contour_points": self.max_contour_points,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return DetectionConfig(**values)


settings = Settings()
