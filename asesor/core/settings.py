"""Application settings with environment variable support.

Uses pydantic-settings for typed configuration validation. Scoring weights
and profile thresholds live in scoring_constants and are not configurable.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class AsesorSettings(BaseSettings):
    """Application configuration loaded from environment variables."""

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    json_logs: bool = Field(default=False, description="Render logs as JSON")
    log_dir: str | None = Field(default=None, description="Directory for a rotating log file; console only when unset")

    model_config = {
        "env_prefix": "ASESOR_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> AsesorSettings:
    """Get cached application settings."""
    return AsesorSettings()
