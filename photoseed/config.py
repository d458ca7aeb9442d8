"""
Runtime settings for photoseed using Pydantic settings.

Values come from defaults, overridden by environment variables with the
PHOTOSEED_ prefix (e.g. PHOTOSEED_DEVICE_INDEX=1).  Only acquirers and the
CLI read settings; seed derivation itself takes no configuration.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class PhotoSeedSettings(BaseSettings):
    """Camera and CLI defaults."""

    model_config = {"env_prefix": "PHOTOSEED_"}

    device_index: int = Field(default=0, ge=0, description="OpenCV camera index")
    capture_timeout: float = Field(
        default=5.0, gt=0, description="Seconds to wait for a frame before giving up"
    )
    warmup_frames: int = Field(
        default=0, ge=0, description="Frames discarded while exposure settles"
    )
    seed_file: str = Field(default="seed", description="Image path stem, '.png' is appended")
    sample_count: int = Field(default=10, ge=0, description="Demo draws printed per seed")
    log_level: str = Field(default="WARNING", description="Root log level for the CLI")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> PhotoSeedSettings:
    """Process-wide settings, read from the environment once."""
    return PhotoSeedSettings()
