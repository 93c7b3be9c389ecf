"""
Package settings (Pydantic).

Defaults live on the model. Each field can be overridden by an environment
variable with the `GREATCIRCLE_` prefix, e.g. `GREATCIRCLE_EARTH_RADIUS_KM`.
"""
from __future__ import annotations

import os
from functools import lru_cache
from typing import Any

from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "GREATCIRCLE_"

# Mean spherical radius, not the WGS84 equatorial radius.
DEFAULT_EARTH_RADIUS_KM = 6372.8


class Settings(BaseModel):
    earth_radius_km: float = Field(DEFAULT_EARTH_RADIUS_KM, gt=0)
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        return value.strip().upper()


def _env_overrides() -> dict[str, Any]:
    """Collect `GREATCIRCLE_*` environment variables that map onto Settings fields."""
    overrides: dict[str, Any] = {}
    for name in Settings.model_fields:
        raw = os.getenv(f"{ENV_PREFIX}{name.upper()}")
        if raw is not None and raw.strip():
            overrides[name] = raw.strip()
    return overrides


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings once per process. Call `get_settings.cache_clear()` to reload."""
    return Settings(**_env_overrides())
