"""Mini README: Centralised configuration model and helpers for the marina manager.

Structure:
    * MarinaSettings - Pydantic settings describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read ``MARINA_`` environment variables (or a
    local ``.env`` file). The configuration is cached so validation happens
    once per process; tests call ``get_settings.cache_clear()`` after
    patching the environment.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_MAX_VESSELS = 120


class MarinaSettings(BaseSettings):
    """Runtime configuration for the marina fleet manager."""

    model_config = SettingsConfigDict(
        env_prefix="MARINA_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    max_vessels: int = Field(
        DEFAULT_MAX_VESSELS,
        description="Upper bound on the number of vessels the fleet store accepts.",
        ge=1,
    )
    strict_location_ranges: bool = Field(
        False,
        description=(
            "Reject slip numbers outside 1-85 and storage spots outside 1-50."
            " When disabled such values are accepted with a logged warning."
        ),
    )
    log_level: str = Field(
        "INFO",
        description="Root logging level name (DEBUG, INFO, WARNING, ERROR).",
    )

    @field_validator("log_level")
    @classmethod
    def _normalise_level(cls, value: str) -> str:
        """Upper-case the level and ensure logging recognises it."""

        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


@lru_cache()
def get_settings() -> MarinaSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return MarinaSettings()
