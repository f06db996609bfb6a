"""Runtime settings for the grid-route command."""

from __future__ import annotations

import os
from functools import lru_cache
from typing import Mapping, Optional

from pydantic import BaseModel, field_validator

from grid import EMPTY

ENV_PREFIX = "GRIDROUTE_"
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    """Which features to route between and how loudly to log."""
    source_marker: str = "m"   # "me"
    target_marker: str = "p"   # destination point
    log_level: str = "WARNING"

    @field_validator("source_marker", "target_marker")
    @classmethod
    def _single_feature_marker(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError(f"marker must be exactly one character, got {value!r}")
        if value == EMPTY:
            raise ValueError(f"{EMPTY!r} is reserved for empty cells")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r}, expected one of {', '.join(LOG_LEVELS)}")
        return level

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from GRIDROUTE_* variables; unset ones keep their defaults."""
        env = os.environ if environ is None else environ
        keys = {
            "source_marker": "FROM",
            "target_marker": "TO",
            "log_level": "LOG_LEVEL",
        }
        values = {field: env[ENV_PREFIX + key] for field, key in keys.items() if ENV_PREFIX + key in env}
        return cls(**values)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()


__all__ = ["Settings", "get_settings", "ENV_PREFIX"]
