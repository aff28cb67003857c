from __future__ import annotations

import os
from typing import Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_TIMEZONE_REGIONS: Tuple[str, ...] = (
    "Africa",
    "America",
    "Antarctica",
    "Arctic",
    "Asia",
    "Atlantic",
    "Australia",
    "Europe",
    "Indian",
    "Pacific",
)

REGIONS_ENV_VAR = "TINY_TIME_TIMEZONE_REGIONS"
LOG_LEVEL_ENV_VAR = "TINY_TIME_LOG_LEVEL"
LOG_LEVELS: Tuple[str, ...] = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


class Settings(BaseModel):
    """Runtime settings, read from the environment.

    Environment variables:
    - TINY_TIME_TIMEZONE_REGIONS  comma-separated region prefixes treated as canonical
    - TINY_TIME_LOG_LEVEL         log level used by the command line (default: WARNING)
    """

    model_config = ConfigDict(frozen=True)

    timezone_regions: Tuple[str, ...] = DEFAULT_TIMEZONE_REGIONS
    log_level: str = "WARNING"

    @field_validator("timezone_regions")
    @classmethod
    def _require_regions(cls, regions: Tuple[str, ...]) -> Tuple[str, ...]:
        if not regions:
            raise ValueError("at least one timezone region is required")
        return regions

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, level: str) -> str:
        level = level.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        values = {}
        regions = env.get(REGIONS_ENV_VAR)
        if regions:
            values["timezone_regions"] = tuple(part.strip() for part in regions.split(",") if part.strip())
        level = env.get(LOG_LEVEL_ENV_VAR)
        if level:
            values["log_level"] = level
        return cls(**values)
