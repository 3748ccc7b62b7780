"""Calendar configuration model."""

import logging
import os
from collections.abc import Mapping
from datetime import time
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

ENV_PREFIX = "EVENTCAL_"


class CalendarSettings(BaseModel):
    """Settings shared by Event construction and calendar logging.

    Args:
        day_start: Time of day a full-day event starts at.
        day_end: Time of day a full-day event ends at (must be after day_start).
        log_level: Level applied to the eventcal package logger.
    """

    day_start: time = Field(
        default=time(0, 0, 0), description="Time of day a full-day event starts at"
    )
    day_end: time = Field(
        default=time(23, 59, 59), description="Time of day a full-day event ends at"
    )
    log_level: str = Field(
        default="WARNING", description="Level applied to the eventcal logger"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check the logging level name."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @model_validator(mode="after")
    def check_day_bounds(self) -> "CalendarSettings":
        """Ensure a full-day span has positive duration.

        Returns:
            The validated settings.

        Raises:
            ValueError: If day_end is not after day_start.
        """
        if self.day_end <= self.day_start:
            raise ValueError(
                f"day_end ({self.day_end}) must be after day_start ({self.day_start})"
            )
        return self

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "CalendarSettings":
        """Build settings from EVENTCAL_* environment variables.

        Unset variables keep their defaults.

        Args:
            environ: Mapping to read from (defaults to os.environ).

        Returns:
            Validated CalendarSettings.
        """
        if environ is None:
            environ = os.environ

        values = {}
        for field_name in cls.model_fields:
            raw = environ.get(f"{ENV_PREFIX}{field_name.upper()}")
            if raw is not None and raw.strip():
                values[field_name] = raw.strip()
        return cls.model_validate(values)


_settings: CalendarSettings | None = None


def get_settings() -> CalendarSettings:
    """Get the shared CalendarSettings, loading it from the environment on first use."""
    global _settings

    if _settings is None:
        _settings = CalendarSettings.from_env()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None


def configure_logging(settings: Optional[CalendarSettings] = None) -> logging.Logger:
    """Apply the configured level to the eventcal package logger.

    Args:
        settings: Settings to apply (defaults to get_settings()).

    Returns:
        The eventcal package logger.
    """
    if settings is None:
        settings = get_settings()

    logger = logging.getLogger("eventcal")
    logger.setLevel(settings.log_level)
    return logger
