"""Pydantic configuration schemas."""

from .app_schema import AppConfig
from .logging_schema import LoggingConfig
from .timeouts_schema import TimeoutsConfig

__all__: list[str] = ["AppConfig", "LoggingConfig", "TimeoutsConfig"]
