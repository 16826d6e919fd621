"""Logging infrastructure."""

from .logger import get_logger, setup_logging

__all__: list[str] = ["get_logger", "setup_logging"]
