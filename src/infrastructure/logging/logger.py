"""Logging setup for the compute core.

Loggers are plain stdlib loggers living under the ``compute_core``
namespace; structlog renders their records so that console and file output
share one format (key/value for humans, JSON for log shippers).
"""

import logging
import os
from typing import Optional

import structlog

from config.schemas.logging_schema import LoggingConfig

ROOT_LOGGER_NAME = "compute_core"

_SHARED_PROCESSORS = [
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
]


def get_logger(name: str) -> logging.Logger:
    """Get a logger nested under the ``compute_core`` namespace."""
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def _formatter(json_format: bool) -> structlog.stdlib.ProcessorFormatter:
    renderer = (
        structlog.processors.JSONRenderer()
        if json_format
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_SHARED_PROCESSORS,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            renderer,
        ],
    )


def setup_logging(config: Optional[LoggingConfig] = None) -> logging.Logger:
    """
    Configure the ``compute_core`` logger tree.

    Existing handlers on the root ``compute_core`` logger are replaced, so
    calling this twice does not duplicate output.

    Args:
        config: Logging configuration; defaults are used when omitted

    Returns:
        The configured ``compute_core`` logger
    """
    config = config or LoggingConfig()
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(getattr(logging, config.level.upper(), logging.INFO))
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = _formatter(config.json_format)
    if config.console_enabled:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if config.file_path:
        log_dir = os.path.dirname(config.file_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(config.file_path)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
    return logger
