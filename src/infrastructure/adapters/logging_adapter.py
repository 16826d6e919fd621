"""LoggingPort implementation backed by the compute_core logger tree."""

import logging
from typing import Any, Optional

from domain.base.ports.logging_port import LoggingPort
from infrastructure.logging.logger import get_logger


class LoggingAdapter(LoggingPort):
    """Forward domain log calls to a stdlib logger under ``compute_core``.

    Records carry the file and line of the code that called the port, not
    of this adapter.
    """

    def __init__(self, name: str = "compute_core", logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or get_logger(name)

    @property
    def name(self) -> str:
        return self._logger.name

    def _emit(self, level: int, message: str, args: tuple, kwargs: dict[str, Any]) -> None:
        kwargs.setdefault("stacklevel", 3)
        self._logger.log(level, message, *args, **kwargs)

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._emit(logging.DEBUG, message, args, kwargs)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._emit(logging.INFO, message, args, kwargs)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._emit(logging.WARNING, message, args, kwargs)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._emit(logging.ERROR, message, args, kwargs)

    def critical(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._emit(logging.CRITICAL, message, args, kwargs)

    def exception(self, message: str, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("exc_info", True)
        self._emit(logging.ERROR, message, args, kwargs)

    def log(self, level: int, message: str, *args: Any, **kwargs: Any) -> None:
        self._emit(level, message, args, kwargs)
