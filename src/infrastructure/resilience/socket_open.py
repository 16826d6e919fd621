"""TCP reachability probe."""

import socket
from typing import Any, Optional

from domain.base.ports.logging_port import LoggingPort, NullLoggingPort
from infrastructure.resilience.retry import BoundedRetryPoller, Duration


class SocketOpen:
    """Predicate that holds once ``host:port`` accepts a TCP connection."""

    def __init__(
        self,
        host: str,
        port: int,
        connect_timeout: float = 2.0,
        logger: Optional[LoggingPort] = None,
    ) -> None:
        self.host = host
        self.port = port
        self.connect_timeout = connect_timeout
        self._logger = logger or NullLoggingPort()
        self.__name__ = f"socketOpen({host}:{port})"

    def __call__(self) -> bool:
        self._logger.debug("testing socket %s:%s", self.host, self.port)
        try:
            with socket.create_connection((self.host, self.port), timeout=self.connect_timeout):
                self._logger.debug("socket %s:%s open", self.host, self.port)
                return True
        except OSError:
            return False


def await_port_open(
    host: str,
    port: int,
    timeout: Duration,
    period: Duration = 1.0,
    connect_timeout: float = 2.0,
    logger: Optional[LoggingPort] = None,
    **kwargs: Any,
) -> bool:
    """Block until ``host:port`` accepts connections; False on timeout."""
    probe = SocketOpen(host, port, connect_timeout=connect_timeout, logger=logger)
    return BoundedRetryPoller(timeout, period, logger=logger, **kwargs).apply(probe)
