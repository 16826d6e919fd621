"""Bounded retry of a boolean predicate."""

import threading
import time
from datetime import timedelta
from typing import Callable, Optional, Union

from domain.base.exceptions import InvalidArgumentError
from domain.base.ports.logging_port import LoggingPort, NullLoggingPort

Duration = Union[float, int, timedelta]


def _seconds(name: str, value: Duration) -> float:
    seconds = value.total_seconds() if isinstance(value, timedelta) else float(value)
    if seconds < 0:
        raise InvalidArgumentError(f"{name} must not be negative, got {value}")
    return seconds


class BoundedRetryPoller:
    """
    Call a predicate until it returns True or a deadline passes.

    The poller sleeps ``period`` seconds between calls, multiplying the
    delay by ``backoff_factor`` after each miss up to ``max_period``. A sleep
    never extends past the deadline. Exceptions raised by the predicate are
    not retried: they propagate to the caller on the first occurrence.

    Waiting can be abandoned early through ``interrupt``: setting the event
    (or an ``InterruptedError`` raised while sleeping) makes :meth:`apply`
    return False.
    """

    def __init__(
        self,
        timeout: Duration,
        period: Duration = 0.05,
        max_period: Optional[Duration] = None,
        backoff_factor: float = 1.0,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
        interrupt: Optional[threading.Event] = None,
        logger: Optional[LoggingPort] = None,
    ) -> None:
        self.timeout = _seconds("timeout", timeout)
        self.period = _seconds("period", period)
        self.max_period = _seconds("max_period", max_period) if max_period is not None else None
        if backoff_factor < 1.0:
            raise InvalidArgumentError(f"backoff_factor must be at least 1.0, got {backoff_factor}")
        self.backoff_factor = backoff_factor
        self._clock = clock
        self._sleep = sleep
        self._interrupt = interrupt
        self._logger = logger or NullLoggingPort()

    def apply(self, predicate: Callable[[], bool]) -> bool:
        """
        Poll ``predicate`` until it holds.

        Args:
            predicate: Zero-argument callable; any exception it raises propagates

        Returns:
            True once the predicate held, False on timeout or interruption
        """
        name = getattr(predicate, "__name__", type(predicate).__name__)
        deadline = self._clock() + self.timeout
        delay = self.period
        attempts = 0
        while True:
            attempts += 1
            if predicate():
                return True
            remaining = deadline - self._clock()
            if remaining <= 0:
                self._logger.debug(
                    "%s not satisfied after %d attempt(s) in %.1fs", name, attempts, self.timeout
                )
                return False
            if not self._wait(min(delay, remaining)):
                self._logger.debug("gave up waiting on %s after %d attempt(s)", name, attempts)
                return False
            delay = self._next_delay(delay)

    __call__ = apply

    def _next_delay(self, delay: float) -> float:
        delay *= self.backoff_factor
        if self.max_period is not None:
            delay = min(delay, self.max_period)
        return delay

    def _wait(self, seconds: float) -> bool:
        """Sleep; return False when the wait was interrupted."""
        try:
            if self._interrupt is not None:
                return not self._interrupt.wait(seconds)
            self._sleep(seconds)
        except InterruptedError:
            return False
        return True


def retry(
    predicate: Callable[[], bool],
    timeout: Duration,
    period: Duration = 0.05,
    **kwargs,
) -> bool:
    """Poll ``predicate`` until it holds or ``timeout`` elapses; see :class:`BoundedRetryPoller`."""
    return BoundedRetryPoller(timeout, period, **kwargs).apply(predicate)
