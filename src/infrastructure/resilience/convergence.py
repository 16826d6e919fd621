"""Status convergence polling for nodes and images.

A :class:`StateConvergencePoller` answers "has the resource reached its
intended status yet?" by refreshing the resource once per check. It fails
fast when the resource lands in a status from which the intended one can
no longer be reached.
"""

from collections.abc import Collection
from enum import Enum
from typing import Any, Callable, Generic, Optional, TypeVar

from domain.base.exceptions import InvalidStateError
from domain.base.ports.logging_port import LoggingPort, NullLoggingPort
from domain.image.aggregate import Image
from domain.image.value_objects import ImageStatus
from domain.node.aggregate import NodeMetadata
from domain.node.value_objects import NodeStatus
from infrastructure.resilience.retry import BoundedRetryPoller, Duration

R = TypeVar("R")


class ConvergenceCell(Generic[R]):
    """Last known snapshot of one resource.

    A cell belongs to exactly one poller and is not synchronized; give each
    observer its own cell.
    """

    def __init__(self, value: Optional[R] = None) -> None:
        self.value = value

    def get(self) -> Optional[R]:
        return self.value

    def set(self, value: Optional[R]) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"ConvergenceCell({self.value!r})"


class StateConvergencePoller(Generic[R]):
    """
    Check whether a resource has reached an intended status.

    Each :meth:`check`:

    1. returns True without refreshing when the cached snapshot is already
       at the intended status;
    2. otherwise refreshes the resource and caches the result, even when
       the resource is gone;
    3. returns ``absent_is_success`` when the resource is gone;
    4. raises ``InvalidStateError`` when the status is one of ``invalid``;
    5. returns whether the status equals ``intended``.
    """

    def __init__(
        self,
        resource_id: str,
        refresh: Callable[[str], Optional[R]],
        intended: Enum,
        invalid: Collection[Enum],
        absent_is_success: bool,
        cell: Optional[ConvergenceCell[R]] = None,
        resource_type: str = "resource",
        logger: Optional[LoggingPort] = None,
    ) -> None:
        self.resource_id = resource_id
        self.intended = intended
        self.invalid = frozenset(invalid)
        self.absent_is_success = absent_is_success
        self.cell = cell if cell is not None else ConvergenceCell()
        self.resource_type = resource_type
        self._refresh = refresh
        self._logger = logger or NullLoggingPort()
        self.__name__ = f"{resource_type}{intended.name.capitalize()}({resource_id})"

    def check(self) -> bool:
        """Run one refresh-and-compare step."""
        cached = self.cell.get()
        if cached is not None and _status(cached) == self.intended:
            return True

        self._logger.debug("refreshing %s %s", self.resource_type, self.resource_id)
        snapshot = self._refresh(self.resource_id)
        self.cell.set(snapshot)
        if snapshot is None:
            self._logger.debug(
                "%s %s no longer exists; treating as %s",
                self.resource_type,
                self.resource_id,
                "success" if self.absent_is_success else "not converged",
            )
            return self.absent_is_success

        status = _status(snapshot)
        if status in self.invalid:
            location = getattr(snapshot, "location", None)
            location_id = location.id if location is not None else None
            self._logger.warning(
                "%s %s in location %s reached %s while waiting for %s",
                self.resource_type,
                self.resource_id,
                location_id,
                status.name,
                self.intended.name,
            )
            raise InvalidStateError(
                f"{self.resource_type} {self.resource_id} in location {location_id} "
                f"is in invalid status {status.name}",
                details={
                    "resource_id": self.resource_id,
                    "location": location_id,
                    "status": status.name,
                    "intended": self.intended.name,
                },
            )
        self._logger.debug(
            "%s %s: looking for status %s, current: %s",
            self.resource_type,
            self.resource_id,
            self.intended.name,
            status.name,
        )
        return status == self.intended

    __call__ = check

    def __repr__(self) -> str:
        return self.__name__


def _status(snapshot: Any) -> Enum:
    return snapshot.status


def node_running(
    node_id: str,
    refresh: Callable[[str], Optional[NodeMetadata]],
    cell: Optional[ConvergenceCell[NodeMetadata]] = None,
    logger: Optional[LoggingPort] = None,
) -> StateConvergencePoller[NodeMetadata]:
    """Node is RUNNING; ERROR and TERMINATED are fatal and a vanished node has not converged."""
    return StateConvergencePoller(
        node_id,
        refresh,
        intended=NodeStatus.RUNNING,
        invalid={NodeStatus.ERROR, NodeStatus.TERMINATED},
        absent_is_success=False,
        cell=cell,
        resource_type="node",
        logger=logger,
    )


def node_terminated(
    node_id: str,
    refresh: Callable[[str], Optional[NodeMetadata]],
    cell: Optional[ConvergenceCell[NodeMetadata]] = None,
    logger: Optional[LoggingPort] = None,
) -> StateConvergencePoller[NodeMetadata]:
    """Node is TERMINATED or gone; ERROR is fatal."""
    return StateConvergencePoller(
        node_id,
        refresh,
        intended=NodeStatus.TERMINATED,
        invalid={NodeStatus.ERROR},
        absent_is_success=True,
        cell=cell,
        resource_type="node",
        logger=logger,
    )


def node_suspended(
    node_id: str,
    refresh: Callable[[str], Optional[NodeMetadata]],
    cell: Optional[ConvergenceCell[NodeMetadata]] = None,
    logger: Optional[LoggingPort] = None,
) -> StateConvergencePoller[NodeMetadata]:
    """Node is SUSPENDED; ERROR and TERMINATED are fatal."""
    return StateConvergencePoller(
        node_id,
        refresh,
        intended=NodeStatus.SUSPENDED,
        invalid={NodeStatus.ERROR, NodeStatus.TERMINATED},
        absent_is_success=False,
        cell=cell,
        resource_type="node",
        logger=logger,
    )


def image_available(
    image_id: str,
    refresh: Callable[[str], Optional[Image]],
    cell: Optional[ConvergenceCell[Image]] = None,
    logger: Optional[LoggingPort] = None,
) -> StateConvergencePoller[Image]:
    """Image is AVAILABLE; ERROR and DELETED are fatal."""
    return StateConvergencePoller(
        image_id,
        refresh,
        intended=ImageStatus.AVAILABLE,
        invalid={ImageStatus.ERROR, ImageStatus.DELETED},
        absent_is_success=False,
        cell=cell,
        resource_type="image",
        logger=logger,
    )


def image_deleted(
    image_id: str,
    refresh: Callable[[str], Optional[Image]],
    cell: Optional[ConvergenceCell[Image]] = None,
    logger: Optional[LoggingPort] = None,
) -> StateConvergencePoller[Image]:
    """Image is DELETED or gone; ERROR is fatal."""
    return StateConvergencePoller(
        image_id,
        refresh,
        intended=ImageStatus.DELETED,
        invalid={ImageStatus.ERROR},
        absent_is_success=True,
        cell=cell,
        resource_type="image",
        logger=logger,
    )


def await_convergence(
    poller: StateConvergencePoller[Any],
    timeout: Duration,
    period: Duration = 0.05,
    **kwargs: Any,
) -> bool:
    """
    Block until ``poller`` converges.

    Args:
        poller: Convergence check to repeat
        timeout: Maximum time to wait
        period: Initial delay between checks
        **kwargs: Further :class:`BoundedRetryPoller` options

    Returns:
        True if the resource converged in time, False on timeout

    Raises:
        InvalidStateError: As soon as the resource reaches a fatal status
    """
    return BoundedRetryPoller(timeout, period, **kwargs).apply(poller.check)
