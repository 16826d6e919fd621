"""Node lifecycle service: run a node action and wait for it to take effect."""

import time
from typing import Callable, Optional

from config.schemas.timeouts_schema import TimeoutsConfig
from domain.base.exceptions import ResourceBusyError
from domain.base.ports.logging_port import LoggingPort, NullLoggingPort
from domain.base.ports.resource_port import NodeActionsPort
from domain.node.aggregate import NodeMetadata
from infrastructure.resilience.convergence import (
    ConvergenceCell,
    StateConvergencePoller,
    node_running,
    node_suspended,
    node_terminated,
)
from infrastructure.resilience.retry import BoundedRetryPoller
from infrastructure.resilience.socket_open import SocketOpen


class NodeLifecycleService:
    """
    Reboot, resume, suspend and destroy nodes synchronously.

    Every operation asks the provider to act through ``NodeActionsPort`` and
    then blocks until the node converges to the matching status, within the
    timeouts of :class:`TimeoutsConfig`. A node reaching a fatal status
    raises ``InvalidStateError``.
    """

    def __init__(
        self,
        actions: NodeActionsPort,
        timeouts: Optional[TimeoutsConfig] = None,
        logger: Optional[LoggingPort] = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._actions = actions
        self._timeouts = timeouts or TimeoutsConfig()
        self._logger = logger or NullLoggingPort()
        self._clock = clock
        self._sleep = sleep

    def _poller(self, timeout: float) -> BoundedRetryPoller:
        return BoundedRetryPoller(
            timeout,
            clock=self._clock,
            sleep=self._sleep,
            logger=self._logger,
            **self._timeouts.polling(),
        )

    def _await(self, poller: StateConvergencePoller[NodeMetadata], timeout: float) -> bool:
        return self._poller(timeout).apply(poller.check)

    def reboot_node(self, node_id: str) -> bool:
        """Reboot a node and wait until it is RUNNING again."""
        self._logger.debug(">> rebooting node(%s)", node_id)
        cell = ConvergenceCell(self._actions.reboot_node(node_id))
        converged = self._await(
            node_running(node_id, self._actions.get_node, cell, self._logger),
            self._timeouts.node_running,
        )
        self._logger.debug("<< rebooted node(%s) success(%s)", node_id, converged)
        return converged

    def resume_node(self, node_id: str) -> bool:
        """Resume a node and wait until it is RUNNING."""
        self._logger.debug(">> resuming node(%s)", node_id)
        cell = ConvergenceCell(self._actions.resume_node(node_id))
        converged = self._await(
            node_running(node_id, self._actions.get_node, cell, self._logger),
            self._timeouts.node_running,
        )
        self._logger.debug("<< resumed node(%s) success(%s)", node_id, converged)
        return converged

    def suspend_node(self, node_id: str) -> bool:
        """Suspend a node and wait until it is SUSPENDED."""
        self._logger.debug(">> suspending node(%s)", node_id)
        cell = ConvergenceCell(self._actions.suspend_node(node_id))
        converged = self._await(
            node_suspended(node_id, self._actions.get_node, cell, self._logger),
            self._timeouts.node_suspended,
        )
        self._logger.debug("<< suspended node(%s) success(%s)", node_id, converged)
        return converged

    def destroy_node(self, node_id: str) -> Optional[NodeMetadata]:
        """
        Destroy a node and wait until it is gone.

        The destroy request is repeated while the provider reports the node
        busy, for at most the node-terminated timeout.

        Args:
            node_id: Node to destroy

        Returns:
            The last known node snapshot, None once the node disappeared

        Raises:
            InvalidStateError: If the node ends up in ERROR
        """
        self._logger.debug(">> destroying node(%s)", node_id)
        cell: ConvergenceCell[NodeMetadata] = ConvergenceCell()

        def request_destroy() -> bool:
            try:
                cell.set(self._actions.destroy_node(node_id))
                return True
            except ResourceBusyError:
                self._logger.warning("<< illegal state destroying node(%s)", node_id)
                return False

        accepted = self._poller(self._timeouts.node_terminated).apply(request_destroy)
        converged = accepted and self._await(
            node_terminated(node_id, self._actions.get_node, cell, self._logger),
            self._timeouts.node_terminated,
        )
        self._logger.debug("<< destroyed node(%s) success(%s)", node_id, converged)
        return cell.get()

    def await_port_open(self, host: str, port: int, connect_timeout: float = 2.0) -> bool:
        """Wait until a node accepts TCP connections on ``port``, within the port-open timeout."""
        self._logger.debug(">> awaiting port %s:%s", host, port)
        probe = SocketOpen(host, port, connect_timeout=connect_timeout, logger=self._logger)
        opened = self._poller(self._timeouts.port_open).apply(probe)
        self._logger.debug("<< port %s:%s open(%s)", host, port, opened)
        return opened
