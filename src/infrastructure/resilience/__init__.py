"""Retry and convergence polling."""

from .convergence import (
    ConvergenceCell,
    StateConvergencePoller,
    await_convergence,
    image_available,
    image_deleted,
    node_running,
    node_suspended,
    node_terminated,
)
from .retry import BoundedRetryPoller, retry
from .socket_open import SocketOpen, await_port_open

__all__: list[str] = [
    "BoundedRetryPoller",
    "ConvergenceCell",
    "SocketOpen",
    "StateConvergencePoller",
    "await_convergence",
    "await_port_open",
    "image_available",
    "image_deleted",
    "node_running",
    "node_suspended",
    "node_terminated",
    "retry",
]
