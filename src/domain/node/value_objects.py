"""Node value objects."""

from enum import Enum


class NodeStatus(str, Enum):
    """Lifecycle status of a compute node."""

    PENDING = "pending"
    RUNNING = "running"
    SUSPENDED = "suspended"
    TERMINATED = "terminated"
    ERROR = "error"
    UNRECOGNIZED = "unrecognized"
