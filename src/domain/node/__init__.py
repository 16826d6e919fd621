"""Node bounded context."""

from .aggregate import NodeMetadata
from .value_objects import NodeStatus

__all__: list[str] = ["NodeMetadata", "NodeStatus"]
