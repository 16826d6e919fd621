"""Node metadata aggregate."""

from typing import Optional

from pydantic import ConfigDict, Field

from domain.base.entity import Entity
from domain.location.value_objects import Location
from domain.node.value_objects import NodeStatus


class NodeMetadata(Entity):
    """Snapshot of a compute node as reported by the provider."""

    model_config = ConfigDict(frozen=True)

    id: str
    provider_id: Optional[str] = None
    name: Optional[str] = None
    group: Optional[str] = None
    location: Optional[Location] = None
    image_id: Optional[str] = None
    hardware_id: Optional[str] = None
    status: NodeStatus = NodeStatus.PENDING
    public_addresses: list[str] = Field(default_factory=list)
    private_addresses: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    user_metadata: dict[str, str] = Field(default_factory=dict)

    def __str__(self) -> str:
        return f"node({self.id})"
