"""Domain ports for refreshing and acting on remote resources."""

from abc import ABC, abstractmethod
from typing import Optional

from domain.image.aggregate import Image
from domain.node.aggregate import NodeMetadata


class NodeRefreshPort(ABC):
    """Port for fetching a fresh node snapshot."""

    @abstractmethod
    def get_node(self, node_id: str) -> Optional[NodeMetadata]:
        """Get the current node snapshot, or None if the node no longer exists."""


class ImageRefreshPort(ABC):
    """Port for fetching a fresh image snapshot."""

    @abstractmethod
    def get_image(self, image_id: str) -> Optional[Image]:
        """Get the current image snapshot, or None if the image no longer exists."""


class NodeActionsPort(NodeRefreshPort):
    """Port for node lifecycle actions.

    Each action returns the snapshot reported right after the action was
    accepted, or None when the provider reports nothing. Providers raise
    ``ResourceBusyError`` when the node cannot accept the action yet.
    """

    @abstractmethod
    def reboot_node(self, node_id: str) -> Optional[NodeMetadata]:
        """Reboot a node."""

    @abstractmethod
    def resume_node(self, node_id: str) -> Optional[NodeMetadata]:
        """Resume a suspended node."""

    @abstractmethod
    def suspend_node(self, node_id: str) -> Optional[NodeMetadata]:
        """Suspend a running node."""

    @abstractmethod
    def destroy_node(self, node_id: str) -> Optional[NodeMetadata]:
        """Destroy a node."""
