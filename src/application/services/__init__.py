"""Application services."""

from .image_lifecycle_service import ImageLifecycleService
from .node_lifecycle_service import NodeLifecycleService

__all__: list[str] = ["ImageLifecycleService", "NodeLifecycleService"]
