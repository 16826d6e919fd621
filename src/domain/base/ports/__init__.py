"""Domain ports - interfaces the domain depends on."""

from .catalog_port import ComputeCatalogPort
from .logging_port import LoggingPort, NullLoggingPort
from .resource_port import ImageRefreshPort, NodeActionsPort, NodeRefreshPort

__all__: list[str] = [
    "ComputeCatalogPort",
    "ImageRefreshPort",
    "LoggingPort",
    "NodeActionsPort",
    "NodeRefreshPort",
    "NullLoggingPort",
]
