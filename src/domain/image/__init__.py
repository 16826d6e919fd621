"""Image bounded context."""

from .aggregate import Image
from .value_objects import ImageStatus, OperatingSystem, OsFamily

__all__: list[str] = ["Image", "ImageStatus", "OperatingSystem", "OsFamily"]
