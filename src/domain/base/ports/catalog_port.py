"""Domain port for provider catalogs."""

from abc import ABC, abstractmethod
from typing import Optional

from domain.hardware.aggregate import Hardware
from domain.image.aggregate import Image
from domain.location.value_objects import Location


class ComputeCatalogPort(ABC):
    """Point-in-time view of a provider's locations, images and hardware profiles.

    Implementations own any caching or staleness policy; callers treat every
    returned sequence as a snapshot.
    """

    @abstractmethod
    def list_locations(self) -> list[Location]:
        """Get all locations the provider exposes."""

    @abstractmethod
    def list_images(self) -> list[Image]:
        """Get all images, in the provider's catalog order."""

    @abstractmethod
    def list_hardware(self) -> list[Hardware]:
        """Get all hardware profiles, in the provider's catalog order."""

    @abstractmethod
    def default_location(self) -> Optional[Location]:
        """Get the location used when a request names none."""
