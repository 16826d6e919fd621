"""Image aggregate."""

from typing import Any, Optional

from pydantic import ConfigDict, Field

from domain.base.entity import Entity
from domain.image.value_objects import ImageStatus, OperatingSystem
from domain.location.value_objects import Location


class Image(Entity):
    """Snapshot of a provider image as returned by one catalog fetch.

    Images scoped to a location use the composite id
    ``"<locationId>/<providerId>"`` (see :meth:`compose_id`).
    """

    model_config = ConfigDict(frozen=True)

    id: str
    provider_id: str
    name: Optional[str] = None
    description: Optional[str] = None
    version: Optional[str] = None
    location: Optional[Location] = None
    operating_system: OperatingSystem = Field(default_factory=OperatingSystem)
    status: ImageStatus = ImageStatus.AVAILABLE
    user_metadata: dict[str, str] = Field(default_factory=dict)

    @staticmethod
    def compose_id(location_id: Optional[str], provider_id: str) -> str:
        """Build the image id for a provider id, scoped to a location when given."""
        if location_id is None:
            return provider_id
        return f"{location_id}/{provider_id}"

    @classmethod
    def in_location(cls, location: Location, provider_id: str, **fields: Any) -> "Image":
        """Create an image scoped to ``location`` with its composite id."""
        return cls(
            id=cls.compose_id(location.id, provider_id),
            provider_id=provider_id,
            location=location,
            **fields,
        )

    def __str__(self) -> str:
        return f"image({self.id})"
