"""Hardware profile aggregate."""

from typing import Callable, Optional

from pydantic import ConfigDict, Field

from domain.base.entity import Entity
from domain.hardware.value_objects import Processor, Volume
from domain.image.aggregate import Image
from domain.image.predicates import any_image
from domain.location.value_objects import Location


class Hardware(Entity):
    """Snapshot of a provider hardware profile (flavor, size, instance type).

    ``supports_image`` tells which images can boot on this profile; it
    defaults to accepting every image.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    provider_id: Optional[str] = None
    name: Optional[str] = None
    location: Optional[Location] = None
    ram: int = Field(default=0, ge=0, description="Memory in MB")
    processors: list[Processor] = Field(default_factory=list)
    volumes: list[Volume] = Field(default_factory=list)
    hypervisor: Optional[str] = None
    supports_image: Callable[[Image], bool] = Field(default=any_image, exclude=True, repr=False)

    @property
    def cores(self) -> float:
        """Total number of cores across all processors."""
        return sum(processor.cores for processor in self.processors)

    @property
    def cores_and_speed(self) -> float:
        """Aggregate compute capacity: the sum of cores times speed."""
        return sum(processor.cores * processor.speed for processor in self.processors)

    @property
    def disk(self) -> float:
        """Total volume size in GB; volumes without a size count as zero."""
        return sum(volume.size or 0.0 for volume in self.volumes)

    def __str__(self) -> str:
        return f"hardware({self.id})"
