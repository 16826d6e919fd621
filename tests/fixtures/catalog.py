"""In-memory catalog and node fakes shared by the unit tests."""

from typing import Optional

from domain.base.exceptions import ResourceBusyError
from domain.base.ports.catalog_port import ComputeCatalogPort
from domain.base.ports.resource_port import ImageRefreshPort, NodeActionsPort
from domain.hardware.aggregate import Hardware
from domain.hardware.value_objects import Processor, Volume
from domain.image.aggregate import Image
from domain.image.value_objects import OperatingSystem, OsFamily
from domain.location.value_objects import Location, LocationScope
from domain.node.aggregate import NodeMetadata


def build_locations() -> dict[str, Location]:
    """Build a small provider tree.

    aws
    ├── us-east-1
    │   ├── us-east-1a
    │   │   └── host-1
    │   └── us-east-1b
    └── us-west-2
        └── us-west-2a
    """
    provider = Location(id="aws", scope=LocationScope.PROVIDER, description="aws")
    east = Location(id="us-east-1", scope=LocationScope.REGION, parent=provider)
    west = Location(id="us-west-2", scope=LocationScope.REGION, parent=provider)
    east_a = Location(id="us-east-1a", scope=LocationScope.ZONE, parent=east)
    east_b = Location(id="us-east-1b", scope=LocationScope.ZONE, parent=east)
    west_a = Location(id="us-west-2a", scope=LocationScope.ZONE, parent=west)
    host = Location(id="host-1", scope=LocationScope.HOST, parent=east_a)
    return {
        location.id: location
        for location in (provider, east, west, east_a, east_b, west_a, host)
    }


def build_image(
    location: Optional[Location],
    provider_id: str,
    family: Optional[str] = None,
    version: Optional[str] = None,
    is_64bit: bool = True,
    **fields,
) -> Image:
    operating_system = OperatingSystem(
        family=OsFamily.from_value(family) if family else None,
        version=version,
        arch="x86_64" if is_64bit else "x86_32",
        is_64bit=is_64bit,
    )
    return Image(
        id=Image.compose_id(location.id if location else None, provider_id),
        provider_id=provider_id,
        location=location,
        operating_system=operating_system,
        **fields,
    )


def build_hardware(
    hardware_id: str,
    cores: float = 1,
    ram: int = 1024,
    disk: float = 10,
    speed: float = 1.0,
    location: Optional[Location] = None,
    **fields,
) -> Hardware:
    return Hardware(
        id=hardware_id,
        provider_id=hardware_id,
        location=location,
        ram=ram,
        processors=[Processor(cores=cores, speed=speed)],
        volumes=[Volume(size=disk, boot_device=True)],
        **fields,
    )


class FakeCatalog(ComputeCatalogPort):
    """Catalog serving fixed lists and counting reads."""

    def __init__(self, locations=(), images=(), hardware=(), default=None) -> None:
        self.locations = list(locations)
        self.images = list(images)
        self.hardware = list(hardware)
        self.default = default
        self.reads = 0

    def list_locations(self) -> list[Location]:
        self.reads += 1
        return list(self.locations)

    def list_images(self) -> list[Image]:
        self.reads += 1
        return list(self.images)

    def list_hardware(self) -> list[Hardware]:
        self.reads += 1
        return list(self.hardware)

    def default_location(self) -> Optional[Location]:
        self.reads += 1
        return self.default


class FakeNodeActions(NodeActionsPort):
    """Node provider replaying a scripted sequence of snapshots.

    ``refreshes`` lists what successive ``get_node`` calls return; the last
    entry repeats once the script is exhausted.
    """

    def __init__(self, refreshes=(), action_result=None, busy_times: int = 0) -> None:
        self.refreshes = list(refreshes)
        self.action_result = action_result
        self.busy_times = busy_times
        self.calls: list[tuple[str, str]] = []

    def get_node(self, node_id: str) -> Optional[NodeMetadata]:
        self.calls.append(("get_node", node_id))
        if len(self.refreshes) > 1:
            return self.refreshes.pop(0)
        return self.refreshes[0] if self.refreshes else None

    def _act(self, action: str, node_id: str) -> Optional[NodeMetadata]:
        self.calls.append((action, node_id))
        return self.action_result

    def reboot_node(self, node_id: str) -> Optional[NodeMetadata]:
        return self._act("reboot_node", node_id)

    def resume_node(self, node_id: str) -> Optional[NodeMetadata]:
        return self._act("resume_node", node_id)

    def suspend_node(self, node_id: str) -> Optional[NodeMetadata]:
        return self._act("suspend_node", node_id)

    def destroy_node(self, node_id: str) -> Optional[NodeMetadata]:
        if self.busy_times > 0:
            self.busy_times -= 1
            self.calls.append(("destroy_node", node_id))
            raise ResourceBusyError(f"node {node_id} is busy")
        return self._act("destroy_node", node_id)


class FakeImages(ImageRefreshPort):
    """Image provider replaying a scripted sequence of snapshots."""

    def __init__(self, refreshes=()) -> None:
        self.refreshes = list(refreshes)
        self.calls: list[str] = []

    def get_image(self, image_id: str) -> Optional[Image]:
        self.calls.append(image_id)
        if len(self.refreshes) > 1:
            return self.refreshes.pop(0)
        return self.refreshes[0] if self.refreshes else None
