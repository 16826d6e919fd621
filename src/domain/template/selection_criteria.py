"""Declarative template selection criteria."""

import re
from typing import Any, Callable, Optional, Union

from domain.base.entity import ValueObject
from domain.base.exceptions import InvalidArgumentError
from domain.hardware.aggregate import Hardware
from domain.image.aggregate import Image
from domain.image.value_objects import OsFamily
from domain.template.value_objects import Ranking, TemplateOptions

# Scalar values longer than this are cut in diagnostic output.
MAX_DESCRIBED_VALUE_LENGTH = 80


class ImageById(ValueObject):
    """Select exactly one image by its id."""

    image_id: str


class ImageByDescriptors(ValueObject):
    """Select images by a conjunction of descriptors; unset fields are ignored."""

    name: Optional[str] = None
    description: Optional[str] = None
    version: Optional[str] = None
    os_family: Optional[OsFamily] = None
    os_name: Optional[str] = None
    os_description: Optional[str] = None
    os_version: Optional[str] = None
    os_arch: Optional[str] = None
    os_64bit: Optional[bool] = None
    predicate: Optional[Callable[[Image], bool]] = None

    def is_empty(self) -> bool:
        """Check whether no descriptor is set."""
        return all(value is None for value in self.__dict__.values())


class HardwareById(ValueObject):
    """Select exactly one hardware profile by its id."""

    hardware_id: str


class HardwareByHypervisor(ValueObject):
    """Select hardware profiles whose hypervisor matches a pattern."""

    pattern: str


ImageSelection = Union[ImageById, ImageByDescriptors]
HardwareSelection = Union[HardwareById, HardwareByHypervisor]

# criteria attribute -> ImageByDescriptors field
_IMAGE_DESCRIPTORS = {
    "image_name": "name",
    "image_description": "description",
    "image_version": "version",
    "os_family": "os_family",
    "os_name": "os_name",
    "os_description": "os_description",
    "os_version": "os_version",
    "os_arch": "os_arch",
    "os_64bit": "os_64bit",
    "image_predicate": "predicate",
}


def _descriptor_property(attribute: str) -> property:
    field = _IMAGE_DESCRIPTORS[attribute]

    def getter(self: "SelectionCriteria") -> Any:
        if isinstance(self._image, ImageByDescriptors):
            return getattr(self._image, field)
        return None

    def setter(self: "SelectionCriteria", value: Any) -> None:
        self._set_image_descriptor(field, value)

    return property(getter, setter, doc=f"Image descriptor ``{field}``.")


class SelectionCriteria:
    """
    Mutable accumulator of a caller's template constraints.

    Image selection is either *by id* or *by descriptors*, and hardware
    selection is either *by id* or *by hypervisor*; each pair is stored as a
    single tagged value so the two modes can never be combined:

    - setting ``image_id`` clears every image and OS descriptor;
    - setting a descriptor while an image id is selected is rejected;
    - setting ``hardware_id`` clears ``hypervisor`` and vice versa.

    Fields can be passed to the constructor; they are applied in the order
    given, exactly as if assigned one by one.
    """

    image_name = _descriptor_property("image_name")
    image_description = _descriptor_property("image_description")
    image_version = _descriptor_property("image_version")
    os_family = _descriptor_property("os_family")
    os_name = _descriptor_property("os_name")
    os_description = _descriptor_property("os_description")
    os_version = _descriptor_property("os_version")
    os_arch = _descriptor_property("os_arch")
    os_64bit = _descriptor_property("os_64bit")
    image_predicate = _descriptor_property("image_predicate")

    def __init__(self, **fields: Any) -> None:
        self._image: ImageSelection = ImageByDescriptors()
        self._hardware: Optional[HardwareSelection] = None
        self._location_id: Optional[str] = None
        self._min_ram: Optional[int] = None
        self._min_cores: Optional[float] = None
        self._min_disk: Optional[float] = None
        self._ranking = Ranking.NONE
        self._options: Optional[TemplateOptions] = None
        self.update(**fields)

    def update(self, **fields: Any) -> "SelectionCriteria":
        """Assign several fields in order and return self for chaining."""
        for name, value in fields.items():
            if not isinstance(getattr(type(self), name, None), property):
                raise InvalidArgumentError(f"unknown selection field {name}")
            setattr(self, name, value)
        return self

    # image selection

    @property
    def image_selection(self) -> ImageSelection:
        """The active image selection mode."""
        return self._image

    @property
    def image_id(self) -> Optional[str]:
        if isinstance(self._image, ImageById):
            return self._image.image_id
        return None

    @image_id.setter
    def image_id(self, value: Optional[str]) -> None:
        self._image = ImageByDescriptors() if value is None else ImageById(image_id=value)

    def _set_image_descriptor(self, field: str, value: Any) -> None:
        if field == "os_family" and isinstance(value, str):
            try:
                value = OsFamily.from_value(value)
            except ValueError as e:
                raise InvalidArgumentError(str(e)) from e
        if isinstance(self._image, ImageById):
            if value is None:
                return
            # last write wins: a descriptor replaces the image id
            self._image = ImageByDescriptors()
        self._image = self._image.model_copy(update={field: value})

    # hardware selection

    @property
    def hardware_selection(self) -> Optional[HardwareSelection]:
        """The active hardware selection mode, or None when unconstrained."""
        return self._hardware

    @property
    def hardware_id(self) -> Optional[str]:
        if isinstance(self._hardware, HardwareById):
            return self._hardware.hardware_id
        return None

    @hardware_id.setter
    def hardware_id(self, value: Optional[str]) -> None:
        if value is not None:
            self._hardware = HardwareById(hardware_id=value)
        elif isinstance(self._hardware, HardwareById):
            self._hardware = None

    @property
    def hypervisor(self) -> Optional[str]:
        if isinstance(self._hardware, HardwareByHypervisor):
            return self._hardware.pattern
        return None

    @hypervisor.setter
    def hypervisor(self, value: Optional[str]) -> None:
        if value is not None:
            self._hardware = HardwareByHypervisor(pattern=value)
        elif isinstance(self._hardware, HardwareByHypervisor):
            self._hardware = None

    # independent constraints

    @property
    def location_id(self) -> Optional[str]:
        return self._location_id

    @location_id.setter
    def location_id(self, value: Optional[str]) -> None:
        self._location_id = value

    @property
    def min_ram(self) -> Optional[int]:
        return self._min_ram

    @min_ram.setter
    def min_ram(self, value: Optional[int]) -> None:
        self._min_ram = self._non_negative("min_ram", value)

    @property
    def min_cores(self) -> Optional[float]:
        return self._min_cores

    @min_cores.setter
    def min_cores(self, value: Optional[float]) -> None:
        self._min_cores = self._non_negative("min_cores", value)

    @property
    def min_disk(self) -> Optional[float]:
        return self._min_disk

    @min_disk.setter
    def min_disk(self, value: Optional[float]) -> None:
        self._min_disk = self._non_negative("min_disk", value)

    @property
    def ranking(self) -> Ranking:
        return self._ranking

    @ranking.setter
    def ranking(self, value: Union[Ranking, str]) -> None:
        try:
            self._ranking = Ranking(value.lower() if isinstance(value, str) else value)
        except ValueError as e:
            raise InvalidArgumentError(f"unknown ranking {value}") from e

    @property
    def options(self) -> Optional[TemplateOptions]:
        return self._options

    @options.setter
    def options(self, value: Optional[TemplateOptions]) -> None:
        self._options = value

    @staticmethod
    def _non_negative(name: str, value: Optional[float]) -> Optional[float]:
        if value is not None and value < 0:
            raise InvalidArgumentError(f"{name} must not be negative, got {value}")
        return value

    def smallest(self) -> "SelectionCriteria":
        """Prefer the smallest compatible hardware profile."""
        self.ranking = Ranking.SMALLEST
        return self

    def biggest(self) -> "SelectionCriteria":
        """Prefer the biggest compatible hardware profile."""
        self.ranking = Ranking.BIGGEST
        return self

    def fastest(self) -> "SelectionCriteria":
        """Prefer the fastest compatible hardware profile."""
        self.ranking = Ranking.FASTEST
        return self

    # seeding from existing snapshots

    def from_image(self, image: Image) -> "SelectionCriteria":
        """Constrain the request to images described like ``image``.

        Name is copied as is; description and version are copied as exact,
        escaped patterns so that only identical values match.
        """
        os = image.operating_system
        if self._location_id is None and image.location is not None:
            self._location_id = image.location.id
        if os.family is not None:
            self.os_family = os.family
        if image.name is not None:
            self.image_name = image.name
        if image.description is not None:
            self.image_description = _exact_pattern(image.description)
        if image.version is not None:
            self.image_version = _exact_pattern(image.version)
        if os.name is not None:
            self.os_name = os.name
        if os.description is not None:
            self.os_description = os.description
        if os.version is not None:
            self.os_version = os.version
        if os.arch is not None:
            self.os_arch = os.arch
        self.os_64bit = os.is_64bit
        return self

    def from_hardware(self, hardware: Hardware) -> "SelectionCriteria":
        """Constrain the request to hardware at least as capable as ``hardware``."""
        if self._location_id is None and hardware.location is not None:
            self._location_id = hardware.location.id
        self.min_cores = hardware.cores
        self.min_ram = hardware.ram
        self.min_disk = hardware.disk
        if hardware.hypervisor is not None:
            self.hypervisor = hardware.hypervisor
        return self

    def from_template(self, template: Any) -> "SelectionCriteria":
        """Constrain the request to reproduce an already resolved template."""
        if template.location is not None:
            self._location_id = template.location.id
        self.from_hardware(template.hardware)
        self.from_image(template.image)
        self.options = template.options
        return self

    @classmethod
    def from_spec(cls, specification: str) -> "SelectionCriteria":
        """Build criteria from a ``key=value,...`` specification string."""
        from domain.template.template_spec import TemplateSpec

        return TemplateSpec.parse(specification).copy_to(cls())

    # inspection

    def is_empty(self) -> bool:
        """Check whether no constraint at all is set; options do not count."""
        return (
            isinstance(self._image, ImageByDescriptors)
            and self._image.is_empty()
            and self._hardware is None
            and self._location_id is None
            and self._min_ram is None
            and self._min_cores is None
            and self._min_disk is None
            and self._ranking == Ranking.NONE
        )

    def describe(self) -> str:
        """Render the set scalar constraints, field by field, in bounded form."""
        fields = [
            ("imageId", self.image_id),
            ("imageName", self.image_name),
            ("imageDescription", self.image_description),
            ("imageVersion", self.image_version),
            ("imagePredicate", self.image_predicate),
            ("osFamily", self.os_family.name if self.os_family else None),
            ("osName", self.os_name),
            ("osDescription", self.os_description),
            ("osVersion", self.os_version),
            ("osArch", self.os_arch),
            ("os64Bit", self.os_64bit),
            ("locationId", self._location_id),
            ("minCores", self._min_cores),
            ("minRam", self._min_ram),
            ("minDisk", self._min_disk),
            ("hardwareId", self.hardware_id),
            ("hypervisor", self.hypervisor),
            ("ranking", self._ranking.value if self._ranking != Ranking.NONE else None),
        ]
        rendered = [f"{name}={_bounded(value)}" for name, value in fields if value is not None]
        return "{" + ", ".join(rendered) + "}"

    def __repr__(self) -> str:
        return f"SelectionCriteria{self.describe()}"


def _exact_pattern(value: str) -> str:
    return f"^{re.escape(value)}$"


def _bounded(value: Any) -> str:
    text = getattr(value, "__name__", None) if callable(value) else None
    text = text or str(value)
    if len(text) > MAX_DESCRIBED_VALUE_LENGTH:
        return text[: MAX_DESCRIBED_VALUE_LENGTH - 3] + "..."
    return text
