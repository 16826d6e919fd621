"""Template resolution: pick an (image, hardware, location) triple from a catalog."""

from collections.abc import Sequence
from typing import Callable, Optional

from domain.base.ports.catalog_port import ComputeCatalogPort
from domain.base.ports.logging_port import LoggingPort, NullLoggingPort
from domain.hardware.aggregate import Hardware
from domain.image.aggregate import Image
from domain.location.hierarchy import LocationCompatible
from domain.location.value_objects import Location
from domain.template import predicates
from domain.template.exceptions import NoMatchError, ResourceNotFoundError
from domain.template.predicates import NamedPredicate, all_of
from domain.template.selection_criteria import SelectionCriteria
from domain.template.template_aggregate import Template
from domain.template.value_objects import Ranking, TemplateOptions


def _size(hardware: Hardware) -> tuple[float, int, float]:
    return (hardware.cores, hardware.ram, hardware.disk)


def _speed(hardware: Hardware) -> tuple[float, float, int, float]:
    return (hardware.cores_and_speed, *_size(hardware))


class TemplateResolver:
    """
    Resolve selection criteria against a provider catalog.

    Catalog data is read through zero-argument suppliers on every call so
    each resolution sees a fresh snapshot. The resolver keeps no per-call
    state and can be shared between threads as long as the suppliers can.

    Resolution order:

    1. A request with no constraint at all is delegated to the fallback
       template supplier, whose result is returned unchanged.
    2. The target location is the requested ``location_id``, else the
       location of the requested image (when that image is narrower than
       the current target), else the default location.
    3. Hardware, then images, are filtered by location compatibility and
       by the requested constraints.
    4. Images that no remaining hardware profile supports are dropped; a
       64-bit image is preferred, otherwise catalog order decides.
    5. Hardware supporting the chosen image is ranked as requested.
    """

    def __init__(
        self,
        locations: Callable[[], Sequence[Location]],
        images: Callable[[], Sequence[Image]],
        hardware: Callable[[], Sequence[Hardware]],
        default_location: Callable[[], Optional[Location]],
        fallback_template: Callable[[], Template],
        logger: Optional[LoggingPort] = None,
    ) -> None:
        self._locations = locations
        self._images = images
        self._hardware = hardware
        self._default_location = default_location
        self._fallback_template = fallback_template
        self._logger = logger or NullLoggingPort()

    @classmethod
    def from_catalog(
        cls,
        catalog: ComputeCatalogPort,
        fallback_template: Callable[[], Template],
        logger: Optional[LoggingPort] = None,
    ) -> "TemplateResolver":
        """Create a resolver reading every snapshot from ``catalog``."""
        return cls(
            locations=catalog.list_locations,
            images=catalog.list_images,
            hardware=catalog.list_hardware,
            default_location=catalog.default_location,
            fallback_template=fallback_template,
            logger=logger,
        )

    def resolve(self, criteria: SelectionCriteria) -> Template:
        """
        Resolve ``criteria`` to a concrete template.

        Args:
            criteria: Constraints to satisfy

        Returns:
            The selected template

        Raises:
            ResourceNotFoundError: If a requested location, image or hardware id is unknown
            NoMatchError: If the constraints leave no usable image or hardware profile
            InvalidStateError: If catalog data holds an orphaned location
            InvalidArgumentError: If the target location is orphaned or a pattern is invalid
        """
        if criteria.is_empty():
            return self._fallback_template()

        self._logger.debug(">> searching params(%s)", criteria.describe())
        images = list(self._images())
        hardware = list(self._hardware())
        location = self._target_location(criteria, images)
        location_compatible = LocationCompatible(lambda: location)

        hardware_filter = self._hardware_filter(criteria, hardware, location_compatible)
        image_filter = self._image_filter(criteria, images, location_compatible)

        matched_images = [image for image in images if image_filter(image)]
        if not matched_images:
            raise NoMatchError(
                f"no image matched predicate: {image_filter}",
                details={"predicate": str(image_filter)},
            )
        matched_hardware = [profile for profile in hardware if hardware_filter(profile)]

        supported_images = [
            image
            for image in matched_images
            if any(profile.supports_image(image) for profile in matched_hardware)
        ]
        if not supported_images:
            raise NoMatchError(
                "no hardware profiles support images matching params: " + criteria.describe(),
                details={
                    "hardware_predicate": str(hardware_filter),
                    "image_predicate": str(image_filter),
                },
            )

        image = self._choose_image(supported_images)
        hardware_choice = self._choose_hardware(
            [profile for profile in matched_hardware if profile.supports_image(image)],
            criteria.ranking,
        )
        template = Template(
            image=image,
            hardware=hardware_choice,
            location=location,
            options=criteria.options or TemplateOptions(),
        )
        self._logger.debug(
            "<< matched image(%s) hardware(%s) location(%s)",
            image.id,
            hardware_choice.id,
            location.id if location else None,
        )
        return template

    def _target_location(
        self, criteria: SelectionCriteria, images: Sequence[Image]
    ) -> Optional[Location]:
        location = None
        if criteria.location_id is not None:
            location = next(
                (
                    candidate
                    for candidate in self._locations()
                    if candidate.id == criteria.location_id
                ),
                None,
            )
            if location is None:
                raise ResourceNotFoundError("locationId", criteria.location_id)

        if criteria.image_id is not None:
            image = next((image for image in images if image.id == criteria.image_id), None)
            if image is not None and image.location is not None:
                if location is None or location.scope.is_wider_than(image.location.scope):
                    location = image.location

        if location is None:
            location = self._default_location()
        return location

    @staticmethod
    def _image_filter(
        criteria: SelectionCriteria,
        images: Sequence[Image],
        location_compatible: LocationCompatible,
    ) -> Callable[[Image], bool]:
        # always applied: orphaned catalog locations fail even without a target
        filters: list[Callable[[Image], bool]] = [location_compatible]

        if criteria.image_id is not None:
            image_id = criteria.image_id
            if not any(image.id == image_id for image in images):
                raise ResourceNotFoundError("imageId", image_id)
            filters.append(NamedPredicate(f"imageId({image_id})", lambda image: image.id == image_id))
            return all_of(filters)

        if criteria.image_name is not None:
            filters.append(predicates.image_name(criteria.image_name))
        if criteria.image_description is not None:
            filters.append(predicates.image_description(criteria.image_description))
        if criteria.image_version is not None:
            filters.append(predicates.image_version(criteria.image_version))
        if criteria.os_family is not None:
            filters.append(predicates.os_family(criteria.os_family))
        if criteria.os_name is not None:
            filters.append(predicates.os_name(criteria.os_name))
        if criteria.os_description is not None:
            filters.append(predicates.os_description(criteria.os_description))
        if criteria.os_version is not None:
            filters.append(predicates.os_version(criteria.os_version))
        if criteria.os_arch is not None:
            filters.append(predicates.os_arch(criteria.os_arch))
        if criteria.os_64bit is not None:
            filters.append(predicates.os_64bit(criteria.os_64bit))
        if criteria.image_predicate is not None:
            filters.append(predicates.image_matches(criteria.image_predicate))
        return all_of(filters)

    @staticmethod
    def _hardware_filter(
        criteria: SelectionCriteria,
        hardware: Sequence[Hardware],
        location_compatible: LocationCompatible,
    ) -> Callable[[Hardware], bool]:
        filters: list[Callable[[Hardware], bool]] = [location_compatible]

        if criteria.hardware_id is not None:
            hardware_id = criteria.hardware_id
            if not any(profile.id == hardware_id for profile in hardware):
                raise ResourceNotFoundError("hardwareId", hardware_id)
            filters.append(
                NamedPredicate(f"hardwareId({hardware_id})", lambda profile: profile.id == hardware_id)
            )
        if criteria.hypervisor is not None:
            filters.append(predicates.hypervisor(criteria.hypervisor))
        if criteria.min_cores is not None:
            filters.append(predicates.min_cores(criteria.min_cores))
        if criteria.min_ram is not None:
            filters.append(predicates.min_ram(criteria.min_ram))
        if criteria.min_disk is not None:
            filters.append(predicates.min_disk(criteria.min_disk))
        return all_of(filters)

    @staticmethod
    def _choose_image(images: Sequence[Image]) -> Image:
        # Only 32-bit images remain when os_64bit=False was requested.
        return next((image for image in images if image.operating_system.is_64bit), images[0])

    @staticmethod
    def _choose_hardware(hardware: Sequence[Hardware], ranking: Ranking) -> Hardware:
        # min() and max() keep the first of equal elements.
        if ranking == Ranking.SMALLEST:
            return min(hardware, key=_size)
        if ranking == Ranking.BIGGEST:
            return max(hardware, key=_size)
        if ranking == Ranking.FASTEST:
            return max(hardware, key=_speed)
        return hardware[0]
