"""Parser for compact ``key=value,...`` template selection strings.

Example::

    TemplateSpec.parse("osFamily=UBUNTU,osVersionMatches=22.04,minRam=2048")

Supported keys mirror the selection criteria: ``hardwareId``, ``minCores``,
``minRam``, ``minDisk``, ``hypervisorMatches``, ``imageId``,
``imageNameMatches``, ``osFamily``, ``osVersionMatches``, ``os64Bit``,
``osArchMatches``, ``osDescriptionMatches``, ``loginUser`` (``user`` or
``user:password``), ``authenticateSudo`` and ``locationId``.
"""

from typing import Any, Callable, Optional

from pydantic import Field

from domain.base.entity import ValueObject
from domain.base.exceptions import InvalidArgumentError
from domain.image.value_objects import OsFamily
from domain.template.selection_criteria import SelectionCriteria
from domain.template.value_objects import TemplateOptions

# Keys that cannot be combined with hardwareId / imageId.
HARDWARE_ID_CONFLICTS = ("minCores", "minRam", "minDisk", "hypervisorMatches")
IMAGE_ID_CONFLICTS = (
    "imageNameMatches",
    "osFamily",
    "osVersionMatches",
    "os64Bit",
    "osArchMatches",
    "osDescriptionMatches",
)


def _parse_int(key: str, value: str) -> int:
    try:
        return int(value)
    except ValueError as e:
        raise InvalidArgumentError(f"key {key} value set to {value}, must be integer") from e


def _parse_float(key: str, value: str) -> float:
    try:
        return float(value)
    except ValueError as e:
        raise InvalidArgumentError(f"key {key} value set to {value}, must be double") from e


def _parse_bool(key: str, value: str) -> bool:
    lowered = value.lower()
    if lowered not in ("true", "false"):
        raise InvalidArgumentError(f"key {key} value set to {value}, must be boolean")
    return lowered == "true"


def _parse_os_family(key: str, value: str) -> OsFamily:
    try:
        return OsFamily.from_value(value)
    except ValueError as e:
        raise InvalidArgumentError(
            f"key {key} value set to {value}, must be a name in enum OsFamily"
        ) from e


def _parse_str(key: str, value: str) -> str:
    return value


# spec key -> (field name, value parser)
VALUE_PARSERS: dict[str, tuple[str, Callable[[str, str], Any]]] = {
    "hardwareId": ("hardware_id", _parse_str),
    "minCores": ("min_cores", _parse_float),
    "minRam": ("min_ram", _parse_int),
    "minDisk": ("min_disk", _parse_float),
    "hypervisorMatches": ("hypervisor_matches", _parse_str),
    "imageId": ("image_id", _parse_str),
    "imageNameMatches": ("image_name_matches", _parse_str),
    "osFamily": ("os_family", _parse_os_family),
    "osVersionMatches": ("os_version_matches", _parse_str),
    "os64Bit": ("os_64bit", _parse_bool),
    "osArchMatches": ("os_arch_matches", _parse_str),
    "osDescriptionMatches": ("os_description_matches", _parse_str),
    "loginUser": ("login_user", _parse_str),
    "authenticateSudo": ("authenticate_sudo", _parse_bool),
    "locationId": ("location_id", _parse_str),
}


class TemplateSpec(ValueObject):
    """Parsed template selection string.

    Two specs are equal when they carry the same settings, whatever the
    original text looked like.
    """

    hardware_id: Optional[str] = None
    min_cores: Optional[float] = None
    min_ram: Optional[int] = None
    min_disk: Optional[float] = None
    hypervisor_matches: Optional[str] = None
    image_id: Optional[str] = None
    image_name_matches: Optional[str] = None
    os_family: Optional[OsFamily] = None
    os_version_matches: Optional[str] = None
    os_64bit: Optional[bool] = None
    os_arch_matches: Optional[str] = None
    os_description_matches: Optional[str] = None
    login_user: Optional[str] = None
    authenticate_sudo: Optional[bool] = None
    location_id: Optional[str] = None
    specification: str = Field(default="", exclude=True, repr=False)

    @classmethod
    def parse(cls, specification: str) -> "TemplateSpec":
        """
        Parse a comma separated ``key=value`` string.

        Args:
            specification: Text such as ``"hardwareId=m1.small,imageId=r/ami-1"``

        Returns:
            The parsed spec, remembering the original text

        Raises:
            InvalidArgumentError: On unknown keys, omitted values, repeated or
                conflicting keys, and values of the wrong type
        """
        values: dict[str, Any] = {}
        if specification.strip():
            for pair in (part.strip() for part in specification.split(",")):
                key_and_value = [token.strip() for token in pair.split("=")]
                if len(key_and_value) > 2:
                    raise InvalidArgumentError(
                        f"key-value pair {pair} with more than one equals sign"
                    )
                key = key_and_value[0]
                if key not in VALUE_PARSERS:
                    raise InvalidArgumentError(f"unknown key {key}", details={"key": key})
                value = key_and_value[1] if len(key_and_value) == 2 else None
                if not value:
                    raise InvalidArgumentError(f"value of key {key} omitted", details={"key": key})
                cls._check_settable(key, values)
                field, parser = VALUE_PARSERS[key]
                values[field] = parser(key, value)
        return cls(specification=specification, **values)

    @staticmethod
    def _check_settable(key: str, values: dict[str, Any]) -> None:
        def already_set(other: str) -> None:
            field = VALUE_PARSERS[other][0]
            if values.get(field) is not None:
                raise InvalidArgumentError(
                    f"{other} was already set to {values[field]}",
                    details={"key": key, "conflicting_key": other},
                )

        already_set(key)
        if key == "hardwareId":
            for other in HARDWARE_ID_CONFLICTS:
                already_set(other)
        elif key in HARDWARE_ID_CONFLICTS:
            already_set("hardwareId")
        elif key == "imageId":
            for other in IMAGE_ID_CONFLICTS:
                already_set(other)
        elif key in IMAGE_ID_CONFLICTS:
            already_set("imageId")
        elif key == "authenticateSudo" and values.get("login_user") is None:
            raise InvalidArgumentError("login user must be set to use authenticateSudo")

    def copy_to(self, criteria: SelectionCriteria) -> SelectionCriteria:
        """Apply every setting of this spec to ``criteria`` and return it."""
        assignments = [
            ("hardware_id", self.hardware_id),
            ("min_cores", self.min_cores),
            ("min_ram", self.min_ram),
            ("min_disk", self.min_disk),
            ("hypervisor", self.hypervisor_matches),
            ("image_id", self.image_id),
            ("image_name", self.image_name_matches),
            ("os_family", self.os_family),
            ("os_version", self.os_version_matches),
            ("os_64bit", self.os_64bit),
            ("os_arch", self.os_arch_matches),
            ("os_description", self.os_description_matches),
            ("location_id", self.location_id),
        ]
        for name, value in assignments:
            if value is not None:
                setattr(criteria, name, value)
        if self.login_user is not None:
            criteria.options = self._with_login(criteria.options or TemplateOptions())
        return criteria

    def _with_login(self, options: TemplateOptions) -> TemplateOptions:
        user, separator, password = self.login_user.partition(":")
        update: dict[str, Any] = {"login_user": user}
        if separator:
            update["login_password"] = password
        if self.authenticate_sudo is not None:
            update["authenticate_sudo"] = self.authenticate_sudo
        return options.model_copy(update=update)

    def to_parsable_string(self) -> str:
        """Return the text this spec was parsed from."""
        return self.specification

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, TemplateSpec):
            return False
        return self.model_dump() == other.model_dump()

    def __hash__(self) -> int:
        return hash(tuple(self.model_dump().items()))

    def __str__(self) -> str:
        return f"TemplateSpec{{{self.specification}}}"
