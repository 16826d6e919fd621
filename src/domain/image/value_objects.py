"""Image value objects: operating system descriptor and image status."""

from enum import Enum
from typing import Optional

from pydantic import AliasChoices, Field

from domain.base.entity import ValueObject


class OsFamily(str, Enum):
    """Operating system families known to the resolver.

    ``UNRECOGNIZED`` marks catalog entries whose family could not be mapped;
    capability checks fall back to heuristics for those.
    """

    UNRECOGNIZED = "unrecognized"
    AIX = "aix"
    ARCH = "arch"
    CENTOS = "centos"
    DARWIN = "darwin"
    DEBIAN = "debian"
    ESX = "esx"
    FEDORA = "fedora"
    FREEBSD = "freebsd"
    GENTOO = "gentoo"
    HPUX = "hpux"
    LINUX = "linux"
    COREOS = "coreos"
    AMZN_LINUX = "amzn-linux"
    MANDRIVA = "mandriva"
    NETBSD = "netbsd"
    OEL = "oel"
    OPENBSD = "openbsd"
    RHEL = "rhel"
    SCIENTIFIC = "scientific"
    CEL = "cel"
    SLACKWARE = "slackware"
    SOLARIS = "solaris"
    SUSE = "suse"
    TURBOLINUX = "turbolinux"
    CLOUD_LINUX = "cloudlinux"
    UBUNTU = "ubuntu"
    WINDOWS = "windows"

    @classmethod
    def from_value(cls, value: str) -> "OsFamily":
        """Look a family up by enum name or value, case-insensitively."""
        normalized = value.strip()
        for family in cls:
            if normalized.upper() == family.name or normalized.lower() == family.value:
                return family
        raise ValueError(f"Unknown operating system family: {value}")


class OperatingSystem(ValueObject):
    """Operating system descriptor attached to an image."""

    family: Optional[OsFamily] = None
    name: Optional[str] = None
    version: Optional[str] = None
    description: Optional[str] = None
    arch: Optional[str] = None
    is_64bit: bool = Field(
        default=False,
        validation_alias=AliasChoices("is_64bit", "is64Bit"),
    )

    @property
    def is_family_recognized(self) -> bool:
        """Check whether the family is a concrete, known value."""
        return self.family is not None and self.family != OsFamily.UNRECOGNIZED


class ImageStatus(str, Enum):
    """Lifecycle status of an image."""

    AVAILABLE = "available"
    PENDING = "pending"
    DELETED = "deleted"
    ERROR = "error"
    UNRECOGNIZED = "unrecognized"
