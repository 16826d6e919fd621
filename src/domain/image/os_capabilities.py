"""Operating system capability checks.

Each check is a pure, total function. When the family is recognized the
answer is decided by the family alone; otherwise the name and description
are searched, case-insensitively, for known marker tokens.
"""

from domain.image.value_objects import OperatingSystem, OsFamily

APT_FAMILIES = frozenset({OsFamily.DEBIAN, OsFamily.UBUNTU})
YUM_FAMILIES = frozenset({OsFamily.CENTOS, OsFamily.AMZN_LINUX, OsFamily.FEDORA, OsFamily.RHEL})
ZYPPER_FAMILIES = frozenset({OsFamily.SUSE})

APT_MARKERS = ("ubuntu", "debian")
YUM_MARKERS = ("centos", "redhat", "rhel", "fedora", "amzn", "amazon")
ZYPPER_MARKERS = ("suse",)


def _text_of(operating_system: OperatingSystem) -> list[str]:
    return [
        value.lower()
        for value in (operating_system.name, operating_system.description)
        if value
    ]


def _mentions(operating_system: OperatingSystem, markers: tuple[str, ...]) -> bool:
    for text in _text_of(operating_system):
        # "Red Hat" and "redhat" must both hit the same marker
        squashed = text.replace(" ", "")
        if any(marker in text or marker in squashed for marker in markers):
            return True
    return False


def is_unix(operating_system: OperatingSystem) -> bool:
    """Check whether the OS is unix-like; only Windows is not."""
    if operating_system.is_family_recognized:
        return operating_system.family != OsFamily.WINDOWS
    return not _mentions(operating_system, ("windows",))


def supports_apt(operating_system: OperatingSystem) -> bool:
    """Check whether the OS uses the apt package manager."""
    if operating_system.is_family_recognized:
        return operating_system.family in APT_FAMILIES
    return _mentions(operating_system, APT_MARKERS)


def supports_yum(operating_system: OperatingSystem) -> bool:
    """Check whether the OS uses the yum package manager."""
    if operating_system.is_family_recognized:
        return operating_system.family in YUM_FAMILIES
    return _mentions(operating_system, YUM_MARKERS)


def supports_zypper(operating_system: OperatingSystem) -> bool:
    """Check whether the OS uses the zypper package manager."""
    if operating_system.is_family_recognized:
        return operating_system.family in ZYPPER_FAMILIES
    return _mentions(operating_system, ZYPPER_MARKERS)


def is_64bit(operating_system: OperatingSystem) -> bool:
    """Check whether the OS is 64-bit."""
    return operating_system.is_64bit
