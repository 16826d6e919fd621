"""Unit tests for operating system capability checks."""

import pytest

from domain.image.os_capabilities import (
    is_64bit,
    is_unix,
    supports_apt,
    supports_yum,
    supports_zypper,
)
from domain.image.value_objects import OperatingSystem, OsFamily


@pytest.mark.unit
class TestRecognizedFamilies:
    """Recognized families are decided by family alone."""

    @pytest.mark.parametrize(
        "family,apt,yum,zypper",
        [
            (OsFamily.UBUNTU, True, False, False),
            (OsFamily.DEBIAN, True, False, False),
            (OsFamily.CENTOS, False, True, False),
            (OsFamily.RHEL, False, True, False),
            (OsFamily.AMZN_LINUX, False, True, False),
            (OsFamily.SUSE, False, False, True),
            (OsFamily.FREEBSD, False, False, False),
        ],
    )
    def test_package_managers(self, family, apt, yum, zypper):
        """Test package manager detection by family."""
        os = OperatingSystem(family=family)

        assert supports_apt(os) is apt
        assert supports_yum(os) is yum
        assert supports_zypper(os) is zypper

    def test_family_wins_over_description(self):
        """Test that heuristics are not used when the family is known."""
        os = OperatingSystem(family=OsFamily.CENTOS, description="ubuntu lookalike")

        assert not supports_apt(os)
        assert supports_yum(os)

    def test_windows_is_not_unix(self):
        """Test unix detection."""
        assert not is_unix(OperatingSystem(family=OsFamily.WINDOWS))
        assert is_unix(OperatingSystem(family=OsFamily.UBUNTU))


@pytest.mark.unit
class TestUnrecognizedFamilies:
    """Unrecognized or missing families fall back to text markers."""

    def test_marker_in_description(self):
        """Test case-insensitive marker search."""
        os = OperatingSystem(family=OsFamily.UNRECOGNIZED, description="Ubuntu 22.04 LTS")

        assert supports_apt(os)
        assert not supports_yum(os)

    def test_marker_in_name_without_family(self):
        """Test that a missing family behaves like an unrecognized one."""
        assert supports_zypper(OperatingSystem(name="openSUSE Leap"))

    def test_space_insensitive_yum_marker(self):
        """Test that 'Red Hat' matches the redhat marker."""
        assert supports_yum(OperatingSystem(description="Red Hat Enterprise Linux 9"))

    def test_unix_heuristic(self):
        """Test unix detection by description."""
        assert not is_unix(OperatingSystem(description="Windows Server 2022"))
        assert is_unix(OperatingSystem(description="Some BSD"))

    def test_empty_descriptor_never_raises(self):
        """Test totality on an empty descriptor."""
        os = OperatingSystem()

        assert is_unix(os)
        assert not supports_apt(os)
        assert not supports_yum(os)
        assert not supports_zypper(os)
        assert not is_64bit(os)

    def test_is_64bit(self):
        """Test the 64-bit flag."""
        assert is_64bit(OperatingSystem(is_64bit=True))
