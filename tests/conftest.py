"""Global test configuration and fixtures."""

import sys
from pathlib import Path
from unittest.mock import Mock

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from domain.base.ports.logging_port import LoggingPort  # noqa: E402
from tests.fixtures.catalog import (  # noqa: E402
    FakeCatalog,
    build_hardware,
    build_image,
    build_locations,
)


@pytest.fixture
def locations():
    """Provider, regions, zones and a host keyed by id."""
    return build_locations()


@pytest.fixture
def catalog(locations) -> FakeCatalog:
    """Catalog with a handful of images and hardware profiles in us-east-1."""
    region = locations["us-east-1"]
    return FakeCatalog(
        locations=list(locations.values()),
        images=[
            build_image(region, "ami-ubuntu32", family="ubuntu", version="22.04", is_64bit=False),
            build_image(region, "ami-ubuntu64", family="ubuntu", version="22.04", is_64bit=True),
            build_image(region, "ami-centos", family="centos", version="9", is_64bit=True),
        ],
        hardware=[
            build_hardware("t.large", cores=4, ram=8192, disk=40, location=region),
            build_hardware("t.small", cores=1, ram=1024, disk=10, location=region),
            build_hardware("t.medium", cores=2, ram=4096, disk=20, location=region),
        ],
        default=region,
    )


@pytest.fixture
def mock_logger() -> Mock:
    """Mock logging port recording every call."""
    return Mock(spec=LoggingPort)


@pytest.fixture
def fake_clock():
    """Manual clock whose sleep advances time instead of blocking."""

    class FakeClock:
        def __init__(self) -> None:
            self.now = 0.0
            self.sleeps: list[float] = []

        def __call__(self) -> float:
            return self.now

        def sleep(self, seconds: float) -> None:
            self.sleeps.append(seconds)
            self.now += seconds

    return FakeClock()
