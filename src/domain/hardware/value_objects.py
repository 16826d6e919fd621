"""Hardware value objects."""

from typing import Optional

from pydantic import Field

from domain.base.entity import ValueObject


class Processor(ValueObject):
    """A processor with its core count and per-core speed (GHz)."""

    cores: float = Field(gt=0)
    speed: float = Field(default=0.0, ge=0)


class Volume(ValueObject):
    """A block device attached to a hardware profile; ``size`` is in GB."""

    id: Optional[str] = None
    type: str = "local"
    size: Optional[float] = Field(default=None, ge=0)
    device: Optional[str] = None
    boot_device: bool = False
    durable: bool = True
