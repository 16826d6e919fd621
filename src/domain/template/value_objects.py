"""Template value objects."""

from enum import Enum
from typing import Optional

from pydantic import Field, field_validator

from domain.base.entity import ValueObject


class Ranking(str, Enum):
    """How to choose between several compatible hardware profiles."""

    NONE = "none"
    SMALLEST = "smallest"
    BIGGEST = "biggest"
    FASTEST = "fastest"


class TemplateOptions(ValueObject):
    """Provisioning options carried alongside a resolved template."""

    inbound_ports: tuple[int, ...] = ()
    block_until_running: bool = True
    tags: tuple[str, ...] = ()
    user_metadata: dict[str, str] = Field(default_factory=dict)
    login_user: Optional[str] = None
    login_password: Optional[str] = Field(default=None, repr=False)
    authenticate_sudo: Optional[bool] = None

    @field_validator("inbound_ports")
    @classmethod
    def validate_ports(cls, ports: tuple[int, ...]) -> tuple[int, ...]:
        """Validate that every port is in the TCP range."""
        for port in ports:
            if not 0 < port < 65536:
                raise ValueError(f"port {port} is outside 1-65535")
        return ports
