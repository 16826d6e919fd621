"""Resolved template."""

from typing import Optional

from pydantic import Field

from domain.base.entity import ValueObject
from domain.hardware.aggregate import Hardware
from domain.image.aggregate import Image
from domain.location.value_objects import Location
from domain.template.value_objects import TemplateOptions


class Template(ValueObject):
    """A concrete (image, hardware, location) selection plus its options."""

    image: Image
    hardware: Hardware
    location: Optional[Location] = None
    options: TemplateOptions = Field(default_factory=TemplateOptions)

    def __str__(self) -> str:
        return (
            f"template(image={self.image.id}, hardware={self.hardware.id}, "
            f"location={self.location.id if self.location else None})"
        )
