"""Base entity and value object classes."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class Entity(BaseModel):
    """Base class for domain entities.

    Entities are identified by their ``id``: two entities of the same type
    with the same id are equal regardless of their other attributes.
    Entities without an id are never equal to anything but themselves.
    """

    model_config = ConfigDict(validate_assignment=True, arbitrary_types_allowed=True)

    id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Entity) or type(self) is not type(other):
            return False
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        if self.id is None:
            return id(self)
        return hash((type(self).__name__, self.id))


class ValueObject(BaseModel):
    """Base class for immutable value objects compared by value."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)
