"""Location value objects."""

from enum import Enum
from typing import Any, Optional

from pydantic import Field

from domain.base.entity import ValueObject


class LocationScope(str, Enum):
    """Scope of a location, from the widest (PROVIDER) to the narrowest (HOST)."""

    PROVIDER = "provider"
    REGION = "region"
    ZONE = "zone"
    HOST = "host"

    @property
    def depth(self) -> int:
        """Position of the scope in the tree; the provider root is 0."""
        return _SCOPE_DEPTH[self]

    def is_wider_than(self, other: "LocationScope") -> bool:
        """Check whether this scope sits above ``other`` in the tree."""
        return self.depth < other.depth


_SCOPE_DEPTH = {
    LocationScope.PROVIDER: 0,
    LocationScope.REGION: 1,
    LocationScope.ZONE: 2,
    LocationScope.HOST: 3,
}


class Location(ValueObject):
    """A scoped location in a provider's PROVIDER > REGION > ZONE > HOST tree.

    Every location other than the provider root must have a parent. A
    location breaking that rule is *orphaned*. Orphans can be constructed so
    that malformed catalog data stays representable, but they are rejected
    whenever they take part in a compatibility test (see
    :func:`domain.location.hierarchy.is_compatible`).

    Two locations are equal when their scope and id are equal.
    """

    id: str
    scope: LocationScope
    description: str = ""
    parent: Optional["Location"] = None
    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def is_orphaned(self) -> bool:
        """Check whether a non-provider location is missing its parent."""
        return self.scope != LocationScope.PROVIDER and self.parent is None

    def ancestors(self) -> list["Location"]:
        """Get the parent chain, nearest first."""
        chain = []
        current = self.parent
        while current is not None:
            chain.append(current)
            current = current.parent
        return chain

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Location):
            return False
        return self.scope == other.scope and self.id == other.id

    def __hash__(self) -> int:
        return hash((self.scope, self.id))

    def __str__(self) -> str:
        return f"{self.scope.name}({self.id})"
