"""Location compatibility rules."""

from typing import Any, Callable, Optional

from domain.base.exceptions import InvalidArgumentError, InvalidStateError
from domain.location.value_objects import Location

# Only the parent and the grandparent of the reference are searched.
ANCESTOR_SEARCH_DEPTH = 2


def is_compatible(candidate: Optional[Location], reference: Optional[Location]) -> bool:
    """
    Check whether a resource bound to ``candidate`` may be used at ``reference``.

    A resource is usable when it is not location bound, when the caller is
    not location sensitive, or when the resource lives at the reference
    location itself, its parent or its grandparent.

    Args:
        candidate: Location declared by a catalog resource (image, hardware)
        reference: Location the caller is targeting

    Returns:
        True if the candidate is acceptable at the reference location

    Raises:
        InvalidStateError: If the candidate is orphaned (malformed catalog data)
        InvalidArgumentError: If the reference is orphaned (malformed caller input)
    """
    if candidate is not None and candidate.is_orphaned:
        raise InvalidStateError(
            f"only locations of scope PROVIDER can have a null parent; input: {candidate}",
            details={"location_id": candidate.id, "scope": candidate.scope.value},
        )
    if reference is not None and reference.is_orphaned:
        raise InvalidArgumentError(
            f"only locations of scope PROVIDER can have a null parent; current: {reference}",
            details={"location_id": reference.id, "scope": reference.scope.value},
        )
    if reference is None or candidate is None:
        return True
    if candidate == reference:
        return True
    return candidate in reference.ancestors()[:ANCESTOR_SEARCH_DEPTH]


class LocationCompatible:
    """Named predicate accepting resources usable at a lazily supplied location.

    The reference location is read from ``reference_supplier`` on every call
    so the predicate can be built before the target location is known.
    """

    def __init__(self, reference_supplier: Callable[[], Optional[Location]]) -> None:
        self._reference_supplier = reference_supplier

    def __call__(self, resource: Any) -> bool:
        return is_compatible(getattr(resource, "location", None), self._reference_supplier())

    def __str__(self) -> str:
        return "locationCompatible()"

    __repr__ = __str__
