"""Location bounded context."""

from .hierarchy import LocationCompatible, is_compatible
from .value_objects import Location, LocationScope

__all__: list[str] = ["Location", "LocationCompatible", "LocationScope", "is_compatible"]
