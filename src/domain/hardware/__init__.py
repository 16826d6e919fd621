"""Hardware bounded context."""

from .aggregate import Hardware
from .value_objects import Processor, Volume

__all__: list[str] = ["Hardware", "Processor", "Volume"]
