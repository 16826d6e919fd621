"""Template bounded context: selection criteria and their resolution."""

from .exceptions import NoMatchError, ResourceNotFoundError, TemplateResolutionError
from .resolver import TemplateResolver
from .selection_criteria import (
    HardwareByHypervisor,
    HardwareById,
    ImageByDescriptors,
    ImageById,
    SelectionCriteria,
)
from .template_aggregate import Template
from .template_spec import TemplateSpec
from .value_objects import Ranking, TemplateOptions

__all__: list[str] = [
    "HardwareByHypervisor",
    "HardwareById",
    "ImageByDescriptors",
    "ImageById",
    "NoMatchError",
    "Ranking",
    "ResourceNotFoundError",
    "SelectionCriteria",
    "Template",
    "TemplateOptions",
    "TemplateResolutionError",
    "TemplateResolver",
    "TemplateSpec",
]
