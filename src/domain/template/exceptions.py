"""Template resolution exceptions."""

from typing import Any, Optional

from domain.base.exceptions import DomainException


class TemplateResolutionError(DomainException):
    """Base class for failures to resolve a template."""


class ResourceNotFoundError(TemplateResolutionError):
    """Raised when a catalog has no entry with the requested id.

    The message has the form ``"<selector>(<id>) not found"``, e.g.
    ``"imageId(us-east-1/ami-1) not found"``.
    """

    def __init__(self, selector: str, resource_id: str) -> None:
        super().__init__(
            f"{selector}({resource_id}) not found",
            details={"selector": selector, "resource_id": resource_id},
        )
        self.selector = selector
        self.resource_id = resource_id


class NoMatchError(TemplateResolutionError):
    """Raised when the requested constraints match nothing in the catalog."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        super().__init__(message, details=details)
