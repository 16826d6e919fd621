"""Base domain exceptions shared by every bounded context."""

from typing import Any, Optional


class DomainException(Exception):
    """Base exception for all domain errors.

    Every domain error carries a short human readable ``message``, a stable
    ``error_code`` and a ``details`` mapping with the structured context of
    the failure. Messages are kept deterministic and bounded in size: they
    name identifiers and predicates, never whole catalogs.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for structured reporting."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return self.message


class ValidationError(DomainException):
    """Raised when domain data fails validation."""


class InvalidArgumentError(ValidationError):
    """Raised when a caller supplies a malformed argument or configuration."""


class InvalidStateError(DomainException):
    """Raised when a resource's data is malformed or it reached a fatal status.

    This error is terminal: retry loops propagate it immediately.
    """


class ResourceBusyError(DomainException):
    """Raised by a provider when an action cannot run in the resource's current state."""


class ConfigurationError(DomainException):
    """Raised when application configuration cannot be loaded or validated."""
