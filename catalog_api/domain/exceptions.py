"""Domain exceptions.

All domain-level errors that represent business rule violations.
Services raise these when input is invalid, a referenced record is
missing, or a uniqueness rule would be broken. The API layer maps
each error's ``kind`` to an HTTP status code.
"""

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Category of a failure as seen by API callers."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    UNEXPECTED = "unexpected"


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching domain-specific errors at the application layer.
    """

    kind: ErrorKind = ErrorKind.UNEXPECTED

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(DomainError):
    """Raised when a field is missing or holds an invalid value."""

    kind = ErrorKind.VALIDATION

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize validation error.

        Args:
            message: Human-readable error message.
            field: Name of the offending field, if known.
        """
        super().__init__(message, details={"field": field} if field else None)
        self.field = field


class NotFoundError(DomainError):
    """Raised when a referenced record does not exist."""

    kind = ErrorKind.NOT_FOUND

    def __init__(
        self,
        message: str,
        entity_type: str | None = None,
        entity_id: Any = None,
    ) -> None:
        """Initialize not found error.

        Args:
            message: Human-readable error message.
            entity_type: Type of the missing entity (e.g., "Product").
            entity_id: Identifier that failed to resolve.
        """
        details: dict[str, Any] = {}
        if entity_type is not None:
            details["entity_type"] = entity_type
        if entity_id is not None:
            details["entity_id"] = entity_id
        super().__init__(message, details=details)


class ConflictError(DomainError):
    """Raised when a write would violate a uniqueness rule."""

    kind = ErrorKind.CONFLICT


class UnexpectedError(DomainError):
    """Raised for failures callers cannot act on (e.g., store errors)."""

    kind = ErrorKind.UNEXPECTED
