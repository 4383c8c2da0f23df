"""Domain exceptions for docshare.

Defines domain-level exceptions that represent rule violations detected
before a request reaches the document backend. Infrastructure exceptions
(backend failures) extend the same base so the presentation layer maps
every error to an HTTP response and a user notification in one place.
"""

from typing import Any


class DocshareException(Exception):
    """Base exception for all docshare errors.

    Attributes:
        message: Human-readable error description, safe to show to the user.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON error body used by the exception handlers."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(DocshareException):
    """Raised when input validation fails (e.g. empty required field)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class AuthenticationException(DocshareException):
    """Raised when no usable bearer credential accompanies a request."""

    def __init__(self, message: str = "Authentication required") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class ResourceNotFoundException(DocshareException):
    """Raised when a requested resource is not found or not visible."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'folder', 'document').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class AccessDeniedException(DocshareException):
    """Raised when the current user may not perform the operation."""
