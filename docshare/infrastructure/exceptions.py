"""Infrastructure exceptions for document backend calls.

Backend errors extend DocshareException so presentation can map them to
HTTP responses consistently. Client errors carry the backend's own message
verbatim; server and transport errors carry a generic message and keep the
original text in details for logging.
"""

from docshare.domain.exceptions import AccessDeniedException, DocshareException

GENERIC_FAILURE_MESSAGE = "The document service is unavailable. Please try again later."


class BackendException(DocshareException):
    """Base exception for document backend calls."""

    def __init__(
        self,
        message: str,
        error_code: str,
        status_code: int | None = None,
        details: dict | None = None,
    ) -> None:
        self.status_code = status_code
        details = dict(details or {})
        if status_code is not None:
            details.setdefault("backend_status", status_code)
        super().__init__(message, error_code, details)


class BackendUnavailableError(BackendException):
    """Backend could not be reached (connection error or timeout)."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            GENERIC_FAILURE_MESSAGE,
            "BACKEND_UNAVAILABLE",
            details={"reason": reason},
        )


class BackendAuthenticationError(BackendException):
    """Backend rejected the credential (401)."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message, "BACKEND_AUTHENTICATION_ERROR", 401)


class BackendAccessDeniedError(BackendException, AccessDeniedException):
    """Backend denied the operation for this user (403)."""

    def __init__(self, message: str = "Access denied") -> None:
        super().__init__(message, "BACKEND_ACCESS_DENIED", 403)


class BackendNotFoundError(BackendException):
    """Backend resource does not exist or is not visible (404)."""

    def __init__(self, message: str = "Resource not found") -> None:
        super().__init__(message, "BACKEND_NOT_FOUND", 404)


class BackendValidationError(BackendException):
    """Backend rejected the request (other 4xx); message is shown unmodified."""

    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, "BACKEND_VALIDATION_ERROR", status_code)


class BackendServerError(BackendException):
    """Backend failed internally (5xx)."""

    def __init__(self, status_code: int, reason: str | None = None) -> None:
        super().__init__(
            GENERIC_FAILURE_MESSAGE,
            "BACKEND_SERVER_ERROR",
            status_code,
            {"reason": reason} if reason else None,
        )


class BackendProtocolError(BackendException):
    """Backend answered 2xx with a body that cannot be interpreted."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            GENERIC_FAILURE_MESSAGE,
            "BACKEND_PROTOCOL_ERROR",
            details={"reason": reason},
        )


class ViewStateStorageError(DocshareException):
    """View state could not be read or written."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(
            "Failed to persist view state",
            "VIEW_STATE_STORAGE_ERROR",
            {"path": path, "reason": reason},
        )
