"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Every error body carries
a notification the client shows as an error toast.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from docshare.core.config import get_settings
from docshare.domain.exceptions import DocshareException

logger = logging.getLogger(__name__)

# Map error_code to HTTP status when applicable
_ERROR_CODE_STATUS: dict[str, int] = {
    "VALIDATION_ERROR": 400,
    "AUTHENTICATION_ERROR": 401,
    "RESOURCE_NOT_FOUND": 404,
    "BACKEND_AUTHENTICATION_ERROR": 401,
    "BACKEND_ACCESS_DENIED": 403,
    "BACKEND_NOT_FOUND": 404,
    "BACKEND_SERVER_ERROR": 502,
    "BACKEND_PROTOCOL_ERROR": 502,
    "BACKEND_UNAVAILABLE": 503,
    "VIEW_STATE_STORAGE_ERROR": 500,
}


def _status_for(exc: DocshareException) -> int:
    if exc.error_code == "BACKEND_VALIDATION_ERROR":
        return getattr(exc, "status_code", None) or 400
    return _ERROR_CODE_STATUS.get(exc.error_code, 400)


def error_body(error: str, message: str, details: Any = None) -> dict[str, Any]:
    """Return the JSON error body with its error notification."""
    return {
        "error": error,
        "message": message,
        "details": details if details is not None else {},
        "notification": {"level": "error", "message": message},
    }


def _docshare_exception_handler(request: Request, exc: DocshareException) -> JSONResponse:
    """Return JSON from DocshareException.to_dict() with appropriate status code."""
    status = _status_for(exc)
    content = exc.to_dict()
    if status >= 500 and not get_settings().debug:
        content["details"] = {}
    return JSONResponse(
        status_code=status,
        content=error_body(content["error"], content["message"], content["details"]),
    )


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 422 with validation error details."""
    return JSONResponse(
        status_code=422,
        content=error_body(
            "VALIDATION_ERROR",
            "Request validation failed",
            jsonable_errors(exc),
        ),
    )


def jsonable_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    """Drop non-serializable context (e.g. exception instances) from pydantic errors."""
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Return JSON for Starlette HTTP exceptions (status + detail)."""
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body("HTTP_ERROR", str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; include detail only when debug is True."""
    logger.exception("Unhandled exception: %s", exc)
    detail = str(exc) if get_settings().debug else "Internal server error"
    return JSONResponse(
        status_code=500,
        content=error_body("INTERNAL_ERROR", detail),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Call once after creating the app. Handlers: DocshareException (and
    subclasses), RequestValidationError, StarletteHTTPException, generic Exception.
    """
    app.add_exception_handler(DocshareException, _docshare_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
