"""Thin async HTTP helper for the document backend.

Every call goes through request(), which attaches the caller's bearer
credential and classifies non-2xx responses into backend exceptions.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from docshare.application.dtos.auth import Credentials
from docshare.infrastructure.exceptions import (
    BackendAccessDeniedError,
    BackendAuthenticationError,
    BackendException,
    BackendNotFoundError,
    BackendProtocolError,
    BackendServerError,
    BackendUnavailableError,
    BackendValidationError,
)

logger = logging.getLogger(__name__)


def _error_message(resp: httpx.Response) -> str | None:
    """Return the backend's message from {"message"} or {"error"}, else the body text."""
    try:
        body = resp.json()
    except ValueError:
        text = resp.text.strip()
        return text or None
    if isinstance(body, dict):
        for key in ("message", "error", "detail"):
            value = body.get(key)
            if isinstance(value, str) and value:
                return value
    return None


def classify_response(resp: httpx.Response) -> BackendException | None:
    """Map a response to the exception it should raise, or None on success."""
    status = resp.status_code
    if status < 400:
        return None
    message = _error_message(resp)
    if status == 401:
        return BackendAuthenticationError(message or "Authentication failed")
    if status == 403:
        return BackendAccessDeniedError(message or "Access denied")
    if status == 404:
        return BackendNotFoundError(message or "Resource not found")
    if status < 500:
        return BackendValidationError(message or "Request rejected", status)
    return BackendServerError(status, message)


async def request(
    client: httpx.AsyncClient,
    method: str,
    path: str,
    credentials: Credentials | None = None,
    *,
    json_body: Any = None,
    params: dict[str, Any] | None = None,
    files: dict[str, Any] | None = None,
    data: dict[str, Any] | None = None,
    request_id: str | None = None,
) -> httpx.Response:
    """Perform one backend call and return the successful response.

    Raises:
        BackendUnavailableError: Transport failure or timeout.
        BackendException: Any non-2xx status (see classify_response).
    """
    headers: dict[str, str] = {}
    if credentials is not None:
        headers.update(credentials.headers())
    elif request_id:
        headers["X-Request-ID"] = request_id
    try:
        resp = await client.request(
            method,
            path,
            headers=headers,
            json=json_body,
            params=params,
            files=files,
            data=data,
        )
    except httpx.TransportError as e:
        logger.error("Backend %s %s failed: %s", method, path, e)
        raise BackendUnavailableError(str(e) or e.__class__.__name__) from e
    error = classify_response(resp)
    if error is None:
        return resp
    if resp.status_code >= 500:
        logger.error("Backend %s %s returned %s", method, path, resp.status_code)
    else:
        logger.warning(
            "Backend %s %s returned %s: %s",
            method,
            path,
            resp.status_code,
            error.message,
        )
    raise error


def decode_json(resp: httpx.Response) -> Any:
    """Return the JSON body; an empty body decodes to None."""
    raw = resp.content
    if not raw:
        return None
    try:
        return json.loads(raw.decode())
    except (UnicodeDecodeError, ValueError) as e:
        raise BackendProtocolError(f"Invalid JSON from backend: {e}") from e
