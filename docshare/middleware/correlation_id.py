"""Correlation ID middleware: forward from the client or reuse the request id. Raw ASGI."""

import uuid
from typing import Callable

from docshare.middleware._headers import append_header, get_header


def CorrelationIDMiddleware(
    app: Callable, header_name: str = "X-Correlation-ID"
) -> Callable:
    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        correlation_id = (
            get_header(scope, header_name)
            or scope.get("state", {}).get("request_id")
            or str(uuid.uuid4())
        )
        scope.setdefault("state", {})["correlation_id"] = correlation_id

        async def send_wrapper(message: dict) -> None:
            if message["type"] == "http.response.start":
                append_header(message, header_name, correlation_id)
            await send(message)

        await app(scope, receive, send_wrapper)

    return asgi_app
