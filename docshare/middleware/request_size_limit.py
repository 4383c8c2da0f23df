"""Request body size limit middleware.

Rejects uploads whose declared Content-Length exceeds max_upload_size, and
stops reading a streamed body once it passes the limit. Raw ASGI.
"""

import json
from typing import Any, Callable

from docshare.middleware._headers import get_header


async def _send_413(send: Callable, max_bytes: int, actual: int | None = None) -> None:
    details: dict[str, Any] = {"max_bytes": max_bytes}
    if actual is not None:
        details["content_length"] = actual
    message = f"Request body must be at most {max_bytes} bytes"
    body = json.dumps(
        {
            "error": "PAYLOAD_TOO_LARGE",
            "message": message,
            "details": details,
            "notification": {"level": "error", "message": message},
        }
    ).encode()
    await send({
        "type": "http.response.start",
        "status": 413,
        "headers": [(b"content-type", b"application/json")],
    })
    await send({"type": "http.response.body", "body": body, "more_body": False})


def RequestSizeLimitMiddleware(app: Callable, max_bytes: int) -> Callable:
    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return

        declared = get_header(scope, "content-length")
        if declared and declared.isdigit() and int(declared) > max_bytes:
            await _send_413(send, max_bytes, int(declared))
            return

        received = 0
        rejected = False

        async def limited_receive() -> dict:
            nonlocal received, rejected
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > max_bytes and not rejected:
                    rejected = True
                    await _send_413(send, max_bytes, received)
                    return {"type": "http.disconnect"}
            return message

        async def guarded_send(message: dict) -> None:
            if not rejected:
                await send(message)

        await app(scope, limited_receive, guarded_send)

    return asgi_app
