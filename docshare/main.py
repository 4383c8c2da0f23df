"""FastAPI application entry point.

Wiring only: lifespan, exception handlers, middleware, routers.
Settings are loaded inside create_app() so that tests can set env (and
clear the get_settings cache) before calling create_app().
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from docshare.api.v1 import api_router
from docshare.core.config import get_settings
from docshare.core.exception_handlers import register_exception_handlers
from docshare.core.lifespan import create_lifespan
from docshare.middleware import (
    CorrelationIDMiddleware,
    RequestIDMiddleware,
    RequestSizeLimitMiddleware,
    TimeoutMiddleware,
)
from docshare.shared.telemetry.logging import setup_logging


def create_app() -> FastAPI:
    """Build and return the FastAPI application."""
    settings = get_settings()
    setup_logging()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )

    register_exception_handlers(app)

    # Middleware: last added = outermost. Order: timeout → size limit → request ID → correlation ID → CORS.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[settings.request_id_header, settings.correlation_id_header],
    )
    app.add_middleware(CorrelationIDMiddleware, header_name=settings.correlation_id_header)
    app.add_middleware(RequestIDMiddleware, header_name=settings.request_id_header)
    app.add_middleware(RequestSizeLimitMiddleware, max_bytes=settings.max_upload_size)
    app.add_middleware(TimeoutMiddleware, timeout_seconds=settings.request_timeout_seconds)

    app.include_router(api_router, prefix="/api/v1")
    return app


app = create_app()
