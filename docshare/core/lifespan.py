"""Application lifespan: startup and shutdown.

Single place for startup/shutdown wiring: the document backend client
and the view-state store. No business logic here.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from docshare.core.config import get_settings
from docshare.infrastructure.backend import DocumentBackendClient
from docshare.infrastructure.view_state import FileViewStateStore, InMemoryViewStateStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Objects already placed on app.state (tests inject doubles) are kept
    and not closed here.
    """
    settings = get_settings()

    # ---- Startup ----
    owns_backend = getattr(app.state, "backend", None) is None
    if owns_backend:
        app.state.backend = DocumentBackendClient(
            settings.backend_api_url,
            timeout=settings.backend_timeout_seconds,
        )
        logger.info("Document backend client created for %s", settings.backend_api_url)

    owns_store = getattr(app.state, "view_state_store", None) is None
    if owns_store:
        if settings.view_state_path:
            app.state.view_state_store = FileViewStateStore(settings.view_state_path)
        else:
            app.state.view_state_store = InMemoryViewStateStore()
    await app.state.view_state_store.load()

    yield

    # ---- Shutdown ----
    if owns_store:
        await app.state.view_state_store.close()
        app.state.view_state_store = None
    if owns_backend:
        await app.state.backend.aclose()
        app.state.backend = None
        logger.info("Document backend client closed")
