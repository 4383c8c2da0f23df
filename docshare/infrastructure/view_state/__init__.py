"""View-state persistence."""

from docshare.infrastructure.view_state.file_store import (
    FileViewStateStore,
    InMemoryViewStateStore,
)

__all__ = ["FileViewStateStore", "InMemoryViewStateStore"]
