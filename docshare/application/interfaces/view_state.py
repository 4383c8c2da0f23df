"""View-state store interface (port)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from docshare.application.dtos.view_state import ViewState


class IViewStateStore(Protocol):
    """Per-user navigation state with an explicit load/save lifecycle.

    load() runs once at startup; save() persists on every change.
    """

    async def load(self) -> None: ...

    async def get(self, user_id: str) -> ViewState: ...

    async def save(self, user_id: str, state: ViewState) -> None: ...

    async def close(self) -> None: ...
