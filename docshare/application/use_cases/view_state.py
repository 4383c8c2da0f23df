"""Read and change the user's remembered navigation state."""

from __future__ import annotations

from docshare.application.dtos.view_state import ViewState
from docshare.application.interfaces.view_state import IViewStateStore
from docshare.domain.enums import DocumentFilter

_UNSET = object()


class ViewStateService:
    def __init__(self, store: IViewStateStore) -> None:
        self.store = store

    async def get(self, user_id: str) -> ViewState:
        return await self.store.get(user_id)

    async def update(
        self,
        user_id: str,
        current_folder: "str | None | object" = _UNSET,
        current_filter: DocumentFilter | None = None,
    ) -> ViewState:
        """Change folder and/or filter; current_folder=None returns to the top level."""
        state = await self.store.get(user_id)
        if current_folder is not _UNSET:
            state = state.select_folder(current_folder)  # type: ignore[arg-type]
        if current_filter is not None:
            state = state.select_filter(current_filter)
        await self.store.save(user_id, state)
        return state

    async def toggle_expanded(self, user_id: str, folder_id: str) -> ViewState:
        """Expand or collapse folder_id in the sidebar without changing the selection."""
        state = (await self.store.get(user_id)).toggle_expanded(folder_id)
        await self.store.save(user_id, state)
        return state
