"""View state API schemas."""

from pydantic import BaseModel, Field

from docshare.application.dtos.view_state import ViewState
from docshare.domain.enums import DocumentFilter


class ViewStateResponse(BaseModel):
    current_folder: str | None = None
    current_filter: DocumentFilter = DocumentFilter.ALL
    expanded_folders: list[str] = []

    @classmethod
    def from_state(cls, state: ViewState) -> "ViewStateResponse":
        return cls(
            current_folder=state.current_folder,
            current_filter=state.current_filter,
            expanded_folders=sorted(state.expanded_folders),
        )


class ViewStateUpdateRequest(BaseModel):
    """Partial update. Send current_folder: null to return to the top level."""

    current_folder: str | None = Field(default=None)
    current_filter: DocumentFilter | None = None
