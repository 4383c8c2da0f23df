"""Per-user view state (current folder, filter, expanded folders)."""

from dataclasses import dataclass, field, replace
from typing import Any

from docshare.domain.enums import DocumentFilter


@dataclass(frozen=True)
class ViewState:
    """Navigation state that survives across sessions.

    Immutable; each change returns a new instance that the caller persists.
    """

    current_folder: str | None = None
    current_filter: DocumentFilter = DocumentFilter.ALL
    expanded_folders: frozenset[str] = field(default_factory=frozenset)

    def select_folder(self, folder_id: str | None) -> "ViewState":
        return replace(self, current_folder=folder_id)

    def select_filter(self, current_filter: DocumentFilter) -> "ViewState":
        return replace(self, current_filter=current_filter)

    def toggle_expanded(self, folder_id: str) -> "ViewState":
        """Flip expansion of folder_id without touching the selection."""
        if folder_id in self.expanded_folders:
            expanded = self.expanded_folders - {folder_id}
        else:
            expanded = self.expanded_folders | {folder_id}
        return replace(self, expanded_folders=frozenset(expanded))

    def to_dict(self) -> dict[str, Any]:
        return {
            "current_folder": self.current_folder,
            "current_filter": self.current_filter.value,
            "expanded_folders": sorted(self.expanded_folders),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ViewState":
        """Build from persisted JSON; unknown filters fall back to ALL."""
        raw_filter = data.get("current_filter") or DocumentFilter.ALL.value
        try:
            current_filter = DocumentFilter(raw_filter)
        except ValueError:
            current_filter = DocumentFilter.ALL
        return cls(
            current_folder=data.get("current_folder") or None,
            current_filter=current_filter,
            expanded_folders=frozenset(data.get("expanded_folders") or ()),
        )
