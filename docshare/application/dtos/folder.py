"""DTOs for the folder hierarchy and folder contents views."""

from dataclasses import dataclass, field

from docshare.domain.entities import DocumentEntity, FolderEntity, TagEntity
from docshare.domain.enums import DocumentFilter, FolderAccess


@dataclass(frozen=True)
class FolderNode:
    """A folder placed in the rendered tree.

    expanded is False for LOCKED nodes regardless of the stored expansion
    state; children is empty unless the node is FULL and expanded.
    """

    folder: FolderEntity
    level: int
    access: FolderAccess
    expanded: bool = False
    selected: bool = False
    children: tuple["FolderNode", ...] = ()

    @property
    def locked(self) -> bool:
        return self.access == FolderAccess.LOCKED

    @property
    def navigable(self) -> bool:
        return self.access == FolderAccess.FULL


@dataclass(frozen=True)
class FolderContents:
    """Contents of one folder for the main view.

    restricted=True means the folder is visible but its contents are not
    available to the user; folders and documents are then empty.
    """

    folder_id: str | None
    access: FolderAccess
    restricted: bool = False
    folders: tuple[FolderEntity, ...] = ()
    documents: tuple[DocumentEntity, ...] = ()


@dataclass(frozen=True)
class SidebarView:
    """Everything the navigation sidebar shows."""

    nodes: tuple[FolderNode, ...]
    tags: tuple[TagEntity, ...] = ()
    current_folder: str | None = None
    current_filter: DocumentFilter = DocumentFilter.ALL
    expanded_folders: frozenset[str] = field(default_factory=frozenset)
