"""Folder API schemas: tree, contents and folder commands."""

from datetime import datetime

from pydantic import BaseModel, Field

from docshare.application.dtos.folder import FolderContents, FolderNode, SidebarView
from docshare.domain.entities import FolderEntity
from docshare.domain.enums import DocumentFilter, FolderAccess
from docshare.schemas.common import NotificationSchema
from docshare.schemas.document import DocumentResponse
from docshare.schemas.tag import TagResponse


class FolderResponse(BaseModel):
    id: str
    name: str
    parent_id: str | None = None
    owner_id: str | None = None
    department_ids: list[str] = []
    shared_user_ids: list[str] = []
    has_access: bool | None = None
    can_view_content: bool | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_entity(cls, folder: FolderEntity) -> "FolderResponse":
        return cls(
            id=folder.id,
            name=folder.name,
            parent_id=folder.parent_id,
            owner_id=folder.owner_id,
            department_ids=list(folder.department_ids),
            shared_user_ids=list(folder.shared_user_ids),
            has_access=folder.has_access,
            can_view_content=folder.can_view_content,
            created_at=folder.created_at,
            updated_at=folder.updated_at,
        )


class FolderNodeResponse(BaseModel):
    """One rendered tree node. locked nodes show a lock and are not navigable."""

    id: str
    name: str
    level: int
    access: FolderAccess
    locked: bool
    expanded: bool
    selected: bool
    children: list["FolderNodeResponse"] = []

    @classmethod
    def from_node(cls, node: FolderNode) -> "FolderNodeResponse":
        return cls(
            id=node.folder.id,
            name=node.folder.name,
            level=node.level,
            access=node.access,
            locked=node.locked,
            expanded=node.expanded,
            selected=node.selected,
            children=[cls.from_node(c) for c in node.children],
        )


class SidebarResponse(BaseModel):
    tree: list[FolderNodeResponse]
    tags: list[TagResponse]
    current_folder: str | None = None
    current_filter: DocumentFilter
    expanded_folders: list[str]

    @classmethod
    def from_view(cls, view: SidebarView) -> "SidebarResponse":
        return cls(
            tree=[FolderNodeResponse.from_node(n) for n in view.nodes],
            tags=[TagResponse.from_entity(t) for t in view.tags],
            current_folder=view.current_folder,
            current_filter=view.current_filter,
            expanded_folders=sorted(view.expanded_folders),
        )


class FolderContentsResponse(BaseModel):
    """Folder contents; restricted=True means the contents are not available."""

    folder_id: str | None
    access: FolderAccess
    restricted: bool
    message: str | None = None
    folders: list[FolderResponse] = []
    documents: list[DocumentResponse] = []

    @classmethod
    def from_contents(cls, contents: FolderContents) -> "FolderContentsResponse":
        return cls(
            folder_id=contents.folder_id,
            access=contents.access,
            restricted=contents.restricted,
            message=(
                "You do not have permission to view the contents of this folder"
                if contents.restricted
                else None
            ),
            folders=[FolderResponse.from_entity(f) for f in contents.folders],
            documents=[DocumentResponse.from_entity(d) for d in contents.documents],
        )


class FolderCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    parent_id: str | None = None
    department_ids: list[str] = Field(
        default_factory=list,
        description="Departments granted access (admins and managers only)",
    )


class FolderRenameRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    department_ids: list[str] | None = Field(
        None,
        description="Replacement department access (admins and managers only); omit to keep it",
    )


class FolderCommandResponse(BaseModel):
    folder: FolderResponse
    notification: NotificationSchema
