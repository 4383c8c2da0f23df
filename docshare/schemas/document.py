"""Document API schemas."""

from datetime import datetime

from pydantic import BaseModel

from docshare.application.dtos.document import DocumentListing
from docshare.domain.entities import DocumentEntity
from docshare.schemas.common import NotificationSchema
from docshare.schemas.tag import TagResponse


class DocumentPermissionsResponse(BaseModel):
    read: list[str] = []
    write: list[str] = []
    delete: list[str] = []


class DocumentResponse(BaseModel):
    id: str
    name: str
    original_name: str
    mime_type: str
    size: int
    folder_id: str | None = None
    tags: list[TagResponse] = []
    owner_id: str | None = None
    is_starred: bool = False
    shared_user_ids: list[str] = []
    permissions: DocumentPermissionsResponse = DocumentPermissionsResponse()
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_entity(cls, document: DocumentEntity) -> "DocumentResponse":
        return cls(
            id=document.id,
            name=document.name,
            original_name=document.original_name,
            mime_type=document.mime_type,
            size=document.size,
            folder_id=document.folder_id,
            tags=[TagResponse.from_entity(t) for t in document.tags],
            owner_id=document.owner_id,
            is_starred=document.is_starred,
            shared_user_ids=list(document.shared_user_ids),
            permissions=DocumentPermissionsResponse(**document.permissions.to_dict()),
            created_at=document.created_at,
            updated_at=document.updated_at,
        )


class StarRequest(BaseModel):
    starred: bool


class DocumentCommandResponse(BaseModel):
    document: DocumentResponse
    notification: NotificationSchema


class DocumentListResponse(BaseModel):
    """Document listing; restricted=True means the folder's documents are not available."""

    documents: list[DocumentResponse] = []
    folder_id: str | None = None
    restricted: bool = False
    message: str | None = None

    @classmethod
    def from_listing(cls, listing: DocumentListing) -> "DocumentListResponse":
        return cls(
            documents=[DocumentResponse.from_entity(d) for d in listing.documents],
            folder_id=listing.folder_id,
            restricted=listing.restricted,
            message=(
                "You do not have permission to view the contents of this folder"
                if listing.restricted
                else None
            ),
        )
