"""Document domain entity and its per-user permission lists."""

from dataclasses import dataclass, field
from datetime import datetime

from docshare.domain.entities.tag import TagEntity
from docshare.domain.enums import Permission
from docshare.domain.exceptions import ValidationException


@dataclass(frozen=True)
class DocumentPermissions:
    """User ids holding each document permission.

    Kept independently of DocumentEntity.shared_user_ids by the backend;
    presence in shared_user_ids alone does not imply read access.
    """

    read: tuple[str, ...] = ()
    write: tuple[str, ...] = ()
    delete: tuple[str, ...] = ()

    def for_user(self, user_id: str) -> set[Permission]:
        """Return the permissions held by user_id."""
        held: set[Permission] = set()
        if user_id in self.read:
            held.add(Permission.READ)
        if user_id in self.write:
            held.add(Permission.WRITE)
        if user_id in self.delete:
            held.add(Permission.DELETE)
        return held

    def to_dict(self) -> dict[str, list[str]]:
        return {
            "read": list(self.read),
            "write": list(self.write),
            "delete": list(self.delete),
        }


@dataclass
class DocumentEntity:
    """Domain entity for an uploaded document."""

    id: str
    name: str
    original_name: str
    mime_type: str = "application/octet-stream"
    size: int = 0
    folder_id: str | None = None
    tags: tuple[TagEntity, ...] = ()
    owner_id: str | None = None
    is_starred: bool = False
    shared_user_ids: tuple[str, ...] = ()
    permissions: DocumentPermissions = field(default_factory=DocumentPermissions)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValidationException("Document ID is required", field="id")

    def is_owned_by(self, user_id: str | None) -> bool:
        return user_id is not None and self.owner_id == user_id

    def is_pdf(self) -> bool:
        return self.mime_type == "application/pdf"
