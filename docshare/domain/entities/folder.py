"""Folder domain entity.

Folders form a hierarchy through parent_id. The backend annotates each
folder with access hints (has_access, can_view_content) for the current
user; a missing hint is None.
"""

from dataclasses import dataclass
from datetime import datetime

from docshare.domain.exceptions import ValidationException


@dataclass
class FolderEntity:
    """Domain entity for a folder as seen by the current user."""

    id: str
    name: str
    parent_id: str | None = None
    owner_id: str | None = None
    department_ids: tuple[str, ...] = ()
    shared_user_ids: tuple[str, ...] = ()
    has_access: bool | None = None
    can_view_content: bool | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValidationException("Folder ID is required", field="id")

    def is_root(self) -> bool:
        """Return whether the folder sits at the top of the hierarchy."""
        return self.parent_id is None

    def is_owned_by(self, user_id: str | None) -> bool:
        return user_id is not None and self.owner_id == user_id
