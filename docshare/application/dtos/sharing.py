"""DTOs for the folder and document share dialogs."""

from dataclasses import dataclass

from docshare.domain.entities import (
    DepartmentEntity,
    DocumentEntity,
    FolderEntity,
    UserEntity,
)


@dataclass(frozen=True)
class FolderShareDialog:
    """Initial state of the folder share dialog.

    users excludes the folder owner. department_ids/user_ids are the
    currently checked entries.
    """

    folder: FolderEntity
    departments: tuple[DepartmentEntity, ...]
    users: tuple[UserEntity, ...]
    department_ids: tuple[str, ...]
    user_ids: tuple[str, ...]


@dataclass(frozen=True)
class DocumentShareDialog:
    """Initial state of the document share dialog."""

    document: DocumentEntity
    users: tuple[UserEntity, ...]
    selected_users: tuple[str, ...]
    read: tuple[str, ...]
    write: tuple[str, ...]
    delete: tuple[str, ...]
