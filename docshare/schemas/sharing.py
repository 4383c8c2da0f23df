"""Share dialog API schemas."""

from pydantic import BaseModel, Field, model_validator

from docshare.application.dtos.sharing import DocumentShareDialog, FolderShareDialog
from docshare.application.services.share_selection import DocumentShareSelection
from docshare.domain.enums import Permission, SelectionOperation
from docshare.schemas.document import DocumentResponse
from docshare.schemas.folder import FolderResponse
from docshare.schemas.user import DepartmentResponse, UserResponse


class FolderShareDialogResponse(BaseModel):
    folder: FolderResponse
    departments: list[DepartmentResponse]
    users: list[UserResponse]
    department_ids: list[str]
    user_ids: list[str]

    @classmethod
    def from_dialog(cls, dialog: FolderShareDialog) -> "FolderShareDialogResponse":
        return cls(
            folder=FolderResponse.from_entity(dialog.folder),
            departments=[DepartmentResponse.from_entity(d) for d in dialog.departments],
            users=[UserResponse.from_entity(u) for u in dialog.users],
            department_ids=list(dialog.department_ids),
            user_ids=list(dialog.user_ids),
        )


class ShareDepartmentsRequest(BaseModel):
    """Complete set of departments; replaces what the folder has."""

    department_ids: list[str] = Field(default_factory=list)


class ShareUsersRequest(BaseModel):
    """Complete set of users; replaces what the folder has."""

    user_ids: list[str] = Field(default_factory=list)


class DocumentShareSelectionSchema(BaseModel):
    """A document share selection as held by the client."""

    selected_users: list[str] = Field(default_factory=list)
    read: list[str] = Field(default_factory=list)
    write: list[str] = Field(default_factory=list)
    delete: list[str] = Field(default_factory=list)

    def to_selection(self) -> DocumentShareSelection:
        """Normalize into a selection that satisfies the subset rules."""
        return DocumentShareSelection.from_payload(
            self.selected_users,
            {
                Permission.READ: self.read,
                Permission.WRITE: self.write,
                Permission.DELETE: self.delete,
            },
        )

    @classmethod
    def from_selection(cls, selection: DocumentShareSelection) -> "DocumentShareSelectionSchema":
        return cls(
            selected_users=list(selection.selected_users),
            read=list(selection.read),
            write=list(selection.write),
            delete=list(selection.delete),
        )


class DocumentShareDialogResponse(BaseModel):
    document: DocumentResponse
    users: list[UserResponse]
    selection: DocumentShareSelectionSchema

    @classmethod
    def from_dialog(cls, dialog: DocumentShareDialog) -> "DocumentShareDialogResponse":
        return cls(
            document=DocumentResponse.from_entity(dialog.document),
            users=[UserResponse.from_entity(u) for u in dialog.users],
            selection=DocumentShareSelectionSchema(
                selected_users=list(dialog.selected_users),
                read=list(dialog.read),
                write=list(dialog.write),
                delete=list(dialog.delete),
            ),
        )


class SelectionChangeRequest(BaseModel):
    """One edit to apply to a client-held document share selection."""

    selection: DocumentShareSelectionSchema = Field(default_factory=DocumentShareSelectionSchema)
    operation: SelectionOperation
    user_id: str = Field(..., min_length=1)
    permission: Permission | None = None

    @model_validator(mode="after")
    def permission_required_for_grant_and_revoke(self) -> "SelectionChangeRequest":
        if self.operation in (SelectionOperation.GRANT, SelectionOperation.REVOKE) and (
            self.permission is None
        ):
            raise ValueError("permission is required for grant and revoke")
        return self
