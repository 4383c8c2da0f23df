"""Document backend gateway interface (port).

Every method that reaches a protected backend route takes an explicit
Credentials value; implementations never read a token from ambient state.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from docshare.application.dtos.admin import (
        DepartmentCreate,
        DepartmentUpdate,
        EmployeeCreate,
        EmployeeUpdate,
        Page,
    )
    from docshare.application.dtos.auth import AuthSession, Credentials, RegistrationData
    from docshare.application.dtos.document import (
        DocumentDownload,
        DocumentQuery,
        UploadedFile,
    )
    from docshare.application.dtos.invoice import InvoiceCreate, InvoiceQuery
    from docshare.domain.entities import (
        DepartmentEntity,
        DocumentEntity,
        FolderEntity,
        InvoiceEntity,
        TagEntity,
        UserEntity,
    )


class IAuthBackend(Protocol):
    """Authentication endpoints."""

    async def login(
        self, email: str, password: str, request_id: str | None = None
    ) -> AuthSession: ...

    async def register(
        self, data: RegistrationData, request_id: str | None = None
    ) -> AuthSession: ...

    async def get_profile(self, credentials: Credentials) -> UserEntity: ...


class IFolderBackend(Protocol):
    """Folder endpoints, including folder sharing (replace semantics)."""

    async def list_folders(
        self, credentials: Credentials, parent_id: str | None = None
    ) -> list[FolderEntity]: ...

    async def get_folder(self, credentials: Credentials, folder_id: str) -> FolderEntity: ...

    async def get_folder_contents(
        self, credentials: Credentials, folder_id: str
    ) -> tuple[list[FolderEntity], list[DocumentEntity]]: ...

    async def create_folder(
        self,
        credentials: Credentials,
        name: str,
        parent_id: str | None = None,
        department_ids: list[str] | None = None,
    ) -> FolderEntity: ...

    async def rename_folder(
        self,
        credentials: Credentials,
        folder_id: str,
        name: str,
        department_ids: list[str] | None = None,
    ) -> FolderEntity: ...

    async def delete_folder(self, credentials: Credentials, folder_id: str) -> None: ...

    async def share_folder_with_departments(
        self, credentials: Credentials, folder_id: str, department_ids: list[str]
    ) -> None: ...

    async def share_folder_with_users(
        self, credentials: Credentials, folder_id: str, user_ids: list[str]
    ) -> None: ...


class IDocumentStoreBackend(Protocol):
    """Document endpoints, including document sharing (replace semantics)."""

    async def list_documents(
        self, credentials: Credentials, query: DocumentQuery
    ) -> list[DocumentEntity]: ...

    async def get_document(
        self, credentials: Credentials, document_id: str
    ) -> DocumentEntity: ...

    async def star_document(
        self, credentials: Credentials, document_id: str, starred: bool
    ) -> DocumentEntity: ...

    async def delete_document(self, credentials: Credentials, document_id: str) -> None: ...

    async def upload_document(
        self, credentials: Credentials, file: UploadedFile, folder_id: str | None = None
    ) -> DocumentEntity: ...

    async def download_document(
        self, credentials: Credentials, document_id: str
    ) -> DocumentDownload: ...

    async def share_document(
        self,
        credentials: Credentials,
        document_id: str,
        user_ids: list[str],
        permissions: dict[str, list[str]],
    ) -> None: ...


class IDirectoryBackend(Protocol):
    """Tags, user directory and administration endpoints."""

    async def list_tags(self, credentials: Credentials) -> list[TagEntity]: ...

    async def create_tag(
        self, credentials: Credentials, name: str, color: str
    ) -> TagEntity: ...

    async def update_tag(
        self, credentials: Credentials, tag_id: str, name: str, color: str
    ) -> TagEntity: ...

    async def delete_tag(self, credentials: Credentials, tag_id: str) -> None: ...

    async def list_users(self, credentials: Credentials) -> list[UserEntity]: ...

    async def list_departments(
        self, credentials: Credentials, page: int = 1, limit: int = 10
    ) -> Page[DepartmentEntity]: ...

    async def create_department(
        self, credentials: Credentials, data: DepartmentCreate
    ) -> DepartmentEntity: ...

    async def update_department(
        self, credentials: Credentials, department_id: str, data: DepartmentUpdate
    ) -> DepartmentEntity: ...

    async def delete_department(
        self, credentials: Credentials, department_id: str
    ) -> None: ...

    async def list_employees(
        self, credentials: Credentials, page: int = 1, limit: int = 10
    ) -> Page[UserEntity]: ...

    async def create_employee(
        self, credentials: Credentials, data: EmployeeCreate
    ) -> UserEntity: ...

    async def update_employee(
        self, credentials: Credentials, employee_id: str, data: EmployeeUpdate
    ) -> UserEntity: ...

    async def delete_employee(self, credentials: Credentials, employee_id: str) -> None: ...


class IInvoiceBackend(Protocol):
    """Invoice record endpoints."""

    async def create_invoice(
        self, credentials: Credentials, data: InvoiceCreate
    ) -> InvoiceEntity: ...

    async def list_invoices(
        self, credentials: Credentials, query: InvoiceQuery
    ) -> list[InvoiceEntity]: ...

    async def export_invoices(
        self, credentials: Credentials, query: InvoiceQuery
    ) -> DocumentDownload: ...


class IDocumentBackend(
    IAuthBackend,
    IFolderBackend,
    IDocumentStoreBackend,
    IInvoiceBackend,
    IDirectoryBackend,
    Protocol,
):
    """Full gateway to the document management backend."""
