"""HTTP gateway to the document management backend.

Implements IDocumentBackend with httpx.AsyncClient. The client holds no
credential; callers pass Credentials into each method.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

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
from docshare.application.dtos.invoice import EXPORT_FILENAME, InvoiceCreate, InvoiceQuery
from docshare.domain.entities import (
    DepartmentEntity,
    DocumentEntity,
    FolderEntity,
    InvoiceEntity,
    TagEntity,
    UserEntity,
)
from docshare.infrastructure.backend._normalize import (
    list_payload,
    to_department,
    to_document,
    to_folder,
    to_invoice,
    to_tag,
    to_user,
)
from docshare.infrastructure.backend._rest_client import decode_json, request
from docshare.infrastructure.exceptions import BackendProtocolError

logger = logging.getLogger(__name__)

XLSX_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def _as_list(body: Any, kind: str) -> list[Any]:
    if body is None:
        return []
    if not isinstance(body, list):
        raise BackendProtocolError(f"Expected a list of {kind}")
    return body


def _filename_from_disposition(value: str | None) -> str | None:
    if not value:
        return None
    for part in value.split(";"):
        key, _, raw = part.strip().partition("=")
        if key.lower() == "filename" and raw:
            return raw.strip('"')
    return None


class DocumentBackendClient:
    """Async client for the document backend REST API."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._http = (
            http_client
            if http_client is not None
            else httpx.AsyncClient(base_url=self._base_url, timeout=timeout)
        )
        self._owns_http = http_client is None

    async def aclose(self) -> None:
        """Close the HTTP client only if we created it (do not close injected client)."""
        if self._owns_http:
            await self._http.aclose()

    async def _json(self, method: str, path: str, credentials: Credentials | None, **kwargs) -> Any:
        resp = await request(self._http, method, path, credentials, **kwargs)
        return decode_json(resp)

    # Auth

    def _session(self, body: Any) -> AuthSession:
        if not isinstance(body, dict) or not body.get("token"):
            raise BackendProtocolError("Authentication response without token")
        return AuthSession(token=body["token"], user=to_user(body.get("user")))

    async def login(self, email: str, password: str, request_id: str | None = None) -> AuthSession:
        body = await self._json(
            "POST",
            "/auth/login",
            None,
            json_body={"email": email, "password": password},
            request_id=request_id,
        )
        return self._session(body)

    async def register(
        self, data: RegistrationData, request_id: str | None = None
    ) -> AuthSession:
        body = await self._json(
            "POST",
            "/auth/register",
            None,
            json_body={
                "name": data.name,
                "email": data.email,
                "password": data.password,
                "role": data.role,
                "department": data.department,
            },
            request_id=request_id,
        )
        return self._session(body)

    async def get_profile(self, credentials: Credentials) -> UserEntity:
        body = await self._json("GET", "/auth/me", credentials)
        if isinstance(body, dict) and isinstance(body.get("user"), dict):
            body = body["user"]
        return to_user(body)

    # Folders

    async def list_folders(
        self, credentials: Credentials, parent_id: str | None = None
    ) -> list[FolderEntity]:
        params = {"parent": parent_id} if parent_id else None
        body = await self._json("GET", "/folders", credentials, params=params)
        return [to_folder(f) for f in _as_list(body, "folders")]

    async def get_folder(self, credentials: Credentials, folder_id: str) -> FolderEntity:
        return to_folder(await self._json("GET", f"/folders/{folder_id}", credentials))

    async def get_folder_contents(
        self, credentials: Credentials, folder_id: str
    ) -> tuple[list[FolderEntity], list[DocumentEntity]]:
        body = await self._json("GET", f"/folders/{folder_id}/contents", credentials)
        if not isinstance(body, dict):
            raise BackendProtocolError("Expected folder contents object")
        folders = body.get("folders", body.get("subfolders")) or []
        documents = body.get("documents") or []
        return (
            [to_folder(f) for f in _as_list(folders, "folders")],
            [to_document(d) for d in _as_list(documents, "documents")],
        )

    async def create_folder(
        self,
        credentials: Credentials,
        name: str,
        parent_id: str | None = None,
        department_ids: list[str] | None = None,
    ) -> FolderEntity:
        payload: dict[str, Any] = {"name": name, "parent": parent_id}
        if department_ids:
            payload["departmentAccess"] = list(department_ids)
        return to_folder(await self._json("POST", "/folders", credentials, json_body=payload))

    async def rename_folder(
        self,
        credentials: Credentials,
        folder_id: str,
        name: str,
        department_ids: list[str] | None = None,
    ) -> FolderEntity:
        payload: dict[str, Any] = {"name": name}
        if department_ids is not None:
            payload["departmentAccess"] = list(department_ids)
        body = await self._json("PUT", f"/folders/{folder_id}", credentials, json_body=payload)
        return to_folder(body)

    async def delete_folder(self, credentials: Credentials, folder_id: str) -> None:
        await request(self._http, "DELETE", f"/folders/{folder_id}", credentials)

    async def share_folder_with_departments(
        self, credentials: Credentials, folder_id: str, department_ids: list[str]
    ) -> None:
        await request(
            self._http,
            "PUT",
            f"/folders/{folder_id}/share-department",
            credentials,
            json_body={"departments": list(department_ids)},
        )

    async def share_folder_with_users(
        self, credentials: Credentials, folder_id: str, user_ids: list[str]
    ) -> None:
        await request(
            self._http,
            "PUT",
            f"/folders/{folder_id}/share",
            credentials,
            json_body={"userIds": list(user_ids)},
        )

    # Documents

    async def list_documents(
        self, credentials: Credentials, query: DocumentQuery
    ) -> list[DocumentEntity]:
        body = await self._json("GET", "/documents", credentials, params=query.to_params())
        return [to_document(d) for d in _as_list(body, "documents")]

    async def get_document(self, credentials: Credentials, document_id: str) -> DocumentEntity:
        return to_document(await self._json("GET", f"/documents/{document_id}", credentials))

    async def star_document(
        self, credentials: Credentials, document_id: str, starred: bool
    ) -> DocumentEntity:
        body = await self._json(
            "PUT",
            f"/documents/{document_id}/star",
            credentials,
            json_body={"starred": starred},
        )
        return to_document(body)

    async def delete_document(self, credentials: Credentials, document_id: str) -> None:
        await request(self._http, "DELETE", f"/documents/{document_id}", credentials)

    async def upload_document(
        self, credentials: Credentials, file: UploadedFile, folder_id: str | None = None
    ) -> DocumentEntity:
        body = await self._json(
            "POST",
            "/documents/upload",
            credentials,
            files={"file": (file.filename, file.content, file.content_type)},
            data={"folder": folder_id} if folder_id else None,
        )
        return to_document(body)

    async def download_document(
        self, credentials: Credentials, document_id: str
    ) -> DocumentDownload:
        resp = await request(self._http, "GET", f"/documents/{document_id}/download", credentials)
        return DocumentDownload(
            content=resp.content,
            content_type=resp.headers.get("content-type", "application/octet-stream"),
            filename=_filename_from_disposition(resp.headers.get("content-disposition")),
        )

    async def share_document(
        self,
        credentials: Credentials,
        document_id: str,
        user_ids: list[str],
        permissions: dict[str, list[str]],
    ) -> None:
        await request(
            self._http,
            "PUT",
            f"/documents/{document_id}/share",
            credentials,
            json_body={"userIds": list(user_ids), "permissions": permissions},
        )

    # Invoices

    async def create_invoice(
        self, credentials: Credentials, data: InvoiceCreate
    ) -> InvoiceEntity:
        body = await self._json(
            "POST",
            "/invoices",
            credentials,
            json_body={
                "document": data.document_id,
                "vendorName": data.vendor_name,
                "invoiceDate": data.invoice_date.isoformat(),
                "invoiceValue": data.invoice_value,
                "invoiceQty": data.invoice_qty,
            },
        )
        return to_invoice(body)

    async def list_invoices(
        self, credentials: Credentials, query: InvoiceQuery
    ) -> list[InvoiceEntity]:
        body = await self._json("GET", "/invoices", credentials, params=query.to_params())
        return [to_invoice(i) for i in _as_list(body, "invoices")]

    async def export_invoices(
        self, credentials: Credentials, query: InvoiceQuery
    ) -> DocumentDownload:
        resp = await request(
            self._http, "GET", "/invoices/export", credentials, params=query.to_params()
        )
        return DocumentDownload(
            content=resp.content,
            content_type=resp.headers.get("content-type", XLSX_CONTENT_TYPE),
            filename=_filename_from_disposition(resp.headers.get("content-disposition"))
            or EXPORT_FILENAME,
        )

    # Tags

    async def list_tags(self, credentials: Credentials) -> list[TagEntity]:
        body = await self._json("GET", "/tags", credentials)
        return [to_tag(t) for t in _as_list(body, "tags")]

    async def create_tag(self, credentials: Credentials, name: str, color: str) -> TagEntity:
        body = await self._json(
            "POST", "/tags", credentials, json_body={"name": name, "color": color}
        )
        return to_tag(body)

    async def update_tag(
        self, credentials: Credentials, tag_id: str, name: str, color: str
    ) -> TagEntity:
        body = await self._json(
            "PUT", f"/tags/{tag_id}", credentials, json_body={"name": name, "color": color}
        )
        return to_tag(body)

    async def delete_tag(self, credentials: Credentials, tag_id: str) -> None:
        await request(self._http, "DELETE", f"/tags/{tag_id}", credentials)

    # Users and administration

    async def list_users(self, credentials: Credentials) -> list[UserEntity]:
        body = await self._json("GET", "/users", credentials)
        return [to_user(u) for u in _as_list(body, "users")]

    async def list_departments(
        self, credentials: Credentials, page: int = 1, limit: int = 10
    ) -> Page[DepartmentEntity]:
        body = await self._json(
            "GET", "/admin/departments", credentials, params={"page": page, "limit": limit}
        )
        items, total = list_payload(body, "departments")
        return Page(tuple(to_department(d) for d in items), total, page, limit)

    async def create_department(
        self, credentials: Credentials, data: DepartmentCreate
    ) -> DepartmentEntity:
        body = await self._json(
            "POST",
            "/admin/departments",
            credentials,
            json_body={
                "name": data.name,
                "displayName": data.display_name,
                "description": data.description,
            },
        )
        return to_department(body)

    async def update_department(
        self, credentials: Credentials, department_id: str, data: DepartmentUpdate
    ) -> DepartmentEntity:
        body = await self._json(
            "PUT",
            f"/admin/departments/{department_id}",
            credentials,
            json_body={
                "displayName": data.display_name,
                "description": data.description,
                "isActive": data.is_active,
            },
        )
        return to_department(body)

    async def delete_department(self, credentials: Credentials, department_id: str) -> None:
        await request(self._http, "DELETE", f"/admin/departments/{department_id}", credentials)

    async def list_employees(
        self, credentials: Credentials, page: int = 1, limit: int = 10
    ) -> Page[UserEntity]:
        body = await self._json(
            "GET", "/admin/employees", credentials, params={"page": page, "limit": limit}
        )
        items, total = list_payload(body, "employees")
        return Page(tuple(to_user(u) for u in items), total, page, limit)

    async def create_employee(
        self, credentials: Credentials, data: EmployeeCreate
    ) -> UserEntity:
        body = await self._json(
            "POST",
            "/admin/employees",
            credentials,
            json_body={
                "name": data.name,
                "email": data.email,
                "password": data.password,
                "role": data.role,
                "department": data.department,
            },
        )
        return to_user(body)

    async def update_employee(
        self, credentials: Credentials, employee_id: str, data: EmployeeUpdate
    ) -> UserEntity:
        body = await self._json(
            "PUT",
            f"/admin/employees/{employee_id}",
            credentials,
            json_body={
                "name": data.name,
                "email": data.email,
                "role": data.role,
                "department": data.department,
            },
        )
        return to_user(body)

    async def delete_employee(self, credentials: Credentials, employee_id: str) -> None:
        await request(self._http, "DELETE", f"/admin/employees/{employee_id}", credentials)
