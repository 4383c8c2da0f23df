"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for credentials, the current user and the
application services. The backend client and the view-state store are
created in the lifespan and read from app.state here; routes depend only
on these dependencies.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from docshare.application.dtos.auth import Credentials
from docshare.application.interfaces.backend import IDocumentBackend
from docshare.application.interfaces.view_state import IViewStateStore
from docshare.application.use_cases import (
    AuthService,
    DepartmentAdminService,
    DocumentService,
    EmployeeAdminService,
    FolderBrowser,
    InvoiceService,
    SharingService,
    TagService,
    ViewStateService,
)
from docshare.core.config import get_settings
from docshare.domain.entities import UserEntity
from docshare.domain.exceptions import AuthenticationException

security = HTTPBearer(auto_error=False)


def get_backend(request: Request) -> IDocumentBackend:
    """Document backend gateway created at startup."""
    return request.app.state.backend


def get_view_state_store(request: Request) -> IViewStateStore:
    """View-state store loaded at startup."""
    return request.app.state.view_state_store


def get_request_id(request: Request) -> str | None:
    return getattr(request.state, "request_id", None)


def get_credentials(
    request: Request,
    bearer: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> Credentials:
    """Bearer credential of this request, forwarded to every backend call.

    Raises:
        AuthenticationException: If no bearer token was sent.
    """
    if bearer is None or not bearer.credentials:
        raise AuthenticationException()
    return Credentials(token=bearer.credentials, request_id=get_request_id(request))


async def get_current_user(
    request: Request,
    credentials: Annotated[Credentials, Depends(get_credentials)],
    backend: Annotated[IDocumentBackend, Depends(get_backend)],
) -> UserEntity:
    """Signed-in user as reported by the backend (GET /auth/me), once per request."""
    user = getattr(request.state, "current_user", None)
    if user is None:
        user = await backend.get_profile(credentials)
        request.state.current_user = user
    return user


def get_auth_service(
    backend: Annotated[IDocumentBackend, Depends(get_backend)],
) -> AuthService:
    return AuthService(backend)


def get_folder_browser(
    backend: Annotated[IDocumentBackend, Depends(get_backend)],
    store: Annotated[IViewStateStore, Depends(get_view_state_store)],
) -> FolderBrowser:
    return FolderBrowser(backend, store)


def get_sharing_service(
    backend: Annotated[IDocumentBackend, Depends(get_backend)],
) -> SharingService:
    return SharingService(backend, directory_limit=get_settings().share_directory_limit)


def get_document_service(
    backend: Annotated[IDocumentBackend, Depends(get_backend)],
    store: Annotated[IViewStateStore, Depends(get_view_state_store)],
) -> DocumentService:
    return DocumentService(backend, store, max_upload_size=get_settings().max_upload_size)


def get_tag_service(
    backend: Annotated[IDocumentBackend, Depends(get_backend)],
) -> TagService:
    return TagService(backend)


def get_invoice_service(
    backend: Annotated[IDocumentBackend, Depends(get_backend)],
) -> InvoiceService:
    return InvoiceService(backend)


def get_department_admin_service(
    backend: Annotated[IDocumentBackend, Depends(get_backend)],
) -> DepartmentAdminService:
    settings = get_settings()
    return DepartmentAdminService(
        backend,
        default_page_size=settings.default_page_size,
        max_page_size=settings.max_page_size,
    )


def get_employee_admin_service(
    backend: Annotated[IDocumentBackend, Depends(get_backend)],
) -> EmployeeAdminService:
    settings = get_settings()
    return EmployeeAdminService(
        backend,
        default_page_size=settings.default_page_size,
        max_page_size=settings.max_page_size,
    )


def get_view_state_service(
    store: Annotated[IViewStateStore, Depends(get_view_state_store)],
) -> ViewStateService:
    return ViewStateService(store)


CredentialsDep = Annotated[Credentials, Depends(get_credentials)]
CurrentUserDep = Annotated[UserEntity, Depends(get_current_user)]
