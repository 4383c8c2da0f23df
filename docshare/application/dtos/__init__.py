"""Application DTOs: plain dataclasses passed between layers."""

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
    DocumentListing,
    DocumentQuery,
    UploadedFile,
)
from docshare.application.dtos.folder import FolderContents, FolderNode, SidebarView
from docshare.application.dtos.invoice import InvoiceCreate, InvoiceQuery
from docshare.application.dtos.notification import CommandResult, Notification
from docshare.application.dtos.sharing import DocumentShareDialog, FolderShareDialog
from docshare.application.dtos.view_state import ViewState

__all__ = [
    "AuthSession",
    "CommandResult",
    "Credentials",
    "DepartmentCreate",
    "DepartmentUpdate",
    "DocumentDownload",
    "DocumentListing",
    "DocumentQuery",
    "DocumentShareDialog",
    "EmployeeCreate",
    "EmployeeUpdate",
    "FolderContents",
    "FolderNode",
    "FolderShareDialog",
    "InvoiceCreate",
    "InvoiceQuery",
    "Notification",
    "Page",
    "RegistrationData",
    "SidebarView",
    "UploadedFile",
    "ViewState",
]
