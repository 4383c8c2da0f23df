"""Application use cases (one service per area)."""

from docshare.application.use_cases.admin import (
    DepartmentAdminService,
    EmployeeAdminService,
)
from docshare.application.use_cases.auth import AuthService
from docshare.application.use_cases.documents import DocumentService
from docshare.application.use_cases.folders import FolderBrowser
from docshare.application.use_cases.invoices import InvoiceService
from docshare.application.use_cases.sharing import SharingService
from docshare.application.use_cases.tags import TagService
from docshare.application.use_cases.view_state import ViewStateService

__all__ = [
    "AuthService",
    "DepartmentAdminService",
    "DocumentService",
    "EmployeeAdminService",
    "FolderBrowser",
    "InvoiceService",
    "SharingService",
    "TagService",
    "ViewStateService",
]
