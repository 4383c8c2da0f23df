"""Domain entities.

Pure domain models normalized from backend payloads; no HTTP concerns.
"""

from docshare.domain.entities.department import DepartmentEntity
from docshare.domain.entities.document import DocumentEntity, DocumentPermissions
from docshare.domain.entities.folder import FolderEntity
from docshare.domain.entities.invoice import InvoiceDocument, InvoiceEntity
from docshare.domain.entities.tag import TagEntity
from docshare.domain.entities.user import UserEntity

__all__ = [
    "DepartmentEntity",
    "DocumentEntity",
    "DocumentPermissions",
    "FolderEntity",
    "InvoiceDocument",
    "InvoiceEntity",
    "TagEntity",
    "UserEntity",
]
