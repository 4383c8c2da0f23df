"""Application interfaces (ports) implemented by the infrastructure layer."""

from docshare.application.interfaces.backend import (
    IAuthBackend,
    IDirectoryBackend,
    IDocumentBackend,
    IDocumentStoreBackend,
    IFolderBackend,
    IInvoiceBackend,
)
from docshare.application.interfaces.view_state import IViewStateStore

__all__ = [
    "IAuthBackend",
    "IDirectoryBackend",
    "IDocumentBackend",
    "IDocumentStoreBackend",
    "IFolderBackend",
    "IInvoiceBackend",
    "IViewStateStore",
]
