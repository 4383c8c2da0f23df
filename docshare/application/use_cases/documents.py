"""Document listing, starring, deletion, upload and download."""

from __future__ import annotations

import logging
import os

from docshare.application.dtos.auth import Credentials
from docshare.application.dtos.document import (
    DocumentDownload,
    DocumentListing,
    DocumentQuery,
    UploadedFile,
)
from docshare.application.dtos.notification import CommandResult, Notification
from docshare.application.interfaces.backend import IDocumentBackend
from docshare.application.interfaces.view_state import IViewStateStore
from docshare.domain.entities import DocumentEntity
from docshare.domain.enums import DocumentFilter
from docshare.domain.exceptions import AccessDeniedException, ValidationException

logger = logging.getLogger(__name__)


def _sanitize_filename(filename: str) -> str:
    """Strip path separators and dangerous characters from filename."""
    name = os.path.basename(filename or "")
    name = name.replace("\x00", "").strip(". ")
    if not name:
        raise ValidationException("Filename is empty or invalid", field="file")
    return name


class DocumentService:
    """Document operations on behalf of the current user."""

    def __init__(
        self,
        backend: IDocumentBackend,
        view_state: IViewStateStore,
        max_upload_size: int | None = None,
    ) -> None:
        self.backend = backend
        self.view_state = view_state
        self.max_upload_size = max_upload_size

    async def list_documents(
        self,
        credentials: Credentials,
        user_id: str,
        folder_id: str | None = None,
        current_filter: DocumentFilter | None = None,
        search: str | None = None,
    ) -> DocumentListing:
        """List documents for the given or remembered folder and filter.

        An explicit filter becomes the user's remembered filter. A 403 on a
        folder listing yields an empty listing marked restricted.
        """
        state = await self.view_state.get(user_id)
        if current_filter is not None and current_filter != state.current_filter:
            state = state.select_filter(current_filter)
            await self.view_state.save(user_id, state)
        query = DocumentQuery(
            folder_id=folder_id if folder_id is not None else state.current_folder,
            filter=state.current_filter,
            search=search,
        )
        try:
            documents = await self.backend.list_documents(credentials, query)
        except AccessDeniedException:
            if "folder" not in query.to_params():
                raise
            logger.info("Documents of folder %s denied; showing restricted view", query.folder_id)
            return DocumentListing(folder_id=query.folder_id, restricted=True)
        return DocumentListing(documents=tuple(documents), folder_id=query.folder_id)

    async def set_starred(
        self, credentials: Credentials, document_id: str, starred: bool
    ) -> CommandResult[DocumentEntity]:
        document = await self.backend.star_document(credentials, document_id, starred)
        message = "Document starred" if starred else "Document unstarred"
        return CommandResult(document, Notification.success(message))

    async def delete_document(
        self, credentials: Credentials, document_id: str
    ) -> CommandResult[str]:
        await self.backend.delete_document(credentials, document_id)
        return CommandResult(document_id, Notification.success("Document deleted successfully"))

    async def upload_document(
        self,
        credentials: Credentials,
        file: UploadedFile,
        folder_id: str | None = None,
    ) -> CommandResult[DocumentEntity]:
        """Upload one file into folder_id (or the top level)."""
        if not file.content:
            raise ValidationException("Uploaded file is empty", field="file")
        if self.max_upload_size is not None and len(file.content) > self.max_upload_size:
            raise ValidationException(
                f"File exceeds the maximum upload size of {self.max_upload_size} bytes",
                field="file",
            )
        safe = UploadedFile(
            filename=_sanitize_filename(file.filename),
            content=file.content,
            content_type=file.content_type,
        )
        document = await self.backend.upload_document(credentials, safe, folder_id)
        logger.info("Uploaded %s (%d bytes) as document %s", safe.filename, len(safe.content), document.id)
        return CommandResult(document, Notification.success("Document uploaded successfully"))

    async def download_document(
        self, credentials: Credentials, document_id: str
    ) -> DocumentDownload:
        return await self.backend.download_document(credentials, document_id)
