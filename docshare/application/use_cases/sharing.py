"""Folder and document sharing commands.

Each command sends the complete desired membership (the backend replaces
what it stores), never retries, and on success re-reads the authoritative
record. A failure propagates unchanged and leaves the caller's selection
as it was.
"""

from __future__ import annotations

import logging

from docshare.application.dtos.auth import Credentials
from docshare.application.dtos.notification import CommandResult, Notification
from docshare.application.dtos.sharing import DocumentShareDialog, FolderShareDialog
from docshare.application.interfaces.backend import IDocumentBackend
from docshare.application.services.share_selection import (
    DocumentShareSelection,
    FolderShareSelection,
)
from docshare.domain.entities import DocumentEntity, FolderEntity

logger = logging.getLogger(__name__)


def _unique(ids: list[str]) -> list[str]:
    return list(dict.fromkeys(i for i in ids if i))


class SharingService:
    """Open share dialogs and commit share selections."""

    def __init__(self, backend: IDocumentBackend, directory_limit: int = 100) -> None:
        self.backend = backend
        self.directory_limit = directory_limit

    async def open_folder_share_dialog(
        self, credentials: Credentials, folder_id: str
    ) -> FolderShareDialog:
        folder = await self.backend.get_folder(credentials, folder_id)
        departments = await self.backend.list_departments(
            credentials, page=1, limit=self.directory_limit
        )
        users = await self.backend.list_users(credentials)
        selection = FolderShareSelection.from_folder(folder)
        return FolderShareDialog(
            folder=folder,
            departments=departments.items,
            users=tuple(u for u in users if u.id != folder.owner_id),
            department_ids=tuple(selection.department_ids),
            user_ids=tuple(selection.user_ids),
        )

    async def share_folder_with_departments(
        self, credentials: Credentials, folder_id: str, department_ids: list[str]
    ) -> CommandResult[FolderEntity]:
        department_ids = _unique(department_ids)
        await self.backend.share_folder_with_departments(credentials, folder_id, department_ids)
        logger.info("Folder %s shared with %d departments", folder_id, len(department_ids))
        folder = await self.backend.get_folder(credentials, folder_id)
        return CommandResult(
            folder, Notification.success("Folder shared with departments successfully")
        )

    async def share_folder_with_users(
        self, credentials: Credentials, folder_id: str, user_ids: list[str]
    ) -> CommandResult[FolderEntity]:
        user_ids = _unique(user_ids)
        await self.backend.share_folder_with_users(credentials, folder_id, user_ids)
        logger.info("Folder %s shared with %d users", folder_id, len(user_ids))
        folder = await self.backend.get_folder(credentials, folder_id)
        return CommandResult(folder, Notification.success("Folder shared with users successfully"))

    async def open_document_share_dialog(
        self, credentials: Credentials, document_id: str
    ) -> DocumentShareDialog:
        document = await self.backend.get_document(credentials, document_id)
        users = await self.backend.list_users(credentials)
        selection = DocumentShareSelection.from_document(document)
        return DocumentShareDialog(
            document=document,
            users=tuple(u for u in users if u.id != document.owner_id),
            selected_users=tuple(selection.selected_users),
            read=tuple(selection.read),
            write=tuple(selection.write),
            delete=tuple(selection.delete),
        )

    async def share_document(
        self,
        credentials: Credentials,
        document_id: str,
        selection: DocumentShareSelection,
    ) -> CommandResult[DocumentEntity]:
        """Commit the selection as the document's complete share state."""
        payload = selection.to_payload()
        await self.backend.share_document(
            credentials, document_id, payload["userIds"], payload["permissions"]
        )
        logger.info(
            "Document %s shared with %d users", document_id, len(payload["userIds"])
        )
        document = await self.backend.get_document(credentials, document_id)
        return CommandResult(document, Notification.success("Document shared successfully"))
