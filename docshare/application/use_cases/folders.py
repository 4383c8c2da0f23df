"""Folder browsing: sidebar tree, folder contents and folder CRUD."""

from __future__ import annotations

import logging

from docshare.application.dtos.auth import Credentials
from docshare.application.dtos.folder import FolderContents, SidebarView
from docshare.application.dtos.notification import CommandResult, Notification
from docshare.application.interfaces.backend import IDocumentBackend
from docshare.application.interfaces.view_state import IViewStateStore
from docshare.application.services.access_resolver import classify_folder, is_visible
from docshare.application.services.folder_tree import compose_folder_tree
from docshare.domain.entities import FolderEntity, UserEntity
from docshare.domain.enums import FolderAccess
from docshare.domain.exceptions import (
    AccessDeniedException,
    ResourceNotFoundException,
    ValidationException,
)

logger = logging.getLogger(__name__)


class FolderBrowser:
    """Read and change the folder hierarchy as the current user sees it."""

    def __init__(self, backend: IDocumentBackend, view_state: IViewStateStore) -> None:
        self.backend = backend
        self.view_state = view_state

    async def sidebar(self, credentials: Credentials, user_id: str) -> SidebarView:
        """Compose the navigation tree from all folders and the user's view state."""
        folders = await self.backend.list_folders(credentials)
        tags = await self.backend.list_tags(credentials)
        state = await self.view_state.get(user_id)
        nodes = compose_folder_tree(
            folders,
            state.expanded_folders,
            selected_id=state.current_folder,
        )
        return SidebarView(
            nodes=tuple(nodes),
            tags=tuple(tags),
            current_folder=state.current_folder,
            current_filter=state.current_filter,
            expanded_folders=state.expanded_folders,
        )

    async def open_folder(
        self,
        credentials: Credentials,
        folder_id: str,
        user_id: str | None = None,
    ) -> FolderContents:
        """Return the folder's contents, or the restricted view.

        Locked folders are never fetched. A 403 on the folder or on its
        contents also yields the restricted view. When user_id is given and
        the folder is browsable it becomes the user's current folder.
        """
        try:
            folder = await self.backend.get_folder(credentials, folder_id)
            access = classify_folder(folder)
            if access == FolderAccess.HIDDEN:
                raise ResourceNotFoundException("folder", folder_id)
            if access == FolderAccess.LOCKED:
                return FolderContents(folder_id=folder_id, access=access, restricted=True)
            subfolders, documents = await self.backend.get_folder_contents(
                credentials, folder_id
            )
        except AccessDeniedException:
            logger.info("Folder %s denied; showing restricted view", folder_id)
            return FolderContents(
                folder_id=folder_id, access=FolderAccess.LOCKED, restricted=True
            )
        if user_id is not None:
            state = await self.view_state.get(user_id)
            await self.view_state.save(user_id, state.select_folder(folder_id))
        return FolderContents(
            folder_id=folder_id,
            access=access,
            folders=tuple(f for f in subfolders if is_visible(f)),
            documents=tuple(documents),
        )

    async def create_folder(
        self,
        credentials: Credentials,
        user: UserEntity,
        name: str,
        parent_id: str | None = None,
        department_ids: list[str] | None = None,
    ) -> CommandResult[FolderEntity]:
        """Create a folder; departments are only sent for admins and managers."""
        name = (name or "").strip()
        if not name:
            raise ValidationException("Folder name is required", field="name")
        if department_ids and not user.can_share_with_departments():
            logger.info("Ignoring department access from %s user %s", user.role.value, user.id)
            department_ids = None
        folder = await self.backend.create_folder(credentials, name, parent_id, department_ids)
        return CommandResult(folder, Notification.success("Folder created successfully"))

    async def rename_folder(
        self,
        credentials: Credentials,
        user: UserEntity,
        folder_id: str,
        name: str,
        department_ids: list[str] | None = None,
    ) -> CommandResult[FolderEntity]:
        """Rename a folder; department access is replaced only for admins and managers."""
        name = (name or "").strip()
        if not name:
            raise ValidationException("Folder name is required", field="name")
        if department_ids is not None and not user.can_share_with_departments():
            logger.info("Ignoring department access from %s user %s", user.role.value, user.id)
            department_ids = None
        folder = await self.backend.rename_folder(credentials, folder_id, name, department_ids)
        return CommandResult(folder, Notification.success("Folder renamed successfully"))

    async def delete_folder(
        self, credentials: Credentials, folder_id: str, user_id: str | None = None
    ) -> CommandResult[str]:
        """Delete a folder and clear it from the user's view state."""
        await self.backend.delete_folder(credentials, folder_id)
        if user_id is not None:
            state = await self.view_state.get(user_id)
            if state.current_folder == folder_id:
                state = state.select_folder(None)
            if folder_id in state.expanded_folders:
                state = state.toggle_expanded(folder_id)
            await self.view_state.save(user_id, state)
        return CommandResult(folder_id, Notification.success("Folder deleted successfully"))
