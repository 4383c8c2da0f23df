"""Folder API: sidebar tree, folder contents, folder CRUD and folder sharing."""

from typing import Annotated

from fastapi import APIRouter, Depends

from docshare.api.v1.dependencies import (
    CredentialsDep,
    CurrentUserDep,
    get_folder_browser,
    get_sharing_service,
)
from docshare.application.use_cases import FolderBrowser, SharingService
from docshare.schemas.common import MessageResponse, NotificationSchema
from docshare.schemas.folder import (
    FolderCommandResponse,
    FolderContentsResponse,
    FolderCreateRequest,
    FolderRenameRequest,
    FolderResponse,
    SidebarResponse,
)
from docshare.schemas.sharing import (
    FolderShareDialogResponse,
    ShareDepartmentsRequest,
    ShareUsersRequest,
)

router = APIRouter()


@router.get("/tree", response_model=SidebarResponse)
async def folder_tree(
    credentials: CredentialsDep,
    user: CurrentUserDep,
    browser: Annotated[FolderBrowser, Depends(get_folder_browser)],
):
    """Sidebar: visible folder tree (locked folders collapsed), tags, current folder and filter."""
    view = await browser.sidebar(credentials, user.id)
    return SidebarResponse.from_view(view)


@router.post("", response_model=FolderCommandResponse, status_code=201)
async def create_folder(
    body: FolderCreateRequest,
    credentials: CredentialsDep,
    user: CurrentUserDep,
    browser: Annotated[FolderBrowser, Depends(get_folder_browser)],
):
    result = await browser.create_folder(
        credentials, user, body.name, body.parent_id, body.department_ids
    )
    return FolderCommandResponse(
        folder=FolderResponse.from_entity(result.value),
        notification=NotificationSchema.from_dto(result.notification),
    )


@router.get("/{folder_id}/contents", response_model=FolderContentsResponse)
async def folder_contents(
    folder_id: str,
    credentials: CredentialsDep,
    user: CurrentUserDep,
    browser: Annotated[FolderBrowser, Depends(get_folder_browser)],
):
    """Open a folder. Locked or denied folders answer 200 with restricted=true and no items."""
    contents = await browser.open_folder(credentials, folder_id, user_id=user.id)
    return FolderContentsResponse.from_contents(contents)


@router.put("/{folder_id}", response_model=FolderCommandResponse)
async def rename_folder(
    folder_id: str,
    body: FolderRenameRequest,
    credentials: CredentialsDep,
    user: CurrentUserDep,
    browser: Annotated[FolderBrowser, Depends(get_folder_browser)],
):
    result = await browser.rename_folder(
        credentials, user, folder_id, body.name, department_ids=body.department_ids
    )
    return FolderCommandResponse(
        folder=FolderResponse.from_entity(result.value),
        notification=NotificationSchema.from_dto(result.notification),
    )


@router.delete("/{folder_id}", response_model=MessageResponse)
async def delete_folder(
    folder_id: str,
    credentials: CredentialsDep,
    user: CurrentUserDep,
    browser: Annotated[FolderBrowser, Depends(get_folder_browser)],
):
    result = await browser.delete_folder(credentials, folder_id, user_id=user.id)
    return MessageResponse(
        id=result.value, notification=NotificationSchema.from_dto(result.notification)
    )


@router.get("/{folder_id}/share", response_model=FolderShareDialogResponse)
async def folder_share_dialog(
    folder_id: str,
    credentials: CredentialsDep,
    sharing: Annotated[SharingService, Depends(get_sharing_service)],
):
    """Departments, users (owner excluded) and the folder's current share selection."""
    dialog = await sharing.open_folder_share_dialog(credentials, folder_id)
    return FolderShareDialogResponse.from_dialog(dialog)


@router.put("/{folder_id}/share-department", response_model=FolderCommandResponse)
async def share_folder_with_departments(
    folder_id: str,
    body: ShareDepartmentsRequest,
    credentials: CredentialsDep,
    sharing: Annotated[SharingService, Depends(get_sharing_service)],
):
    """Replace the folder's department access with exactly body.department_ids."""
    result = await sharing.share_folder_with_departments(
        credentials, folder_id, body.department_ids
    )
    return FolderCommandResponse(
        folder=FolderResponse.from_entity(result.value),
        notification=NotificationSchema.from_dto(result.notification),
    )


@router.put("/{folder_id}/share", response_model=FolderCommandResponse)
async def share_folder_with_users(
    folder_id: str,
    body: ShareUsersRequest,
    credentials: CredentialsDep,
    sharing: Annotated[SharingService, Depends(get_sharing_service)],
):
    """Replace the folder's user shares with exactly body.user_ids."""
    result = await sharing.share_folder_with_users(credentials, folder_id, body.user_ids)
    return FolderCommandResponse(
        folder=FolderResponse.from_entity(result.value),
        notification=NotificationSchema.from_dto(result.notification),
    )
