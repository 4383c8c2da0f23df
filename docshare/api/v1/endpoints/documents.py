"""Document API: list, star, delete, upload, download and document sharing."""

from typing import Annotated
from urllib.parse import quote

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile
from fastapi.responses import Response

from docshare.api.v1.dependencies import (
    CredentialsDep,
    CurrentUserDep,
    get_document_service,
    get_sharing_service,
)
from docshare.application.dtos.document import UploadedFile
from docshare.application.use_cases import DocumentService, SharingService
from docshare.domain.enums import DocumentFilter
from docshare.schemas.common import MessageResponse, NotificationSchema
from docshare.schemas.document import (
    DocumentCommandResponse,
    DocumentListResponse,
    DocumentResponse,
    StarRequest,
)
from docshare.schemas.sharing import (
    DocumentShareDialogResponse,
    DocumentShareSelectionSchema,
    SelectionChangeRequest,
)

router = APIRouter()


@router.get("", response_model=DocumentListResponse)
async def list_documents(
    credentials: CredentialsDep,
    user: CurrentUserDep,
    documents: Annotated[DocumentService, Depends(get_document_service)],
    folder: Annotated[str | None, Query(description="Folder id; defaults to the current folder")] = None,
    current_filter: Annotated[
        DocumentFilter | None, Query(alias="filter", description="Quick filter; remembered")
    ] = None,
    search: Annotated[str | None, Query(max_length=200)] = None,
):
    """List documents; a folder the user may not read comes back empty and restricted."""
    listing = await documents.list_documents(
        credentials, user.id, folder_id=folder, current_filter=current_filter, search=search
    )
    return DocumentListResponse.from_listing(listing)


@router.post("/upload", response_model=DocumentCommandResponse, status_code=201)
async def upload_document(
    credentials: CredentialsDep,
    documents: Annotated[DocumentService, Depends(get_document_service)],
    file: UploadFile = File(...),
    folder: str | None = Form(None),
):
    """Upload one file into folder (or the top level)."""
    content = await file.read()
    result = await documents.upload_document(
        credentials,
        UploadedFile(
            filename=file.filename or "",
            content=content,
            content_type=file.content_type or "application/octet-stream",
        ),
        folder_id=folder or None,
    )
    return DocumentCommandResponse(
        document=DocumentResponse.from_entity(result.value),
        notification=NotificationSchema.from_dto(result.notification),
    )


@router.put("/{document_id}/star", response_model=DocumentCommandResponse)
async def star_document(
    document_id: str,
    body: StarRequest,
    credentials: CredentialsDep,
    documents: Annotated[DocumentService, Depends(get_document_service)],
):
    result = await documents.set_starred(credentials, document_id, body.starred)
    return DocumentCommandResponse(
        document=DocumentResponse.from_entity(result.value),
        notification=NotificationSchema.from_dto(result.notification),
    )


@router.delete("/{document_id}", response_model=MessageResponse)
async def delete_document(
    document_id: str,
    credentials: CredentialsDep,
    documents: Annotated[DocumentService, Depends(get_document_service)],
):
    result = await documents.delete_document(credentials, document_id)
    return MessageResponse(
        id=result.value, notification=NotificationSchema.from_dto(result.notification)
    )


@router.get("/{document_id}/download")
async def download_document(
    document_id: str,
    credentials: CredentialsDep,
    documents: Annotated[DocumentService, Depends(get_document_service)],
) -> Response:
    download = await documents.download_document(credentials, document_id)
    headers = {}
    if download.filename:
        headers["Content-Disposition"] = (
            f"attachment; filename*=UTF-8''{quote(download.filename)}"
        )
    return Response(content=download.content, media_type=download.content_type, headers=headers)


@router.get("/{document_id}/share", response_model=DocumentShareDialogResponse)
async def document_share_dialog(
    document_id: str,
    credentials: CredentialsDep,
    sharing: Annotated[SharingService, Depends(get_sharing_service)],
):
    """Candidate users (owner excluded) and the document's normalized share selection."""
    dialog = await sharing.open_document_share_dialog(credentials, document_id)
    return DocumentShareDialogResponse.from_dialog(dialog)


@router.post("/{document_id}/share/selection", response_model=DocumentShareSelectionSchema)
async def change_share_selection(document_id: str, body: SelectionChangeRequest):
    """Apply one dialog edit to a client-held selection; nothing is sent to the backend."""
    selection = body.selection.to_selection()
    selection.apply(body.operation, body.user_id, body.permission)
    return DocumentShareSelectionSchema.from_selection(selection)


@router.put("/{document_id}/share", response_model=DocumentCommandResponse)
async def share_document(
    document_id: str,
    body: DocumentShareSelectionSchema,
    credentials: CredentialsDep,
    sharing: Annotated[SharingService, Depends(get_sharing_service)],
):
    """Replace the document's share state with the (normalized) selection."""
    result = await sharing.share_document(credentials, document_id, body.to_selection())
    return DocumentCommandResponse(
        document=DocumentResponse.from_entity(result.value),
        notification=NotificationSchema.from_dto(result.notification),
    )
