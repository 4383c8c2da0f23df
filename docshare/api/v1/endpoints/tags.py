"""Tag API."""

from typing import Annotated

from fastapi import APIRouter, Depends

from docshare.api.v1.dependencies import CredentialsDep, get_tag_service
from docshare.application.use_cases import TagService
from docshare.schemas.common import MessageResponse, NotificationSchema
from docshare.schemas.tag import TagCommandResponse, TagRequest, TagResponse

router = APIRouter()


@router.get("", response_model=list[TagResponse])
async def list_tags(
    credentials: CredentialsDep,
    tags: Annotated[TagService, Depends(get_tag_service)],
):
    return [TagResponse.from_entity(t) for t in await tags.list_tags(credentials)]


@router.post("", response_model=TagCommandResponse, status_code=201)
async def create_tag(
    body: TagRequest,
    credentials: CredentialsDep,
    tags: Annotated[TagService, Depends(get_tag_service)],
):
    result = await tags.create_tag(credentials, body.name, body.color)
    return TagCommandResponse(
        tag=TagResponse.from_entity(result.value),
        notification=NotificationSchema.from_dto(result.notification),
    )


@router.put("/{tag_id}", response_model=TagCommandResponse)
async def update_tag(
    tag_id: str,
    body: TagRequest,
    credentials: CredentialsDep,
    tags: Annotated[TagService, Depends(get_tag_service)],
):
    result = await tags.update_tag(credentials, tag_id, body.name, body.color)
    return TagCommandResponse(
        tag=TagResponse.from_entity(result.value),
        notification=NotificationSchema.from_dto(result.notification),
    )


@router.delete("/{tag_id}", response_model=MessageResponse)
async def delete_tag(
    tag_id: str,
    credentials: CredentialsDep,
    tags: Annotated[TagService, Depends(get_tag_service)],
):
    result = await tags.delete_tag(credentials, tag_id)
    return MessageResponse(
        id=result.value, notification=NotificationSchema.from_dto(result.notification)
    )
