"""User directory API (share dialog pickers)."""

from typing import Annotated

from fastapi import APIRouter, Depends

from docshare.api.v1.dependencies import CredentialsDep, get_backend
from docshare.application.interfaces.backend import IDocumentBackend
from docshare.schemas.user import UserResponse

router = APIRouter()


@router.get("", response_model=list[UserResponse])
async def list_users(
    credentials: CredentialsDep,
    backend: Annotated[IDocumentBackend, Depends(get_backend)],
):
    return [UserResponse.from_entity(u) for u in await backend.list_users(credentials)]
