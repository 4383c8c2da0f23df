"""Tag management."""

from __future__ import annotations

from docshare.application.dtos.auth import Credentials
from docshare.application.dtos.notification import CommandResult, Notification
from docshare.application.interfaces.backend import IDocumentBackend
from docshare.domain.entities import TagEntity
from docshare.domain.exceptions import ValidationException
from docshare.domain.value_objects import HexColor


def _validated(name: str, color: str) -> tuple[str, str]:
    name = (name or "").strip()
    if not name:
        raise ValidationException("Tag name is required", field="name")
    try:
        return name, HexColor(color).value
    except ValueError as e:
        raise ValidationException(str(e), field="color") from e


class TagService:
    def __init__(self, backend: IDocumentBackend) -> None:
        self.backend = backend

    async def list_tags(self, credentials: Credentials) -> list[TagEntity]:
        return await self.backend.list_tags(credentials)

    async def create_tag(
        self, credentials: Credentials, name: str, color: str
    ) -> CommandResult[TagEntity]:
        name, color = _validated(name, color)
        tag = await self.backend.create_tag(credentials, name, color)
        return CommandResult(tag, Notification.success("Tag created successfully"))

    async def update_tag(
        self, credentials: Credentials, tag_id: str, name: str, color: str
    ) -> CommandResult[TagEntity]:
        name, color = _validated(name, color)
        tag = await self.backend.update_tag(credentials, tag_id, name, color)
        return CommandResult(tag, Notification.success("Tag updated successfully"))

    async def delete_tag(self, credentials: Credentials, tag_id: str) -> CommandResult[str]:
        await self.backend.delete_tag(credentials, tag_id)
        return CommandResult(tag_id, Notification.success("Tag deleted successfully"))
