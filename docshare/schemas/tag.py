"""Tag API schemas."""

from pydantic import BaseModel, Field

from docshare.domain.entities import TagEntity
from docshare.schemas.common import NotificationSchema


class TagRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    color: str = Field(..., description="Hex color, e.g. #1a2b3c or #abc")


class TagResponse(BaseModel):
    id: str
    name: str
    color: str
    owner_id: str | None = None

    @classmethod
    def from_entity(cls, tag: TagEntity) -> "TagResponse":
        return cls(id=tag.id, name=tag.name, color=tag.color.value, owner_id=tag.owner_id)


class TagCommandResponse(BaseModel):
    tag: TagResponse
    notification: NotificationSchema
