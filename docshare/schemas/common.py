"""Shared API schemas."""

from pydantic import BaseModel, Field

from docshare.application.dtos.notification import Notification
from docshare.domain.enums import NotificationLevel


class NotificationSchema(BaseModel):
    """Transient message the client shows as a toast."""

    level: NotificationLevel
    message: str

    @classmethod
    def from_dto(cls, notification: Notification) -> "NotificationSchema":
        return cls(level=notification.level, message=notification.message)


class MessageResponse(BaseModel):
    """Response for commands that return no record (e.g. deletes)."""

    id: str = Field(..., description="Id of the affected record")
    notification: NotificationSchema


class ErrorResponse(BaseModel):
    """Error body returned by every failing request."""

    error: str
    message: str
    details: dict | list = Field(default_factory=dict)
    notification: NotificationSchema
