"""Transient user notification (toast) attached to command results and errors."""

from dataclasses import dataclass
from typing import Generic, TypeVar

from docshare.domain.enums import NotificationLevel

T = TypeVar("T")


@dataclass(frozen=True)
class Notification:
    """One user-visible message."""

    level: NotificationLevel
    message: str

    @classmethod
    def success(cls, message: str) -> "Notification":
        return cls(NotificationLevel.SUCCESS, message)

    @classmethod
    def error(cls, message: str) -> "Notification":
        return cls(NotificationLevel.ERROR, message)


@dataclass(frozen=True)
class CommandResult(Generic[T]):
    """Outcome of a mutation: the authoritative record plus a notification."""

    value: T
    notification: Notification
