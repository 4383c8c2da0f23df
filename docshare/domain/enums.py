"""Domain enumerations for docshare.

Enums represent fixed sets of domain values (roles, folder access
classification, sharing permissions, document list filters).
"""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings."""
        return [member.value for member in cls]


class UserRole(_ValuesMixin, str, Enum):
    """Role of a user within the organization."""

    ADMIN = "admin"
    MANAGER = "manager"
    EMPLOYEE = "employee"


class FolderAccess(_ValuesMixin, str, Enum):
    """Rendering classification of a folder node.

    HIDDEN: not rendered at all. LOCKED: rendered with a lock indicator,
    navigation disabled, contents never fetched. FULL: rendered and browsable.
    """

    HIDDEN = "hidden"
    LOCKED = "locked"
    FULL = "full"


class Permission(_ValuesMixin, str, Enum):
    """Per-user document permission."""

    READ = "read"
    WRITE = "write"
    DELETE = "delete"


class DocumentFilter(_ValuesMixin, str, Enum):
    """Quick filter applied to the document list."""

    ALL = "all"
    STARRED = "starred"
    SHARED = "shared"
    MY_DRIVES = "mydrives"
    INVOICES = "invoices"


class NotificationLevel(_ValuesMixin, str, Enum):
    """Severity of a transient user notification."""

    SUCCESS = "success"
    INFO = "info"
    ERROR = "error"


class SelectionOperation(_ValuesMixin, str, Enum):
    """One edit applied to a document share selection."""

    SELECT = "select"
    DESELECT = "deselect"
    TOGGLE = "toggle"
    GRANT = "grant"
    REVOKE = "revoke"
