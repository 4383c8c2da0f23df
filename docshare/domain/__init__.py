"""Domain layer: entities, value objects, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from docshare.domain.entities import (
    DepartmentEntity,
    DocumentEntity,
    DocumentPermissions,
    FolderEntity,
    TagEntity,
    UserEntity,
)
from docshare.domain.enums import (
    DocumentFilter,
    FolderAccess,
    NotificationLevel,
    Permission,
    SelectionOperation,
    UserRole,
)
from docshare.domain.exceptions import (
    AccessDeniedException,
    AuthenticationException,
    DocshareException,
    ResourceNotFoundException,
    ValidationException,
)
from docshare.domain.value_objects import HexColor

__all__ = [
    # Entities
    "DepartmentEntity",
    "DocumentEntity",
    "DocumentPermissions",
    "FolderEntity",
    "TagEntity",
    "UserEntity",
    # Enums
    "DocumentFilter",
    "FolderAccess",
    "NotificationLevel",
    "Permission",
    "SelectionOperation",
    "UserRole",
    # Exceptions
    "AccessDeniedException",
    "AuthenticationException",
    "DocshareException",
    "ResourceNotFoundException",
    "ValidationException",
    # Value objects
    "HexColor",
]
