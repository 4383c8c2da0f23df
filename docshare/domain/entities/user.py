"""User domain entity."""

from dataclasses import dataclass

from docshare.domain.entities.department import DepartmentEntity
from docshare.domain.enums import UserRole
from docshare.domain.exceptions import ValidationException


@dataclass(frozen=True)
class UserEntity:
    """Domain entity for a user (employee).

    Frozen: role and department are set once per record; an update produces
    a new record from the backend.
    """

    id: str
    name: str
    email: str
    role: UserRole = UserRole.EMPLOYEE
    department: DepartmentEntity | None = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValidationException("User ID is required", field="id")

    def can_share_with_departments(self) -> bool:
        """Return whether folder creation may offer department sharing (admin or manager)."""
        return self.role in (UserRole.ADMIN, UserRole.MANAGER)
