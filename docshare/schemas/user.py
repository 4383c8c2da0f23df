"""User and department API schemas."""

from pydantic import BaseModel, ConfigDict

from docshare.domain.entities import DepartmentEntity, UserEntity
from docshare.domain.enums import UserRole


class DepartmentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    display_name: str
    description: str | None = None
    is_active: bool = True
    employee_count: int = 0
    can_delete: bool = True

    @classmethod
    def from_entity(cls, department: DepartmentEntity) -> "DepartmentResponse":
        return cls(
            id=department.id,
            name=department.name,
            display_name=department.display_name,
            description=department.description,
            is_active=department.is_active,
            employee_count=department.employee_count,
            can_delete=department.can_delete(),
        )


class UserResponse(BaseModel):
    """User as shown in lists and pickers (no password)."""

    id: str
    name: str
    email: str
    role: UserRole
    department: DepartmentResponse | None = None
    can_share_with_departments: bool = False

    @classmethod
    def from_entity(cls, user: UserEntity) -> "UserResponse":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            role=user.role,
            department=DepartmentResponse.from_entity(user.department) if user.department else None,
            can_share_with_departments=user.can_share_with_departments(),
        )
