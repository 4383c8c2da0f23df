"""Department and employee administration API schemas."""

from pydantic import BaseModel, EmailStr, Field

from docshare.domain.enums import UserRole
from docshare.schemas.common import NotificationSchema
from docshare.schemas.user import DepartmentResponse, UserResponse


class DepartmentCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=50, description="Lowercase slug, immutable")
    display_name: str = Field(..., min_length=1, max_length=200)
    description: str | None = None


class DepartmentUpdateRequest(BaseModel):
    """Editable fields only; the department name cannot be changed."""

    display_name: str = Field(..., min_length=1, max_length=200)
    description: str | None = None
    is_active: bool = True


class EmployeeCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    email: EmailStr
    password: str = Field(..., min_length=1)
    role: UserRole = UserRole.EMPLOYEE
    department: str = Field(..., min_length=1)


class EmployeeUpdateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    email: EmailStr
    role: UserRole
    department: str = Field(..., min_length=1)


class DepartmentPageResponse(BaseModel):
    items: list[DepartmentResponse]
    total: int
    page: int
    limit: int
    has_next: bool
    has_prev: bool


class EmployeePageResponse(BaseModel):
    items: list[UserResponse]
    total: int
    page: int
    limit: int
    has_next: bool
    has_prev: bool


class DepartmentCommandResponse(BaseModel):
    department: DepartmentResponse
    notification: NotificationSchema


class EmployeeCommandResponse(BaseModel):
    employee: UserResponse
    notification: NotificationSchema
