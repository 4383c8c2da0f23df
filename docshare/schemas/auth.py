"""Auth API schemas."""

from pydantic import BaseModel, EmailStr, Field

from docshare.domain.enums import UserRole
from docshare.schemas.user import UserResponse


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class RegisterRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    email: EmailStr
    password: str = Field(..., min_length=1)
    role: UserRole = UserRole.EMPLOYEE
    department: str = Field(..., min_length=1, description="Department name (slug)")


class TokenResponse(BaseModel):
    """Bearer token issued by the document backend, plus the signed-in user."""

    token: str
    token_type: str = "bearer"
    user: UserResponse
