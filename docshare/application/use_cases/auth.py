"""Sign-in, registration and profile lookup, delegated to the backend."""

from __future__ import annotations

from docshare.application.dtos.auth import AuthSession, Credentials, RegistrationData
from docshare.application.interfaces.backend import IDocumentBackend
from docshare.domain.entities import UserEntity
from docshare.domain.enums import UserRole
from docshare.domain.exceptions import ValidationException


class AuthService:
    """The backend issues and checks tokens; this only validates input."""

    def __init__(self, backend: IDocumentBackend) -> None:
        self.backend = backend

    async def login(
        self, email: str, password: str, request_id: str | None = None
    ) -> AuthSession:
        email = (email or "").strip()
        if not email or not password:
            raise ValidationException("Email and password are required")
        return await self.backend.login(email, password, request_id=request_id)

    async def register(
        self, data: RegistrationData, request_id: str | None = None
    ) -> AuthSession:
        for field in ("name", "email", "password", "department"):
            if not (getattr(data, field) or "").strip():
                raise ValidationException(f"{field.capitalize()} is required", field=field)
        if data.role not in UserRole.values():
            raise ValidationException(
                f"Role must be one of: {', '.join(UserRole.values())}", field="role"
            )
        return await self.backend.register(data, request_id=request_id)

    async def current_user(self, credentials: Credentials) -> UserEntity:
        return await self.backend.get_profile(credentials)
