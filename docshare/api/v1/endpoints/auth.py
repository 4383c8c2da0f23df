"""Auth API: sign-in and registration are delegated to the document backend."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from docshare.api.v1.dependencies import CurrentUserDep, get_auth_service, get_request_id
from docshare.application.dtos.auth import RegistrationData
from docshare.application.use_cases import AuthService
from docshare.schemas.auth import LoginRequest, RegisterRequest, TokenResponse
from docshare.schemas.user import UserResponse

router = APIRouter()


@router.post("/login", response_model=TokenResponse)
async def login(
    body: LoginRequest,
    request: Request,
    auth: Annotated[AuthService, Depends(get_auth_service)],
):
    session = await auth.login(body.email, body.password, request_id=get_request_id(request))
    return TokenResponse(token=session.token, user=UserResponse.from_entity(session.user))


@router.post("/register", response_model=TokenResponse, status_code=201)
async def register(
    body: RegisterRequest,
    request: Request,
    auth: Annotated[AuthService, Depends(get_auth_service)],
):
    session = await auth.register(
        RegistrationData(
            name=body.name,
            email=body.email,
            password=body.password,
            role=body.role.value,
            department=body.department,
        ),
        request_id=get_request_id(request),
    )
    return TokenResponse(token=session.token, user=UserResponse.from_entity(session.user))


@router.get("/me", response_model=UserResponse)
async def me(user: CurrentUserDep):
    """Current user profile."""
    return UserResponse.from_entity(user)
