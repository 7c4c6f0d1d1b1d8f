"""Routes handling user registration and login."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...deps import CurrentUserDependency, DatabaseSessionDependency, SettingsDependency
from ...models import User
from ...schemas import AuthResponse, LoginRequest, RegisterRequest, UserPublic
from ...services import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


def _build_response(service: AuthService, user: User) -> AuthResponse:
    token = service.issue_token(user)
    return AuthResponse(
        user=UserPublic.model_validate(user),
        token=token.token,
        expires_in=service.token_lifetime_seconds,
    )


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_200_OK,
    summary="Register a new user account",
)
async def register(
    payload: RegisterRequest,
    session: DatabaseSessionDependency,
    settings: SettingsDependency,
) -> AuthResponse:
    service = AuthService(session, settings)
    user = await service.register_user(
        username=payload.username,
        password=payload.password,
        email=payload.email,
        first_name=payload.first_name,
        last_name=payload.last_name,
    )
    return _build_response(service, user)


@router.post(
    "/login",
    response_model=AuthResponse,
    status_code=status.HTTP_200_OK,
    summary="Authenticate using username and password",
)
async def login(
    payload: LoginRequest,
    session: DatabaseSessionDependency,
    settings: SettingsDependency,
) -> AuthResponse:
    service = AuthService(session, settings)
    user = await service.authenticate_user(payload.username, payload.password)
    return _build_response(service, user)


@router.get(
    "/me",
    response_model=UserPublic,
    summary="Return the authenticated user",
)
async def read_current_user(current_user: CurrentUserDependency) -> UserPublic:
    return UserPublic.model_validate(current_user)
