"""Reusable FastAPI dependencies."""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer
from sqlmodel.ext.asyncio.session import AsyncSession

from .core.config import Settings, get_settings
from .core.context import bind_user_id
from .core.security import JWTError, resolve_identity
from .db.session import get_session
from .models import User
from .repositories import UserRepository

_oauth2_scheme = OAuth2PasswordBearer(tokenUrl="api/auth/login", auto_error=False)


async def get_db_session() -> AsyncIterator[AsyncSession]:
    """FastAPI dependency that yields a database session."""

    async for session in get_session():
        yield session


SettingsDependency = Annotated[Settings, Depends(get_settings)]
DatabaseSessionDependency = Annotated[AsyncSession, Depends(get_db_session)]


def _unauthorized(detail: str = "Could not validate credentials.") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def _forbidden(detail: str = "Not enough permissions.") -> HTTPException:
    return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


async def get_current_user(
    request: Request,
    session: DatabaseSessionDependency,
    settings: SettingsDependency,
    token: str | None = Depends(_oauth2_scheme),
) -> User:
    """Resolve the bearer token into an active ``User``."""

    if not token:
        raise _unauthorized()
    try:
        user_id = resolve_identity(token, settings)
    except JWTError as exc:
        raise _unauthorized() from exc

    user = await UserRepository(session).get(user_id)
    if user is None:
        raise _unauthorized()
    if not user.is_active:
        raise _forbidden("User account is inactive.")
    request.state.user_id = user.id
    bind_user_id(user.id)
    return user


CurrentUserDependency = Annotated[User, Depends(get_current_user)]


__all__ = [
    "CurrentUserDependency",
    "DatabaseSessionDependency",
    "SettingsDependency",
    "get_current_user",
    "get_db_session",
]
