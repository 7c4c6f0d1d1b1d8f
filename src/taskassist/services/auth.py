"""Authentication service encapsulating registration, login and token issuance."""

from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError
from sqlmodel.ext.asyncio.session import AsyncSession

from ..core.config import Settings
from ..core.security import GeneratedToken, create_access_token
from ..errors import ApplicationError, AuthenticationError, ConflictError
from ..models import User, UserRole
from .users import UserService

logger = logging.getLogger(__name__)


class AuthService:
    """High-level authentication workflows."""

    def __init__(self, session: AsyncSession, settings: Settings) -> None:
        self._session = session
        self._settings = settings
        self._user_service = UserService(session)

    async def register_user(
        self,
        *,
        username: str,
        password: str,
        email: str | None = None,
        first_name: str | None = None,
        last_name: str | None = None,
    ) -> User:
        existing = await self._user_service.get_user_by_username(username)
        if existing is not None:
            logger.info("Registration rejected for taken username")
            raise ConflictError("Username already exists")
        try:
            user = await self._user_service.create_user(
                username=username,
                password=password,
                email=email,
                first_name=first_name,
                last_name=last_name,
                role=UserRole.USER,
                is_active=True,
            )
        except IntegrityError as exc:
            # A concurrent registration claimed the username after the lookup.
            await self._session.rollback()
            logger.info("Registration rejected for taken username")
            raise ConflictError("Username already exists") from exc
        logger.info("User registered", extra={"user_id": user.id})
        return user

    async def authenticate_user(self, username: str, password: str) -> User:
        """Return the user for valid credentials, recording the login.

        Unknown usernames, wrong passwords and inactive accounts all fail the
        same way, and in comparable time, so callers cannot tell which
        usernames exist.
        """
        user = await self._user_service.verify_credentials(username, password)
        if user is None or user.id is None:
            logger.warning("Login failed")
            raise AuthenticationError()
        if not user.is_active:
            logger.warning("Login rejected for inactive account", extra={"user_id": user.id})
            raise AuthenticationError()
        return await self._user_service.update_last_login(user.id)

    def issue_token(self, user: User) -> GeneratedToken:
        if user.id is None:
            raise ApplicationError("User must be persisted before issuing tokens.")
        return create_access_token(
            subject=user.id,
            roles=[user.role.value],
            settings=self._settings,
        )

    @property
    def token_lifetime_seconds(self) -> int:
        return self._settings.access_token_expire_minutes * 60


__all__ = ["AuthService"]
