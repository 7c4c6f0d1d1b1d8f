"""Service layer orchestrating user-related repository operations."""

from __future__ import annotations

import logging

from sqlmodel.ext.asyncio.session import AsyncSession

from ..core.security import get_password_hash, verify_password
from ..models import User, UserRole, utcnow
from ..repositories import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """High-level business operations for ``User`` entities."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self._repository = UserRepository(session)

    @property
    def repository(self) -> UserRepository:
        """Expose the underlying repository for advanced scenarios."""
        return self._repository

    async def create_user(
        self,
        *,
        username: str,
        password: str,
        email: str | None = None,
        first_name: str | None = None,
        last_name: str | None = None,
        role: UserRole = UserRole.USER,
        is_active: bool = True,
    ) -> User:
        """Create and persist a new user record with a hashed password."""
        user = User(
            username=username,
            hashed_password=get_password_hash(password),
            email=email,
            first_name=first_name,
            last_name=last_name,
            role=role,
            is_active=is_active,
        )
        await self._repository.add(user)
        await self._session.commit()
        await self._repository.refresh(user)
        return user

    async def get_user(self, user_id: int) -> User | None:
        """Fetch a user by primary key."""
        return await self._repository.get(user_id)

    async def get_user_by_username(self, username: str) -> User | None:
        """Fetch a user by their unique username."""
        return await self._repository.get_by_username(username)

    async def search_users(self, query: str, *, limit: int) -> list[User]:
        """Return up to ``limit`` users whose name or email contains ``query``.

        A blank query matches everyone, so the first ``limit`` users come back.
        """
        return await self._repository.search(query.strip(), limit=limit)

    async def verify_credentials(self, username: str, password: str) -> User | None:
        """Return the user when ``password`` matches, ``None`` otherwise."""
        user = await self._repository.get_by_username(username)
        if not verify_password(password, user.hashed_password if user is not None else None):
            return None
        return user

    async def update_last_login(self, user_id: int) -> User:
        """Stamp the user's last successful login with the current time."""
        user = await self._repository.require(user_id)
        user.last_login = utcnow()
        await self._session.commit()
        await self._repository.refresh(user)
        return user

    async def update_profile(
        self,
        user_id: int,
        *,
        email: str | None = None,
        first_name: str | None = None,
        last_name: str | None = None,
        profile_image_url: str | None = None,
    ) -> User:
        """Merge the supplied profile fields into the stored user."""
        user = await self._repository.require(user_id)
        updates = {
            "email": email,
            "first_name": first_name,
            "last_name": last_name,
            "profile_image_url": profile_image_url,
        }
        for field, value in updates.items():
            if value is not None:
                setattr(user, field, value)
        user.touch()
        await self._session.commit()
        await self._repository.refresh(user)
        logger.info("User profile updated", extra={"user_id": user_id})
        return user


__all__ = ["UserService"]
