"""Repository for interacting with user persistence models."""

from __future__ import annotations

from sqlalchemy import or_
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..models import User
from .base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Concrete repository for CRUD operations on ``User`` entities."""

    label = "User"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, User)

    async def get_by_username(self, username: str) -> User | None:
        """Return a user matching the supplied username if it exists."""
        result = await self._session.execute(select(User).where(User.username == username))
        return result.scalar_one_or_none()

    async def search(self, query: str, *, limit: int) -> list[User]:
        """Case-insensitive substring search over name and contact fields."""
        pattern = f"%{query}%"
        statement = (
            select(User)
            .where(
                or_(
                    User.username.ilike(pattern),  # type: ignore[union-attr]
                    User.email.ilike(pattern),  # type: ignore[union-attr]
                    User.first_name.ilike(pattern),  # type: ignore[union-attr]
                    User.last_name.ilike(pattern),  # type: ignore[union-attr]
                )
            )
            .order_by(User.id)
            .limit(limit)
        )
        result = await self._session.execute(statement)
        return list(result.scalars().all())
