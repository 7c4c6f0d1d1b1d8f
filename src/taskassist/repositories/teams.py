"""Repository for teammate relationship rows."""

from __future__ import annotations

from sqlalchemy import or_
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..models import Team, User
from .base import BaseRepository


class TeamRepository(BaseRepository[Team]):
    """Persistence helpers for symmetric ``Team`` pairs."""

    label = "Team relationship"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Team)

    async def get_for_pair(self, user_id1: int, user_id2: int) -> Team | None:
        """Return the row joining the two users, whichever order it was stored in."""
        statement = select(Team).where(
            Team.member_low_id == min(user_id1, user_id2),
            Team.member_high_id == max(user_id1, user_id2),
        )
        result = await self._session.execute(statement)
        return result.scalar_one_or_none()

    async def list_for_user(self, user_id: int) -> list[Team]:
        """Return every relationship row that includes ``user_id`` on either side."""
        statement = (
            select(Team)
            .where(or_(Team.user_id1 == user_id, Team.user_id2 == user_id))
            .order_by(Team.id)
        )
        result = await self._session.execute(statement)
        return list(result.scalars().all())

    async def list_members(self, user_id: int) -> list[User]:
        """Return the users paired with ``user_id``."""
        as_first = select(Team.user_id2).where(Team.user_id1 == user_id)
        as_second = select(Team.user_id1).where(Team.user_id2 == user_id)
        statement = (
            select(User)
            .where(or_(User.id.in_(as_first), User.id.in_(as_second)))  # type: ignore[union-attr]
            .order_by(User.id)
        )
        result = await self._session.execute(statement)
        return list(result.scalars().all())
