"""Service layer for symmetric teammate relationships."""

from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError
from sqlmodel.ext.asyncio.session import AsyncSession

from ..errors import ValidationFailedError
from ..models import Team, User
from ..repositories import TeamRepository, UserRepository

logger = logging.getLogger(__name__)


class TeamService:
    """Create, list and remove teammate pairs."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self._repository = TeamRepository(session)
        self._user_repository = UserRepository(session)

    @property
    def repository(self) -> TeamRepository:
        """Expose the underlying repository for advanced scenarios."""
        return self._repository

    async def add_team_member(self, user_id1: int, user_id2: int) -> Team:
        """Pair two users, returning the existing row when they are already paired."""
        if user_id1 == user_id2:
            raise ValidationFailedError(
                "A user cannot be paired with themselves",
                errors={"userId2": "must differ from userId1"},
            )
        for user_id in (user_id1, user_id2):
            await self._user_repository.require(user_id)

        existing = await self._repository.get_for_pair(user_id1, user_id2)
        if existing is not None:
            logger.info("Team pair reused", extra={"team_id": existing.id})
            return existing

        team = Team.for_pair(user_id1, user_id2)
        try:
            await self._repository.add(team)
            await self._session.commit()
        except IntegrityError:
            # Another request stored the same pair first.
            await self._session.rollback()
            winner = await self._repository.get_for_pair(user_id1, user_id2)
            if winner is None:
                raise
            logger.info("Team pair reused", extra={"team_id": winner.id})
            return winner
        await self._repository.refresh(team)
        logger.info(
            "Team pair created",
            extra={"team_id": team.id, "user_id1": user_id1, "user_id2": user_id2},
        )
        return team

    async def get_team(self, team_id: int) -> Team | None:
        """Retrieve a relationship row by primary key."""
        return await self._repository.get(team_id)

    async def list_teams_for_user(self, user_id: int) -> list[Team]:
        """Return relationship rows containing ``user_id``."""
        return await self._repository.list_for_user(user_id)

    async def list_team_members(self, user_id: int) -> list[User]:
        """Return the users paired with ``user_id``."""
        return await self._repository.list_members(user_id)

    async def remove_team_member(self, team_id: int) -> bool:
        """Delete a relationship by ID, returning ``True`` iff a record was removed."""
        if not await self._repository.delete_by_id(team_id):
            return False
        await self._session.commit()
        logger.info("Team pair removed", extra={"team_id": team_id})
        return True


__all__ = ["TeamService"]
