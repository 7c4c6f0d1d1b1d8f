"""Repository for interacting with project persistence models."""

from __future__ import annotations

from sqlalchemy import and_, or_
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..models import Project, Team
from .base import BaseRepository


class ProjectRepository(BaseRepository[Project]):
    """Concrete repository encapsulating ``Project`` persistence operations."""

    label = "Project"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Project)

    async def list_for_owner(self, user_id: int) -> list[Project]:
        """Return projects owned by ``user_id``."""
        result = await self._session.execute(
            select(Project).where(Project.user_id == user_id).order_by(Project.id)
        )
        return list(result.scalars().all())

    async def list_accessible(self, user_id: int) -> list[Project]:
        """Return owned projects plus public projects shared through the user's teams."""
        team_ids = select(Team.id).where(or_(Team.user_id1 == user_id, Team.user_id2 == user_id))
        statement = (
            select(Project)
            .where(
                or_(
                    Project.user_id == user_id,
                    and_(
                        Project.team_id.in_(team_ids),  # type: ignore[union-attr]
                        Project.is_public.is_(True),  # type: ignore[attr-defined]
                    ),
                )
            )
            .order_by(Project.id)
        )
        result = await self._session.execute(statement)
        return list(result.scalars().all())
