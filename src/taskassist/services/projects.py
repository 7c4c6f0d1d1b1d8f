"""Service layer encapsulating project-related operations."""

from __future__ import annotations

import logging

from sqlmodel.ext.asyncio.session import AsyncSession

from ..models import Project
from ..repositories import ProjectRepository

logger = logging.getLogger(__name__)


class ProjectService:
    """High-level business orchestration for ``Project`` entities."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self._repository = ProjectRepository(session)

    @property
    def repository(self) -> ProjectRepository:
        """Expose the underlying repository for advanced scenarios."""
        return self._repository

    async def create_project(
        self,
        *,
        user_id: int,
        name: str,
        color: str,
        team_id: int | None = None,
        is_public: bool = False,
    ) -> Project:
        """Create a project owned by ``user_id``."""
        project = Project(
            user_id=user_id,
            name=name,
            color=color,
            team_id=team_id,
            is_public=is_public,
        )
        await self._repository.add(project)
        await self._session.commit()
        await self._repository.refresh(project)
        return project

    async def get_project(self, project_id: int) -> Project | None:
        """Retrieve a project by primary key."""
        return await self._repository.get(project_id)

    async def list_projects(self) -> list[Project]:
        """Return all projects in the system."""
        return await self._repository.list()

    async def list_projects_for_owner(self, user_id: int) -> list[Project]:
        """Return projects owned by ``user_id``."""
        return await self._repository.list_for_owner(user_id)

    async def list_accessible_projects(self, user_id: int) -> list[Project]:
        """Return projects the user owns or that are public within one of their teams."""
        return await self._repository.list_accessible(user_id)

    async def update_project(
        self,
        project_id: int,
        *,
        name: str | None = None,
        color: str | None = None,
        team_id: int | None = None,
        is_public: bool | None = None,
    ) -> Project:
        """Merge the supplied fields into the project and persist the changes."""
        project = await self._repository.require(project_id)
        if name is not None:
            project.name = name
        if color is not None:
            project.color = color
        if team_id is not None:
            project.team_id = team_id
        if is_public is not None:
            project.is_public = is_public
        project.touch()
        await self._session.commit()
        await self._repository.refresh(project)
        return project

    async def delete_project(self, project_id: int) -> bool:
        """Delete a project by ID, returning ``True`` iff a record was removed."""
        if not await self._repository.delete_by_id(project_id):
            return False
        await self._session.commit()
        logger.info("Project deleted", extra={"project_id": project_id})
        return True


__all__ = ["ProjectService"]
