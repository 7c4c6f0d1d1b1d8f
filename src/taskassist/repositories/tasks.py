"""Repository for interacting with task persistence models."""

from __future__ import annotations

from typing import Any

from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..models import Task, TaskFilter
from .base import BaseRepository


def _filter_clause(task_filter: TaskFilter) -> Any:
    if task_filter is TaskFilter.COMPLETED:
        return Task.completed.is_(True)  # type: ignore[attr-defined]
    if task_filter is TaskFilter.PENDING:
        return Task.completed.is_(False)  # type: ignore[attr-defined]
    return Task.starred.is_(True)  # type: ignore[attr-defined]


class TaskRepository(BaseRepository[Task]):
    """Concrete repository encapsulating ``Task`` persistence operations."""

    label = "Task"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Task)

    async def list_filtered(
        self,
        *,
        task_filter: TaskFilter | None = None,
        user_id: int | None = None,
        assigned_to: int | None = None,
        assigned_by: int | None = None,
    ) -> list[Task]:
        """Return tasks matching the provided scope and filter, ordered by id."""
        query = select(Task)
        if user_id is not None:
            query = query.where(Task.user_id == user_id)
        if assigned_to is not None:
            query = query.where(Task.assigned_to == assigned_to)
        if assigned_by is not None:
            query = query.where(Task.assigned_by == assigned_by)
        if task_filter is not None:
            query = query.where(_filter_clause(task_filter))
        result = await self._session.execute(query.order_by(Task.id))
        return list(result.scalars().all())

    async def count(self, task_filter: TaskFilter | None = None) -> int:
        """Count tasks, optionally restricted by ``task_filter``."""
        query = select(func.count()).select_from(Task)
        if task_filter is not None:
            query = query.where(_filter_clause(task_filter))
        result = await self._session.execute(query)
        return int(result.scalar_one())
