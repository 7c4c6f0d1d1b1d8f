"""Service layer encapsulating task-related operations."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from sqlmodel.ext.asyncio.session import AsyncSession

from ..models import DEFAULT_PRIORITY, Task, TaskFilter
from ..repositories import TaskRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TaskSummaryResult:
    """Global task counts."""

    total: int
    completed: int
    pending: int


def _apply_task_updates(task: Task, updates: dict[str, Any]) -> None:
    for field, value in updates.items():
        if value is not None:
            setattr(task, field, value)


class TaskService:
    """High-level business orchestration for ``Task`` entities."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self._repository = TaskRepository(session)

    @property
    def repository(self) -> TaskRepository:
        """Expose the underlying repository for advanced scenarios."""
        return self._repository

    async def create_task(
        self,
        *,
        user_id: int,
        title: str,
        description: str | None = None,
        completed: bool | None = None,
        starred: bool | None = None,
        priority: str | None = None,
        project_id: int | None = None,
        due_date: datetime | None = None,
        assigned_to: int | None = None,
        assigned_by: int | None = None,
        team_id: int | None = None,
    ) -> Task:
        """Create a task owned by ``user_id``; unset flags fall back to their defaults."""
        task = Task(
            user_id=user_id,
            title=title,
            description=description,
            completed=False if completed is None else completed,
            starred=False if starred is None else starred,
            priority=priority or DEFAULT_PRIORITY,
            project_id=project_id,
            due_date=due_date,
            assigned_to=assigned_to,
            assigned_by=assigned_by,
            team_id=team_id,
        )
        await self._repository.add(task)
        await self._session.commit()
        await self._repository.refresh(task)
        return task

    async def get_task(self, task_id: int) -> Task | None:
        """Retrieve a task by primary key."""
        return await self._repository.get(task_id)

    async def list_tasks(self, task_filter: str | TaskFilter | None = None) -> list[Task]:
        """Return all tasks, narrowed by ``task_filter`` when it names a known filter."""
        return await self._repository.list_filtered(task_filter=TaskFilter.parse(task_filter))

    async def list_tasks_for_owner(
        self,
        user_id: int,
        task_filter: str | TaskFilter | None = None,
    ) -> list[Task]:
        return await self._repository.list_filtered(
            user_id=user_id,
            task_filter=TaskFilter.parse(task_filter),
        )

    async def list_tasks_assigned_to(
        self,
        user_id: int,
        task_filter: str | TaskFilter | None = None,
    ) -> list[Task]:
        return await self._repository.list_filtered(
            assigned_to=user_id,
            task_filter=TaskFilter.parse(task_filter),
        )

    async def list_tasks_assigned_by(
        self,
        user_id: int,
        task_filter: str | TaskFilter | None = None,
    ) -> list[Task]:
        return await self._repository.list_filtered(
            assigned_by=user_id,
            task_filter=TaskFilter.parse(task_filter),
        )

    async def update_task(
        self,
        task_id: int,
        *,
        title: str | None = None,
        description: str | None = None,
        completed: bool | None = None,
        project_id: int | None = None,
        due_date: datetime | None = None,
        priority: str | None = None,
        starred: bool | None = None,
        assigned_to: int | None = None,
        assigned_by: int | None = None,
        team_id: int | None = None,
    ) -> Task:
        """Merge the supplied fields into a task and persist the changes."""
        task = await self._repository.require(task_id)
        _apply_task_updates(
            task,
            {
                "title": title,
                "description": description,
                "completed": completed,
                "project_id": project_id,
                "due_date": due_date,
                "priority": priority,
                "starred": starred,
                "assigned_to": assigned_to,
                "assigned_by": assigned_by,
                "team_id": team_id,
            },
        )
        task.touch()
        await self._session.commit()
        await self._repository.refresh(task)
        return task

    async def delete_task(self, task_id: int) -> bool:
        """Delete a task by ID, returning ``True`` iff a record was removed."""
        if not await self._repository.delete_by_id(task_id):
            return False
        await self._session.commit()
        logger.info("Task deleted", extra={"task_id": task_id})
        return True

    async def get_task_summary(self) -> TaskSummaryResult:
        """Count all, completed and pending tasks across every user."""
        return TaskSummaryResult(
            total=await self._repository.count(),
            completed=await self._repository.count(TaskFilter.COMPLETED),
            pending=await self._repository.count(TaskFilter.PENDING),
        )


__all__ = ["TaskService", "TaskSummaryResult"]
