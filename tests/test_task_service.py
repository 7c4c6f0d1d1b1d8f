from __future__ import annotations

from datetime import datetime, timezone

import pytest
from sqlmodel.ext.asyncio.session import AsyncSession

from taskassist.errors import NotFoundError
from taskassist.models import TaskFilter
from taskassist.services import TaskService

async def _seed_tasks(service: TaskService, owner_id: int, other_id: int) -> None:
    await service.create_task(user_id=owner_id, title="open")
    await service.create_task(user_id=owner_id, title="done", completed=True)
    await service.create_task(user_id=owner_id, title="starred open", starred=True)
    await service.create_task(
        user_id=other_id,
        title="starred done",
        starred=True,
        completed=True,
        assigned_to=owner_id,
        assigned_by=other_id,
    )


@pytest.mark.asyncio
async def test_create_task_applies_defaults(session: AsyncSession, user_factory) -> None:
    owner = await user_factory("owner")
    service = TaskService(session)

    task = await service.create_task(user_id=owner.id, title="Ship v1")

    assert task.id is not None
    assert task.completed is False
    assert task.starred is False
    assert task.priority == "medium"
    assert task.created_at is not None
    assert task.updated_at is not None

    summary = await service.get_task_summary()
    assert (summary.total, summary.completed, summary.pending) == (1, 0, 1)


@pytest.mark.asyncio
async def test_filters_partition_tasks(session: AsyncSession, user_factory) -> None:
    owner = await user_factory("owner")
    other = await user_factory("other")
    service = TaskService(session)
    await _seed_tasks(service, owner.id, other.id)

    everything = await service.list_tasks()
    completed = await service.list_tasks("completed")
    pending = await service.list_tasks(TaskFilter.PENDING)
    starred = await service.list_tasks("starred")

    assert len(everything) == 4
    assert {task.title for task in completed} == {"done", "starred done"}
    assert {task.title for task in pending} == {"open", "starred open"}
    assert {task.id for task in completed} | {task.id for task in pending} == {
        task.id for task in everything
    }
    assert {task.title for task in starred} == {"starred open", "starred done"}
    assert [task.id for task in everything] == sorted(task.id for task in everything)


@pytest.mark.asyncio
async def test_unknown_filter_returns_everything(session: AsyncSession, user_factory) -> None:
    owner = await user_factory("owner")
    other = await user_factory("other")
    service = TaskService(session)
    await _seed_tasks(service, owner.id, other.id)

    assert len(await service.list_tasks("archived")) == 4
    assert len(await service.list_tasks(None)) == 4
    assert TaskFilter.parse(" Completed ") is TaskFilter.COMPLETED
    assert TaskFilter.parse("bogus") is None


@pytest.mark.asyncio
async def test_scoped_listings_apply_filters(session: AsyncSession, user_factory) -> None:
    owner = await user_factory("owner")
    other = await user_factory("other")
    service = TaskService(session)
    await _seed_tasks(service, owner.id, other.id)

    owned = await service.list_tasks_for_owner(owner.id)
    owned_starred = await service.list_tasks_for_owner(owner.id, "starred")
    assigned = await service.list_tasks_assigned_to(owner.id)
    assigned_pending = await service.list_tasks_assigned_to(owner.id, "pending")
    assigned_by_other = await service.list_tasks_assigned_by(other.id, "completed")

    assert [task.title for task in owned] == ["open", "done", "starred open"]
    assert [task.title for task in owned_starred] == ["starred open"]
    assert [task.title for task in assigned] == ["starred done"]
    assert assigned_pending == []
    assert [task.title for task in assigned_by_other] == ["starred done"]


@pytest.mark.asyncio
async def test_update_task_merges_supplied_fields(session: AsyncSession, user_factory) -> None:
    owner = await user_factory("owner")
    service = TaskService(session)
    task = await service.create_task(
        user_id=owner.id,
        title="Write docs",
        description="Public API guide",
        priority="high",
    )
    due = datetime(2030, 1, 1, tzinfo=timezone.utc)

    updated = await service.update_task(task.id, completed=True, due_date=due, description=None)

    assert updated.completed is True
    assert updated.title == "Write docs"
    assert updated.description == "Public API guide"
    assert updated.priority == "high"
    assert updated.due_date is not None

    with pytest.raises(NotFoundError):
        await service.update_task(9999, title="missing")


@pytest.mark.asyncio
async def test_delete_task_reports_existence(session: AsyncSession, user_factory) -> None:
    owner = await user_factory("owner")
    service = TaskService(session)
    task = await service.create_task(user_id=owner.id, title="Temporary")

    assert await service.delete_task(task.id) is True
    assert await service.delete_task(task.id) is False
    assert await service.get_task(task.id) is None


@pytest.mark.asyncio
async def test_summary_counts_all_users(session: AsyncSession, user_factory) -> None:
    owner = await user_factory("owner")
    other = await user_factory("other")
    service = TaskService(session)
    await _seed_tasks(service, owner.id, other.id)

    summary = await service.get_task_summary()

    assert summary.total == 4
    assert summary.completed == 2
    assert summary.pending == 2
