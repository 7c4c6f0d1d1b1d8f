"""Routes handling task CRUD operations."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Query, Response, status

from ...deps import CurrentUserDependency, DatabaseSessionDependency
from ...errors import NotFoundError
from ...models import Task
from ...schemas import TaskCreate, TaskRead, TaskSummary, TaskUpdate
from ...services import TaskService

router = APIRouter(prefix="/tasks", tags=["tasks"])

FilterQuery = Annotated[
    str | None,
    Query(
        alias="filter",
        description="One of completed, pending or starred; anything else returns every task.",
    ),
]
OwnerQuery = Annotated[
    int | None,
    Query(
        alias="userId",
        description="Restrict results to tasks owned by the provided user id.",
    ),
]


def _map_tasks(tasks: list[Task]) -> list[TaskRead]:
    return [TaskRead.model_validate(task) for task in tasks]


@router.get("", response_model=list[TaskRead], summary="List tasks with an optional filter")
async def list_tasks(
    session: DatabaseSessionDependency,
    current_user: CurrentUserDependency,
    task_filter: FilterQuery = None,
    user_id: OwnerQuery = None,
) -> list[TaskRead]:
    service = TaskService(session)
    if user_id is not None:
        return _map_tasks(await service.list_tasks_for_owner(user_id, task_filter))
    return _map_tasks(await service.list_tasks(task_filter))


@router.get("/summary", response_model=TaskSummary, summary="Aggregate task counts")
async def get_task_summary(
    session: DatabaseSessionDependency,
    current_user: CurrentUserDependency,
) -> TaskSummary:
    summary = await TaskService(session).get_task_summary()
    return TaskSummary(total=summary.total, completed=summary.completed, pending=summary.pending)


@router.get(
    "/user/{user_id}",
    response_model=list[TaskRead],
    summary="List tasks owned by a user",
)
async def list_tasks_for_owner(
    user_id: int,
    session: DatabaseSessionDependency,
    current_user: CurrentUserDependency,
    task_filter: FilterQuery = None,
) -> list[TaskRead]:
    return _map_tasks(await TaskService(session).list_tasks_for_owner(user_id, task_filter))


@router.get(
    "/assigned/{user_id}",
    response_model=list[TaskRead],
    summary="List tasks assigned to a user",
)
async def list_tasks_assigned_to(
    user_id: int,
    session: DatabaseSessionDependency,
    current_user: CurrentUserDependency,
    task_filter: FilterQuery = None,
) -> list[TaskRead]:
    return _map_tasks(await TaskService(session).list_tasks_assigned_to(user_id, task_filter))


@router.get(
    "/assigned-by/{user_id}",
    response_model=list[TaskRead],
    summary="List tasks a user has assigned to others",
)
async def list_tasks_assigned_by(
    user_id: int,
    session: DatabaseSessionDependency,
    current_user: CurrentUserDependency,
    task_filter: FilterQuery = None,
) -> list[TaskRead]:
    return _map_tasks(await TaskService(session).list_tasks_assigned_by(user_id, task_filter))


@router.get("/{task_id}", response_model=TaskRead, summary="Retrieve a task by id")
async def get_task(
    task_id: int,
    session: DatabaseSessionDependency,
    current_user: CurrentUserDependency,
) -> TaskRead:
    task = await TaskService(session).get_task(task_id)
    if task is None:
        raise NotFoundError("Task not found.")
    return TaskRead.model_validate(task)


@router.post(
    "",
    response_model=TaskRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new task",
)
async def create_task(
    payload: TaskCreate,
    session: DatabaseSessionDependency,
    current_user: CurrentUserDependency,
) -> TaskRead:
    fields = payload.model_dump(exclude={"user_id"})
    task = await TaskService(session).create_task(
        user_id=payload.user_id if payload.user_id is not None else current_user.id,  # type: ignore[arg-type]
        **fields,
    )
    return TaskRead.model_validate(task)


@router.patch("/{task_id}", response_model=TaskRead, summary="Update an existing task")
async def update_task(
    task_id: int,
    payload: TaskUpdate,
    session: DatabaseSessionDependency,
    current_user: CurrentUserDependency,
) -> TaskRead:
    task = await TaskService(session).update_task(
        task_id,
        **payload.model_dump(exclude_unset=True),
    )
    return TaskRead.model_validate(task)


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a task",
)
async def delete_task(
    task_id: int,
    session: DatabaseSessionDependency,
    current_user: CurrentUserDependency,
) -> Response:
    if not await TaskService(session).delete_task(task_id):
        raise NotFoundError("Task not found.")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
