"""Routes handling project CRUD operations."""

from __future__ import annotations

from fastapi import APIRouter, Response, status

from ...deps import CurrentUserDependency, DatabaseSessionDependency
from ...errors import NotFoundError
from ...models import Project
from ...schemas import ProjectCreate, ProjectRead, ProjectUpdate
from ...services import ProjectService

router = APIRouter(prefix="/projects", tags=["projects"])


def _map_projects(projects: list[Project]) -> list[ProjectRead]:
    return [ProjectRead.model_validate(project) for project in projects]


@router.get("", response_model=list[ProjectRead], summary="List all projects")
async def list_projects(
    session: DatabaseSessionDependency,
    current_user: CurrentUserDependency,
) -> list[ProjectRead]:
    return _map_projects(await ProjectService(session).list_projects())


@router.get(
    "/user/{user_id}",
    response_model=list[ProjectRead],
    summary="List projects owned by a user",
)
async def list_projects_for_owner(
    user_id: int,
    session: DatabaseSessionDependency,
    current_user: CurrentUserDependency,
) -> list[ProjectRead]:
    return _map_projects(await ProjectService(session).list_projects_for_owner(user_id))


@router.get(
    "/accessible/{user_id}",
    response_model=list[ProjectRead],
    summary="List projects a user owns or can see through a team",
)
async def list_accessible_projects(
    user_id: int,
    session: DatabaseSessionDependency,
    current_user: CurrentUserDependency,
) -> list[ProjectRead]:
    return _map_projects(await ProjectService(session).list_accessible_projects(user_id))


@router.get("/{project_id}", response_model=ProjectRead, summary="Retrieve a project by id")
async def get_project(
    project_id: int,
    session: DatabaseSessionDependency,
    current_user: CurrentUserDependency,
) -> ProjectRead:
    project = await ProjectService(session).get_project(project_id)
    if project is None:
        raise NotFoundError("Project not found.")
    return ProjectRead.model_validate(project)


@router.post(
    "",
    response_model=ProjectRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new project",
)
async def create_project(
    payload: ProjectCreate,
    session: DatabaseSessionDependency,
    current_user: CurrentUserDependency,
) -> ProjectRead:
    project = await ProjectService(session).create_project(
        user_id=payload.user_id if payload.user_id is not None else current_user.id,  # type: ignore[arg-type]
        name=payload.name,
        color=payload.color,
        team_id=payload.team_id,
        is_public=payload.is_public,
    )
    return ProjectRead.model_validate(project)


@router.patch("/{project_id}", response_model=ProjectRead, summary="Update an existing project")
async def update_project(
    project_id: int,
    payload: ProjectUpdate,
    session: DatabaseSessionDependency,
    current_user: CurrentUserDependency,
) -> ProjectRead:
    project = await ProjectService(session).update_project(
        project_id,
        **payload.model_dump(exclude_unset=True),
    )
    return ProjectRead.model_validate(project)


@router.delete(
    "/{project_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a project",
)
async def delete_project(
    project_id: int,
    session: DatabaseSessionDependency,
    current_user: CurrentUserDependency,
) -> Response:
    if not await ProjectService(session).delete_project(project_id):
        raise NotFoundError("Project not found.")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
