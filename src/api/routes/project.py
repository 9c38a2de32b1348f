from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import parse_uuid, raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.projects import (
    BoardResponse,
    CreateProjectUseCase,
    DeleteProjectResponse,
    DeleteProjectUseCase,
    GetBoardUseCase,
    GetProjectUseCase,
    ListMyProjectsUseCase,
    ProjectCommand,
    ProjectListResponse,
    ProjectResponse,
    UpdateProjectUseCase,
)
from src.depends import get_current_principal, get_unit_of_work
from src.domain.entities import ProjectStatus
from src.domain.principal import Principal

router = APIRouter(prefix="/projects", tags=["Projects"])


class ProjectRequest(BaseModel):
    """
    Project HTTP request payload

    Shared by create and update.
    """

    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    status: ProjectStatus = Field(ProjectStatus.pending)
    start_date: Optional[date] = None
    due_date: Optional[date] = None

    def to_command(self) -> ProjectCommand:
        return ProjectCommand(**self.model_dump())


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ProjectResponse)
async def create_project(
    request: ProjectRequest,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Project

    The caller becomes owner; the five default status columns are seeded.
    """
    result = await CreateProjectUseCase(uow).execute(principal, request.to_command())
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("", status_code=status.HTTP_200_OK, response_model=ProjectListResponse)
async def list_my_projects(
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Projects the caller collaborates on, newest first"""
    result = await ListMyProjectsUseCase(uow).execute(principal)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get(
    "/{project_id}", status_code=status.HTTP_200_OK, response_model=ProjectResponse
)
async def get_project(
    project_id: str,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get Project

    Raises:
        - 403 Forbidden: FORBIDDEN (not a member)
        - 404 Not Found: PROJECT_NOT_FOUND
    """
    result = await GetProjectUseCase(uow).execute(
        principal, parse_uuid(project_id, "project")
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.put(
    "/{project_id}", status_code=status.HTTP_200_OK, response_model=ProjectResponse
)
async def update_project(
    project_id: str,
    request: ProjectRequest,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Update project details; any member"""
    result = await UpdateProjectUseCase(uow).execute(
        principal, parse_uuid(project_id, "project"), request.to_command()
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete(
    "/{project_id}",
    status_code=status.HTTP_200_OK,
    response_model=DeleteProjectResponse,
)
async def delete_project(
    project_id: str,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete Project

    Owner only. Members, invitations, columns and tasks are deleted with it.

    Raises:
        - 403 Forbidden: FORBIDDEN (not an owner)
        - 404 Not Found: PROJECT_NOT_FOUND
    """
    result = await DeleteProjectUseCase(uow).execute(
        principal, parse_uuid(project_id, "project")
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get(
    "/{project_id}/board", status_code=status.HTTP_200_OK, response_model=BoardResponse
)
async def get_board(
    project_id: str,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Kanban Board Snapshot

    Columns left to right, each with its tasks in persisted order. Clients
    poll this to reconcile their local drag-and-drop state.
    """
    result = await GetBoardUseCase(uow).execute(
        principal, parse_uuid(project_id, "project")
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value
