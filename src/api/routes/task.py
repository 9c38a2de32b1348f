from datetime import date
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import parse_uuid, raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.tasks import (
    CreateTaskUseCase,
    DeleteTaskResponse,
    DeleteTaskUseCase,
    TaskCommand,
    TaskPlacementResponse,
    UpdateTaskStatusUseCase,
    UpdateTaskUseCase,
)
from src.depends import get_current_principal, get_unit_of_work
from src.domain.entities import TaskPriority
from src.domain.principal import Principal

router = APIRouter(tags=["Tasks"])


class TaskRequest(BaseModel):
    """
    Task form payload

    status is the column slug. On update it is optional and, when it names
    another column, moves the task.
    """

    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    priority: TaskPriority = Field(TaskPriority.medium)
    result_explanation: Optional[str] = None
    status: Optional[str] = Field(None, description="Column slug")
    order_column: Optional[int] = Field(None, description="Position in the column")
    assigned_to: Optional[UUID] = None
    start_date: Optional[date] = None
    due_date: Optional[date] = None

    def to_command(self) -> TaskCommand:
        return TaskCommand(**self.model_dump(exclude={"status", "order_column"}))


class UpdateTaskStatusRequest(BaseModel):
    """Drag-and-drop payload: target column slug and index"""

    status: str = Field(..., description="Target column slug")
    order_column: int = Field(..., description="Index within the target column")


@router.post(
    "/projects/{project_id}/tasks",
    status_code=status.HTTP_201_CREATED,
    response_model=TaskPlacementResponse,
)
async def create_task(
    project_id: str,
    request: TaskRequest,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Task

    Raises:
        - 400 Bad Request: UNKNOWN_STATUS, INVALID_ASSIGNEE
        - 403 Forbidden: FORBIDDEN
    """
    result = await CreateTaskUseCase(uow).execute(
        principal,
        parse_uuid(project_id, "project"),
        request.status or "backlog",
        request.to_command(),
        request.order_column,
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.put(
    "/tasks/{task_id}",
    status_code=status.HTTP_200_OK,
    response_model=TaskPlacementResponse,
)
async def update_task(
    task_id: str,
    request: TaskRequest,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Edit a task; a different status moves it"""
    result = await UpdateTaskUseCase(uow).execute(
        principal,
        parse_uuid(task_id, "task"),
        request.to_command(),
        status_slug=request.status,
        order_column=request.order_column,
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.patch(
    "/tasks/{task_id}/status",
    status_code=status.HTTP_200_OK,
    response_model=TaskPlacementResponse,
)
async def update_task_status(
    task_id: str,
    request: UpdateTaskStatusRequest,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Move Task

    The response carries the persisted order of every column the move
    touched; clients should adopt it instead of their local guess.

    Raises:
        - 400 Bad Request: UNKNOWN_STATUS
        - 404 Not Found: TASK_NOT_FOUND
    """
    result = await UpdateTaskStatusUseCase(uow).execute(
        principal, parse_uuid(task_id, "task"), request.status, request.order_column
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete(
    "/tasks/{task_id}", status_code=status.HTTP_200_OK, response_model=DeleteTaskResponse
)
async def delete_task(
    task_id: str,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeleteTaskUseCase(uow).execute(principal, parse_uuid(task_id, "task"))
    if result.is_err():
        raise_for_error(result.error)
    return result.value
