from typing import List, Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import parse_uuid, raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.projects import StatusColumnInfo
from src.app.use_cases.statuses import (
    ColumnOrder,
    CreateStatusUseCase,
    DeleteStatusResponse,
    DeleteStatusUseCase,
    ListStatusesUseCase,
    RenameStatusUseCase,
    ReorderStatusesUseCase,
    StatusColumnListResponse,
)
from src.depends import get_current_principal, get_unit_of_work
from src.domain.principal import Principal

router = APIRouter(prefix="/projects/{project_id}/statuses", tags=["Status Columns"])


class StatusRequest(BaseModel):
    """Column name and color, for create and rename"""

    name: str = Field(..., min_length=1, max_length=255)
    color: Optional[str] = Field(None, max_length=50)


class ReorderStatusesRequest(BaseModel):
    """Complete target ordering, usually computed client-side"""

    statuses: List[ColumnOrder]


@router.get("", status_code=status.HTTP_200_OK, response_model=StatusColumnListResponse)
async def list_statuses(
    project_id: str,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListStatusesUseCase(uow).execute(
        principal, parse_uuid(project_id, "project")
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=StatusColumnInfo)
async def create_status(
    project_id: str,
    request: StatusRequest,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Add a column at the right end of the board"""
    result = await CreateStatusUseCase(uow).execute(
        principal, parse_uuid(project_id, "project"), request.name, request.color
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/reorder", status_code=status.HTTP_200_OK, response_model=StatusColumnListResponse
)
async def reorder_statuses(
    project_id: str,
    request: ReorderStatusesRequest,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Write the given order_column values; columns of other projects are ignored"""
    result = await ReorderStatusesUseCase(uow).execute(
        principal, parse_uuid(project_id, "project"), request.statuses
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.put(
    "/{status_id}", status_code=status.HTTP_200_OK, response_model=StatusColumnInfo
)
async def rename_status(
    project_id: str,
    status_id: str,
    request: StatusRequest,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Rename or recolor a column; its slug never changes"""
    result = await RenameStatusUseCase(uow).execute(
        principal,
        parse_uuid(project_id, "project"),
        parse_uuid(status_id, "status"),
        request.name,
        request.color,
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete(
    "/{status_id}", status_code=status.HTTP_200_OK, response_model=DeleteStatusResponse
)
async def delete_status(
    project_id: str,
    status_id: str,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete Column

    Tasks move to the leftmost remaining column.

    Raises:
        - 404 Not Found: STATUS_NOT_FOUND
        - 409 Conflict: CANNOT_DELETE_DEFAULT, CANNOT_DELETE_LAST_COLUMN
    """
    result = await DeleteStatusUseCase(uow).execute(
        principal, parse_uuid(project_id, "project"), parse_uuid(status_id, "status")
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value
