from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from src.api.error import parse_uuid, raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.members import (
    AddMemberUseCase,
    ChangeRoleResponse,
    ChangeRoleUseCase,
    ListMembersUseCase,
    MemberInfo,
    MemberListResponse,
    RemoveMemberResponse,
    RemoveMemberUseCase,
)
from src.depends import get_current_principal, get_unit_of_work
from src.domain.principal import Principal

router = APIRouter(prefix="/projects/{project_id}/members", tags=["Members"])


class AddMemberRequest(BaseModel):
    """
    Add member HTTP request payload

    The email must belong to an existing user.
    """

    email: EmailStr = Field(..., description="Email of the user to add")
    role: str = Field(..., description="Role to grant (admin/member)")


class ChangeRoleRequest(BaseModel):
    """Change role HTTP request payload"""

    role: str = Field(..., description="New role (owner/admin/member)")


@router.get("", status_code=status.HTTP_200_OK, response_model=MemberListResponse)
async def list_members(
    project_id: str,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Members ordered by join time, each with role"""
    result = await ListMembersUseCase(uow).execute(
        principal, parse_uuid(project_id, "project")
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=MemberInfo)
async def add_member(
    project_id: str,
    request: AddMemberRequest,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Add Member

    Raises:
        - 400 Bad Request: INVALID_ROLE
        - 403 Forbidden: FORBIDDEN (not owner/admin)
        - 404 Not Found: USER_NOT_FOUND, PROJECT_NOT_FOUND
        - 409 Conflict: ALREADY_MEMBER
    """
    result = await AddMemberUseCase(uow).execute(
        principal, parse_uuid(project_id, "project"), request.email, request.role
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.put(
    "/{user_id}", status_code=status.HTTP_200_OK, response_model=ChangeRoleResponse
)
async def change_member_role(
    project_id: str,
    user_id: str,
    request: ChangeRoleRequest,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Change Member Role

    Raises:
        - 400 Bad Request: INVALID_ROLE
        - 403 Forbidden: FORBIDDEN (not owner/admin, or admin touching ownership)
        - 404 Not Found: MEMBERSHIP_NOT_FOUND
        - 409 Conflict: LAST_OWNER
    """
    result = await ChangeRoleUseCase(uow).execute(
        principal,
        parse_uuid(project_id, "project"),
        parse_uuid(user_id, "user"),
        request.role,
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete(
    "/{user_id}", status_code=status.HTTP_200_OK, response_model=RemoveMemberResponse
)
async def remove_member(
    project_id: str,
    user_id: str,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Remove Member

    Tasks assigned to the member are handed to another owner first.

    Raises:
        - 403 Forbidden: FORBIDDEN
        - 404 Not Found: MEMBERSHIP_NOT_FOUND
        - 409 Conflict: LAST_OWNER
    """
    result = await RemoveMemberUseCase(uow).execute(
        principal, parse_uuid(project_id, "project"), parse_uuid(user_id, "user")
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value
