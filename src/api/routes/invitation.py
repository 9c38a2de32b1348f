from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field, model_validator

from src.api.error import parse_uuid, raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.invitations import (
    AcceptInvitationResponse,
    AcceptInvitationUseCase,
    CancelInvitationUseCase,
    InvitationListResponse,
    InvitationStatusResponse,
    InviteUserResponse,
    InviteUserUseCase,
    ListPendingInvitationsUseCase,
    ListProjectInvitationsUseCase,
    RejectInvitationUseCase,
)
from src.depends import get_current_principal, get_unit_of_work
from src.domain.principal import Principal

router = APIRouter(tags=["Invitations"])


class InviteUserRequest(BaseModel):
    """
    Invite user HTTP request payload

    Either email or username is required.
    """

    email: Optional[EmailStr] = Field(None, description="Email address to invite")
    username: Optional[str] = Field(None, description="Username to invite")
    role: str = Field(..., description="Role to grant (admin/member)")

    @model_validator(mode="after")
    def require_invitee(self):
        if not self.email and not self.username:
            raise ValueError("Either email or username is required")
        return self


@router.get(
    "/projects/{project_id}/invitations",
    status_code=status.HTTP_200_OK,
    response_model=InvitationListResponse,
)
async def list_project_invitations(
    project_id: str,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Pending invitations of a project"""
    result = await ListProjectInvitationsUseCase(uow).execute(
        principal, parse_uuid(project_id, "project")
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/projects/{project_id}/invitations",
    status_code=status.HTTP_201_CREATED,
    response_model=InviteUserResponse,
)
async def invite_user(
    project_id: str,
    request: InviteUserRequest,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Invite User to Project

    Re-inviting after a rejection recycles the earlier invitation.

    Raises:
        - 400 Bad Request: INVALID_ROLE
        - 403 Forbidden: FORBIDDEN (not owner/admin)
        - 404 Not Found: USER_NOT_FOUND (unknown username)
        - 409 Conflict: DUPLICATE_INVITATION, ALREADY_MEMBER
    """
    result = await InviteUserUseCase(uow).execute(
        principal,
        parse_uuid(project_id, "project"),
        request.role,
        email=request.email,
        username=request.username,
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete(
    "/projects/{project_id}/invitations/{invitation_id}",
    status_code=status.HTTP_200_OK,
    response_model=InvitationStatusResponse,
)
async def cancel_invitation(
    project_id: str,
    invitation_id: str,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Cancel (hard delete) an invitation; owner/admin"""
    result = await CancelInvitationUseCase(uow).execute(
        principal,
        parse_uuid(project_id, "project"),
        parse_uuid(invitation_id, "invitation"),
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get(
    "/invitations", status_code=status.HTTP_200_OK, response_model=InvitationListResponse
)
async def list_my_invitations(
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """The caller's inbox of pending invitations"""
    result = await ListPendingInvitationsUseCase(uow).execute(principal)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/invitations/{invitation_id}/accept",
    status_code=status.HTTP_200_OK,
    response_model=AcceptInvitationResponse,
)
async def accept_invitation(
    invitation_id: str,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Accept Invitation

    Idempotent: accepting twice reports already_accepted.

    Raises:
        - 403 Forbidden: FORBIDDEN (addressed to another email)
        - 404 Not Found: INVITATION_NOT_FOUND
        - 409 Conflict: INVITATION_REJECTED
    """
    result = await AcceptInvitationUseCase(uow).execute(
        principal, parse_uuid(invitation_id, "invitation")
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/invitations/{invitation_id}/reject",
    status_code=status.HTTP_200_OK,
    response_model=InvitationStatusResponse,
)
async def reject_invitation(
    invitation_id: str,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Reject Invitation

    Raises:
        - 403 Forbidden: FORBIDDEN (addressed to another email)
        - 404 Not Found: INVITATION_NOT_FOUND
        - 409 Conflict: INVITATION_ALREADY_ACCEPTED
    """
    result = await RejectInvitationUseCase(uow).execute(
        principal, parse_uuid(invitation_id, "invitation")
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value
