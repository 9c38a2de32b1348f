"""
Invitation Use Case DTOs (Data Transfer Objects)
"""

from typing import List, Optional

from pydantic import BaseModel

from src.domain.entities import Invitation


class InvitationInfo(BaseModel):
    """Invitation as shown to the project team or to the invitee"""

    id: str
    project_id: str
    project_name: Optional[str] = None
    email: str
    username: Optional[str]
    role: str
    status: str
    invited_by: Optional[str]
    inviter_name: Optional[str] = None
    created_at: str

    @classmethod
    def from_entity(
        cls,
        invitation: Invitation,
        project_name: Optional[str] = None,
        inviter_name: Optional[str] = None,
    ) -> "InvitationInfo":
        return cls(
            id=str(invitation.id),
            project_id=str(invitation.project_id),
            project_name=project_name,
            email=invitation.email,
            username=invitation.username,
            role=invitation.role.value,
            status=invitation.status.value,
            invited_by=str(invitation.invited_by) if invitation.invited_by else None,
            inviter_name=inviter_name,
            created_at=invitation.created_at.isoformat(),
        )


class InvitationListResponse(BaseModel):
    invitations: List[InvitationInfo]


class InviteUserResponse(BaseModel):
    """Response for invite user use case"""

    invite_id: str
    status: str
    reinvited: bool


class AcceptInvitationResponse(BaseModel):
    """Response for accept invitation use case"""

    status: str
    project_id: str
    project_name: str
    role: str


class InvitationStatusResponse(BaseModel):
    """Response for cancel and reject"""

    status: str
