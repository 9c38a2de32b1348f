"""
Invite User to Project Use Case

Handles inviting users to join a project with a given role.
"""

import logging
import secrets
from typing import Optional
from uuid import UUID

from src.libs.result import Error, Result, Return
from src.app.services.authorization import ProjectAccessGate
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import normalize_email, utc_now
from src.domain.entities import (
    GRANTABLE_ROLES,
    Invitation,
    InvitationStatus,
    ProjectRole,
)
from src.domain.principal import Principal

from .dtos import InviteUserResponse

logger = logging.getLogger(__name__)


def generate_invitation_token() -> str:
    """Opaque 32 character token"""
    return secrets.token_urlsafe(24)


class InviteUserUseCase:
    """
    Use case for inviting users to join a project.

    Business Rules:
    - Only owners and admins can invite
    - Role must be admin or member; owner is never delegated by invitation
    - A username is resolved to the user's email
    - Emails are matched case-insensitively and stored lowercased
    - Existing members cannot be invited
    - At most one pending invitation per (project, email)
    - A rejected or accepted row for the same email is recycled: new
      token, requested role, inviter, status back to pending
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        principal: Principal,
        project_id: UUID,
        role: str,
        email: Optional[str] = None,
        username: Optional[str] = None,
    ) -> Result[InviteUserResponse]:
        async with self.uow:
            try:
                project_role = ProjectRole(role)
            except ValueError:
                project_role = None
            if project_role not in GRANTABLE_ROLES:
                return Return.err(
                    Error("INVALID_ROLE", f"Invalid role: {role}. Must be one of: admin, member")
                )

            if not email and not username:
                return Return.err(
                    Error("INVALID_INVITEE", "An email or a username is required")
                )

            access = await ProjectAccessGate(self.uow).require_role(
                project_id, principal, (ProjectRole.owner, ProjectRole.admin)
            )
            if access.is_err():
                return access

            if username:
                user = await self.uow.users.get_by_username(username)
                if user is None:
                    return Return.err(Error("USER_NOT_FOUND", "User not found"))
                email = user.email
            else:
                user = await self.uow.users.get_by_email(email)
            email = normalize_email(email)

            if user is not None:
                membership = await self.uow.memberships.get_by_user_and_project(
                    user.id, project_id
                )
                if membership:
                    return Return.err(
                        Error("ALREADY_MEMBER", "User is already a member of this project")
                    )

            existing = await self.uow.invitations.get_by_project_and_email(
                project_id, email
            )

            if existing is not None:
                if existing.status == InvitationStatus.pending:
                    return Return.err(
                        Error(
                            "DUPLICATE_INVITATION",
                            "Invitation already sent to this user",
                        )
                    )

                existing.token = generate_invitation_token()
                existing.role = project_role
                existing.status = InvitationStatus.pending
                existing.invited_by = principal.user_id
                if username:
                    existing.username = username
                existing.updated_at = utc_now()
                invitation = await self.uow.invitations.update(existing)
                reinvited = True
            else:
                invitation = await self.uow.invitations.create(
                    Invitation(
                        project_id=project_id,
                        email=email,
                        username=username,
                        role=project_role,
                        token=generate_invitation_token(),
                        status=InvitationStatus.pending,
                        invited_by=principal.user_id,
                    )
                )
                reinvited = False

            await self.uow.commit()

            logger.info(
                "Invitation %s sent to %s for project %s", invitation.id, email, project_id
            )
            return Return.ok(
                InviteUserResponse(
                    invite_id=str(invitation.id),
                    status=invitation.status.value,
                    reinvited=reinvited,
                )
            )
