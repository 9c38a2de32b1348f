"""
Accept Invitation Use Case

Turns a pending invitation into a membership.
"""

import logging
from uuid import UUID

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import normalize_email, utc_now
from src.domain.entities import InvitationStatus, Membership
from src.domain.principal import Principal

from .dtos import AcceptInvitationResponse

logger = logging.getLogger(__name__)


class AcceptInvitationUseCase:
    """
    Use case for accepting project invitations.

    Business Rules:
    - Only the addressee (matching email) can accept
    - Accepting an accepted invitation is an idempotent success
    - A rejected invitation cannot be accepted; it must be re-sent
    - If the user already became a member meanwhile, the invitation is
      only marked accepted
    - Membership creation and status change commit together
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, principal: Principal, invitation_id: UUID
    ) -> Result[AcceptInvitationResponse]:
        async with self.uow:
            invitation = await self.uow.invitations.get_by_id(invitation_id)
            if invitation is None:
                return Return.err(Error("INVITATION_NOT_FOUND", "Invitation not found"))

            if normalize_email(invitation.email) != normalize_email(principal.email):
                return Return.err(
                    Error("FORBIDDEN", "This invitation is addressed to someone else")
                )

            project = await self.uow.projects.get_by_id(invitation.project_id)
            if project is None:
                return Return.err(Error("PROJECT_NOT_FOUND", "Project not found"))

            def response(status: str) -> AcceptInvitationResponse:
                return AcceptInvitationResponse(
                    status=status,
                    project_id=str(project.id),
                    project_name=project.name,
                    role=invitation.role.value,
                )

            if invitation.status == InvitationStatus.accepted:
                return Return.ok(response("already_accepted"))

            if invitation.status == InvitationStatus.rejected:
                return Return.err(
                    Error(
                        "INVITATION_REJECTED",
                        "This invitation was rejected; ask for a new one",
                    )
                )

            existing = await self.uow.memberships.get_by_user_and_project(
                principal.user_id, project.id
            )

            invitation.status = InvitationStatus.accepted
            invitation.updated_at = utc_now()

            if existing is not None:
                await self.uow.invitations.update(invitation)
                await self.uow.commit()
                return Return.ok(response("already_member"))

            await self.uow.memberships.create(
                Membership(
                    project_id=project.id,
                    user_id=principal.user_id,
                    role=invitation.role,
                )
            )
            await self.uow.invitations.update(invitation)

            await self.uow.commit()

            logger.info(
                "Invitation %s accepted by %s", invitation.id, principal.user_id
            )
            return Return.ok(response("accepted"))
