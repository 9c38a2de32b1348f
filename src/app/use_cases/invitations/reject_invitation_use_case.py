"""
Reject Invitation Use Case
"""

from uuid import UUID

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import normalize_email, utc_now
from src.domain.entities import InvitationStatus
from src.domain.principal import Principal

from .dtos import InvitationStatusResponse


class RejectInvitationUseCase:
    """
    Business Rules:
    - Only the addressee (matching email) can reject
    - The row is kept with status rejected so it can be re-sent later
    - An accepted invitation cannot be rejected
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, principal: Principal, invitation_id: UUID
    ) -> Result[InvitationStatusResponse]:
        async with self.uow:
            invitation = await self.uow.invitations.get_by_id(invitation_id)
            if invitation is None:
                return Return.err(Error("INVITATION_NOT_FOUND", "Invitation not found"))

            if normalize_email(invitation.email) != normalize_email(principal.email):
                return Return.err(
                    Error("FORBIDDEN", "This invitation is addressed to someone else")
                )

            if invitation.status == InvitationStatus.accepted:
                return Return.err(
                    Error(
                        "INVITATION_ALREADY_ACCEPTED",
                        "This invitation has already been accepted",
                    )
                )

            invitation.status = InvitationStatus.rejected
            invitation.updated_at = utc_now()
            await self.uow.invitations.update(invitation)

            await self.uow.commit()

            return Return.ok(InvitationStatusResponse(status="rejected"))
