"""
Cancel Invitation Use Case
"""

from uuid import UUID

from src.libs.result import Error, Result, Return
from src.app.services.authorization import ProjectAccessGate
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ProjectRole
from src.domain.principal import Principal

from .dtos import InvitationStatusResponse


class CancelInvitationUseCase:
    """
    Business Rules:
    - Only owners and admins can cancel
    - Hard delete, whatever the status
    - The invitation must belong to the given project
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, principal: Principal, project_id: UUID, invitation_id: UUID
    ) -> Result[InvitationStatusResponse]:
        async with self.uow:
            access = await ProjectAccessGate(self.uow).require_role(
                project_id, principal, (ProjectRole.owner, ProjectRole.admin)
            )
            if access.is_err():
                return access

            invitation = await self.uow.invitations.get_by_id(invitation_id)
            if invitation is None or invitation.project_id != project_id:
                return Return.err(Error("INVITATION_NOT_FOUND", "Invitation not found"))

            await self.uow.invitations.delete(invitation)

            await self.uow.commit()

            return Return.ok(InvitationStatusResponse(status="cancelled"))
