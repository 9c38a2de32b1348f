"""
List Invitations Use Cases

The invitee's inbox and a project's outstanding invitations.
"""

from uuid import UUID

from src.libs.result import Result, Return
from src.app.services.authorization import ProjectAccessGate
from src.app.services.unit_of_work import UnitOfWork
from src.domain.principal import Principal

from .dtos import InvitationInfo, InvitationListResponse


class ListPendingInvitationsUseCase:
    """Pending invitations addressed to the caller's email, newest first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, principal: Principal) -> Result[InvitationListResponse]:
        async with self.uow:
            invitations = await self.uow.invitations.get_pending_by_email(principal.email)

            inviters = {
                u.id: u
                for u in await self.uow.users.get_by_ids(
                    list({i.invited_by for i in invitations if i.invited_by})
                )
            }

            items = []
            for invitation in invitations:
                project = await self.uow.projects.get_by_id(invitation.project_id)
                inviter = inviters.get(invitation.invited_by)
                items.append(
                    InvitationInfo.from_entity(
                        invitation,
                        project_name=project.name if project else None,
                        inviter_name=inviter.name if inviter else None,
                    )
                )

            return Return.ok(InvitationListResponse(invitations=items))


class ListProjectInvitationsUseCase:
    """Pending invitations of a project; visible to its members"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, principal: Principal, project_id: UUID
    ) -> Result[InvitationListResponse]:
        async with self.uow:
            access = await ProjectAccessGate(self.uow).require_member(
                project_id, principal
            )
            if access.is_err():
                return access

            invitations = await self.uow.invitations.get_pending_by_project_id(project_id)
            return Return.ok(
                InvitationListResponse(
                    invitations=[InvitationInfo.from_entity(i) for i in invitations]
                )
            )
