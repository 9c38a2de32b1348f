"""
List Members Use Case
"""

from uuid import UUID

from src.libs.result import Result, Return
from src.app.services.authorization import ProjectAccessGate
from src.app.services.unit_of_work import UnitOfWork
from src.domain.principal import Principal

from .dtos import MemberInfo, MemberListResponse


class ListMembersUseCase:
    """Members of a project ordered by join time; any member may list them"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, principal: Principal, project_id: UUID
    ) -> Result[MemberListResponse]:
        async with self.uow:
            access = await ProjectAccessGate(self.uow).require_member(
                project_id, principal
            )
            if access.is_err():
                return access

            memberships = await self.uow.memberships.get_by_project_id(project_id)
            users = {
                u.id: u
                for u in await self.uow.users.get_by_ids(
                    [m.user_id for m in memberships]
                )
            }

            return Return.ok(
                MemberListResponse(
                    members=[
                        MemberInfo.from_entities(m, users.get(m.user_id))
                        for m in memberships
                    ]
                )
            )
