"""
Change Member Role Use Case

Handles changing a member's role within a project.
"""

import logging
from uuid import UUID

from src.libs.result import Error, Result, Return
from src.app.services.authorization import ProjectAccessGate
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.entities import ProjectRole
from src.domain.principal import Principal

from .dtos import ChangeRoleResponse, MemberInfo

logger = logging.getLogger(__name__)


class ChangeRoleUseCase:
    """
    Use case for changing a member's role within a project.

    Business Rules:
    - Owners and admins can change roles
    - Only owners can grant or take away the owner role
    - The last owner cannot be demoted
    - Owner -> owner is a no-op success
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        principal: Principal,
        project_id: UUID,
        target_user_id: UUID,
        new_role: str,
    ) -> Result[ChangeRoleResponse]:
        async with self.uow:
            try:
                project_role = ProjectRole(new_role)
            except ValueError:
                return Return.err(
                    Error(
                        "INVALID_ROLE",
                        f"Invalid role: {new_role}. Must be one of: owner, admin, member",
                    )
                )

            access = await ProjectAccessGate(self.uow).require_role(
                project_id, principal, (ProjectRole.owner, ProjectRole.admin)
            )
            if access.is_err():
                return access
            requester_role = access.value

            target = await self.uow.memberships.get_by_user_and_project(
                target_user_id, project_id
            )
            if target is None:
                return Return.err(
                    Error("MEMBERSHIP_NOT_FOUND", "User is not a member of this project")
                )

            user = await self.uow.users.get_by_id(target_user_id)

            if target.role == project_role:
                return Return.ok(
                    ChangeRoleResponse(
                        status="unchanged", member=MemberInfo.from_entities(target, user)
                    )
                )

            touches_ownership = target.role.is_owner or project_role.is_owner
            if touches_ownership and not requester_role.is_owner:
                return Return.err(
                    Error("FORBIDDEN", "Only owners can grant or revoke ownership")
                )

            if target.role.is_owner:
                owners = await self.uow.memberships.get_owners(project_id)
                if len(owners) <= 1:
                    return Return.err(
                        Error("LAST_OWNER", "Cannot demote the last owner of the project")
                    )

            old_role = target.role
            target.role = project_role
            target.updated_at = utc_now()
            target = await self.uow.memberships.update(target)

            await self.uow.commit()

            logger.info(
                "Role of %s in project %s changed from %s to %s",
                target_user_id,
                project_id,
                old_role.value,
                project_role.value,
            )
            return Return.ok(
                ChangeRoleResponse(
                    status="updated", member=MemberInfo.from_entities(target, user)
                )
            )
