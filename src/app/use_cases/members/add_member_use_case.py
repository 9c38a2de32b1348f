"""
Add Member Use Case

Attaches an existing user to a project directly, without an invitation.
"""

import logging
from uuid import UUID

from src.libs.result import Error, Result, Return
from src.app.services.authorization import ProjectAccessGate
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import GRANTABLE_ROLES, Membership, ProjectRole
from src.domain.principal import Principal

from .dtos import MemberInfo

logger = logging.getLogger(__name__)


class AddMemberUseCase:
    """
    Use case for adding a member directly.

    Business Rules:
    - Only owners and admins can add members
    - Role must be admin or member; ownership is granted through role change
    - The email must belong to a known user
    - A user holds at most one membership per project
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, principal: Principal, project_id: UUID, email: str, role: str
    ) -> Result[MemberInfo]:
        async with self.uow:
            try:
                project_role = ProjectRole(role)
            except ValueError:
                project_role = None
            if project_role not in GRANTABLE_ROLES:
                return Return.err(
                    Error("INVALID_ROLE", f"Invalid role: {role}. Must be one of: admin, member")
                )

            access = await ProjectAccessGate(self.uow).require_role(
                project_id, principal, (ProjectRole.owner, ProjectRole.admin)
            )
            if access.is_err():
                return access

            user = await self.uow.users.get_by_email(email)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            existing = await self.uow.memberships.get_by_user_and_project(
                user.id, project_id
            )
            if existing:
                return Return.err(
                    Error("ALREADY_MEMBER", "User is already a member of this project")
                )

            membership = await self.uow.memberships.create(
                Membership(project_id=project_id, user_id=user.id, role=project_role)
            )

            await self.uow.commit()

            logger.info("User %s added to project %s as %s", user.id, project_id, role)
            return Return.ok(MemberInfo.from_entities(membership, user))
