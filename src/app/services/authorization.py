"""
Role Authorization Gate

Resolves the effective role of a principal on a project and gates the
mutating use cases on it.
"""

from typing import Iterable, Optional
from uuid import UUID

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ProjectRole
from src.domain.principal import Principal


class ProjectAccessGate:
    """
    Business Rules:
    - A super-admin principal is owner-equivalent on every project and
      skips the membership lookup
    - Everybody else holds the role of their membership, or none
    - Gated operations without an explicit role list require membership
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def role_of(
        self, project_id: UUID, principal: Principal
    ) -> Optional[ProjectRole]:
        if principal.is_super_admin:
            return ProjectRole.owner

        membership = await self.uow.memberships.get_by_user_and_project(
            principal.user_id, project_id
        )
        if membership is None:
            return None
        return membership.role

    async def require_member(
        self, project_id: UUID, principal: Principal
    ) -> Result[ProjectRole]:
        """Any role passes; PROJECT_NOT_FOUND when the project does not exist"""
        return await self.require_role(project_id, principal, tuple(ProjectRole))

    async def require_role(
        self,
        project_id: UUID,
        principal: Principal,
        allowed: Iterable[ProjectRole],
    ) -> Result[ProjectRole]:
        project = await self.uow.projects.get_by_id(project_id)
        if project is None:
            return Return.err(Error("PROJECT_NOT_FOUND", "Project not found"))

        role = await self.role_of(project_id, principal)
        if role is None:
            return Return.err(
                Error("FORBIDDEN", "You are not a member of this project")
            )

        if role not in tuple(allowed):
            return Return.err(
                Error(
                    "FORBIDDEN",
                    f"The {role.value} role is not allowed to perform this action",
                )
            )

        return Return.ok(role)
