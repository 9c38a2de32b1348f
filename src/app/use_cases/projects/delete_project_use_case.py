"""
Delete Project Use Case

Removes a project and everything it owns.
"""

import logging
from uuid import UUID

from src.libs.result import Result, Return
from src.app.services.authorization import ProjectAccessGate
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ProjectRole
from src.domain.principal import Principal

from .dtos import DeleteProjectResponse

logger = logging.getLogger(__name__)


class DeleteProjectUseCase:
    """
    Use case for deleting a project.

    Business Rules:
    - Only owners (or a super-admin) can delete
    - Memberships, invitations, status columns and tasks go with it
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, principal: Principal, project_id: UUID
    ) -> Result[DeleteProjectResponse]:
        async with self.uow:
            access = await ProjectAccessGate(self.uow).require_role(
                project_id, principal, (ProjectRole.owner,)
            )
            if access.is_err():
                return access

            project = await self.uow.projects.get_by_id(project_id)
            await self.uow.projects.delete(project)

            await self.uow.commit()

            logger.info("Project %s deleted by %s", project_id, principal.user_id)
            return Return.ok(DeleteProjectResponse(status="deleted"))
