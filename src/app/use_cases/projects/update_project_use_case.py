"""
Update Project Use Case
"""

from uuid import UUID

from src.libs.result import Result, Return
from src.app.services.authorization import ProjectAccessGate
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.principal import Principal

from .dtos import ProjectCommand, ProjectResponse


class UpdateProjectUseCase:
    """
    Use case for editing project details.

    Business Rules:
    - Any member can edit name, description, status and dates
    - Memberships, columns and tasks are untouched
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, principal: Principal, project_id: UUID, command: ProjectCommand
    ) -> Result[ProjectResponse]:
        async with self.uow:
            access = await ProjectAccessGate(self.uow).require_member(
                project_id, principal
            )
            if access.is_err():
                return access

            project = await self.uow.projects.get_by_id(project_id)
            project.name = command.name
            project.description = command.description
            project.status = command.status
            project.start_date = command.start_date
            project.due_date = command.due_date
            project.updated_at = utc_now()
            project = await self.uow.projects.update(project)

            await self.uow.commit()

            return Return.ok(
                ProjectResponse.from_entity(project, role=access.value.value)
            )
