"""
Create Project Use Case

Creates a project, makes the caller its owner and seeds the default
status columns.
"""

import logging

from src.libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import (
    DEFAULT_STATUSES,
    Membership,
    Project,
    ProjectRole,
    TaskStatus,
)
from src.domain.principal import Principal

from .dtos import ProjectCommand, ProjectResponse

logger = logging.getLogger(__name__)


class CreateProjectUseCase:
    """
    Use case for creating a project.

    Business Rules:
    - Any authenticated user can create a project
    - The creator becomes the first owner
    - Backlog, Todo, In Progress, Done and Rejected are seeded at order
      0..4, all flagged as default
    - Project, membership and columns are committed together
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, principal: Principal, command: ProjectCommand
    ) -> Result[ProjectResponse]:
        async with self.uow:
            project = Project(
                name=command.name,
                description=command.description,
                status=command.status,
                start_date=command.start_date,
                due_date=command.due_date,
            )
            project = await self.uow.projects.create(project)

            await self.uow.memberships.create(
                Membership(
                    project_id=project.id,
                    user_id=principal.user_id,
                    role=ProjectRole.owner,
                )
            )

            for order, (name, slug, color) in enumerate(DEFAULT_STATUSES):
                await self.uow.task_statuses.create(
                    TaskStatus(
                        project_id=project.id,
                        name=name,
                        slug=slug,
                        color=color,
                        order_column=order,
                        is_default=True,
                    )
                )

            await self.uow.commit()

            logger.info("Project %s created by %s", project.id, principal.user_id)
            return Return.ok(
                ProjectResponse.from_entity(project, role=ProjectRole.owner.value)
            )
