"""
Get Project Use Cases

Read access to a single project and to the caller's project list.
"""

from uuid import UUID

from src.libs.result import Result, Return
from src.app.services.authorization import ProjectAccessGate
from src.app.services.unit_of_work import UnitOfWork
from src.domain.principal import Principal

from .dtos import ProjectListResponse, ProjectResponse


class GetProjectUseCase:
    """Any member (or super-admin) can view a project"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, principal: Principal, project_id: UUID
    ) -> Result[ProjectResponse]:
        async with self.uow:
            access = await ProjectAccessGate(self.uow).require_member(
                project_id, principal
            )
            if access.is_err():
                return access

            project = await self.uow.projects.get_by_id(project_id)
            return Return.ok(
                ProjectResponse.from_entity(project, role=access.value.value)
            )


class ListMyProjectsUseCase:
    """Projects the caller is a member of, newest first, with the caller's role"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, principal: Principal) -> Result[ProjectListResponse]:
        async with self.uow:
            projects = await self.uow.projects.get_by_member(principal.user_id)

            items = []
            for project in projects:
                membership = await self.uow.memberships.get_by_user_and_project(
                    principal.user_id, project.id
                )
                items.append(
                    ProjectResponse.from_entity(
                        project, role=membership.role.value if membership else None
                    )
                )

            return Return.ok(ProjectListResponse(projects=items))
