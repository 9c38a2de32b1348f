"""
List Status Columns Use Case
"""

from uuid import UUID

from src.libs.result import Result, Return
from src.app.services.authorization import ProjectAccessGate
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.projects.dtos import StatusColumnInfo
from src.domain.principal import Principal

from .dtos import StatusColumnListResponse


class ListStatusesUseCase:
    """Columns of a project, left to right"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, principal: Principal, project_id: UUID
    ) -> Result[StatusColumnListResponse]:
        async with self.uow:
            access = await ProjectAccessGate(self.uow).require_member(
                project_id, principal
            )
            if access.is_err():
                return access

            columns = await self.uow.task_statuses.get_by_project_id(project_id)
            return Return.ok(
                StatusColumnListResponse(
                    columns=[StatusColumnInfo.from_entity(c) for c in columns]
                )
            )
