"""
Rename Status Column Use Case
"""

from typing import Optional
from uuid import UUID

from src.libs.result import Error, Result, Return
from src.app.services.authorization import ProjectAccessGate
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.projects.dtos import StatusColumnInfo
from src.domain.base import utc_now
from src.domain.principal import Principal


class RenameStatusUseCase:
    """
    Business Rules:
    - Any member can rename or recolor a column
    - slug and order_column never change here, so the "done" column
      keeps its meaning under any display name
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        principal: Principal,
        project_id: UUID,
        status_id: UUID,
        name: str,
        color: Optional[str] = None,
    ) -> Result[StatusColumnInfo]:
        async with self.uow:
            access = await ProjectAccessGate(self.uow).require_member(
                project_id, principal
            )
            if access.is_err():
                return access

            task_status = await self.uow.task_statuses.get_by_id(status_id)
            if task_status is None or task_status.project_id != project_id:
                return Return.err(Error("STATUS_NOT_FOUND", "Column not found"))

            task_status.name = name
            if color is not None:
                task_status.color = color
            task_status.updated_at = utc_now()
            task_status = await self.uow.task_statuses.update(task_status)

            await self.uow.commit()

            return Return.ok(StatusColumnInfo.from_entity(task_status))
