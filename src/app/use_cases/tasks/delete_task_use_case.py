"""
Delete Task Use Case
"""

from uuid import UUID

from src.libs.result import Error, Result, Return
from src.app.services.authorization import ProjectAccessGate
from src.app.services.unit_of_work import UnitOfWork
from src.domain.principal import Principal

from .dtos import DeleteTaskResponse


class DeleteTaskUseCase:
    """Any member deletes a task; siblings keep their order_column (gaps are fine)"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, principal: Principal, task_id: UUID
    ) -> Result[DeleteTaskResponse]:
        async with self.uow:
            task = await self.uow.tasks.get_by_id(task_id)
            if task is None:
                return Return.err(Error("TASK_NOT_FOUND", "Task not found"))

            access = await ProjectAccessGate(self.uow).require_member(
                task.project_id, principal
            )
            if access.is_err():
                return access

            await self.uow.tasks.delete(task)

            await self.uow.commit()

            return Return.ok(DeleteTaskResponse(status="deleted"))
