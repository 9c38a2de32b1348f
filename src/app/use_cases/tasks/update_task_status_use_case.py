"""
Update Task Status Use Case

Drag-and-drop move of a task to a column and position.
"""

from typing import Optional
from uuid import UUID

from src.libs.result import Error, Result, Return
from src.app.services.authorization import ProjectAccessGate
from src.app.services.task_placement import TaskPlacementEngine
from src.app.services.unit_of_work import UnitOfWork
from src.domain.principal import Principal

from .dtos import TaskPlacementResponse


class UpdateTaskStatusUseCase:
    """
    Use case for moving a task.

    Business Rules:
    - Any member of the task's project can move it
    - The target slug must resolve within the task's project
    - Entering "done" sets completed_at, leaving it clears it
    - The requested index is clamped and the column renumbered; the
      response carries the persisted order of every touched column
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        principal: Principal,
        task_id: UUID,
        status_slug: str,
        order_column: Optional[int],
    ) -> Result[TaskPlacementResponse]:
        async with self.uow:
            task = await self.uow.tasks.get_by_id(task_id)
            if task is None:
                return Return.err(Error("TASK_NOT_FOUND", "Task not found"))

            access = await ProjectAccessGate(self.uow).require_member(
                task.project_id, principal
            )
            if access.is_err():
                return access

            target = await self.uow.task_statuses.get_by_slug(
                task.project_id, status_slug
            )
            if target is None:
                return Return.err(
                    Error("UNKNOWN_STATUS", f"Unknown status: {status_slug}")
                )

            affected = await TaskPlacementEngine(self.uow).move(
                task, target, order_column
            )

            slugs = {
                c.id: c.slug
                for c in await self.uow.task_statuses.get_by_project_id(task.project_id)
            }

            await self.uow.commit()

            return Return.ok(TaskPlacementResponse.build(task, target, affected, slugs))
