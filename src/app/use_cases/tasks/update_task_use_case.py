"""
Update Task Use Case

Edits task fields; a status carried by the edit form is a move.
"""

from typing import Optional
from uuid import UUID

from src.libs.result import Error, Result, Return
from src.app.services.authorization import ProjectAccessGate
from src.app.services.task_placement import TaskPlacementEngine
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.principal import Principal

from .dtos import TaskCommand, TaskPlacementResponse


class UpdateTaskUseCase:
    """
    Business Rules:
    - Any member of the task's project can edit it
    - Plain edits never touch column, position or completed_at
    - A status different from the current column moves the task to the
      end of that column (or to order_column when given), with the same
      completion rules as a drag-and-drop move
    - The assignee, when given, must be a member of the project
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        principal: Principal,
        task_id: UUID,
        command: TaskCommand,
        status_slug: Optional[str] = None,
        order_column: Optional[int] = None,
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

            current = None
            if task.task_status_id is not None:
                current = await self.uow.task_statuses.get_by_id(task.task_status_id)
            target = current
            if status_slug is not None:
                target = await self.uow.task_statuses.get_by_slug(
                    task.project_id, status_slug
                )
                if target is None:
                    return Return.err(
                        Error("UNKNOWN_STATUS", f"Unknown status: {status_slug}")
                    )

            if command.assigned_to is not None and command.assigned_to != task.assigned_to:
                assignee = await self.uow.memberships.get_by_user_and_project(
                    command.assigned_to, task.project_id
                )
                if assignee is None:
                    return Return.err(
                        Error("INVALID_ASSIGNEE", "Assignee is not a member of this project")
                    )

            for field, value in command.model_dump().items():
                setattr(task, field, value)
            task.updated_at = utc_now()

            moves = target is not None and (
                current is None or target.id != current.id or order_column is not None
            )
            if moves:
                affected = await TaskPlacementEngine(self.uow).move(
                    task, target, order_column
                )
            else:
                await self.uow.tasks.update(task)
                affected = {}

            slugs = {
                c.id: c.slug
                for c in await self.uow.task_statuses.get_by_project_id(task.project_id)
            }

            await self.uow.commit()

            return Return.ok(
                TaskPlacementResponse.build(task, target, affected, slugs)
            )
