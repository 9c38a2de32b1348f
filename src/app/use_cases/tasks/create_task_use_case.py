"""
Create Task Use Case
"""

from typing import Optional
from uuid import UUID

from src.libs.result import Error, Result, Return
from src.app.services.authorization import ProjectAccessGate
from src.app.services.task_placement import TaskPlacementEngine
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Task
from src.domain.principal import Principal

from .dtos import TaskCommand, TaskPlacementResponse


class CreateTaskUseCase:
    """
    Use case for creating a task on the board.

    Business Rules:
    - Any member can create tasks
    - The status slug must resolve to a column of the project
    - Without an explicit position the task goes to the end of the column
    - The assignee, when given, must be a member of the project
    - Creating straight into "done" stamps completed_at
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        principal: Principal,
        project_id: UUID,
        status_slug: str,
        command: TaskCommand,
        order_column: Optional[int] = None,
    ) -> Result[TaskPlacementResponse]:
        async with self.uow:
            access = await ProjectAccessGate(self.uow).require_member(
                project_id, principal
            )
            if access.is_err():
                return access

            target = await self.uow.task_statuses.get_by_slug(project_id, status_slug)
            if target is None:
                return Return.err(
                    Error("UNKNOWN_STATUS", f"Unknown status: {status_slug}")
                )

            if command.assigned_to is not None:
                assignee = await self.uow.memberships.get_by_user_and_project(
                    command.assigned_to, project_id
                )
                if assignee is None:
                    return Return.err(
                        Error("INVALID_ASSIGNEE", "Assignee is not a member of this project")
                    )

            task = Task(project_id=project_id, **command.model_dump())

            affected = await TaskPlacementEngine(self.uow).place_new(
                task, target, order_column
            )

            await self.uow.commit()

            return Return.ok(
                TaskPlacementResponse.build(
                    task, target, affected, {target.id: target.slug}
                )
            )
