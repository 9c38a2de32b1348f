"""
Delete Status Column Use Case

Removes a user-defined column after moving its tasks elsewhere.
"""

import logging
from uuid import UUID

from src.libs.result import Error, Result, Return
from src.app.services.authorization import ProjectAccessGate
from src.app.services.task_placement import TaskPlacementEngine
from src.app.services.unit_of_work import UnitOfWork
from src.domain.principal import Principal

from .dtos import DeleteStatusResponse

logger = logging.getLogger(__name__)


class DeleteStatusUseCase:
    """
    Use case for deleting a status column.

    Business Rules:
    - Any member can delete a user-defined column
    - Default (seeded) columns cannot be deleted, even when empty
    - A project's only column cannot be deleted
    - Tasks move to the leftmost remaining column, appended after its
      own tasks; tasks are never deleted with the column
    - Migration and deletion commit together
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, principal: Principal, project_id: UUID, status_id: UUID
    ) -> Result[DeleteStatusResponse]:
        async with self.uow:
            access = await ProjectAccessGate(self.uow).require_member(
                project_id, principal
            )
            if access.is_err():
                return access

            task_status = await self.uow.task_statuses.get_by_id(status_id)
            if task_status is None or task_status.project_id != project_id:
                return Return.err(Error("STATUS_NOT_FOUND", "Column not found"))

            if task_status.is_default:
                return Return.err(
                    Error("CANNOT_DELETE_DEFAULT", "Cannot delete default system columns")
                )

            columns = await self.uow.task_statuses.get_by_project_id(project_id)
            remaining = [c for c in columns if c.id != task_status.id]
            if not remaining:
                return Return.err(
                    Error(
                        "CANNOT_DELETE_LAST_COLUMN",
                        "Cannot delete the only column of the project",
                    )
                )

            target = remaining[0]
            migrated = await TaskPlacementEngine(self.uow).migrate_column(
                task_status, target
            )

            await self.uow.task_statuses.delete(task_status)

            await self.uow.commit()

            logger.info(
                "Column %s deleted from project %s, %d tasks moved to %s",
                task_status.slug,
                project_id,
                len(migrated),
                target.slug,
            )
            return Return.ok(
                DeleteStatusResponse(
                    status="deleted",
                    migrated_tasks=len(migrated),
                    migrated_to=target.slug if migrated else None,
                )
            )
