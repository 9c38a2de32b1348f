"""
Create Status Column Use Case

Adds a user-defined column to the right end of a project's board.
"""

import logging
from typing import Optional
from uuid import UUID

from src.libs.result import Error, Result, Return
from src.app.services.authorization import ProjectAccessGate
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.projects.dtos import StatusColumnInfo
from src.domain.entities import TaskStatus, make_column_slug
from src.domain.principal import Principal

logger = logging.getLogger(__name__)

# Regenerating the random suffix this many times without a free slug is an error
MAX_SLUG_ATTEMPTS = 5


class CreateStatusUseCase:
    """
    Use case for adding a status column.

    Business Rules:
    - Any member can add columns
    - order_column = current maximum + 1, or 0 on an empty board
    - slug = slugified name + random 4 character suffix, unique per project
    - Color defaults to gray; user columns are never default
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        principal: Principal,
        project_id: UUID,
        name: str,
        color: Optional[str] = None,
    ) -> Result[StatusColumnInfo]:
        async with self.uow:
            access = await ProjectAccessGate(self.uow).require_member(
                project_id, principal
            )
            if access.is_err():
                return access

            slug = None
            for _ in range(MAX_SLUG_ATTEMPTS):
                candidate = make_column_slug(name)
                if await self.uow.task_statuses.get_by_slug(project_id, candidate) is None:
                    slug = candidate
                    break
            if slug is None:
                return Return.err(
                    Error("INTERNAL_ERROR", "Could not allocate a unique column slug")
                )

            max_order = await self.uow.task_statuses.get_max_order(project_id)

            task_status = await self.uow.task_statuses.create(
                TaskStatus(
                    project_id=project_id,
                    name=name,
                    slug=slug,
                    color=color or "gray",
                    order_column=0 if max_order is None else max_order + 1,
                    is_default=False,
                )
            )

            await self.uow.commit()

            logger.info("Column %s added to project %s", task_status.slug, project_id)
            return Return.ok(StatusColumnInfo.from_entity(task_status))
