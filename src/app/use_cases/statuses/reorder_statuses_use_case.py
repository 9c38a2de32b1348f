"""
Reorder Status Columns Use Case

Bulk rewrite of order_column values computed by the client.
"""

from typing import List
from uuid import UUID

from src.libs.result import Result, Return
from src.app.services.authorization import ProjectAccessGate
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.projects.dtos import StatusColumnInfo
from src.domain.principal import Principal

from .dtos import ColumnOrder, StatusColumnListResponse


class ReorderStatusesUseCase:
    """
    Business Rules:
    - Any member can reorder columns
    - Values are written verbatim in the order given; contiguity is not
      checked and repeating the call is harmless
    - Every write is scoped to the project: IDs of other projects' columns
      (or unknown or malformed IDs) are skipped
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, principal: Principal, project_id: UUID, orders: List[ColumnOrder]
    ) -> Result[StatusColumnListResponse]:
        async with self.uow:
            access = await ProjectAccessGate(self.uow).require_member(
                project_id, principal
            )
            if access.is_err():
                return access

            for item in orders:
                try:
                    status_id = UUID(item.id)
                except ValueError:
                    continue
                await self.uow.task_statuses.set_order(
                    project_id, status_id, item.order_column
                )

            columns = await self.uow.task_statuses.get_by_project_id(project_id)

            await self.uow.commit()

            return Return.ok(
                StatusColumnListResponse(
                    columns=[StatusColumnInfo.from_entity(c) for c in columns]
                )
            )
