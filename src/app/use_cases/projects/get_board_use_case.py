"""
Get Board Use Case

Authoritative snapshot of a project's kanban board. Clients reload it
periodically to reconcile optimistic drag-and-drop state.
"""

from collections import defaultdict
from uuid import UUID

from src.libs.result import Result, Return
from src.app.services.authorization import ProjectAccessGate
from src.app.services.unit_of_work import UnitOfWork
from src.domain.principal import Principal

from .dtos import BoardMember, BoardResponse, ProjectResponse, StatusColumnInfo


class GetBoardUseCase:
    """
    Business Rules:
    - Any member can view the board
    - Columns are sorted by order_column; tasks inside a column by
      (order_column, created_at, id)
    - Members are listed by join time as assignee options
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, principal: Principal, project_id: UUID
    ) -> Result[BoardResponse]:
        async with self.uow:
            access = await ProjectAccessGate(self.uow).require_member(
                project_id, principal
            )
            if access.is_err():
                return access

            project = await self.uow.projects.get_by_id(project_id)
            columns = await self.uow.task_statuses.get_by_project_id(project_id)
            tasks = await self.uow.tasks.get_by_project_id(project_id)

            by_column = defaultdict(list)
            for task in tasks:
                by_column[task.task_status_id].append(task)

            memberships = await self.uow.memberships.get_by_project_id(project_id)
            users = {
                u.id: u
                for u in await self.uow.users.get_by_ids(
                    [m.user_id for m in memberships]
                )
            }

            members = []
            for membership in memberships:
                user = users.get(membership.user_id)
                members.append(
                    BoardMember(
                        user_id=str(membership.user_id),
                        name=user.name if user else "",
                        email=user.email if user else "",
                        role=membership.role.value,
                    )
                )

            return Return.ok(
                BoardResponse(
                    project=ProjectResponse.from_entity(
                        project, role=access.value.value
                    ),
                    columns=[
                        StatusColumnInfo.from_entity(c, by_column.get(c.id, []))
                        for c in columns
                    ],
                    members=members,
                )
            )
