"""
Remove Member from Project Use Case

Detaches a member, handing their task assignments to an owner first.
"""

import logging
from uuid import UUID

from src.libs.result import Error, Result, Return
from src.app.services.authorization import ProjectAccessGate
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.principal import Principal

from .dtos import RemoveMemberResponse

logger = logging.getLogger(__name__)


class RemoveMemberUseCase:
    """
    Use case for removing members from a project.

    Business Rules:
    - Owners and admins can remove members; anyone can remove themselves
    - Only owners can remove an owner
    - The last owner can never be removed
    - Tasks assigned to the leaving user are reassigned to another owner,
      oldest first; reassignment is best effort and never blocks removal
    - Reassignment and removal commit together
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, principal: Principal, project_id: UUID, target_user_id: UUID
    ) -> Result[RemoveMemberResponse]:
        async with self.uow:
            gate = ProjectAccessGate(self.uow)
            access = await gate.require_member(project_id, principal)
            if access.is_err():
                return access
            requester_role = access.value

            is_self_removal = principal.user_id == target_user_id
            if not is_self_removal and not requester_role.can_manage_members:
                return Return.err(
                    Error("FORBIDDEN", "Only owners and admins can remove members")
                )

            target = await self.uow.memberships.get_by_user_and_project(
                target_user_id, project_id
            )
            if target is None:
                return Return.err(
                    Error(
                        "MEMBERSHIP_NOT_FOUND",
                        "Target user is not a member of this project",
                    )
                )

            owners = await self.uow.memberships.get_owners(project_id)

            if target.role.is_owner:
                if not is_self_removal and not requester_role.is_owner:
                    return Return.err(
                        Error("FORBIDDEN", "Only owners can remove an owner")
                    )
                if len(owners) <= 1:
                    return Return.err(
                        Error(
                            "LAST_OWNER",
                            "Cannot remove the last owner of the project",
                        )
                    )

            reassigned = 0
            assigned = await self.uow.tasks.get_assigned(project_id, target_user_id)
            if assigned:
                successor = next(
                    (o for o in owners if o.user_id != target_user_id),
                    owners[0] if owners else None,
                )
                if successor is None:
                    logger.warning(
                        "Project %s has no owner to take over tasks of %s",
                        project_id,
                        target_user_id,
                    )
                else:
                    now = utc_now()
                    for task in assigned:
                        task.assigned_to = successor.user_id
                        task.updated_at = now
                        await self.uow.tasks.update(task)
                    reassigned = len(assigned)

            await self.uow.memberships.delete(target)

            await self.uow.commit()

            logger.info(
                "User %s removed from project %s (%d tasks reassigned)",
                target_user_id,
                project_id,
                reassigned,
            )
            return Return.ok(
                RemoveMemberResponse(status="removed", reassigned_tasks=reassigned)
            )
