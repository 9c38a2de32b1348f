"""
Task Placement Engine

Keeps every task's (column, position) pair and the completed_at
timestamp derived from occupying the "done" column.

Positions are normalized server-side: whenever a task lands in a
column, that column is renumbered 0..n-1 around the requested index and
the column it left is compacted. The client-supplied index is a hint,
the persisted ordering is authoritative and returned to the caller.
"""

import logging
from datetime import datetime
from typing import Dict, List, Optional
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.entities import Task, TaskStatus

logger = logging.getLogger(__name__)


def derive_completed_at(
    current: Optional[datetime],
    previous: Optional[TaskStatus],
    target: TaskStatus,
    now: datetime,
) -> Optional[datetime]:
    """completed_at after moving from previous to target.

    Entering "done" stamps now, leaving it clears the stamp, any other
    move keeps whatever was there. Based on the slug, so renaming the
    Done column does not change the outcome.
    """
    was_done = previous is not None and previous.is_done
    if target.is_done and not was_done:
        return now
    if not target.is_done and was_done:
        return None
    return current


def insert_at(siblings: List[Task], task: Task, position: Optional[int]) -> List[Task]:
    """New column ordering with task inserted at position (clamped); None appends"""
    ordered = [t for t in siblings if t.id != task.id]
    if position is None or position > len(ordered):
        position = len(ordered)
    position = max(position, 0)
    ordered.insert(position, task)
    return ordered


def renumber(ordered: List[Task]) -> List[Task]:
    """Assign contiguous order_column values; returns the tasks that changed"""
    changed = []
    for index, task in enumerate(ordered):
        if task.order_column != index:
            task.order_column = index
            changed.append(task)
    return changed


class TaskPlacementEngine:
    """
    Business Rules:
    - completed_at is non-null iff the task sits in the "done" column
    - Column, position and completed_at of the moved task are written in
      a single update
    - Ties on order_column break by creation time, then ID
    - Deleting a task leaves gaps; the next placement in that column
      closes them
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def place_new(
        self, task: Task, target: TaskStatus, position: Optional[int] = None
    ) -> Dict[UUID, List[Task]]:
        """Place a task that is not persisted yet"""
        task.task_status_id = target.id
        task.completed_at = utc_now() if target.is_done else None

        siblings = await self.uow.tasks.get_by_status_id(target.id)
        ordered = insert_at(siblings, task, position)
        changed = renumber(ordered)
        task.order_column = ordered.index(task)

        await self.uow.tasks.create(task)
        for sibling in changed:
            if sibling is not task:
                await self.uow.tasks.update(sibling)
        return {target.id: ordered}

    async def move(
        self, task: Task, target: TaskStatus, position: Optional[int] = None
    ) -> Dict[UUID, List[Task]]:
        """Move a task into target at position; returns affected columns' order"""
        previous_id = task.task_status_id
        previous = None
        if previous_id is not None:
            previous = (
                target
                if previous_id == target.id
                else await self.uow.task_statuses.get_by_id(previous_id)
            )

        task.completed_at = derive_completed_at(
            task.completed_at, previous, target, utc_now()
        )
        task.task_status_id = target.id

        siblings = await self.uow.tasks.get_by_status_id(target.id)
        ordered = insert_at(siblings, task, position)
        changed = renumber(ordered)
        task.order_column = ordered.index(task)
        task.updated_at = utc_now()

        # One write for column, position and completion of the moved task
        await self.uow.tasks.update(task)
        for sibling in changed:
            if sibling is not task:
                await self.uow.tasks.update(sibling)

        affected = {target.id: ordered}
        if previous_id is not None and previous_id != target.id:
            remaining = [
                t for t in await self.uow.tasks.get_by_status_id(previous_id)
                if t.id != task.id
            ]
            for sibling in renumber(remaining):
                await self.uow.tasks.update(sibling)
            affected[previous_id] = remaining

        logger.info(
            "Task %s moved to column %s at position %s",
            task.id,
            target.slug,
            task.order_column,
        )
        return affected

    async def migrate_column(self, source: TaskStatus, target: TaskStatus) -> List[Task]:
        """Append every task of source to the end of target, keeping their order"""
        moving = await self.uow.tasks.get_by_status_id(source.id)
        if not moving:
            return []

        ordered = await self.uow.tasks.get_by_status_id(target.id)
        now = utc_now()
        for task in moving:
            task.completed_at = derive_completed_at(task.completed_at, source, target, now)
            task.task_status_id = target.id
            ordered.append(task)

        renumber(ordered)
        for task in ordered:
            await self.uow.tasks.update(task)
        return moving
