from typing import List, Optional
from uuid import UUID

from sqlalchemy import func, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.task_status_repository import ITaskStatusRepository
from src.domain.base import utc_now
from src.domain.entities import TaskStatus


class TaskStatusRepository(ITaskStatusRepository):
    """Status column repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, status_id: UUID) -> Optional[TaskStatus]:
        stmt = select(TaskStatus).where(TaskStatus.id == status_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_slug(self, project_id: UUID, slug: str) -> Optional[TaskStatus]:
        stmt = select(TaskStatus).where(
            TaskStatus.project_id == project_id, TaskStatus.slug == slug
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_project_id(self, project_id: UUID) -> List[TaskStatus]:
        stmt = (
            select(TaskStatus)
            .where(TaskStatus.project_id == project_id)
            .order_by(TaskStatus.order_column, TaskStatus.created_at, TaskStatus.id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_max_order(self, project_id: UUID) -> Optional[int]:
        stmt = select(func.max(TaskStatus.order_column)).where(
            TaskStatus.project_id == project_id
        )
        result = await self.session.execute(stmt)
        return result.scalar()

    async def create(self, task_status: TaskStatus) -> TaskStatus:
        self.session.add(task_status)
        await self.session.flush()
        await self.session.refresh(task_status)
        return task_status

    async def update(self, task_status: TaskStatus) -> TaskStatus:
        self.session.add(task_status)
        await self.session.flush()
        await self.session.refresh(task_status)
        return task_status

    async def set_order(self, project_id: UUID, status_id: UUID, order_column: int) -> int:
        stmt = (
            update(TaskStatus)
            .where(TaskStatus.id == status_id, TaskStatus.project_id == project_id)
            .values(order_column=order_column, updated_at=utc_now())
            .execution_options(synchronize_session="fetch")
        )
        result = await self.session.execute(stmt)
        return result.rowcount

    async def delete(self, task_status: TaskStatus) -> None:
        await self.session.delete(task_status)
        await self.session.flush()
