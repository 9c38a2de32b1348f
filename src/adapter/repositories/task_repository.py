from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.task_repository import ITaskRepository
from src.domain.entities import Task


class TaskRepository(ITaskRepository):
    """Task repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, task_id: UUID) -> Optional[Task]:
        """Get task by ID"""
        stmt = select(Task).where(Task.id == task_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_project_id(self, project_id: UUID) -> List[Task]:
        """Get all tasks of a project"""
        stmt = (
            select(Task)
            .where(Task.project_id == project_id)
            .order_by(Task.order_column, Task.created_at, Task.id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_by_status_id(self, status_id: UUID) -> List[Task]:
        """Get the tasks of a column in board order"""
        stmt = (
            select(Task)
            .where(Task.task_status_id == status_id)
            .order_by(Task.order_column, Task.created_at, Task.id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_assigned(self, project_id: UUID, user_id: UUID) -> List[Task]:
        """Get the tasks of a project assigned to a user"""
        stmt = select(Task).where(
            Task.project_id == project_id, Task.assigned_to == user_id
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, task: Task) -> Task:
        """Create a new task"""
        self.session.add(task)
        await self.session.flush()
        await self.session.refresh(task)
        return task

    async def update(self, task: Task) -> Task:
        """Update existing task"""
        self.session.add(task)
        await self.session.flush()
        await self.session.refresh(task)
        return task

    async def delete(self, task: Task) -> None:
        """Delete a task"""
        await self.session.delete(task)
        await self.session.flush()
