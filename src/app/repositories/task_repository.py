from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Task


class ITaskRepository(ABC):
    """Task repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, task_id: UUID) -> Optional[Task]:
        """Get task by ID"""
        pass

    @abstractmethod
    async def get_by_project_id(self, project_id: UUID) -> List[Task]:
        """Get all tasks of a project"""
        pass

    @abstractmethod
    async def get_by_status_id(self, status_id: UUID) -> List[Task]:
        """Get the tasks of a column in board order"""
        pass

    @abstractmethod
    async def get_assigned(self, project_id: UUID, user_id: UUID) -> List[Task]:
        """Get the tasks of a project assigned to a user"""
        pass

    @abstractmethod
    async def create(self, task: Task) -> Task:
        """Create a new task"""
        pass

    @abstractmethod
    async def update(self, task: Task) -> Task:
        """Update existing task"""
        pass

    @abstractmethod
    async def delete(self, task: Task) -> None:
        """Delete a task"""
        pass
