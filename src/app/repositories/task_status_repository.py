from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import TaskStatus


class ITaskStatusRepository(ABC):
    """Status column repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, status_id: UUID) -> Optional[TaskStatus]:
        """Get status column by ID"""
        pass

    @abstractmethod
    async def get_by_slug(self, project_id: UUID, slug: str) -> Optional[TaskStatus]:
        """Resolve a slug within a project"""
        pass

    @abstractmethod
    async def get_by_project_id(self, project_id: UUID) -> List[TaskStatus]:
        """Get the columns of a project, left to right"""
        pass

    @abstractmethod
    async def get_max_order(self, project_id: UUID) -> Optional[int]:
        """Highest order_column of the project, None when it has no columns"""
        pass

    @abstractmethod
    async def create(self, task_status: TaskStatus) -> TaskStatus:
        """Create a new status column"""
        pass

    @abstractmethod
    async def update(self, task_status: TaskStatus) -> TaskStatus:
        """Update existing status column"""
        pass

    @abstractmethod
    async def set_order(self, project_id: UUID, status_id: UUID, order_column: int) -> int:
        """Write order_column of one column, scoped to the project.

        Returns the number of rows written (0 for a foreign or unknown ID).
        """
        pass

    @abstractmethod
    async def delete(self, task_status: TaskStatus) -> None:
        """Delete a status column"""
        pass
