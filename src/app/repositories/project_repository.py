from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Project


class IProjectRepository(ABC):
    """Project repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, project_id: UUID) -> Optional[Project]:
        """Get project by ID"""
        pass

    @abstractmethod
    async def get_by_member(self, user_id: UUID) -> List[Project]:
        """Get projects the user is a member of, newest first"""
        pass

    @abstractmethod
    async def create(self, project: Project) -> Project:
        """Create a new project"""
        pass

    @abstractmethod
    async def update(self, project: Project) -> Project:
        """Update existing project"""
        pass

    @abstractmethod
    async def delete(self, project: Project) -> None:
        """Delete a project together with everything it owns"""
        pass
