from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Membership


class IMembershipRepository(ABC):
    """Membership repository interface - application layer"""

    @abstractmethod
    async def get_by_user_and_project(
        self, user_id: UUID, project_id: UUID
    ) -> Optional[Membership]:
        """Get membership by user and project"""
        pass

    @abstractmethod
    async def get_by_project_id(self, project_id: UUID) -> List[Membership]:
        """Get all memberships of a project, ordered by join time"""
        pass

    @abstractmethod
    async def get_owners(self, project_id: UUID) -> List[Membership]:
        """Get owner memberships of a project, ordered by join time"""
        pass

    @abstractmethod
    async def create(self, membership: Membership) -> Membership:
        """Create a new membership"""
        pass

    @abstractmethod
    async def update(self, membership: Membership) -> Membership:
        """Update existing membership"""
        pass

    @abstractmethod
    async def delete(self, membership: Membership) -> None:
        """Delete a membership"""
        pass
