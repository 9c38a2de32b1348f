from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Invitation


class IInvitationRepository(ABC):
    """Invitation repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, invitation_id: UUID) -> Optional[Invitation]:
        """Get invitation by ID"""
        pass

    @abstractmethod
    async def get_by_project_and_email(
        self, project_id: UUID, email: str
    ) -> Optional[Invitation]:
        """Get the invitation row of (project, email), whatever its status"""
        pass

    @abstractmethod
    async def get_pending_by_project_id(self, project_id: UUID) -> List[Invitation]:
        """Get pending invitations of a project"""
        pass

    @abstractmethod
    async def get_pending_by_email(self, email: str) -> List[Invitation]:
        """Get pending invitations addressed to an email, newest first"""
        pass

    @abstractmethod
    async def create(self, invitation: Invitation) -> Invitation:
        """Create a new invitation"""
        pass

    @abstractmethod
    async def update(self, invitation: Invitation) -> Invitation:
        """Update existing invitation"""
        pass

    @abstractmethod
    async def delete(self, invitation: Invitation) -> None:
        """Hard delete an invitation"""
        pass
