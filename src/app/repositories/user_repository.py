from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import User


class IUserRepository(ABC):
    """User directory interface - application layer"""

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        pass

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username"""
        pass

    @abstractmethod
    async def get_by_ids(self, user_ids: List[UUID]) -> List[User]:
        """Get all users whose ID is in user_ids"""
        pass
