from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.membership_repository import IMembershipRepository
from src.domain.entities import Membership, ProjectRole


class MembershipRepository(IMembershipRepository):
    """Membership repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_user_and_project(
        self, user_id: UUID, project_id: UUID
    ) -> Optional[Membership]:
        """Get membership by user and project"""
        stmt = select(Membership).where(
            Membership.user_id == user_id, Membership.project_id == project_id
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_project_id(self, project_id: UUID) -> List[Membership]:
        """Get all memberships of a project, ordered by join time"""
        stmt = (
            select(Membership)
            .where(Membership.project_id == project_id)
            .order_by(Membership.created_at, Membership.id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_owners(self, project_id: UUID) -> List[Membership]:
        """Get owner memberships of a project, ordered by join time"""
        stmt = (
            select(Membership)
            .where(
                Membership.project_id == project_id,
                Membership.role == ProjectRole.owner,
            )
            .order_by(Membership.created_at, Membership.id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, membership: Membership) -> Membership:
        """Create a new membership"""
        self.session.add(membership)
        await self.session.flush()
        await self.session.refresh(membership)
        return membership

    async def update(self, membership: Membership) -> Membership:
        """Update existing membership"""
        self.session.add(membership)
        await self.session.flush()
        await self.session.refresh(membership)
        return membership

    async def delete(self, membership: Membership) -> None:
        """Delete a membership"""
        await self.session.delete(membership)
        await self.session.flush()
