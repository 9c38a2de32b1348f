from typing import List, Optional
from uuid import UUID

from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.invitation_repository import IInvitationRepository
from src.domain.base import normalize_email
from src.domain.entities import Invitation, InvitationStatus


class InvitationRepository(IInvitationRepository):
    """Invitation repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, invitation_id: UUID) -> Optional[Invitation]:
        """Get invitation by ID"""
        stmt = select(Invitation).where(Invitation.id == invitation_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_project_and_email(
        self, project_id: UUID, email: str
    ) -> Optional[Invitation]:
        """Get the invitation row of (project, email), whatever its status"""
        stmt = (
            select(Invitation)
            .where(
                Invitation.project_id == project_id,
                func.lower(Invitation.email) == normalize_email(email),
            )
            .order_by(Invitation.created_at)
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def get_pending_by_project_id(self, project_id: UUID) -> List[Invitation]:
        """Get pending invitations of a project"""
        stmt = (
            select(Invitation)
            .where(
                Invitation.project_id == project_id,
                Invitation.status == InvitationStatus.pending,
            )
            .order_by(Invitation.created_at)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_pending_by_email(self, email: str) -> List[Invitation]:
        """Get pending invitations addressed to an email, newest first"""
        stmt = (
            select(Invitation)
            .where(
                func.lower(Invitation.email) == normalize_email(email),
                Invitation.status == InvitationStatus.pending,
            )
            .order_by(Invitation.updated_at.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, invitation: Invitation) -> Invitation:
        """Create a new invitation"""
        self.session.add(invitation)
        await self.session.flush()
        await self.session.refresh(invitation)
        return invitation

    async def update(self, invitation: Invitation) -> Invitation:
        """Update existing invitation"""
        self.session.add(invitation)
        await self.session.flush()
        await self.session.refresh(invitation)
        return invitation

    async def delete(self, invitation: Invitation) -> None:
        """Hard delete an invitation"""
        await self.session.delete(invitation)
        await self.session.flush()
