from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.project_repository import IProjectRepository
from src.domain.entities import Invitation, Membership, Project, Task, TaskStatus


class ProjectRepository(IProjectRepository):
    """Project repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, project_id: UUID) -> Optional[Project]:
        """Get project by ID"""
        stmt = select(Project).where(Project.id == project_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_member(self, user_id: UUID) -> List[Project]:
        """Get projects the user is a member of, newest first"""
        stmt = (
            select(Project)
            .join(Membership, Membership.project_id == Project.id)
            .where(Membership.user_id == user_id)
            .order_by(Project.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, project: Project) -> Project:
        """Create a new project"""
        self.session.add(project)
        await self.session.flush()
        await self.session.refresh(project)
        return project

    async def update(self, project: Project) -> Project:
        """Update existing project"""
        self.session.add(project)
        await self.session.flush()
        await self.session.refresh(project)
        return project

    async def delete(self, project: Project) -> None:
        """Delete a project together with everything it owns"""
        # Dependents first; SQLite does not enforce ON DELETE unless asked to
        for model in (Task, TaskStatus, Invitation, Membership):
            await self.session.execute(delete(model).where(model.project_id == project.id))
        await self.session.delete(project)
        await self.session.flush()
