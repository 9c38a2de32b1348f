"""
Membership Entity

Links User to Project with a role.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utc_now

from .enums import ProjectRole


class Membership(SQLModel, table=True):
    """
    Membership entity - the project_user pivot.

    Business Rules:
    - (project_id, user_id) must be unique
    - A project with members always keeps at least one owner
    - Removal deletes the row; there is no soft delete
    """

    __tablename__ = "project_user"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    project_id: UUID = Field(
        foreign_key="projects.id", nullable=False, index=True, ondelete="CASCADE"
    )
    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)

    role: ProjectRole = Field(nullable=False)

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_membership_project_user", "project_id", "user_id", unique=True),
        Index("idx_membership_role", "project_id", "role"),
    )
