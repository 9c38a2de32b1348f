"""
Invitation Entity

Proposed memberships tracked through pending/accepted/rejected.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utc_now

from .enums import InvitationStatus, ProjectRole


class Invitation(SQLModel, table=True):
    """
    Invitation entity - invitations to join a project.

    Business Rules:
    - At most one pending invitation per (project_id, email)
    - Role is admin or member, never owner
    - Rejected or accepted rows are recycled on re-invite
    - Token is opaque and never used for authorization
    """

    __tablename__ = "project_invitations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    project_id: UUID = Field(
        foreign_key="projects.id", nullable=False, index=True, ondelete="CASCADE"
    )
    email: str = Field(max_length=255, nullable=False, index=True)
    username: Optional[str] = Field(default=None, max_length=255)

    role: ProjectRole = Field(nullable=False)
    token: str = Field(max_length=64)

    status: InvitationStatus = Field(default=InvitationStatus.pending)
    invited_by: Optional[UUID] = Field(default=None, foreign_key="users.id")

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_invitation_project_email", "project_id", "email"),
        Index("idx_invitation_status", "status"),
    )
