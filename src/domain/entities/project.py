"""
Project Entity

A collaboration space owning its status columns, tasks and invitations.
"""

from datetime import date, datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utc_now

from .enums import ProjectStatus


class Project(SQLModel, table=True):
    """
    Project entity.

    Business Rules:
    - The creator becomes the first owner
    - Five default status columns are seeded at creation
    - Deleting a project removes its memberships, invitations, columns and tasks
    """

    __tablename__ = "projects"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    description: Optional[str] = Field(default=None)

    status: ProjectStatus = Field(default=ProjectStatus.pending)

    start_date: Optional[date] = Field(default=None)
    due_date: Optional[date] = Field(default=None)

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_project_created_at", "created_at"),)
