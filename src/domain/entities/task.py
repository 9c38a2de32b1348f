"""
Task Entity

A card on the project board.
"""

from datetime import date, datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utc_now

from .enums import TaskPriority


class Task(SQLModel, table=True):
    """
    Task entity.

    Business Rules:
    - (task_status_id, order_column) places the task on the board
    - completed_at is set iff the task sits in the "done" column
    - assigned_to is a weak reference to a user
    """

    __tablename__ = "tasks"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    project_id: UUID = Field(
        foreign_key="projects.id", nullable=False, index=True, ondelete="CASCADE"
    )
    task_status_id: Optional[UUID] = Field(
        default=None, foreign_key="task_statuses.id", index=True, ondelete="SET NULL"
    )

    title: str = Field(max_length=255)
    description: Optional[str] = Field(default=None)
    priority: TaskPriority = Field(default=TaskPriority.medium)
    result_explanation: Optional[str] = Field(default=None)

    assigned_to: Optional[UUID] = Field(default=None, foreign_key="users.id", index=True)
    order_column: int = Field(default=0)

    start_date: Optional[date] = Field(default=None)
    due_date: Optional[date] = Field(default=None)
    completed_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_task_column_order", "task_status_id", "order_column"),)
