"""
TaskStatus Entity

A user-defined kanban column of a project.
"""

import re
import secrets
import string
import unicodedata
from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utc_now

# Occupying the column with this slug marks a task as completed
DONE_SLUG = "done"

# (name, slug, color) seeded for every new project, left to right
DEFAULT_STATUSES = (
    ("Backlog", "backlog", "gray"),
    ("Todo", "todo", "blue"),
    ("In Progress", "in_progress", "yellow"),
    ("Done", DONE_SLUG, "green"),
    ("Rejected", "rejected", "red"),
)


class TaskStatus(SQLModel, table=True):
    """
    TaskStatus entity - ordered per-project status column.

    Business Rules:
    - slug is unique within a project and immutable after creation
    - order_column sorts columns left to right; gaps are tolerated
    - Default (seeded) columns cannot be deleted
    - Deleting a column migrates its tasks, it never deletes them
    """

    __tablename__ = "task_statuses"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    project_id: UUID = Field(
        foreign_key="projects.id", nullable=False, index=True, ondelete="CASCADE"
    )
    name: str = Field(max_length=255)
    slug: str = Field(max_length=255)
    color: str = Field(default="gray", max_length=50)

    order_column: int = Field(default=0)
    is_default: bool = Field(default=False)

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_task_status_project_slug", "project_id", "slug", unique=True),
        Index("idx_task_status_order", "project_id", "order_column"),
    )

    @property
    def is_done(self) -> bool:
        return self.slug == DONE_SLUG


_SLUG_SUFFIX_ALPHABET = string.ascii_lowercase + string.digits


def slugify(name: str) -> str:
    """Lowercase ASCII words joined by hyphens"""
    normalized = unicodedata.normalize("NFKD", name).encode("ascii", "ignore").decode()
    return re.sub(r"[^a-z0-9]+", "-", normalized.lower()).strip("-")


def make_column_slug(name: str) -> str:
    """slugify(name) plus a random 4 character suffix, e.g. "review-k3f9" """
    suffix = "".join(secrets.choice(_SLUG_SUFFIX_ALPHABET) for _ in range(4))
    base = slugify(name) or "column"
    return f"{base}-{suffix}"
