"""
User Entity

Directory entry of a person known to the identity provider.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utc_now


class User(SQLModel, table=True):
    """
    User entity - read-mostly directory used to resolve invitees.

    Business Rules:
    - Email must be unique across all users
    - Username is optional but unique when present
    - is_super_admin grants owner-equivalent access to every project
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    username: Optional[str] = Field(default=None, unique=True, index=True, max_length=255)
    name: str = Field(default="", max_length=255)

    is_super_admin: bool = Field(default=False)

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
