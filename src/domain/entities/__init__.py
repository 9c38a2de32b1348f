"""
Collaboration Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    GRANTABLE_ROLES,
    InvitationStatus,
    ProjectRole,
    ProjectStatus,
    TaskPriority,
)

# Export all entities
from .user import User
from .project import Project
from .membership import Membership
from .invitation import Invitation
from .task_status import DEFAULT_STATUSES, DONE_SLUG, TaskStatus, make_column_slug
from .task import Task

__all__ = [
    # Enums
    "GRANTABLE_ROLES",
    "InvitationStatus",
    "ProjectRole",
    "ProjectStatus",
    "TaskPriority",
    # Entities
    "User",
    "Project",
    "Membership",
    "Invitation",
    "TaskStatus",
    "Task",
    # Constants
    "DEFAULT_STATUSES",
    "DONE_SLUG",
    "make_column_slug",
]
