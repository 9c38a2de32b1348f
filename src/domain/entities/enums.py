"""
Collaboration Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class ProjectRole(str, Enum):
    """User role within a project"""

    owner = "owner"
    admin = "admin"
    member = "member"

    @property
    def is_owner(self) -> bool:
        return self is ProjectRole.owner

    @property
    def can_manage_members(self) -> bool:
        """Owners and admins invite, add, remove and re-role members"""
        return self in (ProjectRole.owner, ProjectRole.admin)


# Roles an invitation or a direct add may grant; ownership is never delegated
GRANTABLE_ROLES = (ProjectRole.admin, ProjectRole.member)


class InvitationStatus(str, Enum):
    """Invitation status"""

    pending = "pending"
    accepted = "accepted"
    rejected = "rejected"


class ProjectStatus(str, Enum):
    """Lifecycle label of a project"""

    pending = "pending"
    in_progress = "in_progress"
    completed = "completed"
    on_hold = "on_hold"
    cancelled = "cancelled"


class TaskPriority(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"
