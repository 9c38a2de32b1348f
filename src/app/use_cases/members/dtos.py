"""
Member Use Case DTOs (Data Transfer Objects)
"""

from typing import List, Optional

from pydantic import BaseModel

from src.domain.entities import Membership, User


class MemberInfo(BaseModel):
    """Project member with role"""

    user_id: str
    email: str
    name: str
    username: Optional[str]
    role: str
    joined_at: str

    @classmethod
    def from_entities(cls, membership: Membership, user: Optional[User]) -> "MemberInfo":
        return cls(
            user_id=str(membership.user_id),
            email=user.email if user else "",
            name=user.name if user else "",
            username=user.username if user else None,
            role=membership.role.value,
            joined_at=membership.created_at.isoformat(),
        )


class MemberListResponse(BaseModel):
    members: List[MemberInfo]


class ChangeRoleResponse(BaseModel):
    status: str
    member: MemberInfo


class RemoveMemberResponse(BaseModel):
    """Response for remove member use case"""

    status: str
    reassigned_tasks: int
