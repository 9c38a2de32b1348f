"""
Project Membership Use Cases
"""

from .add_member_use_case import AddMemberUseCase
from .change_role_use_case import ChangeRoleUseCase
from .dtos import (
    ChangeRoleResponse,
    MemberInfo,
    MemberListResponse,
    RemoveMemberResponse,
)
from .list_members_use_case import ListMembersUseCase
from .remove_member_use_case import RemoveMemberUseCase

__all__ = [
    "AddMemberUseCase",
    "ChangeRoleUseCase",
    "ListMembersUseCase",
    "RemoveMemberUseCase",
    "ChangeRoleResponse",
    "MemberInfo",
    "MemberListResponse",
    "RemoveMemberResponse",
]
