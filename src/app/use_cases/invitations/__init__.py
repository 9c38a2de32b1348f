"""
Invitation Use Cases

Invitation lifecycle: invite, cancel, accept, reject and listings.
"""

from .accept_invitation_use_case import AcceptInvitationUseCase
from .cancel_invitation_use_case import CancelInvitationUseCase
from .dtos import (
    AcceptInvitationResponse,
    InvitationInfo,
    InvitationListResponse,
    InvitationStatusResponse,
    InviteUserResponse,
)
from .invite_user_use_case import InviteUserUseCase
from .list_invitations_use_case import (
    ListPendingInvitationsUseCase,
    ListProjectInvitationsUseCase,
)
from .reject_invitation_use_case import RejectInvitationUseCase

__all__ = [
    "InviteUserUseCase",
    "CancelInvitationUseCase",
    "AcceptInvitationUseCase",
    "RejectInvitationUseCase",
    "ListPendingInvitationsUseCase",
    "ListProjectInvitationsUseCase",
    "InviteUserResponse",
    "AcceptInvitationResponse",
    "InvitationInfo",
    "InvitationListResponse",
    "InvitationStatusResponse",
]
