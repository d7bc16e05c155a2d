"""
Invitation Use Cases

Issuing, validating and accepting agency invitations.
"""

from .create_invite_use_case import CreateInviteUseCase, build_invite_url
from .get_valid_invitation_use_case import GetValidInvitationUseCase, find_valid_invitation
from .accept_invite_use_case import AcceptInviteUseCase
from .continue_invite_use_case import ContinueInviteUseCase
from .complete_invite_use_case import CompleteInviteUseCase
from .errors import InviteErrorCode, NOT_IMPLEMENTED, MESSAGE_BY_CODE
from .dtos import (
    CreateInviteCommand,
    AcceptInviteCommand,
    InvitationRecord,
    CreateInviteResponse,
    AcceptInviteResponse,
    InviteRedirectResponse,
)

__all__ = [
    # Use Cases
    "CreateInviteUseCase",
    "GetValidInvitationUseCase",
    "AcceptInviteUseCase",
    "ContinueInviteUseCase",
    "CompleteInviteUseCase",
    "find_valid_invitation",
    "build_invite_url",
    # Errors
    "InviteErrorCode",
    "NOT_IMPLEMENTED",
    "MESSAGE_BY_CODE",
    # DTOs - Commands
    "CreateInviteCommand",
    "AcceptInviteCommand",
    # DTOs - Responses
    "InvitationRecord",
    "CreateInviteResponse",
    "AcceptInviteResponse",
    "InviteRedirectResponse",
]
