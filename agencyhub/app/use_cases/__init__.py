"""
Use Cases

Organized by domain:
- auth/: Owner signup, sign-in and password credentials
- invitations/: Agency invitation lifecycle
"""

from .auth import (
    RegisterOwnerUseCase,
    SignupOwnerUseCase,
    SignInUseCase,
    GetPasswordStatusUseCase,
    SetPasswordUseCase,
)
from .invitations import (
    CreateInviteUseCase,
    GetValidInvitationUseCase,
    AcceptInviteUseCase,
    ContinueInviteUseCase,
    CompleteInviteUseCase,
)

__all__ = [
    # Auth
    "RegisterOwnerUseCase",
    "SignupOwnerUseCase",
    "SignInUseCase",
    "GetPasswordStatusUseCase",
    "SetPasswordUseCase",
    # Invitations
    "CreateInviteUseCase",
    "GetValidInvitationUseCase",
    "AcceptInviteUseCase",
    "ContinueInviteUseCase",
    "CompleteInviteUseCase",
]
