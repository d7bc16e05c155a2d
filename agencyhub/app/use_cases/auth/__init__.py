"""
Authentication Use Cases

Account provisioning, sign-in and password credentials.
"""

from .signup_owner_use_case import SignupOwnerUseCase
from .register_owner_use_case import RegisterOwnerUseCase
from .sign_in_use_case import SignInUseCase
from .set_password_use_case import GetPasswordStatusUseCase, SetPasswordUseCase
from .dtos import (
    SignupOwnerCommand,
    SignInCommand,
    SetPasswordCommand,
    SignupOwnerResponse,
    RegisterOwnerResponse,
    SignInResponse,
    PasswordStatusResponse,
    SetPasswordResponse,
)

__all__ = [
    # Use Cases
    "SignupOwnerUseCase",
    "RegisterOwnerUseCase",
    "SignInUseCase",
    "GetPasswordStatusUseCase",
    "SetPasswordUseCase",
    # DTOs - Commands
    "SignupOwnerCommand",
    "SignInCommand",
    "SetPasswordCommand",
    # DTOs - Responses
    "SignupOwnerResponse",
    "RegisterOwnerResponse",
    "SignInResponse",
    "PasswordStatusResponse",
    "SetPasswordResponse",
]
