"""
Auth Use Case DTOs (Data Transfer Objects)

Command/Response pattern for clean architecture separation:
- Commands: validated business intent, built inside the use case so that
  invalid input comes back as a VALIDATION_ERROR result
- Responses: structured output, decoupled from the HTTP format
"""

from typing import Optional

from pydantic import BaseModel, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from agencyhub.app.use_cases.validation import (
    password_within_limits,
    normalized_email,
    required,
    valid_email,
)


# ============================================================================
# Command DTOs
# ============================================================================


class SignupOwnerCommand(BaseModel):
    """Owner signup: new user, new agency, owner membership"""

    name: str
    email: str
    password: str
    agency_name: str

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, value):
        return normalized_email(value)

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str) -> str:
        return valid_email(value)

    @field_validator("name")
    @classmethod
    def check_name(cls, value: str) -> str:
        return required(value, "Name is required")

    @field_validator("password")
    @classmethod
    def check_password(cls, value: str) -> str:
        return password_within_limits(value)

    @field_validator("agency_name")
    @classmethod
    def check_agency_name(cls, value: str) -> str:
        return required(value, "Agency name is required")


class SignInCommand(BaseModel):
    """Email/password sign-in"""

    email: str
    password: str

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, value):
        return normalized_email(value)

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str) -> str:
        return valid_email(value)

    @field_validator("password")
    @classmethod
    def check_password(cls, value: str) -> str:
        if not value:
            raise PydanticCustomError("required", "Password is required")
        return value


class SetPasswordCommand(BaseModel):
    """First password for a user that has no credential yet"""

    password: str
    confirm_password: str

    @field_validator("password")
    @classmethod
    def check_password(cls, value: str) -> str:
        return password_within_limits(value)

    @field_validator("confirm_password")
    @classmethod
    def check_confirmation(cls, value: str, info: ValidationInfo) -> str:
        password = info.data.get("password")
        if password is not None and value != password:
            raise PydanticCustomError("password_mismatch", "Passwords do not match")
        return value


# ============================================================================
# Response DTOs
# ============================================================================


class SignupOwnerResponse(BaseModel):
    """Ids created by the owner signup transaction"""

    user_id: str
    agency_id: str


class RegisterOwnerResponse(BaseModel):
    """Response for the full owner registration flow"""

    user_id: str
    agency_id: str
    access_token: str
    redirect_to: str


class SignInResponse(BaseModel):
    """Response for sign-in use case"""

    user_id: str
    access_token: str
    redirect_to: str


class PasswordStatusResponse(BaseModel):
    """Whether the user already has a password credential"""

    has_password: bool
    redirect_to: Optional[str] = None


class SetPasswordResponse(BaseModel):
    """Response for set password use case"""

    status: str
    redirect_to: str
