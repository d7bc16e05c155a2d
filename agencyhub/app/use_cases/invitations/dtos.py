"""
Invitation Use Case DTOs (Data Transfer Objects)

All Command and Response classes for the invitation domain.
"""

from typing import Any, Optional
from uuid import UUID

from pydantic import BaseModel, field_validator
from pydantic_core import PydanticCustomError

from agencyhub.app.use_cases.validation import normalized_email, valid_email
from agencyhub.domain.entities import Invitation, MembershipRole

# Roles an inviter may grant; owner is only ever created by signup
INVITABLE_ROLES = (MembershipRole.member, MembershipRole.admin)


# ============================================================================
# Command DTOs
# ============================================================================


class CreateInviteCommand(BaseModel):
    """
    Member invitation request.

    Role is trimmed and case-folded; blank means member. A blank agency id
    means "the inviter's first agency where they can invite".
    """

    email: str
    role: MembershipRole = MembershipRole.member
    agency_id: Optional[UUID] = None

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, value):
        return normalized_email(value)

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str) -> str:
        return valid_email(value)

    @field_validator("role", mode="before")
    @classmethod
    def normalize_role(cls, value: Any):
        if value is None:
            return MembershipRole.member
        if isinstance(value, MembershipRole):
            return value
        if isinstance(value, str):
            value = value.strip().lower()
            return value or MembershipRole.member
        return value

    @field_validator("role")
    @classmethod
    def check_role(cls, value: MembershipRole) -> MembershipRole:
        if value not in INVITABLE_ROLES:
            raise PydanticCustomError("role_invalid", "Role must be member or admin")
        return value

    @field_validator("agency_id", mode="before")
    @classmethod
    def blank_agency_id(cls, value: Any):
        if isinstance(value, str):
            return value.strip() or None
        return value


class AcceptInviteCommand(BaseModel):
    """Both token and accepting user are required before any lookup"""

    token: str
    user_id: UUID

    @field_validator("token")
    @classmethod
    def check_token(cls, value: str) -> str:
        if not value:
            raise PydanticCustomError("required", "Token is required")
        return value


# ============================================================================
# Response DTOs
# ============================================================================


class InvitationRecord(BaseModel):
    """Stored invitation, every field except the token hash"""

    id: str
    type: str
    email: str
    agency_id: Optional[str] = None
    role: Optional[str] = None
    invited_by_user_id: Optional[str] = None
    expires_at: str
    consumed_at: Optional[str] = None
    created_at: Optional[str] = None

    @classmethod
    def from_entity(cls, invitation: Invitation) -> "InvitationRecord":
        return cls(
            id=str(invitation.id),
            type=invitation.type.value,
            email=invitation.email,
            agency_id=str(invitation.agency_id) if invitation.agency_id else None,
            role=invitation.role.value if invitation.role else None,
            invited_by_user_id=(
                str(invitation.invited_by_user_id)
                if invitation.invited_by_user_id
                else None
            ),
            expires_at=invitation.expires_at.isoformat(),
            consumed_at=(
                invitation.consumed_at.isoformat() if invitation.consumed_at else None
            ),
            created_at=(
                invitation.created_at.isoformat() if invitation.created_at else None
            ),
        )


class CreateInviteResponse(BaseModel):
    """Response for create invite use case; invite_url carries the raw token"""

    invite_id: str
    invite_url: str
    email: str
    role: str
    agency_id: str
    expires_at: str


class AcceptInviteResponse(BaseModel):
    """Membership granted by accepting an invitation"""

    invitation_id: str
    agency_id: str
    role: str


class InviteRedirectResponse(BaseModel):
    """Where the client should navigate next"""

    redirect_to: str
