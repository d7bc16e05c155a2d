"""
Invitation Entity

Pending, single-use grant of membership in an agency.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from agencyhub.domain.base import utcnow

from .enums import InvitationType, MembershipRole


class Invitation(SQLModel, table=True):
    """
    Invitation entity - pending grant of membership.

    Business Rules:
    - Created by an agency owner/admin, expires after 7 days
    - Only the hash of the token is stored; the raw token lives in the link
    - consumed_at goes from NULL to a timestamp exactly once (atomic update)
    - Expiry is evaluated at read time, there is no sweep
    - Client invitations are stored but cannot be accepted yet
    """

    __tablename__ = "invitations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    type: InvitationType = Field(default=InvitationType.member, nullable=False)
    email: str = Field(max_length=255, nullable=False, index=True)

    # Required for member invitations, empty for client invitations
    agency_id: Optional[UUID] = Field(default=None, foreign_key="agencies.id", index=True)
    role: Optional[MembershipRole] = Field(default=None)
    invited_by_user_id: Optional[UUID] = Field(default=None, foreign_key="users.id")

    token_hash: str = Field(unique=True, index=True, max_length=64)

    # Timestamps
    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    consumed_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_invitation_expires_at", "expires_at"),
        Index("idx_invitation_agency_email", "agency_id", "email"),
    )
