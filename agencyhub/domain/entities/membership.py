"""
Membership Entity

Links User to Agency with a role.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from agencyhub.domain.base import utcnow

from .enums import MembershipRole


class Membership(SQLModel, table=True):
    """
    Membership entity - links User to Agency with a role.

    Business Rules:
    - One user can be member of multiple agencies
    - (user_id, agency_id) must be unique
    - Owner membership created at signup, others by accepting an invitation
    - joined_at orders memberships when picking the implicit inviting agency
    """

    __tablename__ = "memberships"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)
    agency_id: UUID = Field(foreign_key="agencies.id", nullable=False, index=True)

    role: MembershipRole = Field(nullable=False)

    joined_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_membership_user_agency", "user_id", "agency_id", unique=True),
    )
