"""
User Entity

Represents a person who can belong to multiple agencies.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from agencyhub.domain.base import utcnow


class User(SQLModel, table=True):
    """
    User entity - represents a person who can belong to multiple agencies.

    Business Rules:
    - Email is stored trimmed and lowercased, unique across all users
    - Created at owner signup; deleted only when signup must be compensated
    - Password credentials live in the credentials table, not here
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    email: str = Field(unique=True, index=True, max_length=255)

    email_verified: bool = Field(default=False)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_user_email_verified", "email_verified"),)
