"""
Credential Entity

Password credential linked to a user.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from agencyhub.domain.base import utcnow

PASSWORD_PROVIDER_ID = "credential"


class Credential(SQLModel, table=True):
    """
    Credential entity - links a password to a user.

    Business Rules:
    - Password stored as bcrypt hash (cost factor 12)
    - At most one credential per (user_id, provider_id)
    - Linked after the owner signup transaction commits, in its own transaction
    """

    __tablename__ = "credentials"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)
    provider_id: str = Field(default=PASSWORD_PROVIDER_ID, max_length=50)

    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_credential_user_provider", "user_id", "provider_id", unique=True),
    )
