"""
Agency Entity

The tenant: an organizational unit that users join through memberships.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from agencyhub.domain.base import utcnow


class Agency(SQLModel, table=True):
    """
    Agency entity - organizational unit (tenant).

    Business Rules:
    - Created exactly once per owner signup
    - Only referenced, never created, by invitation issue/accept
    """

    __tablename__ = "agencies"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
