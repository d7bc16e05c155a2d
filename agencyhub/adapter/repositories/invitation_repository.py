from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from agencyhub.app.repositories.invitation_repository import IInvitationRepository
from agencyhub.domain.entities import Invitation


class InvitationRepository(IInvitationRepository):
    """Invitation repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_token_hash(self, token_hash: str) -> Optional[Invitation]:
        """Get invitation by the hash of its token"""
        stmt = select(Invitation).where(Invitation.token_hash == token_hash)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, invitation: Invitation) -> Invitation:
        """Create a new invitation"""
        self.session.add(invitation)
        await self.session.flush()
        await self.session.refresh(invitation)
        return invitation

    async def mark_consumed(self, invitation_id: UUID, consumed_at: datetime) -> int:
        """Set consumed_at where it is still NULL; returns the affected row count"""
        stmt = (
            update(Invitation)
            .where(Invitation.id == invitation_id, Invitation.consumed_at.is_(None))
            .values(consumed_at=consumed_at)
        )
        result = await self.session.execute(stmt)
        return result.rowcount
