from typing import Iterable, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from agencyhub.app.repositories.membership_repository import IMembershipRepository
from agencyhub.domain.entities import Membership, MembershipRole


class MembershipRepository(IMembershipRepository):
    """Membership repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_user_and_agency(
        self, user_id: UUID, agency_id: UUID
    ) -> Optional[Membership]:
        """Get membership by user and agency"""
        stmt = select(Membership).where(
            Membership.user_id == user_id, Membership.agency_id == agency_id
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_first_by_user_with_roles(
        self,
        user_id: UUID,
        roles: Iterable[MembershipRole],
        agency_id: Optional[UUID] = None,
    ) -> Optional[Membership]:
        """Get the user's earliest-joined membership holding one of the roles"""
        stmt = select(Membership).where(
            Membership.user_id == user_id, Membership.role.in_(list(roles))
        )
        if agency_id is not None:
            stmt = stmt.where(Membership.agency_id == agency_id)
        stmt = stmt.order_by(Membership.joined_at.asc()).limit(1)
        result = await self.session.exec(stmt)
        return result.first()

    async def create(self, membership: Membership) -> Membership:
        """Create a new membership"""
        self.session.add(membership)
        await self.session.flush()
        await self.session.refresh(membership)
        return membership

    async def delete(self, membership: Membership) -> None:
        """Delete a membership"""
        await self.session.delete(membership)
        await self.session.flush()
