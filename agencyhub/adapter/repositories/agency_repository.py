from typing import Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from agencyhub.app.repositories.agency_repository import IAgencyRepository
from agencyhub.domain.entities import Agency


class AgencyRepository(IAgencyRepository):
    """Agency repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, agency_id: UUID) -> Optional[Agency]:
        """Get agency by ID"""
        stmt = select(Agency).where(Agency.id == agency_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, agency: Agency) -> Agency:
        """Create a new agency"""
        self.session.add(agency)
        await self.session.flush()
        await self.session.refresh(agency)
        return agency

    async def delete(self, agency: Agency) -> None:
        """Delete an agency"""
        await self.session.delete(agency)
        await self.session.flush()
