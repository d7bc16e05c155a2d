from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from agencyhub.domain.entities import Agency


class IAgencyRepository(ABC):
    """Agency repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, agency_id: UUID) -> Optional[Agency]:
        """Get agency by ID"""
        pass

    @abstractmethod
    async def create(self, agency: Agency) -> Agency:
        """Create a new agency"""
        pass

    @abstractmethod
    async def delete(self, agency: Agency) -> None:
        """Delete an agency (signup compensation only)"""
        pass
