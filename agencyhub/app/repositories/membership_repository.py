from abc import ABC, abstractmethod
from typing import Iterable, Optional
from uuid import UUID

from agencyhub.domain.entities import Membership, MembershipRole


class IMembershipRepository(ABC):
    """Membership repository interface - application layer"""

    @abstractmethod
    async def get_by_user_and_agency(
        self, user_id: UUID, agency_id: UUID
    ) -> Optional[Membership]:
        """Get membership by user and agency"""
        pass

    @abstractmethod
    async def get_first_by_user_with_roles(
        self,
        user_id: UUID,
        roles: Iterable[MembershipRole],
        agency_id: Optional[UUID] = None,
    ) -> Optional[Membership]:
        """
        Get the user's earliest-joined membership holding one of the roles.

        When agency_id is given only that agency's membership is considered.
        """
        pass

    @abstractmethod
    async def create(self, membership: Membership) -> Membership:
        """Create a new membership"""
        pass

    @abstractmethod
    async def delete(self, membership: Membership) -> None:
        """Delete a membership (signup compensation only)"""
        pass
