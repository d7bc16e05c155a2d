from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from uuid import UUID

from agencyhub.domain.entities import Invitation


class IInvitationRepository(ABC):
    """Invitation repository interface - application layer"""

    @abstractmethod
    async def get_by_token_hash(self, token_hash: str) -> Optional[Invitation]:
        """Get invitation by the hash of its token"""
        pass

    @abstractmethod
    async def create(self, invitation: Invitation) -> Invitation:
        """Create a new invitation"""
        pass

    @abstractmethod
    async def mark_consumed(self, invitation_id: UUID, consumed_at: datetime) -> int:
        """
        Set consumed_at only if it is still NULL, as one conditional UPDATE.

        Returns:
            Number of affected rows: 1 when this call consumed the invitation,
            0 when it was already consumed (or does not exist)
        """
        pass
