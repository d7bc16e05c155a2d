from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from agencyhub.domain.entities import PASSWORD_PROVIDER_ID, Credential


class ICredentialRepository(ABC):
    """Credential repository interface - application layer"""

    @abstractmethod
    async def get_by_user_id(
        self, user_id: UUID, provider_id: str = PASSWORD_PROVIDER_ID
    ) -> Optional[Credential]:
        """Get the user's credential for a provider"""
        pass

    @abstractmethod
    async def create(self, credential: Credential) -> Credential:
        """Link a new credential to a user"""
        pass
