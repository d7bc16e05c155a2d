from typing import Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from agencyhub.app.repositories.credential_repository import ICredentialRepository
from agencyhub.domain.entities import PASSWORD_PROVIDER_ID, Credential


class CredentialRepository(ICredentialRepository):
    """Credential repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_user_id(
        self, user_id: UUID, provider_id: str = PASSWORD_PROVIDER_ID
    ) -> Optional[Credential]:
        """Get the user's credential for a provider"""
        stmt = select(Credential).where(
            Credential.user_id == user_id, Credential.provider_id == provider_id
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, credential: Credential) -> Credential:
        """Link a new credential to a user"""
        self.session.add(credential)
        await self.session.flush()
        await self.session.refresh(credential)
        return credential
