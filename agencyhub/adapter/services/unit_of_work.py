from sqlmodel.ext.asyncio.session import AsyncSession

from agencyhub.adapter.repositories.agency_repository import AgencyRepository
from agencyhub.adapter.repositories.credential_repository import CredentialRepository
from agencyhub.adapter.repositories.invitation_repository import InvitationRepository
from agencyhub.adapter.repositories.membership_repository import MembershipRepository
from agencyhub.adapter.repositories.user_repository import UserRepository
from agencyhub.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.users = UserRepository(self.session)
        self.agencies = AgencyRepository(self.session)
        self.memberships = MembershipRepository(self.session)
        self.invitations = InvitationRepository(self.session)
        self.credentials = CredentialRepository(self.session)
        return self

    async def __aexit__(self, *args):
        # Anything not committed inside the block is discarded
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
