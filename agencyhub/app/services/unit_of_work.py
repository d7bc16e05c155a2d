from abc import ABC, abstractmethod

from agencyhub.app.repositories.agency_repository import IAgencyRepository
from agencyhub.app.repositories.credential_repository import ICredentialRepository
from agencyhub.app.repositories.invitation_repository import IInvitationRepository
from agencyhub.app.repositories.membership_repository import IMembershipRepository
from agencyhub.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    agencies: IAgencyRepository
    memberships: IMembershipRepository
    invitations: IInvitationRepository
    credentials: ICredentialRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
