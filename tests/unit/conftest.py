import pytest
from unittest.mock import AsyncMock, MagicMock

from agencyhub.app.services.token_codec import InviteTokenCodec


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_email = AsyncMock(return_value=None)
    uow.users.get_by_id = AsyncMock(return_value=None)
    uow.users.create = AsyncMock(side_effect=lambda user: user)
    uow.users.delete = AsyncMock()

    uow.agencies = MagicMock()
    uow.agencies.get_by_id = AsyncMock(return_value=None)
    uow.agencies.create = AsyncMock(side_effect=lambda agency: agency)
    uow.agencies.delete = AsyncMock()

    uow.memberships = MagicMock()
    uow.memberships.get_by_user_and_agency = AsyncMock(return_value=None)
    uow.memberships.get_first_by_user_with_roles = AsyncMock(return_value=None)
    uow.memberships.create = AsyncMock(side_effect=lambda membership: membership)
    uow.memberships.delete = AsyncMock()

    uow.invitations = MagicMock()
    uow.invitations.get_by_token_hash = AsyncMock(return_value=None)
    uow.invitations.create = AsyncMock(side_effect=lambda invitation: invitation)
    uow.invitations.mark_consumed = AsyncMock(return_value=1)

    uow.credentials = MagicMock()
    uow.credentials.get_by_user_id = AsyncMock(return_value=None)
    uow.credentials.create = AsyncMock(side_effect=lambda credential: credential)
    return uow


@pytest.fixture
def token_codec():
    return InviteTokenCodec(policy="hmac", secret="unit-test-secret")
