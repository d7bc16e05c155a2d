from datetime import timedelta
from urllib.parse import parse_qs, urlparse
from uuid import uuid4

import pytest

from agencyhub.app.use_cases.invitations import (
    CompleteInviteUseCase,
    ContinueInviteUseCase,
)
from agencyhub.domain.base import utcnow
from agencyhub.domain.entities import Credential, Invitation, MembershipRole

TOKEN = "c" * 64


def make_invitation(token_codec, **overrides):
    fields = dict(
        email="invitee@example.com",
        agency_id=uuid4(),
        role=MembershipRole.member,
        token_hash=token_codec.hash_token(TOKEN),
        expires_at=utcnow() + timedelta(days=7),
    )
    fields.update(overrides)
    return Invitation(**fields)


@pytest.mark.asyncio
async def test_continue_redirects_to_sign_in_with_email_and_token(mock_uow, token_codec):
    mock_uow.invitations.get_by_token_hash.return_value = make_invitation(token_codec)

    result = await ContinueInviteUseCase(mock_uow, token_codec).execute(TOKEN)

    redirect = urlparse(result.value.redirect_to)
    assert redirect.path == "/sign-in"
    query = parse_qs(redirect.query)
    assert query["email"] == ["invitee@example.com"]
    assert query["inviteToken"] == [TOKEN]


@pytest.mark.asyncio
async def test_continue_with_bad_token_returns_to_preview(mock_uow, token_codec):
    result = await ContinueInviteUseCase(mock_uow, token_codec).execute(TOKEN)

    assert result.is_ok()
    assert result.value.redirect_to == f"/invite/{TOKEN}"


@pytest.mark.asyncio
async def test_complete_without_password_goes_to_set_password(mock_uow, token_codec):
    mock_uow.invitations.get_by_token_hash.return_value = make_invitation(token_codec)

    result = await CompleteInviteUseCase(mock_uow, token_codec).execute(TOKEN, uuid4())

    assert result.value.redirect_to == "/set-password"
    mock_uow.memberships.create.assert_called_once()


@pytest.mark.asyncio
async def test_complete_with_password_goes_to_dashboard(mock_uow, token_codec):
    user_id = uuid4()
    mock_uow.invitations.get_by_token_hash.return_value = make_invitation(token_codec)
    mock_uow.credentials.get_by_user_id.return_value = Credential(
        user_id=user_id, password_hash="x" * 60
    )

    result = await CompleteInviteUseCase(mock_uow, token_codec).execute(
        TOKEN, str(user_id)
    )

    assert result.value.redirect_to == "/"
    mock_uow.credentials.get_by_user_id.assert_called_once_with(user_id)


@pytest.mark.asyncio
async def test_complete_passes_acceptance_errors_through(mock_uow, token_codec):
    result = await CompleteInviteUseCase(mock_uow, token_codec).execute(TOKEN, uuid4())

    assert result.error.code == "NOT_FOUND"
    mock_uow.credentials.get_by_user_id.assert_not_called()
