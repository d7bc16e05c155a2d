from uuid import uuid4

import pytest

from agencyhub.app.services.passwords import hash_password
from agencyhub.app.use_cases.auth import SignInUseCase
from agencyhub.domain.entities import Credential, User


@pytest.fixture
def known_user(mock_uow):
    user = User(id=uuid4(), name="Ada", email="ada@example.com")
    mock_uow.users.get_by_email.return_value = user
    mock_uow.credentials.get_by_user_id.return_value = Credential(
        user_id=user.id, password_hash=hash_password("Analytical1")
    )
    return user


@pytest.mark.asyncio
async def test_sign_in_with_correct_password(mock_uow, known_user):
    result = await SignInUseCase(mock_uow).execute(" ADA@example.com ", "Analytical1")

    assert result.is_ok()
    assert result.value.user_id == str(known_user.id)
    assert result.value.redirect_to == "/"
    assert result.value.access_token
    mock_uow.users.get_by_email.assert_called_once_with("ada@example.com")


@pytest.mark.asyncio
async def test_invite_token_redirects_to_completion(mock_uow, known_user):
    result = await SignInUseCase(mock_uow).execute(
        "ada@example.com", "Analytical1", invite_token="abc/def"
    )

    assert result.value.redirect_to == "/invite/complete?token=abc%2Fdef"


@pytest.mark.asyncio
async def test_wrong_password_is_invalid_credentials(mock_uow, known_user):
    result = await SignInUseCase(mock_uow).execute("ada@example.com", "nope-nope")

    assert result.error.code == "INVALID_CREDENTIALS"
    assert result.error.message == "Invalid email or password."


@pytest.mark.asyncio
async def test_unknown_email_is_indistinguishable(mock_uow):
    result = await SignInUseCase(mock_uow).execute("ghost@example.com", "Analytical1")

    assert result.error.code == "INVALID_CREDENTIALS"
    assert result.error.message == "Invalid email or password."


@pytest.mark.asyncio
async def test_user_without_credential_cannot_sign_in(mock_uow):
    mock_uow.users.get_by_email.return_value = User(
        id=uuid4(), name="Grace", email="grace@example.com"
    )

    result = await SignInUseCase(mock_uow).execute("grace@example.com", "Analytical1")

    assert result.error.code == "INVALID_CREDENTIALS"


@pytest.mark.asyncio
async def test_blank_password_is_validation_error(mock_uow):
    result = await SignInUseCase(mock_uow).execute("ada@example.com", "")

    assert result.error.code == "VALIDATION_ERROR"
    assert result.error.details["password"] == ["Password is required"]
