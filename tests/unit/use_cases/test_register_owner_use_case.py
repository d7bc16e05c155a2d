import pytest

from agencyhub.api.utils.jwt import verify_jwt
from agencyhub.app.services.passwords import verify_password
from agencyhub.app.use_cases.auth import RegisterOwnerUseCase
from agencyhub.domain.entities import Agency, Membership, MembershipRole, User


@pytest.mark.asyncio
async def test_register_links_password_and_issues_token(mock_uow):
    result = await RegisterOwnerUseCase(mock_uow).execute(
        "Ada Lovelace", "ada@example.com", "Analytical1", "Engines Ltd"
    )

    assert result.is_ok()
    response = result.value
    assert response.redirect_to == "/"

    credential = mock_uow.credentials.create.call_args.args[0]
    assert str(credential.user_id) == response.user_id
    assert credential.provider_id == "credential"
    assert verify_password("Analytical1", credential.password_hash)

    payload = verify_jwt(response.access_token)
    assert payload["user_id"] == response.user_id
    assert mock_uow.commit.call_count == 2


@pytest.mark.asyncio
async def test_signup_errors_skip_credential(mock_uow):
    result = await RegisterOwnerUseCase(mock_uow).execute(
        "Ada", "bad-email", "Analytical1", "Engines"
    )

    assert result.error.code == "VALIDATION_ERROR"
    mock_uow.credentials.create.assert_not_called()


@pytest.mark.asyncio
async def test_credential_failure_discards_provisioned_account(mock_uow):
    mock_uow.credentials.create.side_effect = RuntimeError("credential store down")

    async def find_membership(user_id, agency_id):
        return Membership(user_id=user_id, agency_id=agency_id, role=MembershipRole.owner)

    async def find_agency(agency_id):
        return Agency(id=agency_id, name="Engines")

    async def find_user(user_id):
        return User(id=user_id, name="Ada", email="ada@example.com")

    mock_uow.memberships.get_by_user_and_agency.side_effect = find_membership
    mock_uow.agencies.get_by_id.side_effect = find_agency
    mock_uow.users.get_by_id.side_effect = find_user

    result = await RegisterOwnerUseCase(mock_uow).execute(
        "Ada", "ada@example.com", "Analytical1", "Engines"
    )

    assert result.error.code == "SIGNUP_FAILED"
    assert result.error.message == "Unable to create account."

    created_user = mock_uow.users.create.call_args.args[0]
    deleted_user = mock_uow.users.delete.call_args.args[0]
    assert deleted_user.id == created_user.id
    mock_uow.agencies.delete.assert_called_once()
    mock_uow.memberships.delete.assert_called_once()


@pytest.mark.asyncio
async def test_failed_cleanup_is_not_raised(mock_uow):
    mock_uow.credentials.create.side_effect = RuntimeError("credential store down")
    mock_uow.memberships.get_by_user_and_agency.side_effect = RuntimeError("still down")

    result = await RegisterOwnerUseCase(mock_uow).execute(
        "Ada", "ada@example.com", "Analytical1", "Engines"
    )

    assert result.error.code == "SIGNUP_FAILED"
    mock_uow.users.delete.assert_not_called()
