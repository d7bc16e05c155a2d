import pytest
from httpx import AsyncClient
from sqlmodel import select

from agencyhub.api.utils.jwt import verify_jwt
from agencyhub.domain.entities import Agency, Credential, Membership, User


async def count(db_session, model):
    result = await db_session.exec(select(model))
    return len(result.all())


@pytest.mark.asyncio
async def test_owner_signup(client: AsyncClient, db_session):
    """Signup creates user, agency, owner membership and password credential"""
    response = await client.post(
        "/auth/signup",
        json={
            "name": "Ada Lovelace",
            "email": "Ada@Example.com",
            "password": "Analytical1",
            "agency_name": "Engines Ltd",
        },
    )

    assert response.status_code == 201
    data = response.json()
    assert data["redirect_to"] == "/"
    assert verify_jwt(data["access_token"])["user_id"] == data["user_id"]

    user = (await db_session.exec(select(User))).one()
    assert user.email == "ada@example.com"
    assert user.name == "Ada Lovelace"
    assert user.email_verified is False
    assert str(user.id) == data["user_id"]

    agency = (await db_session.exec(select(Agency))).one()
    assert agency.name == "Engines Ltd"
    assert str(agency.id) == data["agency_id"]

    membership = (await db_session.exec(select(Membership))).one()
    assert membership.role.value == "owner"
    assert str(membership.user_id) == data["user_id"]

    credential = (await db_session.exec(select(Credential))).one()
    assert str(credential.user_id) == data["user_id"]
    assert credential.password_hash.startswith("$2b$12$")


@pytest.mark.asyncio
async def test_duplicate_email_is_conflict(client: AsyncClient, db_session):
    payload = {
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "password": "Analytical1",
        "agency_name": "Engines Ltd",
    }
    first = await client.post("/auth/signup", json=payload)
    assert first.status_code == 201

    second = await client.post(
        "/auth/signup",
        json={**payload, "email": "  Ada@Example.COM ", "agency_name": "Other"},
    )

    assert second.status_code == 409
    assert second.json()["error"]["code"] == "ACCOUNT_EXISTS"
    assert await count(db_session, User) == 1
    assert await count(db_session, Agency) == 1
    assert await count(db_session, Membership) == 1


@pytest.mark.asyncio
async def test_invalid_signup_reports_fields(client: AsyncClient, db_session):
    response = await client.post(
        "/auth/signup",
        json={"name": "", "email": "nope", "password": "short", "agency_name": " "},
    )

    assert response.status_code == 422
    error = response.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert set(error["details"]) == {"name", "email", "password", "agency_name"}
    assert await count(db_session, User) == 0


@pytest.mark.asyncio
async def test_password_over_72_bytes_is_validation_error(client: AsyncClient, db_session):
    response = await client.post(
        "/auth/signup",
        json={
            "name": "Ada Lovelace",
            "email": "ada@example.com",
            "password": "x" * 80,
            "agency_name": "Engines Ltd",
        },
    )

    assert response.status_code == 422
    error = response.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["details"] == {"password": ["Password must be at most 72 bytes"]}
    assert await count(db_session, User) == 0
    assert await count(db_session, Agency) == 0
