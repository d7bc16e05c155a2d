import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from agencyhub.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from agencyhub.app.services.token_codec import InviteTokenCodec
from agencyhub.depends import get_unit_of_work


class TestConfig(ApplicationConfig):
    APP_URL = "http://localhost:3000"
    INVITE_TOKEN_HASH_POLICY = "hmac"
    INVITE_TOKEN_SECRET = "integration-test-secret"
    INVITE_EXPIRATION_DAYS = 7


@pytest_asyncio.fixture
def token_codec():
    return InviteTokenCodec.from_config(TestConfig)


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def client(db_session):
    from agencyhub.api.app import create_app

    app = create_app(TestConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
