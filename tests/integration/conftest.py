"""Fixtures wiring real components together."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from msa_auth.application import AuthenticationService
from msa_auth.persistence.memory import InMemoryUserRepository
from msa_auth.persistence.sqlalchemy import AuthBase, enable_sqlite_savepoints


@pytest.fixture
def user_repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def auth_service(user_repo, password_service, jwt_service) -> AuthenticationService:
    return AuthenticationService(
        user_repository=user_repo,
        password_service=password_service,
        jwt_service=jwt_service,
    )


@pytest.fixture
async def engine():
    """In-memory SQLite engine with the auth tables created."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
    )
    enable_sqlite_savepoints(engine)

    async with engine.begin() as conn:
        await conn.run_sync(AuthBase.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_maker(engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def session(session_maker):
    async with session_maker() as session:
        yield session
