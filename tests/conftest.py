"""Pytest configuration for all tests."""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from studybuddy.core.config import Settings
from studybuddy.infrastructure.auth import JWTService, hash_password
from studybuddy.infrastructure.persistence.database import Base
from studybuddy.infrastructure.persistence.models import AccountModel

TEST_SECRET = "test-secret-key-that-is-at-least-32-bytes-long"


@pytest.fixture
def settings() -> Settings:
    """Settings for a testing app with a known secret."""
    return Settings(
        environment="testing",
        secret_key=TEST_SECRET,
        database_url="sqlite+aiosqlite:///:memory:",
        log_format="console",
    )


@pytest.fixture
def secret_key() -> str:
    return TEST_SECRET


@pytest.fixture
def jwt_service(secret_key: str) -> JWTService:
    return JWTService(secret_key=secret_key)


@pytest_asyncio.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session.

    Uses an in-memory SQLite database for testing.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session_maker() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture
async def account(db_session: AsyncSession) -> AccountModel:
    """An existing account: a@x.com / secret1."""
    model = AccountModel(
        id="11111111-1111-1111-1111-111111111111",
        email="a@x.com",
        password_hash=hash_password("secret1"),
    )
    db_session.add(model)
    await db_session.commit()
    return model


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    from studybuddy.infrastructure.api.app import create_app

    return create_app(settings)


@pytest_asyncio.fixture
async def client(app: FastAPI, db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client with overridden database dependency."""
    from studybuddy.infrastructure.persistence.database import get_db_session

    app.dependency_overrides[get_db_session] = lambda: db_session

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides = {}
