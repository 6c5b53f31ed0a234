"""Shared pytest fixtures configured to use SQLite in-memory databases."""

import logging
from typing import Dict

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from notelink.config import Settings
from notelink.core.models import BaseModel
from notelink.database import get_db_session
from notelink.main import create_app
from notelink.security import TokenService

# Silence extremely verbose DEBUG logs from aiosqlite to keep test output readable
logging.getLogger("aiosqlite").setLevel(logging.WARNING)

TEST_SECRET_KEY = "test-secret-key"


@pytest.fixture
def test_settings():
    """Settings for testing: SQLite in-memory DB, no log files, no rate limiting."""
    return Settings(
        _env_file=None,
        database_url="sqlite+aiosqlite:///:memory:",
        database_create_tables=False,
        secret_key=TEST_SECRET_KEY,
        rate_limit_enabled=False,
        log_dir=None,
        debug=True,
    )


@pytest.fixture
async def test_engine(test_settings):
    """Fresh in-memory database per test."""
    engine = create_async_engine(
        test_settings.database_url,
        echo=False,
        poolclass=StaticPool,  # keep the same memory DB across connections
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.create_all)

    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def test_session(session_factory):
    """Create a database session for repository tests."""
    async with session_factory() as session:
        try:
            yield session
        finally:
            await session.rollback()


@pytest.fixture
def token_service():
    return TokenService(TEST_SECRET_KEY)


@pytest.fixture
def test_app(test_settings, session_factory):
    """Create test FastAPI app with the DB session dependency overridden."""
    app = create_app(test_settings)

    async def _override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db_session] = _override_get_db
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client(test_app):
    """Create async test client."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def register_user(async_client):
    """Sign up and log in over HTTP; resolves to the login response body."""

    async def _register(username: str, password: str = "secret1") -> Dict:
        response = await async_client.post(
            "/api/auth/signup", json={"username": username, "password": password}
        )
        assert response.status_code == 201, response.text

        response = await async_client.post(
            "/api/auth/login", json={"username": username, "password": password}
        )
        assert response.status_code == 200, response.text
        return response.json()

    return _register
