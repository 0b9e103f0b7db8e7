"""Shared pytest fixtures configured to use SQLite in-memory databases."""

import logging
import os

# keep the test run from writing rotating log files; must precede app imports
os.environ.setdefault("LOG_TO_FILE", "false")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from notepulse.config import Settings, get_settings
from notepulse.core.models import Base
from notepulse.core.schemas.auth import AuthUser
from notepulse.database import enable_sqlite_foreign_keys, get_db_session
from notepulse.main import app
from notepulse.security import create_access_token

# Silence extremely verbose DEBUG logs from aiosqlite to keep test output readable
logging.getLogger("aiosqlite").setLevel(logging.WARNING)


@pytest.fixture
def test_settings():
    """Settings for tests: in-memory DB, fixed secret."""
    return Settings(
        database_url="sqlite+aiosqlite:///:memory:",
        secret_key="test-secret-key",
        debug=True,
        log_to_file=False,
    )


@pytest.fixture
async def test_engine(test_settings):
    """Fresh in-memory SQLite engine per test with FK enforcement on."""
    engine = create_async_engine(
        test_settings.database_url,
        poolclass=StaticPool,  # keep the same memory DB across connections
        connect_args={"check_same_thread": False},
    )
    enable_sqlite_foreign_keys(engine)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
async def test_session(test_engine):
    """Session bound to the per-test engine."""
    session_maker = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_maker() as session:
        try:
            yield session
        finally:
            await session.rollback()


@pytest.fixture
def test_app(test_session, test_settings):
    """App with DB session and settings overridden."""

    async def _override_get_db():
        yield test_session

    app.dependency_overrides[get_db_session] = _override_get_db
    app.dependency_overrides[get_settings] = lambda: test_settings
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client(test_app):
    """Async HTTP client talking to the app in-process."""
    async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
def user_claims():
    return {
        "id": "google-oauth2|1001",
        "email": "ada@example.com",
        "name": "Ada Lovelace",
        "picture": "https://example.com/ada.png",
        "email_verified": True,
        "provider": "google",
    }


@pytest.fixture
def other_user_claims():
    return {"id": "google-oauth2|2002", "email": "bob@example.com", "name": "Bob"}


@pytest.fixture
def test_user(user_claims):
    return AuthUser.model_validate(user_claims)


@pytest.fixture
def other_user(other_user_claims):
    return AuthUser.model_validate(other_user_claims)


@pytest.fixture
def access_token(user_claims, test_settings):
    return create_access_token(user_claims, test_settings)


@pytest.fixture
def auth_headers(access_token):
    """Authorization header with a valid JWT."""
    return {"Authorization": f"Bearer {access_token}"}


@pytest.fixture
def other_auth_headers(other_user_claims, test_settings):
    return {"Authorization": f"Bearer {create_access_token(other_user_claims, test_settings)}"}


class FakeRedis:
    """In-memory stand-in for RedisClient's denylist methods."""

    def __init__(self):
        self.revoked = {}

    async def revoke_token(self, token_jti, expire):
        if expire <= 0:
            return False
        self.revoked[token_jti] = expire
        return True

    async def is_token_revoked(self, token_jti):
        return token_jti in self.revoked


@pytest.fixture
def fake_redis(monkeypatch):
    """Patch the Redis client used by the auth gate and the logout route."""
    from notepulse.api import auth as auth_api
    from notepulse.middleware import auth as auth_middleware

    fake = FakeRedis()
    monkeypatch.setattr(auth_middleware, "get_redis_client", lambda: fake)
    monkeypatch.setattr(auth_api, "get_redis_client", lambda: fake)
    return fake
