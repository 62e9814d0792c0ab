"""
Shared test fixtures for the Homekeep test suite.

Async throughout (aiosqlite + AsyncSession). Each test gets a fresh
in-memory database; authentication is exercised for real through the API.
"""

import os
import sys
from typing import AsyncGenerator

import pytest

# Ensure project root is importable
ROOT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

# Override environment BEFORE importing application modules
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["SECRET_KEY"] = "test-secret-key-not-for-production"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["CORS_ORIGINS"] = '["*"]'

from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from homekeep.api.v1.deps import get_db
from homekeep.db.base import Base
from homekeep.main import app

API = "/api/v1"


@pytest.fixture
async def session_factory() -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    """Fresh in-memory database per test, wired into the app's get_db."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with factory() as session:
            yield session

    app.dependency_overrides[get_db] = _override_get_db
    yield factory
    app.dependency_overrides.pop(get_db, None)
    await engine.dispose()


@pytest.fixture
async def async_client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """Return a httpx AsyncClient wired to the app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Return a raw database session for direct queries in tests."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def signup(async_client: AsyncClient):
    """Register + log in a user; returns ``(user_json, auth_headers)``."""

    async def _signup(
        email: str = "jo@x.com",
        password: str = "pw123",
        full_name: str = "Jo",
        role: str = "member",
    ) -> tuple[dict, dict]:
        resp = await async_client.post(
            f"{API}/register",
            json={"fullName": full_name, "email": email, "password": password, "role": role},
        )
        assert resp.status_code == 201, resp.text
        login = await async_client.post(
            f"{API}/login", json={"email": email, "password": password}
        )
        assert login.status_code == 200, login.text
        return resp.json(), {"Authorization": f"Bearer {login.json()['token']}"}

    return _signup
