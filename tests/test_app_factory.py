"""Tests for create_app wiring and the console entry point."""

from typing import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from jose import jwt
from sqlalchemy.ext.asyncio import AsyncSession

from homekeep import main
from homekeep.api.v1.deps import get_db
from homekeep.core.config import Settings, settings
from homekeep.core.limiter import auth_rate_limit, configure_limiter, limiter
from homekeep.schemas.token import IdentityClaim


@pytest.fixture
def custom_settings() -> Settings:
    return Settings(
        DATABASE_URL="sqlite+aiosqlite:///:memory:",
        SECRET_KEY="factory-secret",
        ACCESS_TOKEN_EXPIRE_MINUTES=5,
        BCRYPT_ROUNDS=5,
        RATE_LIMIT_ENABLED=True,
        LOGIN_RATE_LIMIT="2/minute",
        API_V1_PREFIX="/v2",
    )


@pytest.fixture
async def custom_app(custom_settings: Settings, session_factory):
    application = main.create_app(custom_settings)

    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    application.dependency_overrides[get_db] = _override_get_db
    limiter.reset()
    try:
        yield application
    finally:
        # The limiter is process-wide; hand it back to the default app's settings
        configure_limiter(settings)
        limiter.reset()
        await application.state.engine.dispose()


@pytest.mark.asyncio
async def test_services_follow_given_settings(custom_app, custom_settings: Settings):
    state = custom_app.state
    assert state.settings is custom_settings
    assert str(state.engine.url) == "sqlite+aiosqlite:///:memory:"
    assert state.session_factory.kw["bind"] is state.engine

    token = state.token_service.issue(IdentityClaim(id=3, role="member"))
    claims = jwt.decode(token, "factory-secret", algorithms=["HS256"])
    assert claims["exp"] - claims["iat"] == 5 * 60

    hashed = state.password_hasher.hash("pw123")
    assert hashed.startswith("$2b$05$")


@pytest.mark.asyncio
async def test_limiter_follows_given_settings(custom_app):
    assert limiter.enabled is True
    assert auth_rate_limit() == "2/minute"

    transport = ASGITransport(app=custom_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        statuses = []
        for _ in range(3):
            resp = await client.post(
                "/v2/login", json={"email": "nobody@x.com", "password": "pw"}
            )
            statuses.append(resp.status_code)

    assert statuses == [400, 400, 429]


def test_default_app_uses_process_settings():
    assert main.app.state.settings is settings
    assert str(main.app.state.engine.url) == settings.DATABASE_URL
    assert limiter.enabled is settings.RATE_LIMIT_ENABLED


def test_run_serves_app_with_uvicorn(monkeypatch):
    import uvicorn

    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)))

    main.run()

    assert len(calls) == 1
    args, kwargs = calls[0]
    assert args == ("homekeep.main:app",)
    assert kwargs["host"] == settings.HOST
    assert kwargs["port"] == settings.PORT
