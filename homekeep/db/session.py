"""
Async SQLAlchemy engine & session factory, built from a ``Settings``.

``create_app`` builds one engine per application and keeps both objects on
``app.state``; PostgreSQL (asyncpg) gets a sized connection pool.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from homekeep.core.config import Settings


def create_engine_from_settings(app_settings: Settings) -> AsyncEngine:
    engine_args: dict[str, Any] = {
        "echo": False,
        "pool_pre_ping": True,
    }

    if "postgresql" in app_settings.DATABASE_URL:
        engine_args.update(
            {
                "pool_size": 20,
                "max_overflow": 10,
                "pool_recycle": 300,
            }
        )

    return create_async_engine(app_settings.DATABASE_URL, **engine_args)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # Objects stay readable after commit; endpoints serialise them afterwards
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
