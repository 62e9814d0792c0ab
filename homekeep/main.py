"""
Homekeep — Application entry point.

This is the **only** file that assembles the app.  All business logic
lives in the `api/`, `crud/`, `models/`, and `core/` packages.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from sqlalchemy import select

from homekeep.api.v1.api import api_router
from homekeep.core.config import Settings, settings
from homekeep.core.exceptions import register_exception_handlers
from homekeep.core.limiter import configure_limiter
from homekeep.core.security import PasswordHasher, TokenService
from homekeep.db.base import Base
from homekeep.db.session import create_engine_from_settings, create_session_factory

# Ensure all models are imported so metadata.create_all can see them
from homekeep.models.appliance import Appliance  # noqa: F401
from homekeep.models.bill import Bill  # noqa: F401
from homekeep.models.inventory import InventoryItem  # noqa: F401
from homekeep.models.task import Task  # noqa: F401
from homekeep.models.user import User

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)


# ── Lifespan ────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(app: FastAPI):
    engine = app.state.engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables initialised")

    app_settings: Settings = app.state.settings
    if app_settings.FIRST_ADMIN_PASSWORD:
        await _seed_admin(app, app_settings)

    logger.info("🚀 %s v%s started", app_settings.PROJECT_NAME, app_settings.VERSION)
    yield
    await engine.dispose()
    logger.info("Shutdown complete")


async def _seed_admin(app: FastAPI, app_settings: Settings) -> None:
    email = app_settings.FIRST_ADMIN_EMAIL.strip().lower()
    async with app.state.session_factory() as session:
        result = await session.execute(select(User).where(User.email == email))
        if result.scalar_one_or_none() is not None:
            return
        admin = User(
            email=email,
            hashed_password=app.state.password_hasher.hash(app_settings.FIRST_ADMIN_PASSWORD),
            full_name="Household Administrator",
            role="admin",
        )
        session.add(admin)
        await session.commit()
        logger.info("Default admin created: %s (password: <redacted>)", email)


# ── App factory ─────────────────────────────────────────────────────
def create_app(app_settings: Settings | None = None) -> FastAPI:
    app_settings = app_settings or settings

    application = FastAPI(
        title=app_settings.PROJECT_NAME,
        description="Household management API",
        version=app_settings.VERSION,
        openapi_url=f"{app_settings.API_V1_PREFIX}/openapi.json",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # Read-only for the life of the process
    application.state.settings = app_settings
    application.state.token_service = TokenService(
        secret=app_settings.SECRET_KEY,
        algorithm=app_settings.ALGORITHM,
        expire_minutes=app_settings.ACCESS_TOKEN_EXPIRE_MINUTES,
    )
    application.state.password_hasher = PasswordHasher(rounds=app_settings.BCRYPT_ROUNDS)
    application.state.engine = create_engine_from_settings(app_settings)
    application.state.session_factory = create_session_factory(application.state.engine)

    # Rate limiting on register / login
    application.state.limiter = configure_limiter(app_settings)
    application.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)  # type: ignore[arg-type]

    # CORS
    application.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["*"],
    )

    # Global exception handlers (prevent stack-trace leakage)
    register_exception_handlers(application)

    application.include_router(api_router, prefix=app_settings.API_V1_PREFIX)

    return application


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    uvicorn.run(
        "homekeep.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
        reload=False,
    )


if __name__ == "__main__":
    run()
