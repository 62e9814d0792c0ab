"""
FastAPI dependencies — auth gate, shared services and database session.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from homekeep.core.exceptions import AuthInvalid, AuthMissing
from homekeep.core.security import PasswordHasher, TokenExpired, TokenMalformed, TokenService
from homekeep.schemas.token import IdentityClaim

logger = logging.getLogger(__name__)

# auto_error=False so a missing header maps to our own AuthMissing error
bearer_scheme = HTTPBearer(auto_error=False)

# Largest id the store will accept in a path parameter (INTEGER primary keys)
MAX_ID = 2_147_483_647


# ── Database session ────────────────────────────────────────────────
async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    async with request.app.state.session_factory() as session:
        try:
            yield session
        finally:
            await session.close()


# ── Services (built once by create_app) ─────────────────────────────
def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


# ── Auth gate ───────────────────────────────────────────────────────
async def get_current_identity(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    tokens: TokenService = Depends(get_token_service),
) -> IdentityClaim:
    """Verify the bearer token and return the identity it carries.

    Pure boundary check: the credential store is never consulted here, so a
    token stays valid for its lifetime even if the account changes.
    """
    if credentials is None or not credentials.credentials:
        raise AuthMissing()

    try:
        identity = tokens.verify(credentials.credentials)
    except TokenExpired:
        logger.info("Rejected expired token")
        raise AuthInvalid("Token expired") from None
    except TokenMalformed:
        logger.warning("Rejected malformed token")
        raise AuthInvalid("Invalid token") from None

    request.state.identity = identity
    return identity
