"""
Auth endpoints — registration, login and the current user's profile.
"""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from homekeep.api.v1.deps import (
    get_current_identity,
    get_db,
    get_password_hasher,
    get_token_service,
)
from homekeep.core.limiter import auth_rate_limit, limiter
from homekeep.core.security import PasswordHasher, TokenService
from homekeep.crud import users
from homekeep.models.user import User
from homekeep.schemas.token import IdentityClaim, LoginResponse
from homekeep.schemas.user import LoginRequest, UserCreate, UserPublic, UserRead

# No `from __future__ import annotations` here: slowapi wraps the handlers
# and FastAPI must see real annotation objects.

router = APIRouter(tags=["auth"])


@router.post("/register", response_model=UserRead, status_code=201)
@limiter.limit(auth_rate_limit)
async def register(
    request: Request,
    body: UserCreate,
    db: AsyncSession = Depends(get_db),
    hasher: PasswordHasher = Depends(get_password_hasher),
) -> User:
    """Create an account. Emails are unique regardless of case."""
    return await users.register_user(db, hasher, body)


@router.post("/login", response_model=LoginResponse)
@limiter.limit(auth_rate_limit)
async def login(
    request: Request,
    body: LoginRequest,
    db: AsyncSession = Depends(get_db),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenService = Depends(get_token_service),
) -> LoginResponse:
    """Exchange email + password for a bearer token."""
    token, user = await users.authenticate(db, hasher, tokens, body.email, body.password)
    return LoginResponse(token=token, user=UserPublic.model_validate(user))


@router.get("/me", response_model=UserRead)
async def read_current_user(
    identity: IdentityClaim = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
) -> User:
    """Return profile of the currently authenticated user."""
    return await users.get_user(db, identity)
