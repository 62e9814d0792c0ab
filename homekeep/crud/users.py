"""
Credential store — registration, login and self-service profile changes.

Emails are compared in their normalised (stripped, lower-cased) form, which
is also how they are stored, so the unique index enforces case-insensitive
uniqueness.
"""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from homekeep.core.exceptions import Conflict, InvalidCredential, NotFound
from homekeep.core.security import PasswordHasher, TokenService
from homekeep.models.user import User
from homekeep.schemas.token import IdentityClaim
from homekeep.schemas.user import UserCreate, UserProfileUpdate, normalize_email

logger = logging.getLogger(__name__)


async def _get_by_email(db: AsyncSession, email: str) -> User | None:
    result = await db.execute(select(User).where(User.email == normalize_email(email)))
    return result.scalar_one_or_none()


async def _lock_self(db: AsyncSession, identity: IdentityClaim, user_id: int) -> User:
    """Load the caller's own record; any other id looks like a missing user."""
    if user_id != identity.id:
        logger.warning("User %d attempted to modify user %d", identity.id, user_id)
        raise NotFound("User not found")
    result = await db.execute(select(User).where(User.id == user_id).with_for_update())
    user = result.scalar_one_or_none()
    if user is None:
        raise NotFound("User not found")
    return user


async def register_user(db: AsyncSession, hasher: PasswordHasher, body: UserCreate) -> User:
    if await _get_by_email(db, body.email) is not None:
        logger.warning("Registration rejected: email already registered")
        raise Conflict("User already exists", status_code=400)

    user = User(
        full_name=body.full_name,
        email=normalize_email(body.email),
        hashed_password=hasher.hash(body.password),
        role=body.role,
        address=body.address,
        work=body.work,
        image=body.image,
    )
    db.add(user)
    try:
        await db.commit()
    except IntegrityError:
        # Concurrent registration won the unique index
        await db.rollback()
        raise Conflict("User already exists", status_code=400) from None
    await db.refresh(user)
    logger.info("Registered user %d (role %s)", user.id, user.role)
    return user


async def authenticate(
    db: AsyncSession,
    hasher: PasswordHasher,
    tokens: TokenService,
    email: str,
    password: str,
) -> tuple[str, User]:
    """Return ``(token, user)`` for valid credentials."""
    user = await _get_by_email(db, email)
    if user is None:
        logger.warning("Login failed: unknown email")
        raise NotFound("User not found", status_code=400)
    if not hasher.verify(password, user.hashed_password):
        logger.warning("Login failed: invalid password for user %d", user.id)
        raise InvalidCredential("Invalid password")

    token = tokens.issue(IdentityClaim(id=user.id, role=user.role))
    logger.info("Login successful for user %d", user.id)
    return token, user


async def get_user(db: AsyncSession, identity: IdentityClaim) -> User:
    user = await db.get(User, identity.id)
    if user is None:
        raise NotFound("User not found")
    return user


async def update_profile(
    db: AsyncSession, identity: IdentityClaim, user_id: int, body: UserProfileUpdate
) -> User:
    user = await _lock_self(db, identity, user_id)
    for field, value in body.model_dump(exclude_unset=True).items():
        if value is not None:
            setattr(user, field, value)
    await db.commit()
    await db.refresh(user)
    logger.info("Updated profile of user %d", user.id)
    return user


async def change_password(
    db: AsyncSession,
    hasher: PasswordHasher,
    identity: IdentityClaim,
    user_id: int,
    current_password: str,
    new_password: str,
) -> None:
    user = await _lock_self(db, identity, user_id)
    if not hasher.verify(current_password, user.hashed_password):
        logger.warning("Password change rejected for user %d: wrong current password", identity.id)
        raise InvalidCredential("Current password is incorrect")
    user.hashed_password = hasher.hash(new_password)
    await db.commit()
    logger.info("Password updated for user %d", user.id)


async def change_email(
    db: AsyncSession, identity: IdentityClaim, user_id: int, new_email: str
) -> User:
    user = await _lock_self(db, identity, user_id)
    new_email = normalize_email(new_email)
    existing = await _get_by_email(db, new_email)
    if existing is not None and existing.id != user.id:
        logger.warning("Email change rejected for user %d: email in use", identity.id)
        raise Conflict("Email already in use")
    user.email = new_email
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise Conflict("Email already in use") from None
    await db.refresh(user)
    logger.info("Email updated for user %d", user.id)
    return user
