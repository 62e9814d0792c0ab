"""
Self-service account endpoints — profile, password and email changes.

A caller may only address their own id; any other id answers 404.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from homekeep.api.v1.deps import MAX_ID, get_current_identity, get_db, get_password_hasher
from homekeep.core.security import PasswordHasher
from homekeep.crud import users
from homekeep.models.user import User
from homekeep.schemas.token import IdentityClaim
from homekeep.schemas.user import (
    EmailChange,
    MessageResponse,
    PasswordChange,
    UserProfileUpdate,
    UserRead,
)

router = APIRouter(prefix="/user", tags=["users"])


@router.put("/{user_id}", response_model=UserRead)
async def update_profile(
    body: UserProfileUpdate,
    user_id: int = Path(..., ge=1, le=MAX_ID),
    identity: IdentityClaim = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
) -> User:
    return await users.update_profile(db, identity, user_id, body)


@router.put("/{user_id}/password", response_model=MessageResponse)
async def change_password(
    body: PasswordChange,
    user_id: int = Path(..., ge=1, le=MAX_ID),
    identity: IdentityClaim = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
    hasher: PasswordHasher = Depends(get_password_hasher),
) -> MessageResponse:
    """Re-verify the current password before accepting a new one."""
    await users.change_password(
        db, hasher, identity, user_id, body.current_password, body.new_password
    )
    return MessageResponse(message="Password updated successfully")


@router.put("/{user_id}/email", response_model=UserRead)
async def change_email(
    body: EmailChange,
    user_id: int = Path(..., ge=1, le=MAX_ID),
    identity: IdentityClaim = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
) -> User:
    return await users.change_email(db, identity, user_id, body.new_email)
