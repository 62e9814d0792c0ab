"""Pydantic schemas for JWT tokens and the login exchange."""

from __future__ import annotations

from pydantic import BaseModel

from homekeep.schemas.base import CamelModel
from homekeep.schemas.user import UserPublic


class IdentityClaim(BaseModel):
    """Decoded token payload; lives for one request only."""

    id: int
    role: str


class LoginResponse(CamelModel):
    message: str = "Login successful"
    token: str
    token_type: str = "bearer"
    user: UserPublic
