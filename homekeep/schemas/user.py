"""Pydantic schemas for registration, login and profile changes."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field, field_validator

from homekeep.schemas.base import CamelModel

_VALID_ROLES = {"admin", "member"}


def normalize_email(value: str) -> str:
    return value.strip().lower()


def _check_email(v: str) -> str:
    v = normalize_email(v)
    if "@" not in v or len(v) > 320:
        raise ValueError("Invalid email address")
    return v


def _check_password(v: str) -> str:
    # bcrypt treats NUL as a terminator, so such a password cannot be hashed
    if "\x00" in v:
        raise ValueError("Password must not contain NUL characters")
    return v


class UserCreate(CamelModel):
    full_name: str = Field(..., min_length=1, max_length=200)
    email: str
    password: str = Field(..., min_length=1, max_length=128)
    role: str = "member"
    address: str = Field(default="", max_length=500)
    work: str = Field(default="", max_length=200)
    image: str = Field(default="", max_length=500)

    @field_validator("role")
    @classmethod
    def _validate_role(cls, v: str) -> str:
        if v not in _VALID_ROLES:
            raise ValueError(f"Role must be one of: {sorted(_VALID_ROLES)}")
        return v

    @field_validator("email")
    @classmethod
    def _normalise_email(cls, v: str) -> str:
        return _check_email(v)

    @field_validator("password")
    @classmethod
    def _validate_password(cls, v: str) -> str:
        return _check_password(v)


class UserRead(CamelModel):
    id: int
    full_name: str
    email: str
    role: str
    address: str
    work: str
    image: str
    created_at: datetime | None


class UserPublic(CamelModel):
    """Redacted view returned alongside a login token."""

    id: int
    email: str
    role: str
    full_name: str


class LoginRequest(CamelModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1, max_length=128)


class UserProfileUpdate(CamelModel):
    full_name: str | None = Field(default=None, min_length=1, max_length=200)
    address: str | None = Field(default=None, max_length=500)
    work: str | None = Field(default=None, max_length=200)
    image: str | None = Field(default=None, max_length=500)


class PasswordChange(CamelModel):
    current_password: str = Field(..., min_length=1, max_length=128)
    new_password: str = Field(..., min_length=1, max_length=128)

    @field_validator("new_password")
    @classmethod
    def _validate_new_password(cls, v: str) -> str:
        return _check_password(v)


class EmailChange(CamelModel):
    new_email: str

    @field_validator("new_email")
    @classmethod
    def _normalise_email(cls, v: str) -> str:
        return _check_email(v)


class MessageResponse(CamelModel):
    message: str
