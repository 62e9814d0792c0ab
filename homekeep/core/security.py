"""
JWT token issuance / verification and password hashing (bcrypt).

Both services are built once by the app factory from ``Settings`` and
shared read-only across requests via ``app.state``.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext

from homekeep.core.exceptions import ValidationFailed
from homekeep.schemas.token import IdentityClaim


class TokenError(Exception):
    """Base class for token verification failures."""


class TokenExpired(TokenError):
    pass


class TokenMalformed(TokenError):
    pass


# ── Passwords ───────────────────────────────────────────────────────
class PasswordHasher:
    def __init__(self, rounds: int = 12) -> None:
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    def hash(self, plain: str) -> str:
        try:
            return self._context.hash(plain)
        except ValueError:
            # passlib refuses passwords bcrypt cannot represent (e.g. NUL bytes)
            raise ValidationFailed("Password contains unsupported characters") from None

    def verify(self, plain: str, hashed: str) -> bool:
        try:
            return self._context.verify(plain, hashed)
        except ValueError:
            # Unrecognised or corrupt hash in the store.
            return False


# ── JWT tokens ──────────────────────────────────────────────────────
class TokenService:
    """Issues and verifies signed, time-limited identity tokens."""

    def __init__(self, secret: str, algorithm: str = "HS256", expire_minutes: int = 60) -> None:
        if not secret:
            raise ValueError("Token signing secret must be non-empty")
        self._secret = secret
        self._algorithm = algorithm
        self._default_ttl = timedelta(minutes=expire_minutes)

    def issue(self, identity: IdentityClaim, ttl: timedelta | None = None) -> str:
        now = datetime.now(timezone.utc)
        payload: dict[str, Any] = {
            "sub": str(identity.id),
            "role": identity.role,
            "iat": now,
            "exp": now + (ttl if ttl is not None else self._default_ttl),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> IdentityClaim:
        """Return the embedded identity.

        Raises ``TokenExpired`` past ``exp`` and ``TokenMalformed`` for a bad
        signature, bad structure or an incomplete payload.
        """
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except ExpiredSignatureError as exc:
            raise TokenExpired("Token expired") from exc
        except JWTError as exc:
            raise TokenMalformed("Invalid token") from exc

        sub = payload.get("sub")
        role = payload.get("role")
        if not sub or not isinstance(role, str):
            raise TokenMalformed("Invalid token payload")
        try:
            user_id = int(sub)
        except (TypeError, ValueError) as exc:
            raise TokenMalformed("Invalid token payload") from exc
        return IdentityClaim(id=user_id, role=role)
