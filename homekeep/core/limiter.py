"""Rate limiter for the unauthenticated auth endpoints — keyed by client IP."""

from __future__ import annotations

from slowapi import Limiter
from slowapi.util import get_remote_address

from homekeep.core.config import Settings, settings

limiter = Limiter(key_func=get_remote_address, enabled=settings.RATE_LIMIT_ENABLED)

_auth_rate_limit = settings.LOGIN_RATE_LIMIT


def auth_rate_limit() -> str:
    """Current limit string for /register and /login, read on every request."""
    return _auth_rate_limit


def configure_limiter(app_settings: Settings) -> Limiter:
    global _auth_rate_limit
    limiter.enabled = app_settings.RATE_LIMIT_ENABLED
    _auth_rate_limit = app_settings.LOGIN_RATE_LIMIT
    return limiter
