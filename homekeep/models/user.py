"""
User model — credentials and profile for one household member.
"""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, String

from homekeep.db.base import Base


class User(Base):
    __tablename__ = "users"

    id: int = Column(Integer, primary_key=True, index=True)  # type: ignore[assignment]
    full_name: str = Column(String(200), nullable=False)  # type: ignore[assignment]
    # Stored lower-cased so equality lookups are case-insensitive
    email: str = Column(String(320), unique=True, nullable=False, index=True)  # type: ignore[assignment]
    hashed_password: str = Column(String(128), nullable=False)  # type: ignore[assignment]
    role: str = Column(  # type: ignore[assignment]
        String(20),
        nullable=False,
        default="member",
        server_default="member",
    )  # admin | member
    address: str = Column(String(500), nullable=False, default="", server_default="")  # type: ignore[assignment]
    work: str = Column(String(200), nullable=False, default="", server_default="")  # type: ignore[assignment]
    image: str = Column(String(500), nullable=False, default="", server_default="")  # type: ignore[assignment]
    created_at: datetime = Column(  # type: ignore[assignment]
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
    )
