"""
Columns shared by every per-user resource table.

``user_id`` is the owner reference; every query against an owned table
filters on it.
"""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, Integer
from sqlalchemy.orm import declared_attr


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class OwnedMixin:
    # Plain Column attributes: annotations on a mixin are not covered by
    # Base.__allow_unmapped__ and would be read as Mapped[] declarations.
    id = Column(Integer, primary_key=True, index=True)

    @declared_attr
    def user_id(cls):  # noqa: N805
        return Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    created_at = Column(DateTime(timezone=True), default=_utcnow)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow)
