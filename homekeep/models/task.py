"""Task model — household chores with a checklist description."""

from __future__ import annotations

from datetime import date

from sqlalchemy import JSON, Column, Date, String

from homekeep.db.base import Base
from homekeep.models.owned import OwnedMixin


class Task(OwnedMixin, Base):
    __tablename__ = "tasks"

    title: str = Column(String(200), nullable=False)  # type: ignore[assignment]
    description: list = Column(JSON, nullable=False, default=list)  # type: ignore[assignment]
    due_date: date | None = Column(Date, nullable=True)  # type: ignore[assignment]
    status: str = Column(String(20), nullable=False, default="Pending")  # type: ignore[assignment]
    # Pending | Completed
