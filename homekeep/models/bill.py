"""Bill model — recurring household payments."""

from __future__ import annotations

from datetime import date

from sqlalchemy import Column, Date, Float, String

from homekeep.db.base import Base
from homekeep.models.owned import OwnedMixin


class Bill(OwnedMixin, Base):
    __tablename__ = "bills"

    bill_type: str = Column(String(100), nullable=False)  # type: ignore[assignment]
    amount: float = Column(Float, nullable=False)  # type: ignore[assignment]
    due_date: date = Column(Date, nullable=False)  # type: ignore[assignment]
    status: str = Column(String(20), nullable=False, default="Pending")  # type: ignore[assignment]
    # Pending | Paid
