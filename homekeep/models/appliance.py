"""Appliance model — household devices and their maintenance schedule."""

from __future__ import annotations

from datetime import date

from sqlalchemy import JSON, Column, Date, String

from homekeep.db.base import Base
from homekeep.models.owned import OwnedMixin


class Appliance(OwnedMixin, Base):
    __tablename__ = "appliances"

    name: str = Column(String(200), nullable=False)  # type: ignore[assignment]
    brand: str | None = Column(String(200), nullable=True)  # type: ignore[assignment]
    date_bought: date = Column(Date, nullable=False)  # type: ignore[assignment]
    next_maintenance_date: date | None = Column(Date, nullable=True)  # type: ignore[assignment]
    # [{"date": "YYYY-MM-DD", "description": "..."}]
    maintenance_history: list = Column(JSON, nullable=False, default=list)  # type: ignore[assignment]
