"""Inventory model — pantry, cleaning and tool stock."""

from __future__ import annotations

from datetime import date

from sqlalchemy import Column, Date, Float, String

from homekeep.db.base import Base
from homekeep.models.owned import OwnedMixin


class InventoryItem(OwnedMixin, Base):
    __tablename__ = "inventory_items"

    name: str = Column(String(200), nullable=False)  # type: ignore[assignment]
    category: str = Column(String(100), nullable=False)  # type: ignore[assignment]  # Food, Cleaning, Tools
    quantity: float = Column(Float, nullable=False)  # type: ignore[assignment]
    unit: str | None = Column(String(30), nullable=True)  # type: ignore[assignment]  # kg, pieces, liters
    purchase_date: date | None = Column(Date, nullable=True)  # type: ignore[assignment]
    expiration_date: date | None = Column(Date, nullable=True)  # type: ignore[assignment]
    location: str | None = Column(String(100), nullable=True)  # type: ignore[assignment]  # Kitchen, Bathroom
    status: str = Column(String(20), nullable=False, default="Available")  # type: ignore[assignment]
    # Available | Out of Stock
