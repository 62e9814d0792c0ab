"""Pydantic schemas for inventory item CRUD."""

from __future__ import annotations

import datetime as dt
from typing import ClassVar, Literal

from pydantic import Field

from homekeep.schemas.base import CamelModel
from homekeep.schemas.owned import OwnedPatch, OwnedRead

InventoryStatus = Literal["Available", "Out of Stock"]


class InventoryCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=200)
    category: str = Field(..., min_length=1, max_length=100)
    quantity: float = Field(..., allow_inf_nan=False)
    unit: str | None = Field(default=None, max_length=30)
    purchase_date: dt.date | None = None
    expiration_date: dt.date | None = None
    location: str | None = Field(default=None, max_length=100)
    status: InventoryStatus = "Available"


class InventoryUpdate(OwnedPatch):
    NOT_NULL: ClassVar[tuple[str, ...]] = ("name", "category", "quantity", "status")

    name: str | None = Field(default=None, min_length=1, max_length=200)
    category: str | None = Field(default=None, min_length=1, max_length=100)
    quantity: float | None = Field(default=None, allow_inf_nan=False)
    unit: str | None = Field(default=None, max_length=30)
    purchase_date: dt.date | None = None
    expiration_date: dt.date | None = None
    location: str | None = Field(default=None, max_length=100)
    status: InventoryStatus | None = None


class InventoryRead(OwnedRead):
    name: str
    category: str
    quantity: float
    unit: str | None
    purchase_date: dt.date | None
    expiration_date: dt.date | None
    location: str | None
    status: str
