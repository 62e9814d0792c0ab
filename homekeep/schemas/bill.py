"""Pydantic schemas for Bill CRUD."""

from __future__ import annotations

import datetime as dt
from typing import ClassVar, Literal

from pydantic import Field

from homekeep.schemas.base import CamelModel
from homekeep.schemas.owned import OwnedPatch, OwnedRead

BillStatus = Literal["Pending", "Paid"]


class BillCreate(CamelModel):
    bill_type: str = Field(..., min_length=1, max_length=100)
    amount: float = Field(..., allow_inf_nan=False)
    due_date: dt.date
    status: BillStatus = "Pending"


class BillUpdate(OwnedPatch):
    NOT_NULL: ClassVar[tuple[str, ...]] = ("bill_type", "amount", "due_date", "status")

    bill_type: str | None = Field(default=None, min_length=1, max_length=100)
    amount: float | None = Field(default=None, allow_inf_nan=False)
    due_date: dt.date | None = None
    status: BillStatus | None = None


class BillRead(OwnedRead):
    bill_type: str
    amount: float
    due_date: dt.date
    status: str
