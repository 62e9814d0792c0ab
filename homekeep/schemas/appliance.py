"""Pydantic schemas for Appliance CRUD."""

from __future__ import annotations

import datetime as dt
from typing import Any, ClassVar

from pydantic import Field, field_serializer

from homekeep.schemas.base import CamelModel
from homekeep.schemas.owned import OwnedPatch, OwnedRead


class MaintenanceEntry(CamelModel):
    date: dt.date | None = None
    description: str | None = Field(default=None, max_length=500)


def _history_to_json(entries: list[MaintenanceEntry] | None) -> list[dict[str, Any]] | None:
    # Stored in a JSON column, so dates must already be strings
    if entries is None:
        return None
    return [e.model_dump(mode="json") for e in entries]


class ApplianceCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=200)
    brand: str | None = Field(default=None, max_length=200)
    date_bought: dt.date
    next_maintenance_date: dt.date | None = None
    maintenance_history: list[MaintenanceEntry] = Field(default_factory=list)

    @field_serializer("maintenance_history")
    def _dump_history(self, v: list[MaintenanceEntry]) -> list[dict[str, Any]] | None:
        return _history_to_json(v)


class ApplianceUpdate(OwnedPatch):
    NOT_NULL: ClassVar[tuple[str, ...]] = ("name", "date_bought", "maintenance_history")

    name: str | None = Field(default=None, min_length=1, max_length=200)
    brand: str | None = Field(default=None, max_length=200)
    date_bought: dt.date | None = None
    next_maintenance_date: dt.date | None = None
    maintenance_history: list[MaintenanceEntry] | None = None

    @field_serializer("maintenance_history")
    def _dump_history(self, v: list[MaintenanceEntry] | None) -> list[dict[str, Any]] | None:
        return _history_to_json(v)


class ApplianceRead(OwnedRead):
    name: str
    brand: str | None
    date_bought: dt.date
    next_maintenance_date: dt.date | None
    maintenance_history: list[MaintenanceEntry]
