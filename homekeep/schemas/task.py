"""Pydantic schemas for Task CRUD."""

from __future__ import annotations

import datetime as dt
from typing import ClassVar, Literal

from pydantic import Field, field_validator

from homekeep.schemas.base import CamelModel
from homekeep.schemas.owned import OwnedPatch, OwnedRead

TaskStatus = Literal["Pending", "Completed"]


def _wrap_single(v: object) -> object:
    # Older clients send a single string rather than a checklist
    if isinstance(v, str):
        return [v]
    return v


class TaskCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: list[str] = Field(default_factory=list)
    due_date: dt.date | None = None
    status: TaskStatus = "Pending"

    @field_validator("description", mode="before")
    @classmethod
    def _description(cls, v: object) -> object:
        return _wrap_single(v)


class TaskUpdate(OwnedPatch):
    NOT_NULL: ClassVar[tuple[str, ...]] = ("title", "description", "status")

    title: str | None = Field(default=None, min_length=1, max_length=200)
    description: list[str] | None = None
    due_date: dt.date | None = None
    status: TaskStatus | None = None

    @field_validator("description", mode="before")
    @classmethod
    def _description(cls, v: object) -> object:
        return _wrap_single(v)


class TaskRead(OwnedRead):
    title: str
    description: list[str]
    due_date: dt.date | None
    status: str
