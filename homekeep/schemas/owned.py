"""Base schemas shared by every per-user resource."""

from __future__ import annotations

from datetime import datetime
from typing import ClassVar

from pydantic import model_validator

from homekeep.schemas.base import CamelModel


class OwnedRead(CamelModel):
    id: int
    user_id: int
    created_at: datetime | None = None
    updated_at: datetime | None = None


class OwnedPatch(CamelModel):
    """Partial update. Columns listed in ``NOT_NULL`` may be omitted but not nulled."""

    NOT_NULL: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="after")
    def _reject_nulls(self) -> OwnedPatch:
        for name in self.NOT_NULL:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} must not be null")
        return self
