"""
Generic per-user collection — one implementation behind the appliance,
bill, inventory and task routes.

Ownership is part of every query predicate. Update and delete lock the
row with ``WHERE id = :id AND user_id = :owner FOR UPDATE`` and mutate it
in the same transaction, so a foreign row and a missing row produce the
same ``NotFoundOrForbidden``.
"""

from __future__ import annotations

import logging
from typing import Any, Generic, TypeVar

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from homekeep.core.exceptions import NotFoundOrForbidden
from homekeep.models.appliance import Appliance
from homekeep.models.bill import Bill
from homekeep.models.inventory import InventoryItem
from homekeep.models.task import Task
from homekeep.schemas.token import IdentityClaim

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")

# Never taken from client input
_PROTECTED_FIELDS = frozenset({"id", "user_id", "created_at", "updated_at"})


class OwnedCollection(Generic[ModelT]):
    def __init__(self, model: type[ModelT], label: str) -> None:
        self.model = model
        self.label = label

    def _owned_by(self, identity: IdentityClaim) -> Select:
        return select(self.model).where(self.model.user_id == identity.id)  # type: ignore[attr-defined]

    async def _lock_owned(
        self, db: AsyncSession, identity: IdentityClaim, resource_id: int
    ) -> ModelT:
        stmt = (
            self._owned_by(identity)
            .where(self.model.id == resource_id)  # type: ignore[attr-defined]
            .with_for_update()
        )
        obj = (await db.execute(stmt)).scalar_one_or_none()
        if obj is None:
            logger.warning(
                "%s %d not found or not owned by user %d", self.label, resource_id, identity.id
            )
            raise NotFoundOrForbidden(f"{self.label} not found or not authorized")
        return obj

    async def create(
        self, db: AsyncSession, identity: IdentityClaim, payload: dict[str, Any]
    ) -> ModelT:
        fields = {k: v for k, v in payload.items() if k not in _PROTECTED_FIELDS}
        obj = self.model(**fields, user_id=identity.id)
        db.add(obj)
        await db.commit()
        await db.refresh(obj)
        logger.info("Created %s %d for user %d", self.label, obj.id, identity.id)  # type: ignore[attr-defined]
        return obj

    async def list(self, db: AsyncSession, identity: IdentityClaim) -> list[ModelT]:
        stmt = self._owned_by(identity).order_by(self.model.id)  # type: ignore[attr-defined]
        result = await db.execute(stmt)
        return list(result.scalars().all())

    async def update(
        self,
        db: AsyncSession,
        identity: IdentityClaim,
        resource_id: int,
        patch: dict[str, Any],
    ) -> ModelT:
        obj = await self._lock_owned(db, identity, resource_id)
        for field, value in patch.items():
            if field not in _PROTECTED_FIELDS:
                setattr(obj, field, value)
        await db.commit()
        await db.refresh(obj)
        logger.info("Updated %s %d", self.label, resource_id)
        return obj

    async def delete(
        self, db: AsyncSession, identity: IdentityClaim, resource_id: int
    ) -> ModelT:
        obj = await self._lock_owned(db, identity, resource_id)
        await db.delete(obj)
        await db.commit()
        logger.info("Deleted %s %d", self.label, resource_id)
        return obj


appliances = OwnedCollection(Appliance, "Appliance")
bills = OwnedCollection(Bill, "Bill")
inventory = OwnedCollection(InventoryItem, "Inventory item")
tasks = OwnedCollection(Task, "Task")
