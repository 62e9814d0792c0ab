"""
Per-user resource endpoints — appliances, bills, inventory and tasks.

All four routers come from ``build_owned_router``; the owner is always the
authenticated identity, never a field of the request body.
"""

from fastapi import APIRouter, Depends, Path
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from homekeep.api.v1.deps import MAX_ID, get_current_identity, get_db
from homekeep.crud import owned
from homekeep.crud.owned import OwnedCollection
from homekeep.schemas.appliance import ApplianceCreate, ApplianceRead, ApplianceUpdate
from homekeep.schemas.bill import BillCreate, BillRead, BillUpdate
from homekeep.schemas.inventory import InventoryCreate, InventoryRead, InventoryUpdate
from homekeep.schemas.task import TaskCreate, TaskRead, TaskUpdate
from homekeep.schemas.token import IdentityClaim

# Handler annotations are built from the arguments below, so this module
# must not postpone annotation evaluation.


def build_owned_router(
    collection: OwnedCollection,
    prefix: str,
    create_schema: type[BaseModel],
    update_schema: type[BaseModel],
    read_schema: type[BaseModel],
) -> APIRouter:
    router = APIRouter(prefix=prefix, tags=[prefix.strip("/")])

    @router.post("", response_model=read_schema, status_code=201)
    async def create_resource(
        body: create_schema,  # type: ignore[valid-type]
        identity: IdentityClaim = Depends(get_current_identity),
        db: AsyncSession = Depends(get_db),
    ):
        return await collection.create(db, identity, body.model_dump())

    @router.get("", response_model=list[read_schema])  # type: ignore[valid-type]
    async def list_resources(
        identity: IdentityClaim = Depends(get_current_identity),
        db: AsyncSession = Depends(get_db),
    ):
        return await collection.list(db, identity)

    @router.put("/{resource_id}", response_model=read_schema)
    async def update_resource(
        body: update_schema,  # type: ignore[valid-type]
        resource_id: int = Path(..., ge=1, le=MAX_ID),
        identity: IdentityClaim = Depends(get_current_identity),
        db: AsyncSession = Depends(get_db),
    ):
        return await collection.update(
            db, identity, resource_id, body.model_dump(exclude_unset=True)
        )

    @router.delete("/{resource_id}", response_model=read_schema)
    async def delete_resource(
        resource_id: int = Path(..., ge=1, le=MAX_ID),
        identity: IdentityClaim = Depends(get_current_identity),
        db: AsyncSession = Depends(get_db),
    ):
        return await collection.delete(db, identity, resource_id)

    return router


appliances_router = build_owned_router(
    owned.appliances, "/appliances", ApplianceCreate, ApplianceUpdate, ApplianceRead
)
bills_router = build_owned_router(owned.bills, "/bills", BillCreate, BillUpdate, BillRead)
inventory_router = build_owned_router(
    owned.inventory, "/inventory", InventoryCreate, InventoryUpdate, InventoryRead
)
tasks_router = build_owned_router(owned.tasks, "/tasks", TaskCreate, TaskUpdate, TaskRead)
