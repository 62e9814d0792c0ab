"""
V1 API router aggregator — wires all endpoint modules together.
"""

from fastapi import APIRouter

from homekeep.api.v1.endpoints import auth, resources, users

api_router = APIRouter()

# Register, login, current user
api_router.include_router(auth.router)

# Profile / password / email changes
api_router.include_router(users.router)

# Per-user collections
api_router.include_router(resources.appliances_router)
api_router.include_router(resources.bills_router)
api_router.include_router(resources.inventory_router)
api_router.include_router(resources.tasks_router)
