"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from teamauth.api.v1.dependencies.
"""

from fastapi import APIRouter

from teamauth.api.v1.endpoints import (
    communication_events,
    communications,
    health,
    permissions,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(permissions.router, prefix="/permissions", tags=["permissions"])
api_router.include_router(
    communications.router,
    prefix="/communication-template-groups",
    tags=["communications"],
)
api_router.include_router(
    communication_events.router,
    prefix="/communication-events",
    tags=["communications"],
)
