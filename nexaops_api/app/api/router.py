"""
Top‑level API router.

Sales, expenses and inventory share one router implementation built
from their ``ResourceDescriptor``; notifications and the health check
have their own modules.  Everything is mounted under ``/api`` by
``create_app``.
"""

from fastapi import APIRouter

from .endpoints import health, notifications, records
from ..services.resources import RESOURCES

router = APIRouter()

for descriptor in RESOURCES:
    router.include_router(
        records.build_router(descriptor),
        prefix=f"/{descriptor.name}",
        tags=[descriptor.name],
    )
router.include_router(notifications.router, prefix="/notifications", tags=["notifications"])
router.include_router(health.router, prefix="/health", tags=["health"])
