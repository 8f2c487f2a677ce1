"""
Top-level router of the API.

Aggregates the frontend, crop and dashboard routers.  The routes are
served at the root (no version prefix) because the bundled frontend
calls ``/crops`` and ``/dashboard`` directly.
"""

from fastapi import APIRouter

from .endpoints import crops, dashboard, frontend

router = APIRouter()

router.include_router(frontend.router)
router.include_router(crops.router, tags=["crops"])
router.include_router(dashboard.router, tags=["dashboard"])
