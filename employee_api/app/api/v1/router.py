"""
Top‑level router for version 1 of the API.

This router aggregates the domain‑specific routers.  When new domains
are introduced, update this file to include their routers.
"""

from fastapi import APIRouter

from .endpoints import employees, health


router = APIRouter()

router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(employees.router, prefix="/employees", tags=["employees"])
