"""
Top‑level router.

Public routes live at the root, organizer routes under ``/admin``.
"""

from fastapi import APIRouter

from .endpoints import admin, visitors

router = APIRouter()

router.include_router(visitors.router, tags=["visitors"])
router.include_router(admin.router, prefix="/admin", tags=["admin"])
