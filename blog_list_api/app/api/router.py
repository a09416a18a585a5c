"""
Top‑level API router.

Aggregates the domain routers.  The application mounts this router
under ``/api``.
"""

from fastapi import APIRouter

from .endpoints import blogs

router = APIRouter()

router.include_router(blogs.router, prefix="/blogs", tags=["blogs"])
