"""
Top‑level API router.

The routes keep the flat paths the front end already calls
(``/api/entities``, ``/api/createEntity`` and so on), so the domain
routers are included under the common ``/api`` prefix without a
version segment.
"""

from fastapi import APIRouter

from .endpoints import entities, request_logs

router = APIRouter(prefix="/api")

router.include_router(entities.router, tags=["entities"])
router.include_router(request_logs.router, tags=["requests"])
