"""
Pet Store Main Router

Assembles the resource routers under the /api prefix.
"""

from fastapi import APIRouter

from .routes import pets_router, types_router

router = APIRouter(prefix="/api")

router.include_router(pets_router)
router.include_router(types_router)
