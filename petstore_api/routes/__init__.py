"""
Pet Store Routes Package

FastAPI route handlers organized by resource type.
"""

from .pets import router as pets_router
from .types import router as types_router

__all__ = [
    "pets_router",
    "types_router",
]
