"""
API routes module.

FastAPI routers for all HTTP endpoints.
"""

from fastapi import APIRouter

from .routers import (
    courses_router,
    favorites_router,
    files_router,
    folders_router,
    health_router,
    reviews_router,
)

api_router = APIRouter()

# Include all routers
api_router.include_router(health_router)
api_router.include_router(courses_router)
api_router.include_router(folders_router)
api_router.include_router(files_router)
api_router.include_router(reviews_router)
api_router.include_router(favorites_router)

__all__ = ["api_router"]
