"""API routers."""

from .courses import router as courses_router
from .favorites import router as favorites_router
from .files import router as files_router
from .folders import router as folders_router
from .health import router as health_router
from .reviews import router as reviews_router

__all__ = [
    "courses_router",
    "favorites_router",
    "files_router",
    "folders_router",
    "health_router",
    "reviews_router",
]
