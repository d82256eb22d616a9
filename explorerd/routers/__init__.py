"""API routers for explorerd.

This module contains FastAPI routers for all API endpoints.
"""

from .files import router as files_router
from .pages import router as pages_router

__all__ = [
    "files_router",
    "pages_router",
]
