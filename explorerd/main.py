"""Main FastAPI application for explorerd.

This module creates and configures the FastAPI application that exposes
explorer_library's tree builder and content resolver over HTTP.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .config import ExplorerSettings
from .dependencies import load_settings
from .routers import files_router
from .routers import pages_router

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def create_app(settings: ExplorerSettings | None = None) -> FastAPI:
    """Create the explorerd application.

    Args:
        settings: Settings to serve with (default: loaded from config file and environment)

    Returns:
        Configured FastAPI application
    """
    if settings is None:
        settings = load_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Log what is being served on startup."""
        logger.info(f"Starting explorerd on {settings.host}:{settings.port}")
        for index, root in enumerate(settings.roots):
            ignore = ", ".join(root.ignore) or "nothing"
            logger.info(f"Root {root.label or index}: {root.path} (ignoring {ignore})")

        yield

        logger.info("Shutting down explorerd")

    app = FastAPI(
        title="explorerd",
        description="Read-only HTTP view of local directory trees",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    if settings.cors_origins:
        logger.info(f"CORS enabled for origins: {settings.cors_origins}")

    app.include_router(files_router)
    app.include_router(pages_router)

    @app.get("/")
    async def root() -> dict[str, str]:
        """Root endpoint.

        Returns:
            Service information
        """
        return {
            "name": "explorerd",
            "version": __version__,
            "description": "Read-only HTTP view of local directory trees",
            "explorer": "/explorer",
            "docs": "/docs",
        }

    return app


app = create_app()
