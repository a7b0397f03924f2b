"""FastAPI application for the Chalkboard play timeline."""

import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from chalkboard import __version__
from chalkboard.api.routers import timeline_router
from chalkboard.core.config import get_config

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    errors = get_config().validate()
    for error in errors:
        logger.warning(f"Invalid simulation config: {error}")

    app = FastAPI(
        title="Chalkboard API",
        description="Play timeline simulation API",
        version=__version__,
    )

    # Configure CORS for the drawing front end
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:3000",
            "http://localhost:5173",  # Vite dev server
            "http://127.0.0.1:3000",
            "http://127.0.0.1:5173",
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(timeline_router, prefix="/api/v1")

    @app.get("/")
    async def root() -> dict:
        """Root endpoint - API info."""
        return {
            "name": "Chalkboard API",
            "version": __version__,
            "docs": "/docs",
        }

    @app.get("/health")
    async def health() -> dict:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


# Create app instance
app = create_app()


def run_api(host: str = "127.0.0.1", port: int = 8000, reload: bool = False) -> None:
    """Run the API server."""
    uvicorn.run(
        "chalkboard.api.main:app",
        host=host,
        port=port,
        reload=reload,
    )
