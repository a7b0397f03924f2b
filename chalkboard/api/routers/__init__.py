"""API routers for different resource types."""

from chalkboard.api.routers.timeline import router as timeline_router

__all__ = [
    "timeline_router",
]
