"""API routers."""

from .studio import router as studio_router

__all__ = ["studio_router"]
