"""API routers."""

from studybuddy.infrastructure.api.routes.auth_router import router as auth_router
from studybuddy.infrastructure.api.routes.home_router import router as home_router

__all__ = ["auth_router", "home_router"]
