# API endpoints and routers

from .auth_endpoints import router as auth_router
from .favorites_endpoints import router as favorites_router
from .places_endpoints import router as places_router
from .health_endpoints import router as health_router

__all__ = [
    "auth_router",
    "favorites_router",
    "places_router",
    "health_router",
]
