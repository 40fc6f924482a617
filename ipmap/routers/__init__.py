"""
IP Map Navigator API Routers.

All routers are imported here for easy access.
"""

from ipmap.routers.auth import router as auth_router
from ipmap.routers.health import router as health_router

__all__ = [
    "auth_router",
    "health_router",
]
