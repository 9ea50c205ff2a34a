"""
Routers package initialization.
"""
from .health import router as health_router
from .analytics import router as analytics_router
from .tracker import router as tracker_router
from .export import router as export_router

__all__ = [
    "health_router",
    "analytics_router",
    "tracker_router",
    "export_router",
]
