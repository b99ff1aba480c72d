"""API routers package."""

from balance_tracker.api.routers.employees import router as employees_router

__all__ = [
    "employees_router",
]
