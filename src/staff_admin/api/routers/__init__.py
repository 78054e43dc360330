"""API routers package."""

from staff_admin.api.routers.employees import router as employees_router

__all__ = [
    "employees_router",
]
