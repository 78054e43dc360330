"""View models for service outputs."""

from staff_admin.domain.views.page import PageResult

__all__ = [
    "PageResult",
]
