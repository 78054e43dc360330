"""Domain layer - pure business models with no external dependencies."""

from staff_admin.domain.models import (
    Employee,
    EmployeePatch,
    AccountStatus,
)
from staff_admin.domain.views import PageResult

__all__ = [
    "Employee",
    "EmployeePatch",
    "AccountStatus",
    "PageResult",
]
