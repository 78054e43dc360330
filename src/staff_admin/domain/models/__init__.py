"""Domain models package."""

from staff_admin.domain.models.enums import AccountStatus
from staff_admin.domain.models.employee import Employee, EmployeePatch

__all__ = [
    "AccountStatus",
    "Employee",
    "EmployeePatch",
]
