"""Service layer - business logic orchestration."""

from staff_admin.services.employee_service import (
    EmployeeAccountService,
    EmployeeCreate,
    EmployeeUpdate,
    PasswordChange,
)

__all__ = [
    "EmployeeAccountService",
    "EmployeeCreate",
    "EmployeeUpdate",
    "PasswordChange",
]
