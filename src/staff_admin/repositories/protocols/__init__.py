"""Repository protocol definitions (interfaces)."""

from staff_admin.repositories.protocols.employee_repo import EmployeeRepository

__all__ = [
    "EmployeeRepository",
]
