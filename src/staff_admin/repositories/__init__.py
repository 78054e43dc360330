"""Repository layer - data access abstractions and implementations."""

from staff_admin.repositories.protocols import EmployeeRepository

__all__ = [
    "EmployeeRepository",
]
