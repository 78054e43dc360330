"""Pydantic schemas for API request/response."""

from staff_admin.api.schemas.employee import (
    EmployeeLoginRequest,
    EmployeeLoginResponse,
    EmployeeCreateRequest,
    EmployeeUpdateRequest,
    PasswordChangeRequest,
    EmployeeResponse,
    EmployeeSummary,
    EmployeePageResponse,
)

__all__ = [
    "EmployeeLoginRequest",
    "EmployeeLoginResponse",
    "EmployeeCreateRequest",
    "EmployeeUpdateRequest",
    "PasswordChangeRequest",
    "EmployeeResponse",
    "EmployeeSummary",
    "EmployeePageResponse",
]
