"""Dependency injection for FastAPI."""

from typing import Optional

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from staff_admin.repositories.sqlalchemy.database import get_db
from staff_admin.repositories.sqlalchemy import SqlAlchemyEmployeeRepository
from staff_admin.services import EmployeeAccountService
from staff_admin.config.settings import get_settings


def get_employee_repo(db: Session = Depends(get_db)) -> SqlAlchemyEmployeeRepository:
    """Provide EmployeeRepository instance."""
    return SqlAlchemyEmployeeRepository(db)


def get_employee_service(
    employee_repo: SqlAlchemyEmployeeRepository = Depends(get_employee_repo),
) -> EmployeeAccountService:
    """Provide EmployeeAccountService instance."""
    settings = get_settings()
    return EmployeeAccountService(
        employee_repo=employee_repo,
        default_password=settings.default_password,
        timezone=settings.timezone,
    )


def get_current_actor_id(x_employee_id: int = Header(...)) -> int:
    """Id of the authenticated employee, set by the upstream auth gateway."""
    return x_employee_id


def get_optional_actor_id(x_employee_id: Optional[int] = Header(default=None)) -> Optional[int]:
    """Like get_current_actor_id, but anonymous requests are allowed."""
    return x_employee_id
