"""SQLAlchemy repository implementations."""

from staff_admin.repositories.sqlalchemy.database import (
    get_engine,
    get_session_factory,
    get_db,
    get_session,
    init_db,
    reset_database,
    Base,
)
from staff_admin.repositories.sqlalchemy.employee_repo import SqlAlchemyEmployeeRepository

__all__ = [
    "get_engine",
    "get_session_factory",
    "get_db",
    "get_session",
    "init_db",
    "reset_database",
    "Base",
    "SqlAlchemyEmployeeRepository",
]
