"""
Pytest configuration and fixtures for staff account tests.

This module provides:
- In-memory SQLite database fixtures
- Repository and service fixtures
- Factory helpers for employees
- FastAPI test client with the test database
"""

import os
import uuid
from datetime import datetime
from typing import Callable, Optional

# Keep the app's own engine off disk; tests override get_db anyway.
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

import pytest
from sqlalchemy import create_engine, StaticPool
from sqlalchemy.orm import sessionmaker, Session
from fastapi.testclient import TestClient

from staff_admin.main import app
from staff_admin.repositories.sqlalchemy.database import Base, get_db
# Import ORM models to register them with Base before creating tables
from staff_admin.repositories.sqlalchemy import orm_models  # noqa: F401
from staff_admin.repositories.sqlalchemy import SqlAlchemyEmployeeRepository
from staff_admin.services import EmployeeAccountService
from staff_admin.domain.models import AccountStatus, Employee
from staff_admin.core.security import hash_password
from staff_admin.config.settings import reset_settings


DEFAULT_TEST_PASSWORD = "123456"


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_engine():
    """Create test database engine with shared in-memory SQLite."""
    # Reset settings for clean state
    reset_settings()

    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def test_session(test_engine) -> Session:
    """Create test database session."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()


# =============================================================================
# REPOSITORY / SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def employee_repo(test_session) -> SqlAlchemyEmployeeRepository:
    """Provide test EmployeeRepository."""
    return SqlAlchemyEmployeeRepository(test_session)


@pytest.fixture
def employee_service(employee_repo) -> EmployeeAccountService:
    """Provide test EmployeeAccountService."""
    return EmployeeAccountService(
        employee_repo=employee_repo,
        default_password=DEFAULT_TEST_PASSWORD,
    )


# =============================================================================
# FACTORY FIXTURES
# =============================================================================


@pytest.fixture
def employee_factory(employee_repo) -> Callable[..., Employee]:
    """Factory for inserting employees straight into the store."""

    def _create_employee(
        username: Optional[str] = None,
        password: str = "secret123",
        name: str = "Test Employee",
        status: AccountStatus = AccountStatus.ENABLED,
        id_number: Optional[str] = None,
        create_time: Optional[datetime] = None,
    ) -> Employee:
        if username is None:
            username = f"emp_{uuid.uuid4().hex[:8]}"
        return employee_repo.create(
            Employee(
                id=None,
                username=username,
                name=name,
                password=hash_password(password),
                phone="13800000000",
                sex="1",
                id_number=id_number,
                status=status,
                create_time=create_time,
                update_time=create_time,
            )
        )

    return _create_employee


@pytest.fixture
def enabled_employee(employee_factory) -> Employee:
    """An enabled account whose raw password is 'secret123'."""
    return employee_factory(username="alice", name="Alice", id_number="110101199001010011")


@pytest.fixture
def disabled_employee(employee_factory) -> Employee:
    """A disabled account whose raw password is 'secret123'."""
    return employee_factory(username="bob", name="Bob", status=AccountStatus.DISABLED)


# =============================================================================
# API TEST CLIENT FIXTURE
# =============================================================================


@pytest.fixture
def client(test_engine) -> TestClient:
    """Provide FastAPI test client with test database."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

    def override_get_db():
        session = TestSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


# =============================================================================
# HELPER FUNCTIONS (exported for use in tests)
# =============================================================================


def employee_payload(username: str, **overrides) -> dict:
    """Helper to build a POST /admin/employee body."""
    body = {
        "username": username,
        "name": username.title(),
        "phone": "13800000000",
        "sex": "1",
        "id_number": "110101199001010011",
    }
    body.update(overrides)
    return body
