"""
Integration tests for the SQLAlchemy employee repository with SQLite.

Tests cover:
- Insert and lookups by id, username and national-ID number
- Unique username constraint
- Partial updates through EmployeePatch
- Paged queries with filters
"""

from datetime import datetime

import pytest
from sqlalchemy.exc import IntegrityError

from staff_admin.repositories.sqlalchemy import SqlAlchemyEmployeeRepository
from staff_admin.domain.models import AccountStatus, Employee, EmployeePatch


def make_employee(username: str, **overrides) -> Employee:
    fields = {
        "id": None,
        "username": username,
        "name": username.title(),
        "password": "e10adc3949ba59abbe56e057f20f883e",
        "phone": "13800000000",
        "sex": "1",
        "id_number": None,
        "status": AccountStatus.ENABLED,
    }
    fields.update(overrides)
    return Employee(**fields)


# =============================================================================
# EMPLOYEE REPOSITORY TESTS
# =============================================================================


class TestEmployeeRepository:
    """Tests for SqlAlchemyEmployeeRepository."""

    def test_create_assigns_id(self, employee_repo: SqlAlchemyEmployeeRepository):
        """
        GIVEN an in-memory SQLite database
        WHEN I create an employee
        THEN the store assigns an id and the row can be read back
        """
        created = employee_repo.create(make_employee("alice"))

        assert created.id is not None
        retrieved = employee_repo.get_by_id(created.id)
        assert retrieved is not None
        assert retrieved.username == "alice"
        assert retrieved.status == AccountStatus.ENABLED

    def test_lookups_return_none_when_absent(self, employee_repo: SqlAlchemyEmployeeRepository):
        assert employee_repo.get_by_id(42) is None
        assert employee_repo.get_by_username("ghost") is None
        assert employee_repo.get_by_id_number("110101199001010011") is None

    def test_get_by_username_and_id_number(self, employee_repo: SqlAlchemyEmployeeRepository):
        created = employee_repo.create(make_employee("alice", id_number="110101199001010011"))

        assert employee_repo.get_by_username("alice").id == created.id
        assert employee_repo.get_by_id_number("110101199001010011").id == created.id

    def test_duplicate_username_raises_integrity_error(
        self,
        employee_repo: SqlAlchemyEmployeeRepository,
    ):
        employee_repo.create(make_employee("alice"))

        with pytest.raises(IntegrityError):
            employee_repo.create(make_employee("alice"))

        # Session is usable after the rollback
        assert employee_repo.get_by_username("alice") is not None

    def test_update_applies_only_patch_fields(self, employee_repo: SqlAlchemyEmployeeRepository):
        created = employee_repo.create(make_employee("alice", name="Alice"))

        updated = employee_repo.update(
            created.id,
            EmployeePatch(status=AccountStatus.DISABLED, update_user=9),
        )

        assert updated is True
        stored = employee_repo.get_by_id(created.id)
        assert stored.status == AccountStatus.DISABLED
        assert stored.update_user == 9
        assert stored.name == "Alice"
        assert stored.password == created.password

    def test_update_writes_null_for_cleared_fields(
        self,
        employee_repo: SqlAlchemyEmployeeRepository,
    ):
        created = employee_repo.create(make_employee("alice", avatar="a.png"))

        employee_repo.update(created.id, EmployeePatch(cleared=frozenset({"avatar"})))

        stored = employee_repo.get_by_id(created.id)
        assert stored.avatar is None
        assert stored.phone == "13800000000"

    def test_update_missing_row_returns_false(self, employee_repo: SqlAlchemyEmployeeRepository):
        assert employee_repo.update(404, EmployeePatch(name="Nobody")) is False

    def test_page_query_orders_newest_first(self, employee_repo: SqlAlchemyEmployeeRepository):
        employee_repo.create(make_employee("old", create_time=datetime(2024, 1, 1)))
        employee_repo.create(make_employee("new", create_time=datetime(2024, 6, 1)))
        employee_repo.create(make_employee("mid", create_time=datetime(2024, 3, 1)))

        rows, total = employee_repo.page_query(page=1, page_size=10)

        assert total == 3
        assert [e.username for e in rows] == ["new", "mid", "old"]

    def test_page_query_slices_and_counts(self, employee_repo: SqlAlchemyEmployeeRepository):
        for i in range(25):
            employee_repo.create(make_employee(f"user{i:02d}", create_time=datetime(2024, 1, 1, 8, i)))

        first, total = employee_repo.page_query(page=1, page_size=10)
        second, _ = employee_repo.page_query(page=2, page_size=10)
        third, _ = employee_repo.page_query(page=3, page_size=10)

        assert total == 25
        assert len(first) == 10
        assert len(second) == 10
        assert len(third) == 5
        ids = [e.id for e in first + second + third]
        assert len(set(ids)) == 25

    def test_page_query_filters(self, employee_repo: SqlAlchemyEmployeeRepository):
        employee_repo.create(make_employee("w1", name="Wang Wei"))
        employee_repo.create(make_employee("w2", name="Wang Fang", status=AccountStatus.DISABLED))
        employee_repo.create(make_employee("l1", name="Li Na"))

        rows, total = employee_repo.page_query(page=1, page_size=10, name="ang")
        assert total == 2

        rows, total = employee_repo.page_query(page=1, page_size=10, status=AccountStatus.DISABLED)
        assert total == 1
        assert rows[0].username == "w2"
