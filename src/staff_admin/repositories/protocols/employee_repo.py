"""Employee repository protocol."""

from typing import Protocol, Optional

from staff_admin.domain.models import AccountStatus, Employee, EmployeePatch


class EmployeeRepository(Protocol):
    """Interface for employee data access."""

    def create(self, employee: Employee) -> Employee:
        """Persist a new employee; the store assigns the id."""
        ...

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        """Retrieve employee by ID."""
        ...

    def get_by_username(self, username: str) -> Optional[Employee]:
        """Retrieve employee by username."""
        ...

    def get_by_id_number(self, id_number: str) -> Optional[Employee]:
        """Retrieve employee by national-ID number."""
        ...

    def update(self, employee_id: int, patch: EmployeePatch) -> bool:
        """Apply the provided patch fields. Returns False if no row matched."""
        ...

    def page_query(
        self,
        page: int,
        page_size: int,
        name: Optional[str] = None,
        status: Optional[AccountStatus] = None,
    ) -> tuple[list[Employee], int]:
        """Return (rows for the page, total rows matching the filter)."""
        ...
