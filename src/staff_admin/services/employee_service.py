"""Employee account service: login, onboarding, listing and profile edits."""

import logging
from dataclasses import dataclass
from typing import Optional, Union

from staff_admin.core.clock import now_local, DEFAULT_TIMEZONE
from staff_admin.core.exceptions import (
    ValidationError,
    AccountNotFoundError,
    PasswordError,
    AccountLockedError,
    PasswordEditFailedError,
    PasswordEditFailure,
)
from staff_admin.core.security import (
    DEFAULT_PASSWORD,
    PASSWORD_MASK,
    hash_password,
    verify_password,
)
from staff_admin.domain.models import AccountStatus, Employee, EmployeePatch
from staff_admin.domain.views import PageResult
from staff_admin.repositories.protocols import EmployeeRepository

logger = logging.getLogger(__name__)

# Profile columns that may be written as NULL
CLEARABLE_FIELDS = frozenset({"phone", "sex", "id_number", "avatar"})


@dataclass
class EmployeeCreate:
    """Input data for creating an employee account."""

    username: str
    name: str
    phone: Optional[str] = None
    sex: Optional[str] = None
    id_number: Optional[str] = None
    avatar: Optional[str] = None


@dataclass
class EmployeeUpdate:
    """Profile edit for an existing employee (partial update).

    Fields named in `cleared` were sent as null and are written as NULL.
    """

    id: int
    username: Optional[str] = None
    name: Optional[str] = None
    phone: Optional[str] = None
    sex: Optional[str] = None
    id_number: Optional[str] = None
    avatar: Optional[str] = None
    cleared: frozenset[str] = frozenset()


@dataclass
class PasswordChange:
    """Self-service password change request."""

    old_password: str
    new_password: str


class EmployeeAccountService:
    """
    Service for managing staff accounts.

    Sits between the HTTP layer and the employee repository. Holds no state
    of its own; every call reads or writes through the repository.
    """

    def __init__(
        self,
        employee_repo: EmployeeRepository,
        default_password: str = DEFAULT_PASSWORD,
        timezone: str = DEFAULT_TIMEZONE,
    ):
        self._employee_repo = employee_repo
        self._default_password = default_password
        self._timezone = timezone

    def login(self, username: str, password: str) -> Employee:
        """
        Authenticate an employee by username and raw password.

        Checks run in order: account exists, password matches, account enabled.

        Returns:
            The stored Employee, digest included. Callers must not serialize
            the password field.
        """
        employee = self._employee_repo.get_by_username(username)
        if employee is None:
            logger.warning(f"Login failed: unknown username {username!r}")
            raise AccountNotFoundError()

        if not verify_password(password, employee.password):
            logger.warning(f"Login failed: incorrect password for {username!r}")
            raise PasswordError()

        if employee.status == AccountStatus.DISABLED:
            logger.warning(f"Login refused: account {username!r} is locked")
            raise AccountLockedError()

        logger.info(f"Employee {employee.id} logged in")
        return employee

    def create_account(
        self,
        data: EmployeeCreate,
        actor_id: Optional[int] = None,
    ) -> Employee:
        """
        Create a new enabled account with the default password.

        Username uniqueness is enforced by the store, not checked here.
        """
        now = self._now()
        employee = Employee(
            id=None,
            username=data.username,
            name=data.name,
            password=hash_password(self._default_password),
            phone=data.phone,
            sex=data.sex,
            id_number=data.id_number,
            avatar=data.avatar,
            status=AccountStatus.ENABLED,
            create_time=now,
            update_time=now,
            create_user=actor_id,
            update_user=actor_id,
        )
        created = self._employee_repo.create(employee)
        logger.info(f"Created employee {created.id} ({created.username})")
        return created

    def page_query(
        self,
        page: int,
        page_size: int,
        name: Optional[str] = None,
        status: Optional[AccountStatus] = None,
    ) -> PageResult[Employee]:
        """List one page of employees matching the filters."""
        rows, total = self._employee_repo.page_query(
            page=page,
            page_size=page_size,
            name=name,
            status=status,
        )
        return PageResult(total=total, records=rows)

    def set_status(
        self,
        status: Union[AccountStatus, int],
        employee_id: int,
        actor_id: Optional[int] = None,
    ) -> None:
        """Enable or disable an account. A missing id is a no-op."""
        try:
            status = AccountStatus(status)
        except ValueError:
            raise ValidationError(f"Invalid account status: {status}")

        patch = EmployeePatch(
            status=status,
            update_time=self._now(),
            update_user=actor_id,
        )
        if self._employee_repo.update(employee_id, patch):
            logger.info(f"Employee {employee_id} status set to {status.name}")
        else:
            logger.warning(f"Status change ignored: employee {employee_id} does not exist")

    def get_by_id(self, employee_id: int) -> Employee:
        """Get employee by ID with the password masked."""
        employee = self._employee_repo.get_by_id(employee_id)
        if employee is None:
            raise AccountNotFoundError(employee_id)
        return self._masked(employee)

    def get_by_id_number(self, id_number: str) -> Employee:
        """Get employee by national-ID number with the password masked."""
        employee = self._employee_repo.get_by_id_number(id_number)
        if employee is None:
            raise AccountNotFoundError(id_number)
        return self._masked(employee)

    def update_profile(
        self,
        data: EmployeeUpdate,
        actor_id: Optional[int] = None,
    ) -> None:
        """Edit profile fields. Password and status are never changed here."""
        not_clearable = data.cleared - CLEARABLE_FIELDS
        if not_clearable:
            raise ValidationError(f"Cannot clear required fields: {', '.join(sorted(not_clearable))}")

        patch = EmployeePatch(
            username=data.username,
            name=data.name,
            phone=data.phone,
            sex=data.sex,
            id_number=data.id_number,
            avatar=data.avatar,
            update_time=self._now(),
            update_user=actor_id,
            cleared=data.cleared,
        )
        if self._employee_repo.update(data.id, patch):
            logger.info(f"Updated profile of employee {data.id}")
        else:
            logger.warning(f"Profile edit ignored: employee {data.id} does not exist")

    def change_password(self, actor_id: int, data: PasswordChange) -> None:
        """
        Change the acting employee's own password.

        The old password must match and the new one must be non-empty.
        """
        employee = self._employee_repo.get_by_id(actor_id)
        if employee is None:
            raise AccountNotFoundError(actor_id)

        if not verify_password(data.old_password, employee.password):
            logger.warning(f"Password change rejected for employee {actor_id}: old password mismatch")
            raise PasswordEditFailedError(PasswordEditFailure.OLD_PASSWORD_MISMATCH)

        if not data.new_password:
            raise PasswordEditFailedError(PasswordEditFailure.EMPTY_NEW_PASSWORD)

        patch = EmployeePatch(
            password=hash_password(data.new_password),
            update_time=self._now(),
            update_user=actor_id,
        )
        self._employee_repo.update(actor_id, patch)
        logger.info(f"Employee {actor_id} changed password")

    def _now(self):
        return now_local(self._timezone)

    @staticmethod
    def _masked(employee: Employee) -> Employee:
        employee.password = PASSWORD_MASK
        return employee
