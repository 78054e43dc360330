"""Employee domain model and partial-update patch."""

from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Any, Optional

from staff_admin.domain.models.enums import AccountStatus


@dataclass
class Employee:
    """
    Staff account used to sign in to the admin backend.

    `password` always holds a digest, never the raw value. Records read back
    for display carry a mask instead of the digest.
    """

    id: Optional[int]
    username: str
    name: str
    password: str
    phone: Optional[str] = None
    sex: Optional[str] = None
    id_number: Optional[str] = None
    avatar: Optional[str] = None
    status: AccountStatus = AccountStatus.ENABLED
    create_time: Optional[datetime] = field(default=None)
    update_time: Optional[datetime] = field(default=None)
    create_user: Optional[int] = None
    update_user: Optional[int] = None

    def __post_init__(self) -> None:
        if isinstance(self.status, int) and not isinstance(self.status, AccountStatus):
            self.status = AccountStatus(self.status)

    @property
    def is_enabled(self) -> bool:
        return self.status == AccountStatus.ENABLED


@dataclass
class EmployeePatch:
    """
    Partial update for an employee row.

    A field left as None was not provided and is not written. Names listed in
    `cleared` are written as NULL.
    """

    username: Optional[str] = None
    name: Optional[str] = None
    phone: Optional[str] = None
    sex: Optional[str] = None
    id_number: Optional[str] = None
    avatar: Optional[str] = None
    password: Optional[str] = None
    status: Optional[AccountStatus] = None
    update_time: Optional[datetime] = None
    update_user: Optional[int] = None
    cleared: frozenset[str] = frozenset()

    def changes(self) -> dict[str, Any]:
        """Return the fields that were provided, including cleared ones."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name != "cleared"
            and (getattr(self, f.name) is not None or f.name in self.cleared)
        }
