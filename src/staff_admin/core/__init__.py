"""Core utilities and shared functionality."""

from staff_admin.core.clock import now_local, DEFAULT_TIMEZONE
from staff_admin.core.security import (
    hash_password,
    verify_password,
    DEFAULT_PASSWORD,
    PASSWORD_MASK,
)
from staff_admin.core.exceptions import (
    AppError,
    ValidationError,
    AccountNotFoundError,
    PasswordError,
    AccountLockedError,
    PasswordEditFailedError,
    PasswordEditFailure,
)

__all__ = [
    "now_local",
    "DEFAULT_TIMEZONE",
    "hash_password",
    "verify_password",
    "DEFAULT_PASSWORD",
    "PASSWORD_MASK",
    "AppError",
    "ValidationError",
    "AccountNotFoundError",
    "PasswordError",
    "AccountLockedError",
    "PasswordEditFailedError",
    "PasswordEditFailure",
]
