"""Enumerations for domain models."""

from enum import Enum


class AccountStatus(int, Enum):
    """Employee account status. Stored as 1/0."""

    DISABLED = 0
    ENABLED = 1
