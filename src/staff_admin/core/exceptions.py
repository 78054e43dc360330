"""Application-level exceptions."""

from enum import Enum


class AppError(Exception):
    """Base exception for application errors."""

    status_code = 400

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(AppError):
    """Raised when input validation fails."""

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class AccountNotFoundError(AppError):
    """Raised when no employee account matches the lookup key."""

    status_code = 404

    def __init__(self, identifier: object = None):
        message = "Account not found"
        if identifier is not None:
            message = f"Account not found: {identifier}"
        super().__init__(message, code="ACCOUNT_NOT_FOUND")


class PasswordError(AppError):
    """Raised when the supplied password does not match at login."""

    status_code = 401

    def __init__(self):
        super().__init__("Incorrect password", code="PASSWORD_ERROR")


class AccountLockedError(AppError):
    """Raised when a disabled account attempts to log in."""

    status_code = 403

    def __init__(self):
        super().__init__("Account is locked", code="ACCOUNT_LOCKED")


class PasswordEditFailure(str, Enum):
    """Reasons a password change is rejected."""

    OLD_PASSWORD_MISMATCH = "OLD_PASSWORD_MISMATCH"
    EMPTY_NEW_PASSWORD = "EMPTY_NEW_PASSWORD"


_PASSWORD_EDIT_MESSAGES = {
    PasswordEditFailure.OLD_PASSWORD_MISMATCH: "Password edit failed: old password is incorrect",
    PasswordEditFailure.EMPTY_NEW_PASSWORD: "Password edit failed: new password must not be empty",
}


class PasswordEditFailedError(AppError):
    """Raised when a self-service password change is rejected."""

    def __init__(self, reason: PasswordEditFailure):
        self.reason = reason
        super().__init__(_PASSWORD_EDIT_MESSAGES[reason], code="PASSWORD_EDIT_FAILED")
