"""Password digest helpers."""

import hashlib

# Newly created accounts start with this password until the owner changes it.
DEFAULT_PASSWORD = "123456"

# Shown in place of the stored digest whenever an account is read back.
PASSWORD_MASK = "****"


def hash_password(raw_password: str) -> str:
    """Return the hex MD5 digest of *raw_password* (32 lowercase hex chars)."""
    return hashlib.md5(raw_password.encode("utf-8")).hexdigest()


def verify_password(raw_password: str, password_hash: str) -> bool:
    """Return True if *raw_password* digests to exactly *password_hash*."""
    return hash_password(raw_password) == password_hash
