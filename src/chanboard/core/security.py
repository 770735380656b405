"""Password hashing helpers."""
from __future__ import annotations

import bcrypt


def hash_password(password: str) -> bytes:
    """Return a bcrypt hash suitable for the opaque password column."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt())


def verify_password(password: str, stored: bytes) -> bool:
    """Check ``password`` against a value produced by :func:`hash_password`."""
    return bcrypt.checkpw(password.encode("utf-8"), stored)
