# src/chanboard/db/time.py
"""Time utilities for database models."""

from datetime import UTC, datetime


def utcnow() -> datetime:
    """Return the current UTC time as a naive datetime.

    Timestamp columns are ``TIMESTAMP WITHOUT TIME ZONE`` holding UTC.
    """
    return datetime.now(UTC).replace(tzinfo=None)
