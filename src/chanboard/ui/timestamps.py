# src/chanboard/ui/timestamps.py
"""Timestamp formatting matching the browser's ``en-GB`` rendering."""

from __future__ import annotations

from datetime import UTC, datetime, tzinfo
from zoneinfo import ZoneInfo

from chanboard.core.settings import settings

# Fixed English names so output does not depend on the process locale.
_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def _parse(value: str | datetime) -> datetime:
    if isinstance(value, datetime):
        moment = value
    else:
        moment = datetime.fromisoformat(value.strip())
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return moment


def format_timestamp(value: str | datetime, tz: tzinfo | str | None = None) -> str:
    """Render a machine-readable timestamp for display.

    Args:
        value: ISO-8601 string (the ``datetime`` attribute of a ``<time>``
            element) or a datetime. Naive values are taken as UTC.
        tz: Target timezone, as a ``tzinfo`` or IANA name. Defaults to the
            configured display timezone.

    Returns:
        A string like ``"Sun, 5 Jun 2022, 12:00:00"``.
    """
    if tz is None:
        tz = settings.display_timezone
    if isinstance(tz, str):
        tz = UTC if tz.upper() == "UTC" else ZoneInfo(tz)
    local = _parse(value).astimezone(tz)
    return (
        f"{_WEEKDAYS[local.weekday()]}, {local.day} {_MONTHS[local.month - 1]} "
        f"{local.year}, {local:%H:%M:%S}"
    )
