"""
UTC datetime utilities for consistent timezone handling.

All datetime values in the system should be timezone-aware UTC.
Use these helpers instead of datetime.now() or datetime.utcnow().
"""

from datetime import UTC, date, datetime


def utc_now() -> datetime:
    """
    Return the current UTC datetime with timezone info.

    Use this instead of:
        - datetime.now() - naive, uses local timezone
        - datetime.utcnow() - naive, deprecated in Python 3.12

    Returns:
        Timezone-aware datetime in UTC
    """
    return datetime.now(UTC)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """
    Ensure a datetime is UTC-aware.

    - If None, returns None
    - If naive, assumes UTC and attaches timezone
    - If aware, converts to UTC

    Use at repository/persistence boundaries to normalize datetimes.

    Args:
        dt: A datetime that may be naive or aware

    Returns:
        UTC-aware datetime or None
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        # Naive datetime - assume it's UTC and attach timezone
        return dt.replace(tzinfo=UTC)

    return dt.astimezone(UTC)


def parse_datetime(value: object) -> datetime | None:
    """
    Parse an ISO-8601 date or timestamp into a UTC-aware datetime.

    Accepts datetime and date instances as well as strings such as
    "2025-03-01", "2025-03-01T09:30:00" and "2025-03-01T09:30:00Z".
    Date-only values resolve to midnight UTC.

    Args:
        value: Candidate value (anything else returns None)

    Returns:
        UTC-aware datetime, or None when the value is not a date/timestamp
    """
    if isinstance(value, datetime):
        return ensure_utc(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=UTC)
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        return None
    return ensure_utc(parsed)
