"""
UTC datetime utilities and the wall clock used by expiry checks.

All datetime values in the system should be timezone-aware UTC.
Use these helpers instead of datetime.now() or datetime.utcnow().
"""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """
    Return the current UTC datetime with timezone info.

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

    Use at repository/persistence boundaries to normalize datetimes
    (SQLite returns naive values even for DateTime(timezone=True) columns).

    Args:
        dt: A datetime that may be naive or aware

    Returns:
        UTC-aware datetime or None
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)

    return dt.astimezone(UTC)


def from_timestamp_utc(timestamp: float) -> datetime:
    """
    Create a UTC-aware datetime from a Unix timestamp (e.g. JWT iat/exp claims).

    Args:
        timestamp: Unix timestamp (seconds since epoch)

    Returns:
        UTC-aware datetime
    """
    return datetime.fromtimestamp(timestamp, tz=UTC)


class SystemClock:
    """IClock backed by the system wall clock."""

    def now(self) -> datetime:
        return utc_now()
