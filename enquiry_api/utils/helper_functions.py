from datetime import datetime, timezone
from typing import Any, Optional


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_iso_timestamp(dt: Optional[datetime] = None) -> str:
    """Format a datetime as an ISO-8601 UTC string with millisecond precision.

    Naive datetimes are assumed to already be in UTC.

    Args:
        dt: Datetime to format, defaults to the current time

    Returns:
        Timestamp such as ``2025-03-01T09:30:00.000Z``
    """
    if dt is None:
        dt = utc_now()
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def clean_optional_text(value: Any) -> str:
    """Trim an optional form value, mapping empty or missing values to ""."""
    if not value:
        return ""
    return str(value).strip()


def display_or_dash(value: str) -> str:
    return value or "-"
