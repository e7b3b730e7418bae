from __future__ import annotations

from datetime import date, datetime, timezone


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """Normalize datetime to UTC-aware.

    Converts naive datetimes to UTC-aware, and converts aware datetimes to UTC.
    Returns None if input is None.

    Args:
        dt: Datetime to normalize (may be naive or aware)

    Returns:
        UTC-aware datetime, or None if input was None
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def calendar_day(dt: datetime) -> date:
    """Calendar day (year, month, day) of a timestamp, in UTC."""
    if dt.tzinfo is None:
        return dt.date()
    return dt.astimezone(timezone.utc).date()


def is_same_calendar_day(a: datetime, b: datetime) -> bool:
    return calendar_day(a) == calendar_day(b)
