from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

from fitpet.core.time import calendar_day, ensure_utc, is_same_calendar_day


def test_naive_timestamp_is_read_as_utc() -> None:
    assert calendar_day(datetime(2024, 1, 15, 23, 59)) == date(2024, 1, 15)


def test_offset_timestamp_uses_utc_day() -> None:
    tokyo_morning = datetime(2024, 1, 16, 7, 0, tzinfo=timezone(timedelta(hours=9)))
    assert calendar_day(tokyo_morning) == date(2024, 1, 15)


def test_same_day_across_offsets() -> None:
    utc_noon = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)
    new_york_evening = datetime(2024, 1, 15, 18, 59, tzinfo=timezone(timedelta(hours=-5)))
    assert is_same_calendar_day(utc_noon, new_york_evening)
    assert not is_same_calendar_day(utc_noon, new_york_evening + timedelta(minutes=1))


def test_ensure_utc() -> None:
    assert ensure_utc(None) is None
    assert ensure_utc(datetime(2024, 1, 15, 8, 0)).tzinfo is timezone.utc
