# src/utils_time.py
"""Unix timestamp helpers for Route Forecast."""

from __future__ import annotations

from datetime import datetime, timedelta

from src.config import DAY_TOMORROW, TZ


def datetime_to_unix_timestamp(dt: datetime) -> int:
    """Convert a datetime to whole Unix seconds. Naive values are read as local (TZ) time."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=TZ)
    return int(dt.timestamp())


def unix_timestamp_to_local(ts: float) -> datetime:
    """Convert Unix seconds to an aware datetime in the dashboard timezone."""
    return datetime.fromtimestamp(ts, TZ)


def issued_for(day: str, hour: int, now: datetime | None = None) -> datetime:
    """
    Planned start time: today or tomorrow at hour:00 local time.

    Only "Tomorrow" shifts the date, every other value means today.
    """
    if not 0 <= hour <= 23:
        raise ValueError(f"hour must be between 0 and 23, got {hour}")

    if now is None:
        now = datetime.now(TZ)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=TZ)
    else:
        now = now.astimezone(TZ)

    start_date = now.date()
    if day == DAY_TOMORROW:
        start_date += timedelta(days=1)

    return datetime(start_date.year, start_date.month, start_date.day, hour, tzinfo=TZ)
