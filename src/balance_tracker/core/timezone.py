"""Timezone utilities for UTC calendar days."""

from datetime import date, datetime, time

import pytz

UTC = pytz.UTC

END_OF_DAY = time(23, 59, 59, 999000)


def now_utc() -> datetime:
    """Return current time in UTC."""
    return datetime.now(UTC)


def to_utc(dt: datetime) -> datetime:
    """Convert a datetime to UTC."""
    if dt.tzinfo is None:
        # Assume naive datetime is already UTC
        return UTC.localize(dt)
    return dt.astimezone(UTC)


def day_key(day: date) -> str:
    """Return the ISO YYYY-MM-DD key for a calendar day."""
    return day.isoformat()


def end_of_day_timestamp(day: date) -> int:
    """Epoch seconds (floored) of 23:59:59.999 UTC on the given day."""
    return int(UTC.localize(datetime.combine(day, END_OF_DAY)).timestamp())
