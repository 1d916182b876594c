"""
Date helpers for subscription scheduling.

Instants are timezone-aware UTC datetimes truncated to millisecond precision.
Two ways of adding days are provided:

* ``add_calendar_days`` moves the day-of-month of the wall clock in the
  calendar timezone, keeping the time of day.
* ``add_fixed_days`` adds whole multiples of 86 400 000 ms to the instant.

They only disagree when the span crosses a DST transition of the calendar
timezone.
"""
from __future__ import annotations

import math
from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import Any, Optional

MS_PER_DAY = 24 * 60 * 60 * 1000
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _truncate_ms(value: datetime) -> datetime:
    return value.replace(microsecond=value.microsecond - value.microsecond % 1000)


def _parse_string(text: str, calendar_tz: tzinfo) -> Optional[datetime]:
    text = text.strip()
    if not text:
        return None
    if "T" not in text and " " not in text:
        # Date-only forms are UTC midnight regardless of the calendar timezone.
        try:
            day = date.fromisoformat(text)
        except ValueError:
            return None
        return datetime(day.year, day.month, day.day, tzinfo=timezone.utc)
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=calendar_tz)
    return parsed.astimezone(timezone.utc)


def parse_instant(value: Any, calendar_tz: tzinfo = timezone.utc) -> Optional[datetime]:
    """
    Parse a request value into a UTC instant, or return None when it is not a date.

    Strings are read as ISO 8601; numbers as epoch milliseconds.
    """
    try:
        if isinstance(value, bool):
            return None
        if isinstance(value, (int, float)):
            if isinstance(value, float) and not math.isfinite(value):
                return None
            return EPOCH + timedelta(milliseconds=math.trunc(value))
        if isinstance(value, str):
            parsed = _parse_string(value, calendar_tz)
            return _truncate_ms(parsed) if parsed else None
    except (OverflowError, ValueError):
        return None
    return None


def add_calendar_days(instant: datetime, days: int, calendar_tz: tzinfo = timezone.utc) -> datetime:
    """Advance the wall-clock day in ``calendar_tz`` by ``days``, keeping the time of day."""
    wall = instant.astimezone(calendar_tz).replace(tzinfo=None) + timedelta(days=days)
    return wall.replace(tzinfo=calendar_tz).astimezone(timezone.utc)


def add_fixed_days(instant: datetime, days: float) -> datetime:
    """Add ``days`` × 86 400 000 ms to the instant, truncated to whole milliseconds."""
    return instant + timedelta(milliseconds=math.trunc(days * MS_PER_DAY))


def to_timestamp(instant: datetime) -> str:
    """Render an instant as ``YYYY-MM-DDTHH:MM:SS.sssZ``."""
    utc = instant.astimezone(timezone.utc)
    return (
        f"{utc.year:04d}-{utc.month:02d}-{utc.day:02d}"
        f"T{utc.hour:02d}:{utc.minute:02d}:{utc.second:02d}.{utc.microsecond // 1000:03d}Z"
    )
