from __future__ import annotations

import calendar
from datetime import date, datetime, time, timedelta
from typing import Optional


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_iso_date_or_none(value: Optional[str]) -> Optional[date]:
    """Like `parse_iso_date` but returns None for blank or malformed input."""
    if not value or not value.strip():
        return None
    try:
        return parse_iso_date(value.strip())
    except ValueError:
        return None


def parse_time_of_day(value: Optional[str]) -> Optional[time]:
    """Parse HH:MM or HH:MM:SS. Blank or malformed input gives None."""
    if not value or not value.strip():
        return None
    for fmt in ("%H:%M", "%H:%M:%S"):
        try:
            return datetime.strptime(value.strip(), fmt).time()
        except ValueError:
            continue
    return None


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def combine(work_date: date, time_of_day: time) -> datetime:
    return datetime.combine(work_date, time_of_day.replace(microsecond=0))


def month_range(year: int, month: int) -> tuple[date, date]:
    """First and last day of a calendar month."""
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def days_in_range(start: date, end: date) -> int:
    """Calendar days in [start, end], inclusive. Empty ranges count as 0."""
    return max((end - start).days + 1, 0)


def hours_between(start: datetime, end: datetime) -> float:
    return (end - start) / timedelta(hours=1)
