from __future__ import annotations

from datetime import date, datetime
from typing import Optional


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def start_of_day(day: date) -> datetime:
    return datetime(day.year, day.month, day.day)


def format_time(value: Optional[datetime]) -> str:
    if value is None:
        return "-"
    return value.strftime("%H:%M:%S")


def format_duration(time_in: datetime, time_out: Optional[datetime]) -> str:
    """Elapsed time as ``"{h}h {m}m"``; ``"-"`` while the record is still open."""
    if time_out is None:
        return "-"
    total_minutes = int((time_out - time_in).total_seconds() // 60)
    hours, minutes = divmod(total_minutes, 60)
    return f"{hours}h {minutes}m"
