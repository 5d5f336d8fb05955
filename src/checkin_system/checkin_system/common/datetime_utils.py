from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Iterator

from ..core.constants import DAY_NAMES
from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date.

    ISO timestamps are accepted too; only the date part is used.
    """
    try:
        return datetime.strptime(value.split("T")[0].strip(), "%Y-%m-%d").date()
    except (AttributeError, ValueError):
        raise ValidationError(f"Invalid date (YYYY-MM-DD): {value!r}")


def format_iso_date(value: date) -> str:
    return value.strftime("%Y-%m-%d")


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def day_of_week(value: date) -> int:
    """Weekday index with 0=Sunday .. 6=Saturday."""
    return (value.weekday() + 1) % 7


def day_name(value: date) -> str:
    return DAY_NAMES[day_of_week(value)]


def iter_days(start: date, end: date) -> Iterator[date]:
    """Every calendar day from start to end, both inclusive."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)
