"""Wall-clock time arithmetic.

All values are naive times of day ("HH:MM", 24-hour). Anything that crosses
midnight is represented purely by wraparound; callers that care about which
calendar day a wrapped time belongs to must track it themselves.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ..core.constants import MINUTES_PER_DAY
from ..core.exceptions import ValidationError


@dataclass(frozen=True, order=True)
class ClockTime:
    hours: int
    minutes: int

    def __str__(self) -> str:
        return f"{self.hours:02d}:{self.minutes:02d}"

    @property
    def total_minutes(self) -> int:
        return self.hours * 60 + self.minutes

    @classmethod
    def from_minutes(cls, total: int) -> "ClockTime":
        total %= MINUTES_PER_DAY
        return cls(hours=total // 60, minutes=total % 60)


TimeLike = Union[str, ClockTime]


def parse_time(value: TimeLike) -> ClockTime:
    """Parse "HH:MM" (or "HH:MM:SS", seconds ignored) into a ClockTime."""
    if isinstance(value, ClockTime):
        return value
    if not isinstance(value, str):
        raise ValidationError(f"Invalid time value: {value!r}")

    parts = value.strip().split(":")
    if len(parts) not in (2, 3) or not all(p.isascii() and p.isdigit() for p in parts):
        raise ValidationError(f"Invalid time (HH:MM): {value!r}")

    hours, minutes = int(parts[0]), int(parts[1])
    if not (0 <= hours <= 23 and 0 <= minutes <= 59):
        raise ValidationError(f"Time out of range: {value!r}")
    if len(parts) == 3 and int(parts[2]) > 59:
        raise ValidationError(f"Time out of range: {value!r}")
    return ClockTime(hours=hours, minutes=minutes)


def format_time(value: TimeLike) -> str:
    return str(parse_time(value))


def compare_time(a: TimeLike, b: TimeLike) -> int:
    """-1, 0 or 1, comparing (hours, minutes) lexicographically."""
    ta, tb = parse_time(a), parse_time(b)
    if ta < tb:
        return -1
    if ta > tb:
        return 1
    return 0


def subtract_hours(value: TimeLike, hours: int) -> str:
    t = parse_time(value)
    return str(ClockTime.from_minutes(t.total_minutes - hours * 60))


def add_hours(value: TimeLike, hours: int) -> str:
    t = parse_time(value)
    return str(ClockTime.from_minutes(t.total_minutes + hours * 60))
