from __future__ import annotations

from typing import Optional

from ..common.clock import parse_time
from ..core.enums import ShiftType


def _by_start_hour(start_hour: int) -> ShiftType:
    if 6 <= start_hour < 12:
        return ShiftType.MORNING
    if 12 <= start_hour < 18:
        return ShiftType.AFTERNOON
    return ShiftType.NIGHT


def classify_shift(start_time: Optional[str], end_time: Optional[str] = None) -> ShiftType:
    """Map a shift's start/end times to a shift category.

    The rules overlap; the first matching check wins.
    """
    if not start_time:
        return ShiftType.FLEXIBLE

    start_hour = parse_time(start_time).hours
    if end_time:
        end_hour = parse_time(end_time).hours
        spans_midnight = start_hour > end_hour

        if not spans_midnight:
            if end_hour < 18 or (4 <= start_hour < 12 and 12 <= end_hour <= 18):
                return ShiftType.MORNING if start_hour < 12 else ShiftType.AFTERNOON
            if start_hour >= 12 and end_hour < 22:
                return ShiftType.AFTERNOON

        if start_hour >= 18 or spans_midnight or (start_hour < 6 and end_hour < 6):
            return ShiftType.NIGHT

    return _by_start_hour(start_hour)
