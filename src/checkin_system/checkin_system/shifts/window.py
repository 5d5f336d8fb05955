"""Check-in window calculation.

The window always sits before the shift starts: normally from 4h to 1h
before the start, with special cases for early-morning and late-night shifts.
The adjustment passes in `get_check_in_window` run in a fixed order and later
passes may override earlier ones.
"""

from __future__ import annotations

from typing import Optional

from ..common.clock import TimeLike, compare_time, parse_time, subtract_hours
from ..core.constants import (
    FLEXIBLE_WINDOW_END,
    FLEXIBLE_WINDOW_START,
    MIDNIGHT_RECOMMENDED_START,
    MIDNIGHT_WINDOW_END,
    MIDNIGHT_WINDOW_START,
)
from ..core.enums import ShiftType
from .model import CheckInWindow

FLEXIBLE_WINDOW = CheckInWindow(
    window_start=FLEXIBLE_WINDOW_START,
    window_end=FLEXIBLE_WINDOW_END,
    recommended_start=FLEXIBLE_WINDOW_START,
    recommended_end=FLEXIBLE_WINDOW_END,
)


def get_check_in_window(
    shift_type: ShiftType,
    start_time: Optional[str] = None,
    end_time: Optional[str] = None,
) -> CheckInWindow:
    if shift_type == ShiftType.FLEXIBLE or not start_time:
        return FLEXIBLE_WINDOW

    start_hour = parse_time(start_time).hours

    if start_hour >= 1:
        # Shifts starting 01:00-03:59 wrap into the previous evening here.
        window_start = subtract_hours(start_time, 4)
        window_end = subtract_hours(start_time, 1)
        recommended_start = subtract_hours(start_time, 3)
        recommended_end = subtract_hours(start_time, 1)
    else:
        window_start = MIDNIGHT_WINDOW_START
        window_end = MIDNIGHT_WINDOW_END
        recommended_start = MIDNIGHT_RECOMMENDED_START
        recommended_end = MIDNIGHT_WINDOW_END

    if start_hour < 6:
        window_start_hour = parse_time(window_start).hours
        if window_start_hour > 20 or window_start_hour < start_hour:
            if start_hour >= 4:
                window_start = "00:00"
                window_end = subtract_hours(start_time, 1)
                recommended_start = "01:00"
                recommended_end = subtract_hours(start_time, 1)
            else:
                window_start = MIDNIGHT_WINDOW_START
                window_end = MIDNIGHT_WINDOW_END
                recommended_start = MIDNIGHT_RECOMMENDED_START
                recommended_end = MIDNIGHT_WINDOW_END

    if compare_time(window_end, start_time) >= 0:
        window_end = subtract_hours(start_time, 1)
        recommended_end = subtract_hours(start_time, 1)

    if start_hour >= 22:
        window_start = subtract_hours(start_time, 3)
        recommended_start = subtract_hours(start_time, 2)

    return CheckInWindow(
        window_start=window_start,
        window_end=window_end,
        recommended_start=recommended_start,
        recommended_end=recommended_end,
    )


def is_within_check_in_window(current_time: TimeLike, window_start: TimeLike, window_end: TimeLike) -> bool:
    """Wall-clock membership test, inclusive at both ends."""
    if compare_time(window_start, window_end) > 0:
        # Window spans midnight.
        return compare_time(current_time, window_start) >= 0 or compare_time(current_time, window_end) <= 0
    return compare_time(current_time, window_start) >= 0 and compare_time(current_time, window_end) <= 0
