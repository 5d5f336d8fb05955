from __future__ import annotations

from ...core.enums import ShiftType
from ...shifts.model import CheckInWindow
from ..model import ScheduleEntry
from .base import CheckInWindowStrategy


class DailyCheckInWindowStrategy(CheckInWindowStrategy):
    """Strict daily check-in window, used verbatim (recommended = window)."""

    def window_for(self, *, entry: ScheduleEntry, shift_type: ShiftType) -> CheckInWindow:
        return CheckInWindow(
            window_start=entry.daily_check_in_start,
            window_end=entry.daily_check_in_end,
            recommended_start=entry.daily_check_in_start,
            recommended_end=entry.daily_check_in_end,
        )
