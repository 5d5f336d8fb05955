from __future__ import annotations

from ...core.enums import ShiftType
from ...shifts.model import CheckInWindow
from ..model import ScheduleEntry
from .base import CheckInWindowStrategy


class CustomWindowStrategy(CheckInWindowStrategy):
    """Window set by the scheduler on the entry."""

    def window_for(self, *, entry: ScheduleEntry, shift_type: ShiftType) -> CheckInWindow:
        return CheckInWindow(
            window_start=entry.check_in_window_start,
            window_end=entry.check_in_window_end,
            recommended_start=entry.check_in_window_start,
            recommended_end=entry.check_in_window_end,
        )
