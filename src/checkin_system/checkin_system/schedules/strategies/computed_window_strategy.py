from __future__ import annotations

from ...core.enums import ShiftType
from ...shifts.model import CheckInWindow
from ...shifts.window import get_check_in_window
from ..model import ScheduleEntry
from .base import CheckInWindowStrategy


class ComputedWindowStrategy(CheckInWindowStrategy):
    """Window derived from the shift times."""

    def window_for(self, *, entry: ScheduleEntry, shift_type: ShiftType) -> CheckInWindow:
        return get_check_in_window(shift_type, entry.start_time, entry.end_time)
