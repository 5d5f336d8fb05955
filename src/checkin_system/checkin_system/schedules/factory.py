from __future__ import annotations

from dataclasses import dataclass

from .model import ScheduleEntry
from .strategies.base import CheckInWindowStrategy
from .strategies.computed_window_strategy import ComputedWindowStrategy
from .strategies.custom_window_strategy import CustomWindowStrategy
from .strategies.daily_checkin_strategy import DailyCheckInWindowStrategy


@dataclass
class CheckInWindowStrategyFactory:
    """Factory Pattern: choose the window source for an entry.

    Priority: strict daily check-in window, then custom window, then computed.
    """

    def for_entry(self, entry: ScheduleEntry) -> CheckInWindowStrategy:
        if entry.requires_daily_check_in and entry.daily_check_in_start and entry.daily_check_in_end:
            return DailyCheckInWindowStrategy()
        if entry.check_in_window_start and entry.check_in_window_end:
            return CustomWindowStrategy()
        return ComputedWindowStrategy()
