from __future__ import annotations

from abc import ABC, abstractmethod

from ...core.enums import ShiftType
from ...shifts.model import CheckInWindow
from ..model import ScheduleEntry


class CheckInWindowStrategy(ABC):
    """Strategy Pattern: encapsulate how a schedule entry's check-in window is chosen."""

    @abstractmethod
    def window_for(self, *, entry: ScheduleEntry, shift_type: ShiftType) -> CheckInWindow:
        raise NotImplementedError
