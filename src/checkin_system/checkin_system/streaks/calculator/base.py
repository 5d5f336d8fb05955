from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from typing import Iterable, Sequence

from ...absences.model import ExceptionPeriod
from ...schedules.model import ScheduleEntry
from ..model import StreakSummary


class StreakCalculator(ABC):
    """Calculator interface (Strategy Pattern for streaks)."""

    @abstractmethod
    def calculate(
        self,
        *,
        entries: Sequence[ScheduleEntry],
        check_in_dates: Iterable[date],
        exceptions: Sequence[ExceptionPeriod],
        today: date,
    ) -> StreakSummary:
        raise NotImplementedError
