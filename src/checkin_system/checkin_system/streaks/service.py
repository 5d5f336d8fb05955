from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Optional, Sequence

from ..absences.model import ExceptionPeriod
from ..absences.repository import ExceptionRepository
from ..checkins.repository import CheckInRepository
from ..common.datetime_utils import now_local
from ..core.constants import STREAK_LOOKBACK_DAYS
from ..core.exceptions import PersistenceError
from ..schedules.repository import ScheduleRepository
from .calculator.base import StreakCalculator
from .calculator.standard_calculator import StandardStreakCalculator
from .model import StreakSummary

logger = logging.getLogger(__name__)


class StreakService:
    def __init__(
        self,
        schedules: ScheduleRepository,
        checkins: CheckInRepository,
        exceptions: ExceptionRepository,
        *,
        calculator: Optional[StreakCalculator] = None,
        lookback_days: int = STREAK_LOOKBACK_DAYS,
    ):
        self._schedules = schedules
        self._checkins = checkins
        self._exceptions = exceptions
        self._calculator = calculator or StandardStreakCalculator(lookback_days=lookback_days)
        self._lookback_days = int(lookback_days)

    def _load_exceptions(self, worker_id: str) -> Sequence[ExceptionPeriod]:
        try:
            return self._exceptions.list_for_worker(worker_id=worker_id)
        except PersistenceError as e:
            # Not critical: without exceptions every scheduled day counts.
            logger.warning("Exception lookup failed for worker %s, continuing without: %s", worker_id, e)
            return []

    def get_streak(self, worker_id: str, today: Optional[date] = None) -> StreakSummary:
        """Streak summary; schedule and check-in read failures propagate."""
        today = today or now_local().date()

        entries = self._schedules.list_active_for_worker(worker_id=worker_id)
        check_in_dates = self._checkins.list_dates(
            worker_id=worker_id,
            start=today - timedelta(days=self._lookback_days),
            end=today,
        )
        exceptions = self._load_exceptions(worker_id)

        summary = self._calculator.calculate(
            entries=entries,
            check_in_dates=check_in_dates,
            exceptions=exceptions,
            today=today,
        )
        logger.debug(
            "Streak for worker %s: current=%d completed=%d past_scheduled=%d",
            worker_id,
            summary.current_streak,
            summary.completed_days,
            summary.past_scheduled_days,
        )
        return summary
