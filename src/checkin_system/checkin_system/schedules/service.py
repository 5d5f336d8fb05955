from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional, Sequence

from ..common.datetime_utils import day_of_week, now_local
from ..core.constants import NEXT_SHIFT_MAX_DAYS
from ..core.enums import ScheduleSource, ShiftType
from ..core.exceptions import PersistenceError, ScheduleLookupError
from ..shifts.classifier import classify_shift
from ..shifts.model import ResolvedShift
from ..shifts.window import FLEXIBLE_WINDOW
from .factory import CheckInWindowStrategyFactory
from .matching import find_next_occurrence, pick_date_scoped, pick_recurring
from .model import ScheduleEntry
from .repository import ScheduleRepository

logger = logging.getLogger(__name__)

NO_SHIFT = ResolvedShift(
    has_shift=False,
    shift_type=ShiftType.FLEXIBLE,
    check_in_window=FLEXIBLE_WINDOW,
    schedule_source=ScheduleSource.NONE,
)


@dataclass(frozen=True)
class ShiftOverview:
    today: ResolvedShift
    next: Optional[ResolvedShift]

    def to_dict(self) -> dict:
        return {
            "today": self.today.to_dict(),
            "next": self.next.to_dict() if self.next else no_shift_dict(),
        }


def no_shift_dict() -> dict:
    """Body used when no upcoming shift exists."""
    out = NO_SHIFT.to_dict()
    out.update({"date": None, "dayName": None})
    return out


class ShiftService:
    """Use case: resolve a worker's shift and check-in window.

    There is no fallback schedule: a worker without an
    individual schedule entry has no shift.
    """

    def __init__(
        self,
        schedules: ScheduleRepository,
        *,
        window_factory: CheckInWindowStrategyFactory | None = None,
        max_days_ahead: int = NEXT_SHIFT_MAX_DAYS,
    ):
        self._schedules = schedules
        self._window_factory = window_factory or CheckInWindowStrategyFactory()
        self._max_days_ahead = int(max_days_ahead)

    def resolve_entry(self, entry: ScheduleEntry, *, shift_date: Optional[date] = None) -> ResolvedShift:
        shift_type = classify_shift(entry.start_time, entry.end_time)
        strategy = self._window_factory.for_entry(entry)
        return ResolvedShift(
            has_shift=True,
            shift_type=shift_type,
            check_in_window=strategy.window_for(entry=entry, shift_type=shift_type),
            schedule_source=ScheduleSource.TEAM_LEADER,
            shift_start=entry.start_time,
            shift_end=entry.end_time,
            requires_daily_check_in=entry.requires_daily_check_in,
            shift_date=shift_date,
        )

    def _fetch(self, worker_id: str, **filters) -> Sequence[ScheduleEntry]:
        try:
            return self._schedules.list_active_for_worker(worker_id=worker_id, **filters)
        except PersistenceError as e:
            logger.error("Schedule lookup failed for worker %s (%s): %s", worker_id, filters or "all", e)
            raise ScheduleLookupError(f"Could not load schedules for worker {worker_id}") from e

    def get_shift_info(self, worker_id: str, target_date: Optional[date] = None) -> ResolvedShift:
        target = target_date or now_local().date()

        entry = pick_date_scoped(self._fetch(worker_id, scheduled_date=target), target)
        if entry is None:
            weekday = day_of_week(target)
            entry = pick_recurring(self._fetch(worker_id, day_of_week=weekday), target)

        if entry is None:
            return NO_SHIFT
        return self.resolve_entry(entry)

    def get_next_shift_info(self, worker_id: str, from_date: date) -> Optional[ResolvedShift]:
        """Next shift on or after `from_date`, from a single bulk read."""
        entries = self._fetch(worker_id)
        if not entries:
            return None

        found = find_next_occurrence(entries, from_date, max_days=self._max_days_ahead)
        if found is None:
            return None

        shift_date, entry = found
        return self.resolve_entry(entry, shift_date=shift_date)

    def get_shift_overview(self, worker_id: str, today: Optional[date] = None) -> ShiftOverview:
        today = today or now_local().date()
        today_shift = self.get_shift_info(worker_id, today)

        search_from = today + timedelta(days=1) if today_shift.has_shift else today
        return ShiftOverview(today=today_shift, next=self.get_next_shift_info(worker_id, search_from))
