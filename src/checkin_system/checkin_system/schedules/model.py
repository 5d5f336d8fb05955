from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.clock import parse_time
from ..common.validators import require_weekday
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class ScheduleEntry:
    """Domain entity: one assignable work pattern of a worker.

    An entry is either date-scoped (`scheduled_date`) or recurring
    (`day_of_week`, 0=Sunday .. 6=Saturday), never both.
    """

    schedule_id: int
    worker_id: str
    start_time: str
    end_time: str
    scheduled_date: Optional[date] = None
    day_of_week: Optional[int] = None
    is_active: bool = True
    effective_date: Optional[date] = None
    expiry_date: Optional[date] = None
    check_in_window_start: Optional[str] = None
    check_in_window_end: Optional[str] = None
    requires_daily_check_in: bool = False
    daily_check_in_start: Optional[str] = None
    daily_check_in_end: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.scheduled_date is None) == (self.day_of_week is None):
            raise ValidationError("A schedule needs exactly one of scheduled_date or day_of_week")
        if self.day_of_week is not None:
            require_weekday(self.day_of_week)
        parse_time(self.start_time)
        parse_time(self.end_time)

    @property
    def is_recurring(self) -> bool:
        return self.day_of_week is not None

    @property
    def start_minutes(self) -> int:
        return parse_time(self.start_time).total_minutes

    def is_valid_on(self, target: date) -> bool:
        """Effective/expiry bounds (inclusive); unbounded when unset."""
        effective_ok = self.effective_date is None or self.effective_date <= target
        expiry_ok = self.expiry_date is None or self.expiry_date >= target
        return effective_ok and expiry_ok
