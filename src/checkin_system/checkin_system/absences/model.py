from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterable, Optional

from ..core.enums import ExceptionType

EXCEPTION_TYPE_LABELS = {
    ExceptionType.TRANSFER: "Transfer",
    ExceptionType.ACCIDENT: "Accident",
    ExceptionType.INJURY: "Injury",
    ExceptionType.MEDICAL_LEAVE: "Medical Leave",
    ExceptionType.OTHER: "Other",
}


@dataclass(frozen=True)
class ExceptionPeriod:
    """Domain entity: a leave/incident period that excuses missed check-ins.

    `end_date` is open-ended when unset. `deactivated_at` closes the period
    retroactively from that day on.
    """

    worker_id: str
    start_date: date
    end_date: Optional[date] = None
    is_active: bool = True
    deactivated_at: Optional[datetime] = None
    exception_type: ExceptionType = ExceptionType.OTHER
    reason: Optional[str] = None
    exception_id: Optional[int] = None

    @property
    def type_label(self) -> str:
        return EXCEPTION_TYPE_LABELS.get(self.exception_type, self.exception_type.value)

    def is_in_effect(self, on: date) -> bool:
        if not self.is_active:
            return False
        if self.deactivated_at is not None and self.deactivated_at.date() <= on:
            return False
        if on < self.start_date:
            return False
        return self.end_date is None or on <= self.end_date


def periods_in_effect(periods: Iterable[ExceptionPeriod], on: date) -> list[ExceptionPeriod]:
    return [p for p in periods if p.is_in_effect(on)]


def excused_dates(dates: Iterable[date], periods: Iterable[ExceptionPeriod]) -> set[date]:
    """Subset of `dates` covered by at least one in-effect period."""
    periods = list(periods)
    if not periods:
        return set()
    return {d for d in dates if any(p.is_in_effect(d) for p in periods)}
