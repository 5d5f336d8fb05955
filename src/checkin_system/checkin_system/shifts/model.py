from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import day_name, format_iso_date
from ..core.enums import ScheduleSource, ShiftType


@dataclass(frozen=True)
class CheckInWindow:
    """Clock-time interval for the daily check-in, plus a narrower recommended part."""

    window_start: str
    window_end: str
    recommended_start: str
    recommended_end: str

    def to_dict(self) -> dict:
        return {
            "windowStart": self.window_start,
            "windowEnd": self.window_end,
            "recommendedStart": self.recommended_start,
            "recommendedEnd": self.recommended_end,
        }


@dataclass(frozen=True)
class ResolvedShift:
    """Read-model: the shift that applies to a worker on one day.

    `shift_date` is only set for next-occurrence results.
    """

    has_shift: bool
    shift_type: ShiftType
    check_in_window: CheckInWindow
    schedule_source: ScheduleSource
    shift_start: Optional[str] = None
    shift_end: Optional[str] = None
    requires_daily_check_in: bool = False
    shift_date: Optional[date] = None

    @property
    def day_name(self) -> Optional[str]:
        return day_name(self.shift_date) if self.shift_date else None

    def to_dict(self) -> dict:
        out = {
            "hasShift": self.has_shift,
            "shiftType": self.shift_type.value,
            "shiftStart": self.shift_start,
            "shiftEnd": self.shift_end,
            "checkInWindow": self.check_in_window.to_dict(),
            "scheduleSource": self.schedule_source.value,
            "requiresDailyCheckIn": self.requires_daily_check_in,
        }
        if self.shift_date is not None:
            out["date"] = format_iso_date(self.shift_date)
            out["dayName"] = self.day_name
        return out
