from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import Readiness, ShiftType


@dataclass(frozen=True)
class CheckInPayload:
    """What a worker submits with the daily check-in."""

    pain_level: int
    fatigue_level: int
    sleep_quality: int
    stress_level: int
    predicted_readiness: Readiness
    additional_notes: Optional[str] = None


@dataclass(frozen=True)
class ShiftSnapshot:
    """The shift as resolved when the check-in was submitted."""

    shift_type: ShiftType
    shift_start: Optional[str] = None
    shift_end: Optional[str] = None


@dataclass(frozen=True)
class CheckInRecord:
    """Domain entity: one daily check-in (at most one per worker per date)."""

    checkin_id: int
    worker_id: str
    check_in_date: date
    check_in_time: str
    payload: CheckInPayload
    shift: ShiftSnapshot

    def to_dict(self) -> dict:
        return {
            "id": self.checkin_id,
            "checkInDate": self.check_in_date.strftime("%Y-%m-%d"),
            "checkInTime": self.check_in_time,
            "predictedReadiness": self.payload.predicted_readiness.value,
            "shiftType": self.shift.shift_type.value,
            "shiftStart": self.shift.shift_start,
            "shiftEnd": self.shift.shift_end,
        }
