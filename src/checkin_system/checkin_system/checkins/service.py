from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..absences.model import ExceptionPeriod, periods_in_effect
from ..absences.repository import ExceptionRepository
from ..common.validators import require_int_range, require_non_empty
from ..common.datetime_utils import now_local
from ..core.enums import Readiness
from ..core.exceptions import PersistenceError, ValidationError
from ..schedules.repository import ScheduleRepository
from ..schedules.service import ShiftService
from ..shifts.model import ResolvedShift
from ..shifts.window import is_within_check_in_window
from .model import CheckInPayload, CheckInRecord, ShiftSnapshot
from .repository import CheckInRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WindowStatus:
    current_time: str
    is_within_window: bool
    is_within_recommended: bool


@dataclass(frozen=True)
class CheckInStatus:
    shift: ResolvedShift
    window: WindowStatus
    today_record: Optional[CheckInRecord]
    active_exception: Optional[ExceptionPeriod] = None

    def to_dict(self) -> dict:
        out = self.shift.to_dict()
        out.update(
            {
                "currentTime": self.window.current_time,
                "isWithinWindow": self.window.is_within_window,
                "isWithinRecommended": self.window.is_within_recommended,
                "hasCheckedIn": self.today_record is not None,
                "checkIn": self.today_record.to_dict() if self.today_record else None,
                "hasActiveException": self.active_exception is not None,
                "exception": None,
            }
        )
        if self.active_exception is not None:
            out["exception"] = {
                "exceptionType": self.active_exception.exception_type.value,
                "label": self.active_exception.type_label,
                "reason": self.active_exception.reason,
                "startDate": self.active_exception.start_date.strftime("%Y-%m-%d"),
                "endDate": self.active_exception.end_date.strftime("%Y-%m-%d")
                if self.active_exception.end_date
                else None,
            }
        return out


@dataclass(frozen=True)
class CheckInResult:
    record: CheckInRecord
    window: WindowStatus
    deactivated_schedules: int = 0

    def to_dict(self) -> dict:
        return {
            "success": True,
            "checkIn": self.record.to_dict(),
            "currentTime": self.window.current_time,
            "isWithinWindow": self.window.is_within_window,
            "isWithinRecommended": self.window.is_within_recommended,
            "deactivatedSchedules": self.deactivated_schedules,
        }


def build_payload(data: dict) -> CheckInPayload:
    """Validate a raw check-in body (camelCase keys) into a payload."""
    data = data or {}
    if not isinstance(data, dict):
        raise ValidationError("Check-in body must be a JSON object")
    try:
        readiness = Readiness(data.get("predictedReadiness"))
    except ValueError:
        raise ValidationError("Invalid predicted readiness value")

    notes = data.get("additionalNotes")
    if notes is not None and not isinstance(notes, str):
        raise ValidationError("additionalNotes must be a string")
    notes = (notes or "").strip() or None
    if readiness == Readiness.RED:
        require_non_empty(notes, "Additional notes (required when not fit to work)")

    return CheckInPayload(
        pain_level=require_int_range(data.get("painLevel"), "painLevel", 0, 10),
        fatigue_level=require_int_range(data.get("fatigueLevel"), "fatigueLevel", 0, 10),
        sleep_quality=require_int_range(data.get("sleepQuality"), "sleepQuality", 0, 12),
        stress_level=require_int_range(data.get("stressLevel"), "stressLevel", 0, 10),
        predicted_readiness=readiness,
        additional_notes=notes,
    )


def window_status(shift: ResolvedShift, now: datetime) -> WindowStatus:
    current_time = now.strftime("%H:%M")
    window = shift.check_in_window
    return WindowStatus(
        current_time=current_time,
        is_within_window=is_within_check_in_window(current_time, window.window_start, window.window_end),
        is_within_recommended=is_within_check_in_window(
            current_time, window.recommended_start, window.recommended_end
        ),
    )


class CheckInService:
    """Use case: daily wellness check-in.

    Submitting outside the check-in window is allowed; the result only
    reports whether it was inside.
    """

    def __init__(
        self,
        checkins: CheckInRepository,
        schedules: ScheduleRepository,
        shift_service: ShiftService,
        exceptions: ExceptionRepository | None = None,
    ):
        self._checkins = checkins
        self._schedules = schedules
        self._shift_service = shift_service
        self._exceptions = exceptions

    def get_status(self, worker_id: str, *, now: datetime | None = None) -> CheckInStatus:
        now = now or now_local()
        today = now.date()

        shift = self._shift_service.get_shift_info(worker_id, today)
        record = self._checkins.get_for_worker_and_date(worker_id=worker_id, check_in_date=today)

        active = None
        if self._exceptions is not None:
            try:
                in_effect = periods_in_effect(self._exceptions.list_for_worker(worker_id=worker_id), today)
            except PersistenceError as e:
                logger.warning("Exception lookup failed for worker %s, showing none: %s", worker_id, e)
                in_effect = []
            active = in_effect[0] if in_effect else None

        return CheckInStatus(shift=shift, window=window_status(shift, now), today_record=record, active_exception=active)

    def submit(self, worker_id: str, payload: CheckInPayload, *, now: datetime | None = None) -> CheckInResult:
        if payload.predicted_readiness == Readiness.RED and not (payload.additional_notes or "").strip():
            raise ValidationError("Additional notes are required when not fit to work")

        now = now or now_local()
        today = now.date()

        shift = self._shift_service.get_shift_info(worker_id, today)
        status = window_status(shift, now)
        if not status.is_within_window:
            logger.info(
                "Worker %s checked in at %s outside window %s-%s",
                worker_id,
                status.current_time,
                shift.check_in_window.window_start,
                shift.check_in_window.window_end,
            )

        record = self._checkins.upsert(
            worker_id=worker_id,
            check_in_date=today,
            check_in_time=status.current_time,
            payload=payload,
            shift=ShiftSnapshot(shift_type=shift.shift_type, shift_start=shift.shift_start, shift_end=shift.shift_end),
        )

        deactivated = 0
        if payload.predicted_readiness == Readiness.RED:
            deactivated = self._deactivate_schedules(worker_id)

        return CheckInResult(record=record, window=status, deactivated_schedules=deactivated)

    def _deactivate_schedules(self, worker_id: str) -> int:
        # Schedules stay off until the team leader reactivates them.
        try:
            count = self._schedules.deactivate_all_for_worker(worker_id=worker_id)
        except PersistenceError as e:
            logger.error("Could not deactivate schedules for worker %s: %s", worker_id, e)
            return 0

        if count:
            logger.info("Deactivated %d active schedule(s) for worker %s (not fit to work)", count, worker_id)
        return count
