from dataclasses import replace
from datetime import date, datetime

import pytest

from src.checkin_system.checkin_system.absences.model import ExceptionPeriod
from src.checkin_system.checkin_system.checkins.model import CheckInPayload, CheckInRecord
from src.checkin_system.checkin_system.checkins.service import CheckInService, build_payload
from src.checkin_system.checkin_system.core.enums import ExceptionType, Readiness, ShiftType
from src.checkin_system.checkin_system.core.exceptions import PersistenceError, ValidationError
from src.checkin_system.checkin_system.schedules.model import ScheduleEntry
from src.checkin_system.checkin_system.schedules.service import ShiftService

# Sunday; an 08:00 shift has its window at 04:00-07:00
EARLY = datetime(2025, 6, 15, 5, 30)
LATE = datetime(2025, 6, 15, 10, 0)


class InMemorySchedules:
    def __init__(self, entries):
        self.entries = list(entries)

    def list_active_for_worker(self, *, worker_id, scheduled_date=None, day_of_week=None):
        out = [e for e in self.entries if e.worker_id == worker_id and e.is_active]
        if scheduled_date is not None:
            out = [e for e in out if e.scheduled_date == scheduled_date]
        if day_of_week is not None:
            out = [e for e in out if e.day_of_week == day_of_week]
        return out

    def deactivate_all_for_worker(self, *, worker_id):
        count = 0
        for i, e in enumerate(self.entries):
            if e.worker_id == worker_id and e.is_active:
                self.entries[i] = replace(e, is_active=False)
                count += 1
        return count


class NoDeactivateSchedules(InMemorySchedules):
    def deactivate_all_for_worker(self, *, worker_id):
        raise PersistenceError("locked")


class InMemoryCheckIns:
    def __init__(self):
        self.rows = {}

    def list_dates(self, *, worker_id, start, end):
        return [d for (w, d) in self.rows if w == worker_id and start <= d <= end]

    def get_for_worker_and_date(self, *, worker_id, check_in_date):
        return self.rows.get((worker_id, check_in_date))

    def upsert(self, *, worker_id, check_in_date, check_in_time, payload, shift):
        existing = self.rows.get((worker_id, check_in_date))
        record = CheckInRecord(
            checkin_id=existing.checkin_id if existing else len(self.rows) + 1,
            worker_id=worker_id,
            check_in_date=check_in_date,
            check_in_time=check_in_time,
            payload=payload,
            shift=shift,
        )
        self.rows[(worker_id, check_in_date)] = record
        return record


class InMemoryExceptions:
    def __init__(self, periods=()):
        self.periods = list(periods)

    def list_for_worker(self, *, worker_id):
        return [p for p in self.periods if p.worker_id == worker_id]


class FailingExceptions:
    def list_for_worker(self, *, worker_id):
        raise PersistenceError("down")


def _sunday_shift():
    return ScheduleEntry(schedule_id=1, worker_id="w", start_time="08:00", end_time="16:00", day_of_week=0)


def _service(schedules=None, exceptions=None):
    schedules = schedules or InMemorySchedules([_sunday_shift()])
    checkins = InMemoryCheckIns()
    service = CheckInService(checkins, schedules, ShiftService(schedules), exceptions)
    return service, checkins, schedules


def _payload(readiness=Readiness.GREEN, notes=None):
    return CheckInPayload(
        pain_level=1,
        fatigue_level=2,
        sleep_quality=8,
        stress_level=3,
        predicted_readiness=readiness,
        additional_notes=notes,
    )


def test_build_payload_valid():
    payload = build_payload(
        {
            "painLevel": 0,
            "fatigueLevel": 10,
            "sleepQuality": 12,
            "stressLevel": 5,
            "predictedReadiness": "Yellow",
            "additionalNotes": "  sore back  ",
        }
    )

    assert payload.predicted_readiness == Readiness.YELLOW
    assert payload.sleep_quality == 12
    assert payload.additional_notes == "sore back"


@pytest.mark.parametrize(
    "override",
    [
        {"predictedReadiness": "Purple"},
        {"predictedReadiness": None},
        {"painLevel": 11},
        {"fatigueLevel": -1},
        {"sleepQuality": 13},
        {"stressLevel": "3"},
        {"painLevel": True},
        {"predictedReadiness": "Red"},
        {"predictedReadiness": "Red", "additionalNotes": "   "},
        {"additionalNotes": 5},
        {"additionalNotes": ["tired"]},
    ],
)
def test_build_payload_rejects(override):
    data = {"painLevel": 1, "fatigueLevel": 1, "sleepQuality": 6, "stressLevel": 1, "predictedReadiness": "Green"}
    data.update(override)

    with pytest.raises(ValidationError):
        build_payload(data)


def test_submit_inside_window_saves_shift_snapshot():
    service, checkins, _ = _service()

    result = service.submit("w", _payload(), now=EARLY)

    assert result.window.is_within_window is True
    assert result.window.is_within_recommended is True
    assert result.record.check_in_time == "05:30"
    assert result.record.shift.shift_type == ShiftType.MORNING
    assert result.record.shift.shift_start == "08:00"
    assert checkins.get_for_worker_and_date(worker_id="w", check_in_date=date(2025, 6, 15)) is not None
    assert result.deactivated_schedules == 0


def test_submit_outside_window_is_still_saved():
    service, checkins, _ = _service()

    result = service.submit("w", _payload(), now=LATE)

    assert result.window.is_within_window is False
    assert len(checkins.rows) == 1


def test_resubmission_overwrites_same_day():
    service, checkins, _ = _service()

    first = service.submit("w", _payload(), now=EARLY)
    second = service.submit("w", _payload(Readiness.YELLOW), now=LATE)

    assert len(checkins.rows) == 1
    assert second.record.checkin_id == first.record.checkin_id
    assert second.record.payload.predicted_readiness == Readiness.YELLOW


def test_red_check_in_deactivates_schedules():
    service, _, schedules = _service()

    result = service.submit("w", _payload(Readiness.RED, "twisted ankle"), now=EARLY)

    assert result.deactivated_schedules == 1
    assert all(not e.is_active for e in schedules.entries)


def test_red_check_in_survives_deactivation_failure():
    schedules = NoDeactivateSchedules([_sunday_shift()])
    service, checkins, _ = _service(schedules=schedules)

    result = service.submit("w", _payload(Readiness.RED, "fever"), now=EARLY)

    assert result.deactivated_schedules == 0
    assert len(checkins.rows) == 1


def test_red_without_notes_is_rejected():
    service, checkins, _ = _service()

    with pytest.raises(ValidationError):
        service.submit("w", _payload(Readiness.RED), now=EARLY)
    assert checkins.rows == {}


def test_status_reports_window_and_check_in():
    service, _, _ = _service()

    before = service.get_status("w", now=EARLY).to_dict()
    service.submit("w", _payload(), now=EARLY)
    after = service.get_status("w", now=EARLY).to_dict()

    assert before["hasShift"] is True
    assert before["isWithinWindow"] is True
    assert before["hasCheckedIn"] is False
    assert after["hasCheckedIn"] is True
    assert after["checkIn"]["checkInTime"] == "05:30"


def test_status_shows_active_exception():
    leave = ExceptionPeriod(worker_id="w", start_date=date(2025, 6, 1), exception_type=ExceptionType.INJURY, reason="wrist")
    service, _, _ = _service(exceptions=InMemoryExceptions([leave]))

    body = service.get_status("w", now=EARLY).to_dict()

    assert body["hasActiveException"] is True
    assert body["exception"]["label"] == "Injury"
    assert body["exception"]["endDate"] is None


def test_status_tolerates_exception_lookup_failure():
    service, _, _ = _service(exceptions=FailingExceptions())

    body = service.get_status("w", now=EARLY).to_dict()

    assert body["hasActiveException"] is False
    assert body["exception"] is None


@pytest.mark.parametrize("body", [[1, 2], "Green", 7])
def test_build_payload_requires_object_body(body):
    with pytest.raises(ValidationError):
        build_payload(body)
