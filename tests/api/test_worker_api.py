from datetime import datetime

import pytest

from src.checkin_system.checkin_system.checkins import service as checkin_service_module
from src.checkin_system.checkin_system.checkins.model import CheckInRecord
from src.checkin_system.checkin_system.container import build_services
from src.checkin_system.checkin_system.core.exceptions import PersistenceError
from src.checkin_system.checkin_system.main import create_app
from src.checkin_system.checkin_system.schedules import controller as schedules_controller
from src.checkin_system.checkin_system.schedules.model import ScheduleEntry
from src.checkin_system.checkin_system.streaks import service as streak_service_module

NOW = datetime(2025, 6, 15, 5, 30)  # Sunday


class InMemorySchedules:
    def __init__(self, entries=()):
        self.entries = list(entries)

    def list_active_for_worker(self, *, worker_id, scheduled_date=None, day_of_week=None):
        out = [e for e in self.entries if e.worker_id == worker_id and e.is_active]
        if scheduled_date is not None:
            out = [e for e in out if e.scheduled_date == scheduled_date]
        if day_of_week is not None:
            out = [e for e in out if e.day_of_week == day_of_week]
        return out

    def deactivate_all_for_worker(self, *, worker_id):
        return 0


class FailingSchedules(InMemorySchedules):
    def list_active_for_worker(self, **kwargs):
        raise PersistenceError("db down")


class InMemoryCheckIns:
    def __init__(self):
        self.rows = {}

    def list_dates(self, *, worker_id, start, end):
        return [d for (w, d) in self.rows if w == worker_id and start <= d <= end]

    def get_for_worker_and_date(self, *, worker_id, check_in_date):
        return self.rows.get((worker_id, check_in_date))

    def upsert(self, *, worker_id, check_in_date, check_in_time, payload, shift):
        record = CheckInRecord(len(self.rows) + 1, worker_id, check_in_date, check_in_time, payload, shift)
        self.rows[(worker_id, check_in_date)] = record
        return record


class NoExceptions:
    def list_for_worker(self, *, worker_id):
        return []


def _entries():
    return [
        ScheduleEntry(schedule_id=1, worker_id="w", start_time="08:00", end_time="16:00", day_of_week=0),
        ScheduleEntry(schedule_id=2, worker_id="w", start_time="22:00", end_time="06:00", day_of_week=6),
    ]


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    monkeypatch.setattr(schedules_controller, "now_local", lambda: NOW)
    monkeypatch.setattr(checkin_service_module, "now_local", lambda: NOW)
    monkeypatch.setattr(streak_service_module, "now_local", lambda: NOW)

    container = build_services(
        schedules_repo=InMemorySchedules(_entries()),
        checkins_repo=InMemoryCheckIns(),
        exceptions_repo=NoExceptions(),
    )
    app = create_app(container=container)
    return app.test_client()


def test_shift_info_today(client):
    res = client.get("/api/workers/w/shift-info")

    assert res.status_code == 200
    body = res.get_json()
    assert body["hasShift"] is True
    assert body["shiftType"] == "morning"
    assert body["scheduleSource"] == "team_leader"
    assert body["checkInWindow"]["windowStart"] == "04:00"
    assert body["isWithinWindow"] is True


def test_shift_info_for_date_without_shift(client):
    body = client.get("/api/workers/w/shift-info?date=2025-06-16").get_json()

    assert body["hasShift"] is False
    assert body["shiftType"] == "flexible"
    assert body["scheduleSource"] == "none"
    assert "isWithinWindow" not in body


def test_shift_info_rejects_bad_date(client):
    res = client.get("/api/workers/w/shift-info?date=16-06-2025")

    assert res.status_code == 400
    assert res.get_json()["success"] is False


def test_next_shift_defaults_to_tomorrow(client):
    body = client.get("/api/workers/w/next-shift-info").get_json()

    assert body["date"] == "2025-06-21"
    assert body["dayName"] == "Saturday"
    assert body["shiftType"] == "night"
    assert body["checkInWindow"]["windowStart"] == "19:00"


def test_next_shift_from_date(client):
    body = client.get("/api/workers/w/next-shift-info?from=2025-06-15").get_json()

    assert body["date"] == "2025-06-15"


def test_dashboard(client):
    body = client.get("/api/workers/w/dashboard").get_json()

    assert body["shift"]["today"]["hasShift"] is True
    assert body["shift"]["today"]["currentTime"] == "05:30"
    assert body["shift"]["next"]["date"] == "2025-06-21"


def test_submit_and_streak(client):
    res = client.post(
        "/api/workers/w/checkins",
        json={"painLevel": 1, "fatigueLevel": 2, "sleepQuality": 7, "stressLevel": 2, "predictedReadiness": "Green"},
    )

    assert res.status_code == 200
    body = res.get_json()
    assert body["success"] is True
    assert body["isWithinWindow"] is True
    assert body["checkIn"]["checkInDate"] == "2025-06-15"

    status = client.get("/api/workers/w/checkins/status").get_json()
    assert status["hasCheckedIn"] is True

    streak = client.get("/api/workers/w/streak").get_json()
    assert streak["currentStreak"] == 1
    assert streak["todayCheckInCompleted"] is True
    assert streak["nextCheckInDate"] == "2025-06-21"


def test_submit_rejects_invalid_body(client):
    res = client.post("/api/workers/w/checkins", json={"predictedReadiness": "Red"})

    assert res.status_code == 400
    assert res.get_json()["success"] is False


def test_submit_rejects_non_object_body(client):
    res = client.post("/api/workers/w/checkins", json=[1, 2])

    assert res.status_code == 400
    assert res.get_json()["success"] is False


def test_storage_failure_maps_to_500(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    container = build_services(
        schedules_repo=FailingSchedules(),
        checkins_repo=InMemoryCheckIns(),
        exceptions_repo=NoExceptions(),
    )
    client = create_app(container=container).test_client()

    assert client.get("/api/workers/w/shift-info?date=2025-06-15").status_code == 500
    assert client.get("/api/workers/w/streak").status_code == 500
    assert client.get("/api/workers/w/next-shift-info?from=2025-06-15").status_code == 500


def test_search_horizon_is_configurable(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    container = build_services(
        schedules_repo=InMemorySchedules(_entries()),
        checkins_repo=InMemoryCheckIns(),
        exceptions_repo=NoExceptions(),
        max_days_ahead=3,
    )
    client = create_app(container=container).test_client()

    body = client.get("/api/workers/w/next-shift-info?from=2025-06-16").get_json()

    assert body["hasShift"] is False
    assert body["date"] is None
