from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import Readiness, ShiftType
from ..core.exceptions import PersistenceError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_date, normalize_mysql_time
from .model import CheckInPayload, CheckInRecord, ShiftSnapshot
from .repository import CheckInRepository

_COLUMNS = """
    checkin_id, worker_id, check_in_date, check_in_time, pain_level, fatigue_level,
    sleep_quality, stress_level, predicted_readiness, additional_notes,
    shift_type, shift_start_time, shift_end_time
"""


def _to_record(r: dict) -> CheckInRecord:
    return CheckInRecord(
        checkin_id=int(r["checkin_id"]),
        worker_id=str(r["worker_id"]),
        check_in_date=normalize_mysql_date(r["check_in_date"]),
        check_in_time=normalize_mysql_time(r["check_in_time"]),
        payload=CheckInPayload(
            pain_level=int(r["pain_level"]),
            fatigue_level=int(r["fatigue_level"]),
            sleep_quality=int(r["sleep_quality"]),
            stress_level=int(r["stress_level"]),
            predicted_readiness=Readiness(r["predicted_readiness"]),
            additional_notes=r.get("additional_notes"),
        ),
        shift=ShiftSnapshot(
            shift_type=ShiftType(r["shift_type"]),
            shift_start=normalize_mysql_time(r.get("shift_start_time")),
            shift_end=normalize_mysql_time(r.get("shift_end_time")),
        ),
    )


class MySQLCheckInRepository(CheckInRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_dates(self, *, worker_id: str, start: date, end: date) -> Sequence[date]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT check_in_date
                FROM daily_checkins
                WHERE worker_id=%s AND check_in_date BETWEEN %s AND %s
                ORDER BY check_in_date DESC
                """,
                (str(worker_id), start, end),
            )
            return [normalize_mysql_date(r["check_in_date"]) for r in fetchall(cur)]

    def get_for_worker_and_date(self, *, worker_id: str, check_in_date: date) -> Optional[CheckInRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM daily_checkins WHERE worker_id=%s AND check_in_date=%s",
                (str(worker_id), check_in_date),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def upsert(
        self,
        *,
        worker_id: str,
        check_in_date: date,
        check_in_time: str,
        payload: CheckInPayload,
        shift: ShiftSnapshot,
    ) -> CheckInRecord:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO daily_checkins(
                    worker_id, check_in_date, check_in_time, pain_level, fatigue_level,
                    sleep_quality, stress_level, predicted_readiness, additional_notes,
                    shift_type, shift_start_time, shift_end_time
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    check_in_time=VALUES(check_in_time),
                    pain_level=VALUES(pain_level),
                    fatigue_level=VALUES(fatigue_level),
                    sleep_quality=VALUES(sleep_quality),
                    stress_level=VALUES(stress_level),
                    predicted_readiness=VALUES(predicted_readiness),
                    additional_notes=VALUES(additional_notes),
                    shift_type=VALUES(shift_type),
                    shift_start_time=VALUES(shift_start_time),
                    shift_end_time=VALUES(shift_end_time)
                """,
                (
                    str(worker_id),
                    check_in_date,
                    check_in_time,
                    payload.pain_level,
                    payload.fatigue_level,
                    payload.sleep_quality,
                    payload.stress_level,
                    payload.predicted_readiness.value,
                    payload.additional_notes,
                    shift.shift_type.value,
                    shift.shift_start,
                    shift.shift_end,
                ),
            )

            # On update lastrowid can be 0; read the row back either way.
            cur.execute(
                f"SELECT {_COLUMNS} FROM daily_checkins WHERE worker_id=%s AND check_in_date=%s",
                (str(worker_id), check_in_date),
            )
            r = fetchone(cur)
            if not r:
                raise PersistenceError("Check-in was not saved")
            return _to_record(r)
