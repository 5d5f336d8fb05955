from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_mysql_date, normalize_mysql_time
from .model import ScheduleEntry
from .repository import ScheduleRepository

_COLUMNS = """
    schedule_id, worker_id, scheduled_date, day_of_week, start_time, end_time, is_active,
    effective_date, expiry_date, check_in_window_start, check_in_window_end,
    requires_daily_checkin, daily_checkin_start_time, daily_checkin_end_time
"""


def _to_entry(r: dict) -> ScheduleEntry:
    return ScheduleEntry(
        schedule_id=int(r["schedule_id"]),
        worker_id=str(r["worker_id"]),
        scheduled_date=normalize_mysql_date(r.get("scheduled_date")),
        day_of_week=int(r["day_of_week"]) if r.get("day_of_week") is not None else None,
        start_time=normalize_mysql_time(r["start_time"]),
        end_time=normalize_mysql_time(r["end_time"]),
        is_active=bool(r.get("is_active", 1)),
        effective_date=normalize_mysql_date(r.get("effective_date")),
        expiry_date=normalize_mysql_date(r.get("expiry_date")),
        check_in_window_start=normalize_mysql_time(r.get("check_in_window_start")),
        check_in_window_end=normalize_mysql_time(r.get("check_in_window_end")),
        requires_daily_check_in=bool(r.get("requires_daily_checkin") or 0),
        daily_check_in_start=normalize_mysql_time(r.get("daily_checkin_start_time")),
        daily_check_in_end=normalize_mysql_time(r.get("daily_checkin_end_time")),
    )


class MySQLScheduleRepository(ScheduleRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_active_for_worker(
        self,
        *,
        worker_id: str,
        scheduled_date: Optional[date] = None,
        day_of_week: Optional[int] = None,
    ) -> Sequence[ScheduleEntry]:
        clauses = ["worker_id=%s", "is_active=1"]
        params: list[object] = [str(worker_id)]
        if scheduled_date is not None:
            clauses.append("scheduled_date=%s AND day_of_week IS NULL")
            params.append(scheduled_date)
        if day_of_week is not None:
            clauses.append("day_of_week=%s AND scheduled_date IS NULL")
            params.append(int(day_of_week))

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM worker_schedules
                WHERE {where}
                ORDER BY start_time ASC, schedule_id ASC
                """,
                tuple(params),
            )
            return [_to_entry(r) for r in fetchall(cur)]

    def deactivate_all_for_worker(self, *, worker_id: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE worker_schedules SET is_active=0 WHERE worker_id=%s AND is_active=1",
                (str(worker_id),),
            )
            return int(cur.rowcount or 0)
