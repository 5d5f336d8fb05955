from __future__ import annotations

from typing import Sequence

from ..core.enums import ExceptionType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_mysql_date
from .model import ExceptionPeriod
from .repository import ExceptionRepository


def _exception_type(value) -> ExceptionType:
    try:
        return ExceptionType(str(value or "other"))
    except ValueError:
        return ExceptionType.OTHER


class MySQLExceptionRepository(ExceptionRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_worker(self, *, worker_id: str) -> Sequence[ExceptionPeriod]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT exception_id, worker_id, exception_type, reason, start_date, end_date,
                       is_active, deactivated_at
                FROM worker_exceptions
                WHERE worker_id=%s
                ORDER BY start_date DESC
                """,
                (str(worker_id),),
            )
            return [
                ExceptionPeriod(
                    exception_id=int(r["exception_id"]),
                    worker_id=str(r["worker_id"]),
                    exception_type=_exception_type(r.get("exception_type")),
                    reason=r.get("reason"),
                    start_date=normalize_mysql_date(r["start_date"]),
                    end_date=normalize_mysql_date(r.get("end_date")),
                    is_active=bool(r.get("is_active", 1)),
                    deactivated_at=r.get("deactivated_at"),
                )
                for r in fetchall(cur)
            ]
