from __future__ import annotations

import logging
from contextlib import contextmanager
from datetime import date, datetime, time, timedelta
from typing import Any, Dict, List, Optional

import mysql.connector

from ..common.clock import ClockTime, format_time
from ..core.exceptions import PersistenceError
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Yield (conn, cursor); commit on success, rollback on failure.

    Driver errors surface as PersistenceError.
    """
    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as e:
        logger.error("Database connection failed: %s", e)
        raise PersistenceError("Database unavailable") from e

    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.Error as e:
        conn.rollback()
        logger.error("Database operation failed: %s", e)
        raise PersistenceError("Database operation failed") from e
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def normalize_mysql_time(value: Any) -> Optional[str]:
    """TIME column to "HH:MM".

    The connector hands TIME back as a timedelta (C extension), a
    datetime.time, or a string depending on version and cursor type.
    """
    if value is None:
        return None
    if isinstance(value, timedelta):
        return str(ClockTime.from_minutes(int(value.total_seconds()) // 60))
    if isinstance(value, time):
        return str(ClockTime(hours=value.hour, minutes=value.minute))
    if isinstance(value, (bytes, bytearray)):
        value = value.decode()
    if isinstance(value, str):
        return format_time(value)
    raise TypeError(f"Unsupported MySQL TIME value: {value!r}")


def normalize_mysql_date(value: Any) -> Optional[date]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return datetime.strptime(value.split("T")[0], "%Y-%m-%d").date()

    raise TypeError(f"Unsupported MySQL DATE value type: {type(value)!r}")
