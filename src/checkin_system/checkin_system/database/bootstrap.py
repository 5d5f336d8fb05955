"""Schema setup for a fresh or existing MySQL database."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterator

import mysql.connector

from ..core.exceptions import PersistenceError
from .connection import DBConfig, DatabaseConnection

logger = logging.getLogger(__name__)

DEFAULT_SCHEMA_PATH = Path(__file__).resolve().parents[4] / "database" / "schema.sql"

# Dropped before execution: the target database comes from DB_CONFIG.
_SKIPPED_LINE = re.compile(r"^\s*(--|CREATE\s+DATABASE\b|USE\b)", re.IGNORECASE)


def _prepare(sql: str) -> str:
    return "\n".join(line for line in sql.splitlines() if not _SKIPPED_LINE.match(line))


def iter_sql_statements(sql: str) -> Iterator[str]:
    """Split on ';' outside quoted literals. Backslash escapes the next char."""
    start = 0
    quote = None
    i = 0
    while i < len(sql):
        ch = sql[i]
        if ch == "\\":
            i += 2
            continue
        if quote:
            if ch == quote:
                quote = None
        elif ch in ("'", '"'):
            quote = ch
        elif ch == ";":
            stmt = sql[start:i].strip()
            if stmt:
                yield stmt
            start = i + 1
        i += 1

    tail = sql[start:].strip()
    if tail:
        yield tail


def ensure_database_exists(db_config: dict) -> None:
    target = DBConfig.from_dict(db_config)
    conn = DatabaseConnection(target).connect(with_database=False)
    try:
        conn.cursor().execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: str | Path = DEFAULT_SCHEMA_PATH) -> int:
    """Create the database if missing and run every statement of `schema_path`.

    The schema uses CREATE TABLE IF NOT EXISTS, so re-running is harmless.
    Returns the number of statements executed.
    """
    statements = list(iter_sql_statements(_prepare(Path(schema_path).read_text(encoding="utf-8"))))
    target = DBConfig.from_dict(db_config)

    try:
        ensure_database_exists(db_config)
        conn = DatabaseConnection(target).connect()
        try:
            cur = conn.cursor()
            for stmt in statements:
                cur.execute(stmt)
            conn.commit()
        finally:
            conn.close()
    except mysql.connector.Error as e:
        logger.error("Applying %s to %s failed: %s", schema_path, target.database, e)
        raise PersistenceError(f"Could not apply schema to {target.database}") from e

    logger.info("Applied %d schema statement(s) to %s", len(statements), target.database)
    return len(statements)


def list_tables(db_config: dict) -> list[str]:
    try:
        conn = DatabaseConnection(DBConfig.from_dict(db_config)).connect()
    except mysql.connector.Error as e:
        raise PersistenceError("Database unavailable") from e
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return sorted(row[0] for row in cur.fetchall())
    finally:
        conn.close()
