"""Create the database (if needed) and apply database/schema.sql.

Usage: APP_ENV=development python scripts/init_db.py
"""

from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.checkin_system.checkin_system.core.exceptions import PersistenceError
from src.checkin_system.checkin_system.database.bootstrap import apply_schema, list_tables

logger = logging.getLogger("init_db")


def main() -> int:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"), format="%(levelname)s %(message)s")

    db_config = dict(settings.DB_CONFIG)
    try:
        apply_schema(db_config)
        tables = list_tables(db_config)
    except PersistenceError as e:
        logger.error("Schema setup failed: %s", e)
        return 1

    logger.info("%s on %s:%s ready: %s", db_config["database"], db_config["host"], db_config["port"], ", ".join(tables))
    return 0


if __name__ == "__main__":
    sys.exit(main())
