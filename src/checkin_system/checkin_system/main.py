from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .checkins.controller import register as register_checkins
from .container import Container, build_container
from .core.constants import NEXT_SHIFT_MAX_DAYS, STREAK_LOOKBACK_DAYS
from .database.bootstrap import apply_schema, list_tables
from .schedules.controller import register as register_schedules
from .streaks.controller import register as register_streaks

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config)
            logger.info("schema ready (tables=%s)", ", ".join(list_tables(db_config)))

        container = build_container(
            db_config=db_config,
            max_days_ahead=int(getattr(settings, "NEXT_SHIFT_MAX_DAYS", NEXT_SHIFT_MAX_DAYS)),
            lookback_days=int(getattr(settings, "STREAK_LOOKBACK_DAYS", STREAK_LOOKBACK_DAYS)),
        )

    register_schedules(app, container)
    register_checkins(app, container)
    register_streaks(app, container)

    return app
