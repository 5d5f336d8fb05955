import os

from config import db_config_from_env

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")
DB_CONFIG = db_config_from_env("checkin_db")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# schema.sql is applied on startup when set
AUTO_INIT_DB = os.getenv("AUTO_INIT_DB", "1") == "1"

NEXT_SHIFT_MAX_DAYS = int(os.getenv("NEXT_SHIFT_MAX_DAYS", "730"))
STREAK_LOOKBACK_DAYS = int(os.getenv("STREAK_LOOKBACK_DAYS", "30"))
