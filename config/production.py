import os

from config import db_config_from_env

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")
DB_CONFIG = db_config_from_env("checkin_db")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
AUTO_INIT_DB = os.getenv("AUTO_INIT_DB", "0") == "1"

NEXT_SHIFT_MAX_DAYS = int(os.getenv("NEXT_SHIFT_MAX_DAYS", "730"))
STREAK_LOOKBACK_DAYS = int(os.getenv("STREAK_LOOKBACK_DAYS", "30"))
