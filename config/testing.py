import os

from config import db_config_from_env

SECRET_KEY = "test-secret"
DB_CONFIG = db_config_from_env("checkin_test_db")

DEBUG = False
TESTING = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
AUTO_INIT_DB = False
