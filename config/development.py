import os

from config.config import Config

SECRET_KEY = Config.SECRET_KEY
DB_CONFIG = Config.db_config()
DB_TIMEOUT_SECONDS = Config.DB_TIMEOUT_SECONDS
TIMEZONE = Config.TIMEZONE

ADMIN_USERNAME = Config.ADMIN_USERNAME
ADMIN_PASSWORD = Config.ADMIN_PASSWORD

REPORT_TMP_DIR = Config.REPORT_TMP_DIR
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()
PORT = Config.PORT

DEBUG = True

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
