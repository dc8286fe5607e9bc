import os

from config.config import Config

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")
DB_CONFIG = Config.db_config()
DB_TIMEOUT_SECONDS = Config.DB_TIMEOUT_SECONDS
TIMEZONE = Config.TIMEZONE

ADMIN_USERNAME = Config.ADMIN_USERNAME
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "please-set-ADMIN_PASSWORD")

REPORT_TMP_DIR = Config.REPORT_TMP_DIR
LOG_LEVEL = Config.LOG_LEVEL
PORT = Config.PORT

DEBUG = False

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
