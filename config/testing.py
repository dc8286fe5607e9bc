import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_test"),
}
DB_TIMEOUT_SECONDS = 2
TIMEZONE = "Asia/Kolkata"

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "test-password"

REPORT_TMP_DIR = None
LOG_LEVEL = "WARNING"
PORT = 3000

DEBUG = False
TESTING = True

AUTO_INIT_DB = False
