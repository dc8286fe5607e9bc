"""Shared settings read from the environment (``.env`` is loaded by create_app)."""
import os


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "dev-secret-key"

    DB_USER = os.environ.get("DB_USER", "root")
    DB_PASSWORD = os.environ.get("DB_PASSWORD", "")
    DB_HOST = os.environ.get("DB_HOST", "localhost")
    DB_PORT = int(os.environ.get("DB_PORT", "3306"))
    DB_NAME = os.environ.get("DB_NAME", "attendance_db")
    DB_TIMEOUT_SECONDS = int(os.environ.get("DB_TIMEOUT_SECONDS", "10"))

    # Attendance dates and times use this zone, not the server locale
    TIMEZONE = os.environ.get("TIMEZONE", "Asia/Kolkata")

    ADMIN_USERNAME = os.environ.get("ADMIN_USERNAME", "admin")
    ADMIN_PASSWORD = os.environ.get("ADMIN_PASSWORD", "yourpassword")

    REPORT_TMP_DIR = os.environ.get("REPORT_TMP_DIR") or None
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
    PORT = int(os.environ.get("PORT", "3000"))

    @classmethod
    def db_config(cls) -> dict:
        return {
            "host": cls.DB_HOST,
            "port": cls.DB_PORT,
            "user": cls.DB_USER,
            "password": cls.DB_PASSWORD,
            "database": cls.DB_NAME,
        }
