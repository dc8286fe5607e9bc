from __future__ import annotations

import atexit
import importlib
import logging
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.auth import BasicAuth
from .container import Container, build_container
from .database.bootstrap import apply_schema
from .reports.controller import register as register_reports

logger = logging.getLogger(__name__)

_ROOT = Path(__file__).resolve().parents[3]


def create_app(container: Container | None = None, *, settings_module: str | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder=str(_ROOT / "templates"), static_folder=str(_ROOT / "static"))

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["PORT"] = int(getattr(settings, "PORT", 3000))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        container = build_container(
            db_config=db_config,
            timezone_name=getattr(settings, "TIMEZONE"),
            timeout_seconds=int(getattr(settings, "DB_TIMEOUT_SECONDS")),
            report_tmp_dir=getattr(settings, "REPORT_TMP_DIR", None),
        )
        logger.info(
            "settings=%s db=%s@%s:%s/%s tz=%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
            container.clock.timezone_name,
        )
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(container.conn.config)
        container.attendance_store.open()
        atexit.register(container.close)

    app.extensions["attendance_container"] = container

    auth = BasicAuth(getattr(settings, "ADMIN_USERNAME"), getattr(settings, "ADMIN_PASSWORD"))
    register_attendance(app, container)
    register_reports(app, container, auth)

    return app
