from __future__ import annotations

import logging
from datetime import date

from flask import Flask, render_template, request

from ..common.auth import BasicAuth
from ..common.datetime_utils import parse_iso_date
from ..container import Container
from ..core.constants import DATE_FORMAT
from ..core.exceptions import SerializationError, StorageError, ValidationError
from .model import NotFound

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container, auth: BasicAuth) -> None:
    def _date_arg(name: str, default: date | None = None) -> date:
        value = request.args.get(name)
        if not value:
            if default is None:
                raise ValidationError(f"{name} is required")
            return default
        return parse_iso_date(value)

    @app.route("/admin", methods=["GET"], endpoint="admin")
    @auth.required
    def admin():
        today = container.attendance_service.today()
        try:
            start = _date_arg("startDate", today)
            end = _date_arg("endDate", today)
            records = container.attendance_service.query_attendance(start, end)
        except ValidationError as e:
            return str(e), 400
        except StorageError:
            logger.exception("Failed to fetch attendance records")
            return "An error occurred while fetching attendance records.", 500

        return render_template(
            "admin.html",
            records=records,
            startDate=start.strftime(DATE_FORMAT),
            endDate=end.strftime(DATE_FORMAT),
        )

    @app.route("/download-report", methods=["GET"], endpoint="download_report")
    @auth.required
    def download_report():
        try:
            start = _date_arg("startDate")
            end = _date_arg("endDate")
        except ValidationError as e:
            return str(e), 400

        filename = f"attendance_report_{start.strftime('%Y%m%d')}_{end.strftime('%Y%m%d')}.csv"
        try:
            with container.report_generator.generate_report(start, end, filename=filename) as result:
                if isinstance(result, NotFound):
                    return result.message, 404
                # Bytes are read before the generator deletes the file on exit.
                payload = result.artifact.read_bytes()
        except StorageError:
            logger.exception("Failed to fetch attendance records for report")
            return "An error occurred while fetching attendance records.", 500
        except (SerializationError, OSError):
            logger.exception("Failed to generate attendance report")
            return "An error occurred while generating the report.", 500

        return app.response_class(
            payload,
            mimetype=result.artifact.mimetype,
            headers={"Content-Disposition": f"attachment; filename={result.artifact.filename}"},
        )
