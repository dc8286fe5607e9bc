from __future__ import annotations

import logging

from flask import Flask, redirect, render_template, request, url_for

from ..container import Container
from ..core.exceptions import StorageError, ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/", methods=["GET"], endpoint="index")
    def index():
        return render_template("index.html")

    @app.route("/attendance", methods=["POST"], endpoint="attendance")
    def attendance():
        employee_name = request.form.get("employeeName", "")
        action = request.form.get("action", "")

        try:
            outcome = container.attendance_service.record_action(employee_name, action)
        except ValidationError as e:
            return render_template("index.html", error=str(e), employee_name=employee_name), 400
        except StorageError:
            logger.exception("Failed to record %r for %r", action, employee_name)
            return "An error occurred while saving attendance.", 500

        if not outcome.is_success:
            return render_template("already.html", message=outcome.message)
        return redirect(url_for("success"))

    @app.route("/success", methods=["GET"], endpoint="success")
    def success():
        return render_template("success.html")
