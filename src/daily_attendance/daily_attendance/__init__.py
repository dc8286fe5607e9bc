"""Daily Attendance package.

Employees check in/out once per day; admins query a date range and export
it as CSV. Organized by feature modules (attendance, reports) with a thin
Flask controller layer over service/repository layers.
"""
from __future__ import annotations

from .attendance.model import AttendanceRecord, Outcome
from .attendance.service import AttendanceService
from .container import Container, build_container
from .reports.model import NotFound, TabularResult
from .reports.service import ReportGenerator

__all__ = [
    "AttendanceRecord",
    "AttendanceService",
    "Container",
    "NotFound",
    "Outcome",
    "ReportGenerator",
    "TabularResult",
    "build_container",
]
