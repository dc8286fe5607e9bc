from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceStore
from .attendance.service import AttendanceService
from .common.datetime_utils import Clock
from .core.constants import DEFAULT_TIMEZONE
from .database.connection import DBConfig, DatabaseConnection
from .reports.serializer import CsvReportSerializer
from .reports.service import ReportGenerator


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection
    attendance_store: MySQLAttendanceStore
    clock: Clock

    attendance_service: AttendanceService
    report_generator: ReportGenerator

    def close(self) -> None:
        self.attendance_store.close()


def build_container(
    *,
    db_config: dict,
    timezone_name: str = DEFAULT_TIMEZONE,
    timeout_seconds: int | None = None,
    report_tmp_dir: str | None = None,
) -> Container:
    config = DBConfig.from_dict(db_config, timeout_seconds=timeout_seconds)
    conn = DatabaseConnection(config)
    clock = Clock(timezone_name)

    attendance_store = MySQLAttendanceStore(conn)
    attendance_service = AttendanceService(attendance_store, clock=clock)
    report_generator = ReportGenerator(attendance_store, serializer=CsvReportSerializer(report_tmp_dir))

    return Container(
        conn=conn,
        attendance_store=attendance_store,
        clock=clock,
        attendance_service=attendance_service,
        report_generator=report_generator,
    )
