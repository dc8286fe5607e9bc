from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import Action
from ..core.exceptions import StorageError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceRecord
from .repository import AttendanceStore

_SELECT_COLUMNS = "id, employee_name, work_date, check_in, check_out"

# One pre-written statement per action: the column name never comes from input.
_INSERT_SQL = {
    Action.CHECK_IN: "INSERT INTO attendance(employee_name, work_date, check_in) VALUES(%s,%s,%s)",
    Action.CHECK_OUT: "INSERT INTO attendance(employee_name, work_date, check_out) VALUES(%s,%s,%s)",
}
_UPDATE_SQL = {
    Action.CHECK_IN: "UPDATE attendance SET check_in=%s WHERE id=%s",
    Action.CHECK_OUT: "UPDATE attendance SET check_out=%s WHERE id=%s",
}


def _to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        record_id=int(r["id"]),
        employee_name=r["employee_name"],
        work_date=r["work_date"],
        check_in=r.get("check_in"),
        check_out=r.get("check_out"),
    )


class MySQLAttendanceStore(AttendanceStore):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def open(self) -> "MySQLAttendanceStore":
        self._conn_factory.open()
        return self

    def close(self) -> None:
        self._conn_factory.close()

    def __enter__(self) -> "MySQLAttendanceStore":
        return self.open()

    def __exit__(self, *exc_info) -> None:
        self.close()

    def find_by_employee_and_date(self, employee_name: str, work_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_SELECT_COLUMNS}
                FROM attendance
                WHERE employee_name=%s AND work_date=%s
                """,
                (employee_name, work_date),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def insert(self, *, employee_name: str, work_date: date, field: Action, time_value: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_INSERT_SQL[Action(field)], (employee_name, work_date, time_value))
            return int(cur.lastrowid)

    def update_field(self, *, record_id: int, field: Action, time_value: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_UPDATE_SQL[Action(field)], (time_value, int(record_id)))
            if cur.rowcount == 0:
                # MySQL reports 0 for an unchanged value too, so confirm the row exists.
                cur.execute("SELECT id FROM attendance WHERE id=%s", (int(record_id),))
                if not fetchone(cur):
                    raise StorageError(f"Attendance record {record_id} does not exist")

    def query_range(self, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_SELECT_COLUMNS}
                FROM attendance
                WHERE work_date BETWEEN %s AND %s
                ORDER BY work_date DESC, employee_name ASC, id ASC
                """,
                (start_date, end_date),
            )
            return [_to_record(r) for r in fetchall(cur)]
