from __future__ import annotations

import time as _time
from datetime import date
from threading import Lock
from typing import Optional

import pytest

from src.daily_attendance.daily_attendance.attendance.model import AttendanceRecord
from src.daily_attendance.daily_attendance.attendance.service import AttendanceService
from src.daily_attendance.daily_attendance.common.datetime_utils import Clock
from src.daily_attendance.daily_attendance.core.enums import Action
from src.daily_attendance.daily_attendance.core.exceptions import DuplicateRecordError, StorageError


class InMemoryAttendanceStore:
    """Dict-backed store with the same unique (employee, date) rule as the table."""

    def __init__(self, *, read_delay: float = 0.0):
        self._rows: dict[int, AttendanceRecord] = {}
        self._id = 0
        self._mutex = Lock()
        self.read_delay = read_delay
        self.inserts = 0
        self.updates = 0

    def find_by_employee_and_date(self, employee_name: str, work_date: date) -> Optional[AttendanceRecord]:
        if self.read_delay:
            # Widen the read-then-write window for race tests.
            _time.sleep(self.read_delay)
        with self._mutex:
            for r in self._rows.values():
                if r.employee_name == employee_name and r.work_date == work_date:
                    return r
        return None

    def insert(self, *, employee_name: str, work_date: date, field: Action, time_value: str) -> int:
        with self._mutex:
            for r in self._rows.values():
                if r.employee_name == employee_name and r.work_date == work_date:
                    raise DuplicateRecordError(f"Duplicate entry '{employee_name}-{work_date}'")
            self._id += 1
            self._rows[self._id] = AttendanceRecord(
                record_id=self._id,
                employee_name=employee_name,
                work_date=work_date,
                check_in=time_value if field is Action.CHECK_IN else None,
                check_out=time_value if field is Action.CHECK_OUT else None,
            )
            self.inserts += 1
            return self._id

    def update_field(self, *, record_id: int, field: Action, time_value: str) -> None:
        with self._mutex:
            r = self._rows.get(record_id)
            if r is None:
                raise StorageError(f"Attendance record {record_id} does not exist")
            self._rows[record_id] = AttendanceRecord(
                record_id=r.record_id,
                employee_name=r.employee_name,
                work_date=r.work_date,
                check_in=time_value if field is Action.CHECK_IN else r.check_in,
                check_out=time_value if field is Action.CHECK_OUT else r.check_out,
            )
            self.updates += 1

    def query_range(self, start_date: date, end_date: date):
        with self._mutex:
            items = [r for r in self._rows.values() if start_date <= r.work_date <= end_date]
        items.sort(key=lambda r: r.record_id)
        items.sort(key=lambda r: r.employee_name)
        items.sort(key=lambda r: r.work_date, reverse=True)
        return items

    def all(self) -> list[AttendanceRecord]:
        return list(self._rows.values())


@pytest.fixture
def store() -> InMemoryAttendanceStore:
    return InMemoryAttendanceStore()


@pytest.fixture
def clock() -> Clock:
    return Clock("Asia/Kolkata")


@pytest.fixture
def service(store, clock) -> AttendanceService:
    return AttendanceService(store, clock=clock)
