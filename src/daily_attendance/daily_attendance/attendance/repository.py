from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import Action
from .model import AttendanceRecord


class AttendanceStore(Protocol):
    """Persistent table of attendance rows, unique per (employee_name, work_date)."""

    def find_by_employee_and_date(self, employee_name: str, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def insert(self, *, employee_name: str, work_date: date, field: Action, time_value: str) -> int:
        raise NotImplementedError

    def update_field(self, *, record_id: int, field: Action, time_value: str) -> None:
        raise NotImplementedError

    def query_range(self, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError
