from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.constants import (
    REASON_ALREADY_CHECKED_IN,
    REASON_ALREADY_CHECKED_OUT,
    REASON_ALREADY_COMPLETE,
)
from ..core.enums import Action, OutcomeKind


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee's attendance for one calendar day."""

    record_id: int
    employee_name: str
    work_date: date
    check_in: Optional[str] = None
    check_out: Optional[str] = None

    def get(self, field: Action) -> Optional[str]:
        return self.check_in if field is Action.CHECK_IN else self.check_out

    @property
    def is_complete(self) -> bool:
        return self.check_in is not None and self.check_out is not None


_MESSAGES = {
    REASON_ALREADY_COMPLETE: "You have already checked in and out for today.",
    REASON_ALREADY_CHECKED_IN: "You have already checked in for today.",
    REASON_ALREADY_CHECKED_OUT: "You have already checked out for today.",
}


@dataclass(frozen=True)
class Outcome:
    """Result of ``record_action``: CREATED / UPDATED / REJECTED(reason).

    Rejected is a normal result, not an error.
    """

    kind: OutcomeKind
    action: Action
    reason: Optional[str] = None
    record: Optional[AttendanceRecord] = None

    @classmethod
    def created(cls, action: Action, record: AttendanceRecord) -> "Outcome":
        return cls(OutcomeKind.CREATED, action, record=record)

    @classmethod
    def updated(cls, action: Action, record: AttendanceRecord) -> "Outcome":
        return cls(OutcomeKind.UPDATED, action, record=record)

    @classmethod
    def rejected(cls, action: Action, reason: str, record: AttendanceRecord) -> "Outcome":
        return cls(OutcomeKind.REJECTED, action, reason=reason, record=record)

    @property
    def is_success(self) -> bool:
        return self.kind is not OutcomeKind.REJECTED

    @property
    def message(self) -> str:
        if self.reason is None:
            return "Attendance recorded."
        return _MESSAGES.get(self.reason, self.reason)
