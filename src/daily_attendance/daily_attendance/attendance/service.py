from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime
from typing import Optional, Sequence

from ..common.datetime_utils import Clock
from ..common.validators import parse_action, require_non_empty
from ..core.constants import (
    REASON_ALREADY_CHECKED_IN,
    REASON_ALREADY_CHECKED_OUT,
    REASON_ALREADY_COMPLETE,
)
from ..core.enums import Action
from ..core.exceptions import DuplicateRecordError
from .locks import KeyedLock
from .model import AttendanceRecord, Outcome
from .repository import AttendanceStore

logger = logging.getLogger(__name__)


class AttendanceService:
    def __init__(
        self,
        store: AttendanceStore,
        *,
        clock: Optional[Clock] = None,
        locks: Optional[KeyedLock] = None,
    ):
        self._store = store
        self._clock = clock or Clock()
        self._locks = locks or KeyedLock()

    @property
    def clock(self) -> Clock:
        return self._clock

    def today(self) -> date:
        return self._clock.today()

    def record_action(self, employee_name: str, action: Action | str, *, now: datetime | None = None) -> Outcome:
        """Create or complete today's record for ``employee_name``.

        The lookup and the write run under a lock keyed by (employee, date), so
        concurrent submissions for the same key are applied one after another.
        The table's unique key catches writers in other processes; on such a
        conflict the row is read again and the rules re-applied once.
        """
        employee_name = require_non_empty(employee_name, "employeeName")
        action = parse_action(action)

        now = now or self._clock.now()
        work_date = self._clock.date_of(now)
        time_value = self._clock.time_of(now)

        with self._locks.hold((employee_name, work_date)):
            try:
                outcome = self._apply(employee_name, work_date, action, time_value)
            except DuplicateRecordError:
                logger.warning(
                    "Concurrent insert for %r on %s; re-reading before applying %s",
                    employee_name,
                    work_date,
                    action.value,
                )
                outcome = self._apply(employee_name, work_date, action, time_value)

        if outcome.is_success:
            logger.info(
                "%s %s for %r on %s at %s",
                outcome.kind.value.lower(),
                action.value,
                employee_name,
                work_date,
                time_value,
            )
        else:
            logger.info("Rejected %s for %r on %s: %s", action.value, employee_name, work_date, outcome.reason)
        return outcome

    def _apply(self, employee_name: str, work_date: date, action: Action, time_value: str) -> Outcome:
        existing = self._store.find_by_employee_and_date(employee_name, work_date)

        if existing is None:
            record_id = self._store.insert(
                employee_name=employee_name,
                work_date=work_date,
                field=action,
                time_value=time_value,
            )
            record = AttendanceRecord(record_id=record_id, employee_name=employee_name, work_date=work_date)
            return Outcome.created(action, _with_field(record, action, time_value))

        # A complete record wins over the per-action messages.
        if existing.is_complete:
            return Outcome.rejected(action, REASON_ALREADY_COMPLETE, existing)
        if action is Action.CHECK_IN and existing.check_in is not None:
            return Outcome.rejected(action, REASON_ALREADY_CHECKED_IN, existing)
        if action is Action.CHECK_OUT and existing.check_out is not None:
            return Outcome.rejected(action, REASON_ALREADY_CHECKED_OUT, existing)

        self._store.update_field(record_id=existing.record_id, field=action, time_value=time_value)
        return Outcome.updated(action, _with_field(existing, action, time_value))

    def query_attendance(self, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        return self._store.query_range(start_date, end_date)


def _with_field(record: AttendanceRecord, action: Action, time_value: str) -> AttendanceRecord:
    if action is Action.CHECK_IN:
        return replace(record, check_in=time_value)
    return replace(record, check_out=time_value)
