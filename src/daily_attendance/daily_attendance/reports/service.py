from __future__ import annotations

import logging
from contextlib import contextmanager
from datetime import date
from typing import Iterator, List, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceStore
from ..core.constants import DATE_FORMAT, REPORT_COLUMNS, REPORT_FILENAME
from .model import NotFound, ReportArtifact, TabularResult
from .serializer import CsvReportSerializer, ReportSerializer

logger = logging.getLogger(__name__)


def build_rows(records: Sequence[AttendanceRecord]) -> List[dict]:
    return [
        {
            "id": r.record_id,
            "employeeName": r.employee_name,
            "date": r.work_date.strftime(DATE_FORMAT),
            "checkIn": r.check_in or "",
            "checkOut": r.check_out or "",
        }
        for r in records
    ]


class ReportGenerator:
    def __init__(self, store: AttendanceStore, *, serializer: Optional[ReportSerializer] = None):
        self._store = store
        self._serializer = serializer or CsvReportSerializer()

    @contextmanager
    def generate_report(
        self,
        start_date: date,
        end_date: date,
        *,
        filename: str = REPORT_FILENAME,
    ) -> Iterator[TabularResult | NotFound]:
        """Yield the report for ``[start_date, end_date]`` or ``NotFound``.

        The artifact only lives inside the ``with`` block: it is deleted on
        exit whether the hand-off succeeded or raised.
        """
        records = self._store.query_range(start_date, end_date)
        if not records:
            yield NotFound(start_date, end_date)
            return

        rows = build_rows(records)
        artifact = self._serializer.serialize(REPORT_COLUMNS, rows, filename=filename)
        try:
            yield TabularResult(
                start_date=start_date,
                end_date=end_date,
                headers=[title for _, title in REPORT_COLUMNS],
                rows=rows,
                artifact=artifact,
            )
        finally:
            _discard(artifact)


def _discard(artifact: ReportArtifact) -> None:
    try:
        artifact.path.unlink(missing_ok=True)
    except OSError:
        logger.warning("Could not delete report file %s", artifact.path, exc_info=True)
