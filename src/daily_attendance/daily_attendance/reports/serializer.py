from __future__ import annotations

import csv
import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Sequence, Tuple

from ..core.constants import REPORT_FILENAME
from ..core.exceptions import SerializationError
from .model import ReportArtifact

logger = logging.getLogger(__name__)


class ReportSerializer(ABC):
    """Turns ordered rows into a downloadable artifact (Strategy Pattern)."""

    @abstractmethod
    def serialize(
        self,
        columns: Sequence[Tuple[str, str]],
        rows: Sequence[dict],
        *,
        filename: str = REPORT_FILENAME,
    ) -> ReportArtifact:
        raise NotImplementedError


class CsvReportSerializer(ReportSerializer):
    """Write rows to a CSV file in the temp directory.

    ``columns`` is a sequence of ``(key, header title)`` pairs; output keeps
    that order. Encoded as utf-8-sig so Excel picks up non-ASCII names.
    """

    def __init__(self, tmp_dir: Optional[str | Path] = None):
        self._tmp_dir = str(tmp_dir) if tmp_dir else None

    def serialize(self, columns, rows, *, filename: str = REPORT_FILENAME) -> ReportArtifact:
        try:
            fd, raw_path = tempfile.mkstemp(prefix="attendance_report_", suffix=".csv", dir=self._tmp_dir)
        except OSError as exc:
            raise SerializationError(f"Could not create report file: {exc}") from exc

        path = Path(raw_path)
        try:
            with os.fdopen(fd, "w", encoding="utf-8-sig", newline="") as out:
                writer = csv.writer(out)
                writer.writerow([title for _, title in columns])
                for row in rows:
                    writer.writerow([row.get(key, "") for key, _ in columns])
        except (OSError, csv.Error) as exc:
            path.unlink(missing_ok=True)
            raise SerializationError(f"Could not write report file: {exc}") from exc

        logger.debug("Wrote %d report rows to %s", len(rows), path)
        return ReportArtifact(path=path, filename=filename, mimetype="text/csv")
