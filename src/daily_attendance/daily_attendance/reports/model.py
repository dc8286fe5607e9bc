from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Sequence


@dataclass(frozen=True)
class ReportArtifact:
    """Temporary export file; the bytes stay on disk until it is deleted."""

    path: Path
    filename: str
    mimetype: str = "text/csv"

    def read_bytes(self) -> bytes:
        return self.path.read_bytes()

    def exists(self) -> bool:
        return self.path.exists()


@dataclass(frozen=True)
class TabularResult:
    start_date: date
    end_date: date
    headers: Sequence[str]
    rows: Sequence[dict] = field(default_factory=list)
    artifact: ReportArtifact | None = None

    @property
    def row_count(self) -> int:
        return len(self.rows)


@dataclass(frozen=True)
class NotFound:
    """No attendance in the requested range (not an error, not an empty table)."""

    start_date: date
    end_date: date
    message: str = "No records found for the selected date range."
