from __future__ import annotations

import csv
from datetime import date, datetime
from pathlib import Path

import pytest

from src.daily_attendance.daily_attendance.core.enums import Action
from src.daily_attendance.daily_attendance.core.exceptions import SerializationError, StorageError
from src.daily_attendance.daily_attendance.reports.model import NotFound, ReportArtifact, TabularResult
from src.daily_attendance.daily_attendance.reports.serializer import CsvReportSerializer, ReportSerializer
from src.daily_attendance.daily_attendance.reports.service import ReportGenerator

JAN_1 = date(2024, 1, 1)


class RecordingSerializer(ReportSerializer):
    """Writes a real file so the test can assert it is gone afterwards."""

    def __init__(self, tmp_path: Path, *, fail: bool = False):
        self._tmp_path = tmp_path
        self._fail = fail
        self.columns = None
        self.rows = None
        self.artifacts: list[ReportArtifact] = []

    def serialize(self, columns, rows, *, filename="attendance_report.csv"):
        if self._fail:
            raise SerializationError("disk full")
        self.columns = list(columns)
        self.rows = list(rows)
        path = self._tmp_path / f"report_{len(self.artifacts)}.csv"
        path.write_text("stub", encoding="utf-8")
        artifact = ReportArtifact(path=path, filename=filename)
        self.artifacts.append(artifact)
        return artifact


@pytest.fixture
def seeded(service):
    service.record_action("Alice", Action.CHECK_IN, now=datetime(2024, 1, 1, 9, 0))
    service.record_action("Alice", Action.CHECK_OUT, now=datetime(2024, 1, 1, 18, 0))
    service.record_action("Bob", Action.CHECK_IN, now=datetime(2024, 1, 1, 9, 30))
    return service


def test_empty_range_is_not_found(store, tmp_path):
    serializer = RecordingSerializer(tmp_path)
    generator = ReportGenerator(store, serializer=serializer)

    with generator.generate_report(JAN_1, JAN_1) as result:
        assert isinstance(result, NotFound)
        assert result.message == "No records found for the selected date range."

    assert serializer.artifacts == []


def test_inverted_range_is_not_found(seeded, store, tmp_path):
    serializer = RecordingSerializer(tmp_path)
    generator = ReportGenerator(store, serializer=serializer)

    with generator.generate_report(date(2024, 1, 2), JAN_1) as result:
        assert isinstance(result, NotFound)

    assert serializer.artifacts == []


def test_rows_and_headers_in_fixed_order(seeded, store, tmp_path):
    serializer = RecordingSerializer(tmp_path)
    generator = ReportGenerator(store, serializer=serializer)

    with generator.generate_report(JAN_1, JAN_1) as result:
        assert isinstance(result, TabularResult)
        assert result.headers == ["ID", "Employee Name", "Date", "Check In", "Check Out"]
        assert result.row_count == 2

    assert [key for key, _ in serializer.columns] == ["id", "employeeName", "date", "checkIn", "checkOut"]
    assert serializer.rows == [
        {"id": 1, "employeeName": "Alice", "date": "2024-01-01", "checkIn": "9:00:00 AM", "checkOut": "6:00:00 PM"},
        {"id": 2, "employeeName": "Bob", "date": "2024-01-01", "checkIn": "9:30:00 AM", "checkOut": ""},
    ]


def test_artifact_removed_after_successful_handoff(seeded, store, tmp_path):
    serializer = RecordingSerializer(tmp_path)
    generator = ReportGenerator(store, serializer=serializer)

    with generator.generate_report(JAN_1, JAN_1) as result:
        assert result.artifact.exists()
        assert result.artifact.read_bytes() == b"stub"

    assert not serializer.artifacts[0].exists()


def test_artifact_removed_when_handoff_fails(seeded, store, tmp_path):
    serializer = RecordingSerializer(tmp_path)
    generator = ReportGenerator(store, serializer=serializer)

    with pytest.raises(ConnectionResetError):
        with generator.generate_report(JAN_1, JAN_1):
            raise ConnectionResetError("client went away")

    assert not serializer.artifacts[0].exists()


def test_serializer_failure_propagates(seeded, store, tmp_path):
    generator = ReportGenerator(store, serializer=RecordingSerializer(tmp_path, fail=True))

    with pytest.raises(SerializationError):
        with generator.generate_report(JAN_1, JAN_1):
            pass

    assert list(tmp_path.iterdir()) == []


def test_storage_failure_propagates(tmp_path):
    class BrokenStore:
        def query_range(self, start_date, end_date):
            raise StorageError("timeout")

    generator = ReportGenerator(BrokenStore(), serializer=RecordingSerializer(tmp_path))
    with pytest.raises(StorageError):
        with generator.generate_report(JAN_1, JAN_1):
            pass


def test_csv_serializer_writes_headers_and_rows(seeded, store, tmp_path):
    generator = ReportGenerator(store, serializer=CsvReportSerializer(tmp_path))

    with generator.generate_report(JAN_1, JAN_1, filename="attendance_report_20240101_20240101.csv") as result:
        path = result.artifact.path
        assert path.parent == tmp_path
        assert result.artifact.filename == "attendance_report_20240101_20240101.csv"
        with path.open(encoding="utf-8-sig", newline="") as fh:
            lines = list(csv.reader(fh))

    assert lines == [
        ["ID", "Employee Name", "Date", "Check In", "Check Out"],
        ["1", "Alice", "2024-01-01", "9:00:00 AM", "6:00:00 PM"],
        ["2", "Bob", "2024-01-01", "9:30:00 AM", ""],
    ]
    assert not path.exists()


def test_csv_serializer_reports_unwritable_directory(tmp_path):
    serializer = CsvReportSerializer(tmp_path / "missing")

    with pytest.raises(SerializationError):
        serializer.serialize([("id", "ID")], [{"id": 1}])
