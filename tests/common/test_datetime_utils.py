from __future__ import annotations

from datetime import date, datetime, time, timezone

import pytest

from src.daily_attendance.daily_attendance.common.datetime_utils import Clock, format_time, parse_iso_date
from src.daily_attendance.daily_attendance.core.exceptions import ValidationError


@pytest.mark.parametrize(
    "value, expected",
    [
        (time(0, 0, 0), "12:00:00 AM"),
        (time(9, 5, 3), "9:05:03 AM"),
        (time(12, 0, 0), "12:00:00 PM"),
        (time(13, 30, 59), "1:30:59 PM"),
        (time(23, 59, 59), "11:59:59 PM"),
    ],
)
def test_format_time(value, expected):
    assert format_time(value) == expected


def test_clock_converts_aware_datetimes():
    clock = Clock("Asia/Kolkata")
    moment = datetime(2024, 3, 31, 19, 0, tzinfo=timezone.utc)

    assert clock.date_of(moment) == date(2024, 4, 1)
    assert clock.time_of(moment) == "12:30:00 AM"


def test_clock_now_is_in_reference_zone():
    clock = Clock("Asia/Kolkata")
    assert clock.now().utcoffset().total_seconds() == 5.5 * 3600


def test_unknown_timezone():
    with pytest.raises(ValidationError):
        Clock("Mars/Olympus_Mons")


def test_parse_iso_date():
    assert parse_iso_date("2024-01-31") == date(2024, 1, 31)
    with pytest.raises(ValidationError):
        parse_iso_date("31/01/2024")
