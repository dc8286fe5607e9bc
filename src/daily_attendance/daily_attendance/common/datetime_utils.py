from __future__ import annotations

from datetime import date, datetime, time
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..core.constants import DATE_FORMAT, DEFAULT_TIMEZONE
from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid date {value!r}, expected YYYY-MM-DD") from None


def format_time(value: time) -> str:
    """Render a time of day as ``h:mm:ss AM/PM`` (no leading zero on the hour)."""
    hour = value.hour % 12 or 12
    suffix = "AM" if value.hour < 12 else "PM"
    return f"{hour}:{value.minute:02d}:{value.second:02d} {suffix}"


class Clock:
    """Date/time source bound to one reference time zone.

    Note: Wrapped so tests can inject a fixed ``now`` instead of patching.
    """

    def __init__(self, timezone_name: str = DEFAULT_TIMEZONE):
        try:
            self._tz = ZoneInfo(timezone_name)
        except (ZoneInfoNotFoundError, ValueError):
            raise ValidationError(f"Unknown time zone {timezone_name!r}") from None
        self.timezone_name = timezone_name

    def now(self) -> datetime:
        return datetime.now(self._tz)

    def localize(self, value: datetime) -> datetime:
        # Naive datetimes are taken as already expressed in the reference zone.
        if value.tzinfo is None:
            return value.replace(tzinfo=self._tz)
        return value.astimezone(self._tz)

    def today(self) -> date:
        return self.now().date()

    def date_of(self, value: datetime) -> date:
        return self.localize(value).date()

    def time_of(self, value: datetime) -> str:
        return format_time(self.localize(value).time())
