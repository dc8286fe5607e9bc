"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_TIMEZONE = "Asia/Kolkata"
DATE_FORMAT = "%Y-%m-%d"

DEFAULT_DB_TIMEOUT_SECONDS = 10

REPORT_FILENAME = "attendance_report.csv"
REPORT_COLUMNS = (
    ("id", "ID"),
    ("employeeName", "Employee Name"),
    ("date", "Date"),
    ("checkIn", "Check In"),
    ("checkOut", "Check Out"),
)

REASON_ALREADY_COMPLETE = "already checked in and out"
REASON_ALREADY_CHECKED_IN = "already checked in"
REASON_ALREADY_CHECKED_OUT = "already checked out"
