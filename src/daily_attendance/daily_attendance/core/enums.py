from __future__ import annotations

from enum import Enum


class Action(str, Enum):
    """Attendance action; values match the form field sent by the browser."""

    CHECK_IN = "checkIn"
    CHECK_OUT = "checkOut"


class OutcomeKind(str, Enum):
    """Result of recording one attendance action."""

    CREATED = "CREATED"
    UPDATED = "UPDATED"
    REJECTED = "REJECTED"
