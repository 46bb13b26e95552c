from __future__ import annotations

from enum import Enum
from typing import Optional

from .model import AttendanceRecord


class DayState(str, Enum):
    """A single day's attendance moves NOT_CHECKED_IN -> CHECKED_IN -> DAY_COMPLETE, never back."""

    NOT_CHECKED_IN = "NOT_CHECKED_IN"
    CHECKED_IN = "CHECKED_IN"
    DAY_COMPLETE = "DAY_COMPLETE"


def day_state(record: Optional[AttendanceRecord]) -> DayState:
    if record is None or record.check_in_time is None:
        return DayState.NOT_CHECKED_IN
    if record.check_out_time is None:
        return DayState.CHECKED_IN
    return DayState.DAY_COMPLETE
