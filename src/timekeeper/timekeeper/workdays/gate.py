"""Eligibility of a calendar date for check-in or leave.

Three independent preconditions: the weekday is a configured working day, the
date is not a holiday, and (for check-in) not the employee's off-day.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable, Optional

from ..core.enums import DenialReason
from .model import Holiday, OffDay


def iso_weekday(day: date) -> int:
    """ISO weekday number: 1=Monday ... 7=Sunday."""
    return day.isoweekday()


def is_working_day(day: date, working_days: Iterable[int]) -> bool:
    return iso_weekday(day) in set(working_days)


def check_attendance_day(
    day: date,
    working_days: Iterable[int],
    *,
    holiday: Optional[Holiday] = None,
    off_day: Optional[OffDay] = None,
) -> Optional[DenialReason]:
    if not is_working_day(day, working_days):
        return DenialReason.NON_WORKING_DAY
    if holiday is not None:
        return DenialReason.HOLIDAY
    if off_day is not None:
        return DenialReason.OFF_DAY
    return None


def check_leave_day(
    day: date,
    working_days: Iterable[int],
    *,
    holiday: Optional[Holiday] = None,
) -> Optional[DenialReason]:
    if not is_working_day(day, working_days):
        return DenialReason.NON_WORKING_DAY_LEAVE
    if holiday is not None:
        return DenialReason.HOLIDAY_LEAVE
    return None


def count_working_days(start: date, end: date, working_days: Iterable[int]) -> int:
    """Number of working days in the inclusive range ``start``..``end``."""
    days = set(working_days)
    count = 0
    current = start
    while current <= end:
        if iso_weekday(current) in days:
            count += 1
        current += timedelta(days=1)
    return count
