from __future__ import annotations

from datetime import date
from typing import Iterable, Optional

from ..core.enums import DenialReason
from .gate import check_attendance_day, check_leave_day
from .repository import HolidayRepository, OffDayRepository


class WorkdayService:
    """Composes the working-day rule with holiday and off-day lookups."""

    def __init__(self, holidays: HolidayRepository, off_days: OffDayRepository):
        self._holidays = holidays
        self._off_days = off_days

    def check_in_denial(self, *, user_id: int, day: date, working_days: Iterable[int]) -> Optional[DenialReason]:
        return check_attendance_day(
            day,
            working_days,
            holiday=self._holidays.get_for_date(day=day, year=day.year),
            off_day=self._off_days.get_for_user_and_date(user_id=int(user_id), day=day),
        )

    def leave_denial(self, *, day: date, working_days: Iterable[int]) -> Optional[DenialReason]:
        return check_leave_day(day, working_days, holiday=self._holidays.get_for_date(day=day, year=day.year))
