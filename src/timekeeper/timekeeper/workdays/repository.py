from __future__ import annotations

from datetime import date
from typing import Optional, Protocol

from .model import Holiday, OffDay


class HolidayRepository(Protocol):
    def get_for_date(self, *, day: date, year: int) -> Optional[Holiday]:
        raise NotImplementedError


class OffDayRepository(Protocol):
    def get_for_user_and_date(self, *, user_id: int, day: date) -> Optional[OffDay]:
        raise NotImplementedError
