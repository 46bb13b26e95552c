from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class Holiday:
    """Organization-wide holiday, looked up by date and calendar year."""

    holiday_id: int
    name: str
    date: date
    year: int
    is_recurring: bool = False


@dataclass(frozen=True)
class OffDay:
    """Non-working day assigned to a single employee."""

    off_day_id: int
    user_id: int
    date: date
    reason: Optional[str] = None
    is_paid: bool = False
