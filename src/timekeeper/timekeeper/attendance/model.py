from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance record per employee and calendar date.

    ``work_date`` is the organization-local date. ``late_minutes``,
    ``early_minutes``, ``total_hours`` and ``fine_amount`` are derived from the
    check-in/check-out pair and the effective policy, never entered directly.
    ``is_auto_leave`` is maintained by an external batch process.
    """

    attendance_id: int
    user_id: int
    work_date: date
    check_in_time: Optional[datetime] = None
    check_out_time: Optional[datetime] = None
    check_in_reason: Optional[str] = None
    check_out_reason: Optional[str] = None
    late_minutes: int = 0
    early_minutes: int = 0
    total_hours: float = 0.0
    fine_amount: int = 0
    is_auto_leave: bool = False
    is_modified_by_admin: bool = False
