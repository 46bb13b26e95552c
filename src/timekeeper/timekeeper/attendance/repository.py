from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def get_for_user_and_date(self, user_id: int, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def list_for_user_between(self, user_id: int, start: date, end: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def create_checkin(
        self,
        *,
        user_id: int,
        work_date: date,
        check_in_time: datetime,
        check_in_reason: Optional[str],
        late_minutes: int,
        fine_amount: int,
    ) -> int:
        """Store a check-in for (user, date), returning attendance_id.

        The (user_id, work_date) pair is unique; implementations reuse a
        placeholder row (e.g. an auto-leave marker) when one exists.
        """

        raise NotImplementedError

    def update_checkout(
        self,
        *,
        attendance_id: int,
        check_out_time: datetime,
        check_out_reason: Optional[str],
        early_minutes: int,
        total_hours: float,
    ) -> bool:
        raise NotImplementedError

    def admin_update_record(self, *, record: AttendanceRecord) -> bool:
        """Persist every field of an administrator-edited record."""

        raise NotImplementedError
