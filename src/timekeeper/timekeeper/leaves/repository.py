from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import LeaveStatus, LeaveType
from .model import LeaveRecord


class LeaveRepository(Protocol):
    def get_by_id(self, leave_id: int) -> Optional[LeaveRecord]:
        raise NotImplementedError

    def find_active_for_user_and_date(self, *, user_id: int, day: date) -> Optional[LeaveRecord]:
        """Any PENDING or APPROVED leave of the user on ``day``."""

        raise NotImplementedError

    def count_approved_in_month(self, *, user_id: int, year: int, month: int, exclude_leave_id: Optional[int] = None) -> int:
        raise NotImplementedError

    def list_for_user(self, *, user_id: int, status: Optional[LeaveStatus] = None) -> Sequence[LeaveRecord]:
        raise NotImplementedError

    def create(
        self,
        *,
        user_id: int,
        day: date,
        reason: str,
        leave_type: LeaveType,
        applied_by: int,
        requested_at: datetime,
    ) -> int:
        """Create a PENDING leave, returning leave_id."""

        raise NotImplementedError

    def decide(
        self,
        *,
        leave_id: int,
        status: LeaveStatus,
        approved_by: int,
        approved_at: datetime,
        is_paid: bool,
    ) -> bool:
        """Move a PENDING leave to a terminal status. False if it was not PENDING."""

        raise NotImplementedError

    def delete(self, leave_id: int) -> bool:
        raise NotImplementedError
