from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import LeaveStatus, LeaveType


@dataclass(frozen=True)
class LeaveRecord:
    """Domain entity: a one-day leave request.

    ``is_paid`` is decided once, at approval time.
    """

    leave_id: int
    user_id: int
    date: date
    reason: str
    leave_type: LeaveType
    status: LeaveStatus
    applied_by: int
    requested_at: datetime
    approved_by: Optional[int] = None
    approved_at: Optional[datetime] = None
    is_paid: bool = False

    @property
    def is_terminal(self) -> bool:
        return self.status != LeaveStatus.PENDING
