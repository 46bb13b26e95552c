from __future__ import annotations

from dataclasses import dataclass

from ..attendance.calculations import is_work_hours_incomplete
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import month_bounds
from ..leaves.calculations import LeaveZone, compute_leave_cost, compute_leave_zone
from ..leaves.repository import LeaveRepository
from ..policy.service import PolicyService
from ..workdays.gate import count_working_days


@dataclass(frozen=True)
class EmployeeStats:
    user_id: int
    year: int
    month: int
    working_days: int
    total_present: int
    total_absent: int
    total_leaves: int
    total_late: int
    total_early_checkout: int
    total_fines: int
    total_hours: float
    avg_hours_per_day: float
    incomplete_days: int
    leave_cost: int
    leave_zone: LeaveZone


class MonthlyReportService:
    """Aggregates stored attendance and leave facts for one employee-month."""

    def __init__(self, attendance: AttendanceRepository, leaves: LeaveRepository, policies: PolicyService):
        self._attendance = attendance
        self._leaves = leaves
        self._policies = policies

    def employee_summary(self, *, user_id: int, year: int, month: int) -> EmployeeStats:
        user_id = int(user_id)
        policy = self._policies.resolve(user_id)
        start, end = month_bounds(int(year), int(month))

        records = [r for r in self._attendance.list_for_user_between(user_id, start, end) if r.check_in_time is not None]
        leaves = self._leaves.count_approved_in_month(user_id=user_id, year=int(year), month=int(month))
        working_days = count_working_days(start, end, policy.working_days)

        present = len(records)
        total_hours = sum(r.total_hours or 0.0 for r in records)
        incomplete = sum(
            1
            for r in records
            if r.check_out_time is not None and is_work_hours_incomplete(r.total_hours, policy.required_work_hours).is_incomplete
        )

        return EmployeeStats(
            user_id=user_id,
            year=int(year),
            month=int(month),
            working_days=working_days,
            total_present=present,
            total_absent=max(0, working_days - present - leaves),
            total_leaves=leaves,
            total_late=sum(1 for r in records if r.late_minutes > 0),
            total_early_checkout=sum(1 for r in records if r.early_minutes > 0),
            total_fines=sum(int(r.fine_amount or 0) for r in records),
            total_hours=total_hours,
            avg_hours_per_day=total_hours / present if present else 0.0,
            incomplete_days=incomplete,
            leave_cost=compute_leave_cost(leaves, policy),
            leave_zone=compute_leave_zone(leaves, policy),
        )
