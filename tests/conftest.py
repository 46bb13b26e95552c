from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from typing import Optional

import pytest

from timekeeper.attendance.model import AttendanceRecord
from timekeeper.attendance.service import AttendanceService
from timekeeper.common.datetime_utils import ORG_TZ
from timekeeper.core.enums import LeaveStatus
from timekeeper.leaves.model import LeaveRecord
from timekeeper.leaves.service import LeaveService
from timekeeper.policy.model import Policy, PolicyOverride
from timekeeper.policy.service import PolicyService
from timekeeper.workdays.model import Holiday, OffDay
from timekeeper.workdays.service import WorkdayService


def pkt(year: int, month: int, day: int, hour: int = 0, minute: int = 0, second: int = 0) -> datetime:
    """Organization-local (UTC+05:00) aware datetime."""
    return ORG_TZ.localize(datetime(year, month, day, hour, minute, second))


class InMemoryPolicies:
    def __init__(self, default: Optional[Policy] = None, overrides: Optional[dict[int, PolicyOverride]] = None):
        self.default = default
        self.overrides = overrides or {}

    def get_default(self) -> Optional[Policy]:
        return self.default

    def get_override(self, user_id: int) -> Optional[PolicyOverride]:
        return self.overrides.get(user_id)

    def save_default(self, policy: Policy) -> None:
        self.default = policy


class InMemoryHolidays:
    def __init__(self, holidays: Optional[list[Holiday]] = None):
        self.holidays = list(holidays or [])

    def get_for_date(self, *, day: date, year: int) -> Optional[Holiday]:
        return next((h for h in self.holidays if h.date == day and h.year == year), None)


class InMemoryOffDays:
    def __init__(self, off_days: Optional[list[OffDay]] = None):
        self.off_days = list(off_days or [])

    def get_for_user_and_date(self, *, user_id: int, day: date) -> Optional[OffDay]:
        return next((o for o in self.off_days if o.user_id == user_id and o.date == day), None)


class InMemoryAttendance:
    def __init__(self):
        self._by_id: dict[int, AttendanceRecord] = {}
        self._id = 0

    def add(self, record: AttendanceRecord) -> AttendanceRecord:
        self._id = max(self._id, record.attendance_id)
        self._by_id[record.attendance_id] = record
        return record

    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        return self._by_id.get(attendance_id)

    def get_for_user_and_date(self, user_id: int, work_date: date) -> Optional[AttendanceRecord]:
        return next((r for r in self._by_id.values() if r.user_id == user_id and r.work_date == work_date), None)

    def list_for_user_between(self, user_id: int, start: date, end: date):
        items = [r for r in self._by_id.values() if r.user_id == user_id and start <= r.work_date <= end]
        items.sort(key=lambda r: r.work_date)
        return items

    def create_checkin(self, *, user_id, work_date, check_in_time, check_in_reason, late_minutes, fine_amount) -> int:
        existing = self.get_for_user_and_date(user_id, work_date)
        if existing:
            attendance_id = existing.attendance_id
        else:
            self._id += 1
            attendance_id = self._id
        self._by_id[attendance_id] = AttendanceRecord(
            attendance_id=attendance_id,
            user_id=user_id,
            work_date=work_date,
            check_in_time=check_in_time,
            check_in_reason=check_in_reason,
            late_minutes=late_minutes,
            fine_amount=fine_amount,
            is_auto_leave=existing.is_auto_leave if existing else False,
        )
        return attendance_id

    def update_checkout(self, *, attendance_id, check_out_time, check_out_reason, early_minutes, total_hours) -> bool:
        rec = self._by_id.get(attendance_id)
        if rec is None:
            return False
        self._by_id[attendance_id] = replace(
            rec,
            check_out_time=check_out_time,
            check_out_reason=check_out_reason,
            early_minutes=early_minutes,
            total_hours=total_hours,
        )
        return True

    def admin_update_record(self, *, record: AttendanceRecord) -> bool:
        if record.attendance_id not in self._by_id:
            return False
        self._by_id[record.attendance_id] = record
        return True


class InMemoryLeaves:
    def __init__(self):
        self._by_id: dict[int, LeaveRecord] = {}
        self._id = 0

    def add(self, leave: LeaveRecord) -> LeaveRecord:
        self._id = max(self._id, leave.leave_id)
        self._by_id[leave.leave_id] = leave
        return leave

    def get_by_id(self, leave_id: int) -> Optional[LeaveRecord]:
        return self._by_id.get(leave_id)

    def find_active_for_user_and_date(self, *, user_id: int, day: date) -> Optional[LeaveRecord]:
        return next(
            (lv for lv in self._by_id.values() if lv.user_id == user_id and lv.date == day and lv.status != LeaveStatus.REJECTED),
            None,
        )

    def count_approved_in_month(self, *, user_id: int, year: int, month: int, exclude_leave_id: Optional[int] = None) -> int:
        return sum(
            1
            for lv in self._by_id.values()
            if lv.user_id == user_id
            and lv.status == LeaveStatus.APPROVED
            and lv.date.year == year
            and lv.date.month == month
            and lv.leave_id != exclude_leave_id
        )

    def list_for_user(self, *, user_id: int, status: Optional[LeaveStatus] = None):
        return [lv for lv in self._by_id.values() if lv.user_id == user_id and (status is None or lv.status == status)]

    def create(self, *, user_id, day, reason, leave_type, applied_by, requested_at) -> int:
        self._id += 1
        self._by_id[self._id] = LeaveRecord(
            leave_id=self._id,
            user_id=user_id,
            date=day,
            reason=reason,
            leave_type=leave_type,
            status=LeaveStatus.PENDING,
            applied_by=applied_by,
            requested_at=requested_at,
        )
        return self._id

    def decide(self, *, leave_id, status, approved_by, approved_at, is_paid) -> bool:
        leave = self._by_id.get(leave_id)
        if leave is None or leave.status != LeaveStatus.PENDING:
            return False
        self._by_id[leave_id] = replace(leave, status=status, approved_by=approved_by, approved_at=approved_at, is_paid=is_paid)
        return True

    def delete(self, leave_id: int) -> bool:
        return self._by_id.pop(leave_id, None) is not None


@pytest.fixture
def policy() -> Policy:
    return Policy(
        check_in_time="09:00",
        check_out_time="17:00",
        required_work_hours=8.0,
        grace_period_minutes=15,
        late_fine_base=250,
        late_fine_per_30_min=250,
        leave_cost=1000,
        paid_leaves_per_month=1,
        warning_leave_count=3,
        danger_leave_count=5,
        working_days=frozenset({1, 2, 3, 4, 5}),
    )


@pytest.fixture
def fixed_now() -> datetime:
    # Monday
    return pkt(2026, 2, 2, 9, 0)


@pytest.fixture
def policies_repo(policy) -> InMemoryPolicies:
    return InMemoryPolicies(default=policy)


@pytest.fixture
def holidays_repo() -> InMemoryHolidays:
    return InMemoryHolidays()


@pytest.fixture
def off_days_repo() -> InMemoryOffDays:
    return InMemoryOffDays()


@pytest.fixture
def attendance_repo() -> InMemoryAttendance:
    return InMemoryAttendance()


@pytest.fixture
def leaves_repo() -> InMemoryLeaves:
    return InMemoryLeaves()


@pytest.fixture
def policy_service(policies_repo) -> PolicyService:
    return PolicyService(policies_repo)


@pytest.fixture
def workday_service(holidays_repo, off_days_repo) -> WorkdayService:
    return WorkdayService(holidays_repo, off_days_repo)


@pytest.fixture
def attendance_service(attendance_repo, policy_service, workday_service) -> AttendanceService:
    return AttendanceService(attendance_repo, policy_service, workday_service)


@pytest.fixture
def leave_service(leaves_repo, policy_service, workday_service) -> LeaveService:
    return LeaveService(leaves_repo, policy_service, workday_service)
