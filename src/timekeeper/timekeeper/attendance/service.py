from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import combine_org, now_in_org_tz, to_org_tz
from ..common.validators import clean_optional
from ..core.constants import DEFAULT_EDIT_WINDOW_MINUTES
from ..core.enums import DenialReason, Role
from ..core.exceptions import AdmissionDenied, AuthorizationError, NotFoundError, ReasonRequired, ValidationError
from ..policy.service import PolicyService
from ..workdays.service import WorkdayService
from .calculations import (
    WorkHoursCheck,
    can_edit_attendance,
    compute_early_minutes,
    compute_late_fine,
    compute_total_hours,
    is_work_hours_incomplete,
    recompute_after_edit,
    requires_check_in_reason,
    requires_check_out_reason,
)
from .model import AttendanceRecord
from .repository import AttendanceRepository
from .state import DayState, day_state

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CheckInResult:
    attendance_id: int
    check_in_time: datetime
    late_minutes: int
    fine_amount: int


@dataclass(frozen=True)
class CheckOutResult:
    attendance_id: int
    check_out_time: datetime
    early_minutes: int
    total_hours: float
    work_hours: WorkHoursCheck


@dataclass(frozen=True)
class TodayStatus:
    state: DayState
    record: Optional[AttendanceRecord]


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        policies: PolicyService,
        workdays: WorkdayService,
        *,
        edit_window_minutes: int = DEFAULT_EDIT_WINDOW_MINUTES,
    ):
        self._attendance = attendance
        self._policies = policies
        self._workdays = workdays
        self._edit_window_minutes = int(edit_window_minutes)

    def _deny(self, reason: DenialReason, *, user_id: int) -> AdmissionDenied:
        logger.warning("Attendance denied for user %s: %s", user_id, reason.value)
        return AdmissionDenied(reason)

    def today_status(self, user_id: int, *, now: datetime | None = None) -> TodayStatus:
        today = now_in_org_tz(now).date()
        record = self._attendance.get_for_user_and_date(int(user_id), today)
        return TodayStatus(state=day_state(record), record=record)

    def can_self_edit(self, record: AttendanceRecord, *, now: datetime | None = None) -> bool:
        """Whether the employee may still correct the latest time stamped on ``record``."""
        stamped = record.check_out_time or record.check_in_time
        if stamped is None:
            return False
        return can_edit_attendance(stamped, now_in_org_tz(now), self._edit_window_minutes)

    def check_in(self, user_id: int, *, reason: Optional[str] = None, now: datetime | None = None) -> CheckInResult:
        user_id = int(user_id)
        now = now_in_org_tz(now)
        today = now.date()

        existing = self._attendance.get_for_user_and_date(user_id, today)
        if day_state(existing) != DayState.NOT_CHECKED_IN:
            raise self._deny(DenialReason.ALREADY_CHECKED_IN, user_id=user_id)

        policy = self._policies.resolve(user_id)
        denial = self._workdays.check_in_denial(user_id=user_id, day=today, working_days=policy.working_days)
        if denial is not None:
            raise self._deny(denial, user_id=user_id)

        late = compute_late_fine(now, policy.check_in_time, policy)
        reason = clean_optional(reason)
        if requires_check_in_reason(late.late_minutes) and not reason:
            raise ReasonRequired("check_in_reason", late_minutes=late.late_minutes)

        attendance_id = self._attendance.create_checkin(
            user_id=user_id,
            work_date=today,
            check_in_time=now,
            check_in_reason=reason,
            late_minutes=late.late_minutes,
            fine_amount=late.fine_amount,
        )
        logger.info("User %s checked in at %s (%s min late, fine %s)", user_id, now.isoformat(), late.late_minutes, late.fine_amount)
        return CheckInResult(
            attendance_id=attendance_id,
            check_in_time=now,
            late_minutes=late.late_minutes,
            fine_amount=late.fine_amount,
        )

    def check_out(self, user_id: int, *, reason: Optional[str] = None, now: datetime | None = None) -> CheckOutResult:
        user_id = int(user_id)
        now = now_in_org_tz(now)
        today = now.date()

        record = self._attendance.get_for_user_and_date(user_id, today)
        state = day_state(record)
        if state == DayState.NOT_CHECKED_IN:
            raise self._deny(DenialReason.NOT_CHECKED_IN, user_id=user_id)
        if state == DayState.DAY_COMPLETE:
            raise self._deny(DenialReason.ALREADY_CHECKED_OUT, user_id=user_id)

        policy = self._policies.resolve(user_id)
        early_minutes = compute_early_minutes(now, policy.check_out_time)
        reason = clean_optional(reason)
        if requires_check_out_reason(early_minutes) and not reason:
            raise ReasonRequired("check_out_reason", early_minutes=early_minutes)

        total_hours = compute_total_hours(record.check_in_time, now)
        work_hours = is_work_hours_incomplete(total_hours, policy.required_work_hours)

        ok = self._attendance.update_checkout(
            attendance_id=record.attendance_id,
            check_out_time=now,
            check_out_reason=reason,
            early_minutes=early_minutes,
            total_hours=total_hours,
        )
        if not ok:
            raise ValidationError("Failed to record checkout")

        if work_hours.is_incomplete:
            logger.info("User %s checked out %.2f hours short of %s", user_id, work_hours.deficiency_hours, policy.required_work_hours)
        else:
            logger.info("User %s checked out at %s", user_id, now.isoformat())
        return CheckOutResult(
            attendance_id=record.attendance_id,
            check_out_time=now,
            early_minutes=early_minutes,
            total_hours=total_hours,
            work_hours=work_hours,
        )

    def admin_edit(
        self,
        *,
        current_role: Role,
        attendance_id: int,
        check_in: Optional[str] = None,
        check_out: Optional[str] = None,
        check_in_reason: Optional[str] = None,
        check_out_reason: Optional[str] = None,
    ) -> AttendanceRecord:
        """Administrator correction of a stored record.

        ``check_in``/``check_out`` are organization-local HH:MM values applied
        to the record's date. Bypasses the day state machine. A reason is only
        written together with its time; without a new reason the stored one
        is kept.
        """
        if current_role != Role.ADMIN:
            raise AuthorizationError("Only administrators can edit attendance")

        record = self._attendance.get_by_id(int(attendance_id))
        if record is None:
            raise NotFoundError("Attendance not found")

        check_in = clean_optional(check_in)
        check_out = clean_optional(check_out)
        check_in_reason = clean_optional(check_in_reason)
        check_out_reason = clean_optional(check_out_reason)
        if not (check_in or check_out):
            raise ValidationError("Please provide a check-in or check-out time")

        policy = self._policies.resolve(record.user_id)
        updated = recompute_after_edit(
            record,
            policy,
            new_check_in=combine_org(record.work_date, check_in) if check_in else None,
            new_check_out=combine_org(record.work_date, check_out) if check_out else None,
        )
        if (
            updated.check_in_time is not None
            and updated.check_out_time is not None
            and to_org_tz(updated.check_out_time) < to_org_tz(updated.check_in_time)
        ):
            raise ValidationError("Check-out cannot be earlier than check-in")

        updated = replace(
            updated,
            check_in_reason=check_in_reason if check_in and check_in_reason else record.check_in_reason,
            check_out_reason=check_out_reason if check_out and check_out_reason else record.check_out_reason,
        )

        if not self._attendance.admin_update_record(record=updated):
            raise ValidationError("Failed to update attendance")
        logger.info("Attendance %s edited by administrator", updated.attendance_id)
        return updated
