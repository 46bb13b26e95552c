from datetime import date

import pytest

from conftest import pkt
from timekeeper.attendance.model import AttendanceRecord
from timekeeper.attendance.state import DayState
from timekeeper.core.enums import DenialReason, Role
from timekeeper.core.exceptions import (
    AdmissionDenied,
    AuthorizationError,
    NotFoundError,
    PolicyMissingError,
    ReasonRequired,
    ValidationError,
)
from timekeeper.policy.model import PolicyOverride
from timekeeper.workdays.model import Holiday, OffDay


def test_on_time_check_in_creates_record(attendance_service, attendance_repo, fixed_now):
    result = attendance_service.check_in(1, now=fixed_now)

    rec = attendance_repo.get_for_user_and_date(1, fixed_now.date())
    assert rec is not None
    assert rec.attendance_id == result.attendance_id
    assert rec.late_minutes == 0
    assert rec.fine_amount == 0
    assert attendance_service.today_status(1, now=fixed_now).state == DayState.CHECKED_IN


def test_late_check_in_without_reason_asks_for_one(attendance_service, attendance_repo):
    with pytest.raises(ReasonRequired) as exc:
        attendance_service.check_in(1, now=pkt(2026, 2, 2, 9, 20))

    assert exc.value.late_minutes == 20
    assert exc.value.field == "check_in_reason"
    assert attendance_repo.get_for_user_and_date(1, date(2026, 2, 2)) is None


def test_late_check_in_with_reason_is_fined(attendance_service, attendance_repo):
    result = attendance_service.check_in(1, reason="Traffic jam", now=pkt(2026, 2, 2, 9, 50))

    assert result.late_minutes == 50
    assert result.fine_amount == 500
    rec = attendance_repo.get_by_id(result.attendance_id)
    assert rec.check_in_reason == "Traffic jam"
    assert rec.fine_amount == 500


def test_check_in_twice_is_denied(attendance_service, fixed_now):
    attendance_service.check_in(1, now=fixed_now)

    with pytest.raises(AdmissionDenied) as exc:
        attendance_service.check_in(1, now=fixed_now)
    assert exc.value.reason == DenialReason.ALREADY_CHECKED_IN


def test_check_in_on_sunday_is_denied(attendance_service):
    with pytest.raises(AdmissionDenied) as exc:
        attendance_service.check_in(1, now=pkt(2026, 2, 1, 9, 0))
    assert exc.value.reason == DenialReason.NON_WORKING_DAY


def test_check_in_on_holiday_is_denied(attendance_service, holidays_repo, fixed_now):
    holidays_repo.holidays.append(Holiday(holiday_id=1, name="Kashmir Day", date=fixed_now.date(), year=2026))

    with pytest.raises(AdmissionDenied) as exc:
        attendance_service.check_in(1, now=fixed_now)
    assert exc.value.reason == DenialReason.HOLIDAY


def test_check_in_on_off_day_is_denied(attendance_service, off_days_repo, fixed_now):
    off_days_repo.off_days.append(OffDay(off_day_id=1, user_id=1, date=fixed_now.date()))

    with pytest.raises(AdmissionDenied) as exc:
        attendance_service.check_in(1, now=fixed_now)
    assert exc.value.reason == DenialReason.OFF_DAY

    # other employees are unaffected
    attendance_service.check_in(2, now=fixed_now)


def test_check_in_fails_loudly_without_policy(attendance_service, policies_repo, fixed_now):
    policies_repo.default = None
    with pytest.raises(PolicyMissingError):
        attendance_service.check_in(1, now=fixed_now)


def test_employee_override_changes_assigned_time(attendance_service, policies_repo):
    policies_repo.overrides[1] = PolicyOverride(user_id=1, check_in_time="10:00")

    result = attendance_service.check_in(1, now=pkt(2026, 2, 2, 9, 50))
    assert result.late_minutes == 0


def test_check_in_reuses_auto_leave_placeholder(attendance_service, attendance_repo, fixed_now):
    attendance_repo.add(AttendanceRecord(attendance_id=5, user_id=1, work_date=fixed_now.date(), is_auto_leave=True))

    result = attendance_service.check_in(1, now=fixed_now)
    assert result.attendance_id == 5


def test_check_out_without_check_in_is_denied(attendance_service, fixed_now):
    with pytest.raises(AdmissionDenied) as exc:
        attendance_service.check_out(1, now=fixed_now)
    assert exc.value.reason == DenialReason.NOT_CHECKED_IN


def test_early_check_out_requires_reason(attendance_service, fixed_now):
    attendance_service.check_in(1, now=fixed_now)

    with pytest.raises(ReasonRequired) as exc:
        attendance_service.check_out(1, now=pkt(2026, 2, 2, 16, 30))
    assert exc.value.early_minutes == 30
    assert not isinstance(exc.value, AdmissionDenied)


def test_full_day_flow(attendance_service, attendance_repo, fixed_now):
    attendance_service.check_in(1, now=fixed_now)
    result = attendance_service.check_out(1, reason="Doctor appointment", now=pkt(2026, 2, 2, 16, 0))

    assert result.early_minutes == 60
    assert result.total_hours == 7.0
    assert result.work_hours.is_incomplete
    assert result.work_hours.deficiency_hours == 1.0

    rec = attendance_repo.get_for_user_and_date(1, fixed_now.date())
    assert rec.total_hours == 7.0
    assert rec.check_out_reason == "Doctor appointment"
    assert attendance_service.today_status(1, now=fixed_now).state == DayState.DAY_COMPLETE

    with pytest.raises(AdmissionDenied) as exc:
        attendance_service.check_out(1, now=pkt(2026, 2, 2, 17, 0))
    assert exc.value.reason == DenialReason.ALREADY_CHECKED_OUT


def test_admin_edit_recomputes_like_a_fresh_day(attendance_service, attendance_repo):
    attendance_service.check_in(1, now=pkt(2026, 2, 2, 9, 0))
    attendance_service.check_out(1, now=pkt(2026, 2, 2, 17, 0))
    rec = attendance_repo.get_for_user_and_date(1, date(2026, 2, 2))

    edited = attendance_service.admin_edit(
        current_role=Role.ADMIN,
        attendance_id=rec.attendance_id,
        check_in="09:50",
        check_out="16:30",
        check_in_reason="Corrected from gate log",
    )

    # fresh sequence for another employee at the same times
    attendance_service.check_in(2, reason="late", now=pkt(2026, 2, 2, 9, 50))
    attendance_service.check_out(2, reason="early", now=pkt(2026, 2, 2, 16, 30))
    fresh = attendance_repo.get_for_user_and_date(2, date(2026, 2, 2))

    assert edited.is_modified_by_admin
    assert edited.check_in_reason == "Corrected from gate log"
    assert (edited.late_minutes, edited.early_minutes, edited.total_hours, edited.fine_amount) == (
        fresh.late_minutes,
        fresh.early_minutes,
        fresh.total_hours,
        fresh.fine_amount,
    )
    assert attendance_repo.get_by_id(rec.attendance_id) == edited


def test_admin_edit_rejects_check_out_before_check_in(attendance_service, attendance_repo, fixed_now):
    attendance_service.check_in(1, now=fixed_now)
    rec = attendance_repo.get_for_user_and_date(1, fixed_now.date())

    with pytest.raises(ValidationError):
        attendance_service.admin_edit(current_role=Role.ADMIN, attendance_id=rec.attendance_id, check_out="08:00")


def test_admin_edit_requires_admin_and_existing_record(attendance_service):
    with pytest.raises(AuthorizationError):
        attendance_service.admin_edit(current_role=Role.EMPLOYEE, attendance_id=1, check_in="09:00")
    with pytest.raises(NotFoundError):
        attendance_service.admin_edit(current_role=Role.ADMIN, attendance_id=99, check_in="09:00")


def test_admin_edit_needs_a_change(attendance_service, attendance_repo, fixed_now):
    attendance_service.check_in(1, now=fixed_now)
    rec = attendance_repo.get_for_user_and_date(1, fixed_now.date())

    with pytest.raises(ValidationError):
        attendance_service.admin_edit(current_role=Role.ADMIN, attendance_id=rec.attendance_id, check_in="  ")
    with pytest.raises(ValidationError):
        attendance_service.admin_edit(
            current_role=Role.ADMIN, attendance_id=rec.attendance_id, check_in_reason="Traffic jam"
        )


def test_admin_edit_writes_a_reason_only_with_its_time(attendance_service, attendance_repo):
    attendance_service.check_in(1, reason="Bus was late", now=pkt(2026, 2, 2, 9, 40))
    attendance_service.check_out(1, now=pkt(2026, 2, 2, 17, 30))
    rec = attendance_repo.get_for_user_and_date(1, date(2026, 2, 2))

    edited = attendance_service.admin_edit(
        current_role=Role.ADMIN,
        attendance_id=rec.attendance_id,
        check_out="18:00",
        check_in_reason="Ignored without a check-in time",
        check_out_reason="Stayed for release",
    )

    assert edited.check_in_reason == "Bus was late"
    assert edited.check_out_reason == "Stayed for release"
    assert edited.late_minutes == 40
    assert edited.is_modified_by_admin is True

    edited = attendance_service.admin_edit(current_role=Role.ADMIN, attendance_id=rec.attendance_id, check_in="09:45")

    assert edited.check_in_reason == "Bus was late"
    assert edited.late_minutes == 45


def test_can_self_edit_within_window(attendance_service, attendance_repo, fixed_now):
    attendance_service.check_in(1, now=fixed_now)
    rec = attendance_repo.get_for_user_and_date(1, fixed_now.date())

    assert attendance_service.can_self_edit(rec, now=pkt(2026, 2, 2, 9, 10))
    assert not attendance_service.can_self_edit(rec, now=pkt(2026, 2, 2, 9, 30))
