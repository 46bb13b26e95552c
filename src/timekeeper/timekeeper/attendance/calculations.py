"""Attendance fine engine.

Pure functions turning check-in/check-out instants and a policy into
lateness, earliness, worked hours and fines. Wall-clock HH:MM thresholds are
applied on the organization-local date of the instant being measured.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from ..common.datetime_utils import at_wall_clock, minutes_between
from ..core.constants import DEFAULT_EDIT_WINDOW_MINUTES, FINE_BLOCK_MINUTES
from ..policy.model import Policy
from .model import AttendanceRecord


@dataclass(frozen=True)
class LateFine:
    late_minutes: int
    fine_amount: int


@dataclass(frozen=True)
class WorkHoursCheck:
    is_incomplete: bool
    deficiency_hours: float


@dataclass(frozen=True)
class DerivedAttendance:
    late_minutes: int
    early_minutes: int
    total_hours: float
    fine_amount: int


def compute_late_fine(check_in: datetime, assigned_check_in: str, policy: Policy) -> LateFine:
    """Lateness against the assigned check-in time and the resulting fine.

    Lateness up to and including the grace period is free. The first minute
    past it incurs the base fine, plus one ``late_fine_per_30_min`` for every
    complete 30 minutes beyond the grace period.
    """
    assigned = at_wall_clock(check_in, assigned_check_in)
    late_minutes = max(0, minutes_between(assigned, check_in))
    grace = policy.grace_period_minutes or 0

    if late_minutes <= grace:
        return LateFine(late_minutes=late_minutes, fine_amount=0)

    minutes_after_grace = late_minutes - grace
    fine = policy.late_fine_base + (minutes_after_grace // FINE_BLOCK_MINUTES) * policy.late_fine_per_30_min
    return LateFine(late_minutes=late_minutes, fine_amount=int(fine))


def compute_early_minutes(check_out: datetime, assigned_check_out: str) -> int:
    assigned = at_wall_clock(check_out, assigned_check_out)
    return max(0, minutes_between(check_out, assigned))


def compute_total_hours(check_in: datetime, check_out: Optional[datetime]) -> float:
    """Worked hours in whole minutes / 60, unrounded. Zero until checkout."""
    if check_out is None:
        return 0.0
    return minutes_between(check_in, check_out) / 60


def is_work_hours_incomplete(total_hours: float, required_hours: float) -> WorkHoursCheck:
    """Shortfall against the required hours, rounded half up to two decimals."""
    shortfall = max(0.0, float(required_hours) - float(total_hours))
    deficiency = float(Decimal(str(shortfall)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))
    return WorkHoursCheck(is_incomplete=deficiency > 0, deficiency_hours=deficiency)


def requires_check_in_reason(late_minutes: int) -> bool:
    return late_minutes > 0


def requires_check_out_reason(early_minutes: int) -> bool:
    return early_minutes > 0


def has_reason(reason: Optional[str]) -> bool:
    return bool(reason and reason.strip())


def derive_attendance(check_in: Optional[datetime], check_out: Optional[datetime], policy: Policy) -> DerivedAttendance:
    """Every derived field for a final check-in/check-out pair."""
    late = compute_late_fine(check_in, policy.check_in_time, policy) if check_in is not None else LateFine(0, 0)
    early = compute_early_minutes(check_out, policy.check_out_time) if check_out is not None else 0
    total = compute_total_hours(check_in, check_out) if check_in is not None else 0.0
    return DerivedAttendance(
        late_minutes=late.late_minutes,
        early_minutes=early,
        total_hours=total,
        fine_amount=late.fine_amount,
    )


def recompute_after_edit(
    record: AttendanceRecord,
    policy: Policy,
    *,
    new_check_in: Optional[datetime] = None,
    new_check_out: Optional[datetime] = None,
) -> AttendanceRecord:
    """Apply an administrator's time edit and re-derive what depends on it.

    Lateness and fine follow a changed check-in, earliness a changed
    check-out, worked hours either. Values are computed from the final pair
    of times, so the result matches a fresh check-in/check-out at those times.
    """
    check_in = new_check_in if new_check_in is not None else record.check_in_time
    check_out = new_check_out if new_check_out is not None else record.check_out_time
    changes: dict = {"is_modified_by_admin": True}

    if new_check_in is not None:
        late = compute_late_fine(check_in, policy.check_in_time, policy)
        changes.update(check_in_time=check_in, late_minutes=late.late_minutes, fine_amount=late.fine_amount)

    if new_check_out is not None:
        changes.update(check_out_time=check_out, early_minutes=compute_early_minutes(check_out, policy.check_out_time))

    if new_check_in is not None or new_check_out is not None:
        changes["total_hours"] = compute_total_hours(check_in, check_out) if check_in is not None else 0.0

    return replace(record, **changes)


def can_edit_attendance(recorded_at: datetime, now: datetime, window_minutes: int = DEFAULT_EDIT_WINDOW_MINUTES) -> bool:
    """Whether an employee is still inside the self-correction window."""
    return abs(minutes_between(recorded_at, now)) <= window_minutes
