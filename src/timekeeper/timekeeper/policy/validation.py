from __future__ import annotations

from ..common.datetime_utils import parse_hhmm
from ..common.validators import require_non_negative
from ..core.constants import ISO_WEEKDAYS
from ..core.exceptions import ValidationError
from .model import Policy


def validate_policy(policy: Policy) -> Policy:
    """Check the policy invariants before it is saved or used."""
    parse_hhmm(policy.check_in_time)
    parse_hhmm(policy.check_out_time)

    require_non_negative(policy.required_work_hours, "Required work hours")
    require_non_negative(policy.grace_period_minutes, "Grace period")
    require_non_negative(policy.late_fine_base, "Late fine base")
    require_non_negative(policy.late_fine_per_30_min, "Late fine per 30 minutes")
    require_non_negative(policy.leave_cost, "Leave cost")
    require_non_negative(policy.paid_leaves_per_month, "Paid leaves per month")
    require_non_negative(policy.warning_leave_count, "Warning leave count")
    require_non_negative(policy.danger_leave_count, "Danger leave count")

    if policy.danger_leave_count < policy.warning_leave_count:
        raise ValidationError("Danger leave count must be >= warning leave count")
    if not set(policy.working_days) <= ISO_WEEKDAYS:
        raise ValidationError("Working days must be ISO weekdays between 1 and 7")
    return policy
