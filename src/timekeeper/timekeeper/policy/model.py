from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import Any, FrozenSet, Iterable, Mapping, Optional

from ..core.constants import ISO_WEEKDAYS
from ..core.exceptions import ValidationError


def parse_working_days(value: str | Iterable[int]) -> FrozenSet[int]:
    """Working days as a set of ISO weekdays (1=Monday ... 7=Sunday).

    Accepts the "1,2,3,4,5" form storage keeps, or any iterable of ints.
    """
    if isinstance(value, str):
        parts = [p.strip() for p in value.split(",") if p.strip()]
        try:
            days = frozenset(int(p) for p in parts)
        except ValueError:
            raise ValidationError(f"Invalid working days: {value!r}") from None
    else:
        days = frozenset(int(d) for d in value)

    if not days <= ISO_WEEKDAYS:
        raise ValidationError("Working days must be ISO weekdays between 1 and 7")
    return days


def format_working_days(days: Iterable[int]) -> str:
    return ",".join(str(d) for d in sorted(days))


@dataclass(frozen=True)
class Policy:
    """Organization attendance/leave policy every calculation is parameterized by."""

    check_in_time: str
    check_out_time: str
    required_work_hours: float
    grace_period_minutes: int
    late_fine_base: int
    late_fine_per_30_min: int
    leave_cost: int
    paid_leaves_per_month: int
    warning_leave_count: int
    danger_leave_count: int
    working_days: FrozenSet[int] = field(default_factory=lambda: frozenset({1, 2, 3, 4, 5}))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Policy":
        """Build a policy from a settings/storage mapping keyed by field name."""
        return cls(
            check_in_time=str(data["check_in_time"]),
            check_out_time=str(data["check_out_time"]),
            required_work_hours=float(data["required_work_hours"]),
            grace_period_minutes=int(data.get("grace_period_minutes", 0)),
            late_fine_base=int(data["late_fine_base"]),
            late_fine_per_30_min=int(data["late_fine_per_30_min"]),
            leave_cost=int(data["leave_cost"]),
            paid_leaves_per_month=int(data["paid_leaves_per_month"]),
            warning_leave_count=int(data["warning_leave_count"]),
            danger_leave_count=int(data["danger_leave_count"]),
            working_days=parse_working_days(data.get("working_days", "1,2,3,4,5")),
        )


@dataclass(frozen=True)
class PolicyOverride:
    """Employee-level partial policy. ``None`` fields fall back to the default."""

    user_id: int
    check_in_time: Optional[str] = None
    check_out_time: Optional[str] = None
    required_work_hours: Optional[float] = None


_OVERRIDABLE = tuple(f.name for f in fields(PolicyOverride) if f.name != "user_id")


def merge_policy(default: Policy, override: Optional[PolicyOverride]) -> Policy:
    """Fully-populated policy: override fields win, absent ones come from ``default``."""
    if override is None:
        return default
    changes = {name: getattr(override, name) for name in _OVERRIDABLE if getattr(override, name) is not None}
    return replace(default, **changes)
