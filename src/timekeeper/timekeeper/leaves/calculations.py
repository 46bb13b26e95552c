"""Leave policy engine.

``compute_leave_payment`` and ``compute_leave_cost`` answer different
questions and count differently: the first decides a single leave at approval
time from the leaves approved before it, the second prices a whole month.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..policy.model import Policy


class LeaveZone(str, Enum):
    NORMAL = "NORMAL"
    WARNING = "WARNING"
    DANGER = "DANGER"

    @property
    def severity(self) -> int:
        return _SEVERITY[self]


_SEVERITY = {LeaveZone.NORMAL: 0, LeaveZone.WARNING: 1, LeaveZone.DANGER: 2}


@dataclass(frozen=True)
class LeavePayment:
    is_paid: bool


@dataclass(frozen=True)
class LeaveBalance:
    leaves_taken: int
    paid_leaves_remaining: int
    unpaid_leaves: int
    cost: int
    zone: LeaveZone


def compute_leave_zone(leaves_this_month: int, policy: Policy) -> LeaveZone:
    if leaves_this_month >= policy.danger_leave_count:
        return LeaveZone.DANGER
    if leaves_this_month >= policy.warning_leave_count:
        return LeaveZone.WARNING
    return LeaveZone.NORMAL


def compute_leave_payment(paid_leaves_used_this_month: int, policy: Policy) -> LeavePayment:
    """Whether the leave being approved still falls inside the free monthly allocation.

    ``paid_leaves_used_this_month`` must not include the leave being decided.
    """
    return LeavePayment(is_paid=paid_leaves_used_this_month < policy.paid_leaves_per_month)


def compute_leave_cost(leaves_this_month: int, policy: Policy) -> int:
    unpaid_leaves = max(0, leaves_this_month - policy.paid_leaves_per_month)
    return unpaid_leaves * policy.leave_cost


def leave_balance(leaves_this_month: int, policy: Policy) -> LeaveBalance:
    return LeaveBalance(
        leaves_taken=leaves_this_month,
        paid_leaves_remaining=max(0, policy.paid_leaves_per_month - leaves_this_month),
        unpaid_leaves=max(0, leaves_this_month - policy.paid_leaves_per_month),
        cost=compute_leave_cost(leaves_this_month, policy),
        zone=compute_leave_zone(leaves_this_month, policy),
    )
