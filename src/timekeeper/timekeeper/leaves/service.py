from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime
from typing import Optional, Sequence

from ..common.datetime_utils import now_in_org_tz
from ..common.validators import require_non_empty
from ..core.enums import DenialReason, LeaveStatus, LeaveType, Role
from ..core.exceptions import AdmissionDenied, AuthorizationError, NotFoundError, ValidationError
from ..policy.service import PolicyService
from ..workdays.service import WorkdayService
from .calculations import LeaveBalance, compute_leave_payment, leave_balance
from .model import LeaveRecord
from .repository import LeaveRepository

logger = logging.getLogger(__name__)


class LeaveService:
    def __init__(self, leaves: LeaveRepository, policies: PolicyService, workdays: WorkdayService):
        self._leaves = leaves
        self._policies = policies
        self._workdays = workdays

    def _get(self, leave_id: int) -> LeaveRecord:
        leave = self._leaves.get_by_id(int(leave_id))
        if leave is None:
            raise NotFoundError("Leave not found")
        return leave

    def request_leave(
        self,
        *,
        user_id: int,
        day: date,
        reason: str,
        leave_type: LeaveType = LeaveType.PAID,
        now: datetime | None = None,
    ) -> int:
        """Admit a future-dated leave request as PENDING."""
        user_id = int(user_id)
        now = now_in_org_tz(now)
        reason = require_non_empty(reason, "Reason")

        if day <= now.date():
            raise AdmissionDenied(DenialReason.PAST_DATED_LEAVE)

        if self._leaves.find_active_for_user_and_date(user_id=user_id, day=day) is not None:
            raise AdmissionDenied(DenialReason.DUPLICATE_LEAVE)

        policy = self._policies.resolve(user_id)
        denial = self._workdays.leave_denial(day=day, working_days=policy.working_days)
        if denial is not None:
            raise AdmissionDenied(denial)

        leave_id = self._leaves.create(
            user_id=user_id,
            day=day,
            reason=reason,
            leave_type=LeaveType(leave_type),
            applied_by=user_id,
            requested_at=now,
        )
        logger.info("Leave %s requested by user %s for %s", leave_id, user_id, day.isoformat())
        return leave_id

    def _decide(self, *, current_role: Role, admin_user_id: int, leave_id: int, approve: bool, now: datetime | None) -> LeaveRecord:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Only administrators can decide leave requests")

        leave = self._get(leave_id)
        if leave.is_terminal:
            raise AdmissionDenied(DenialReason.LEAVE_ALREADY_PROCESSED)

        is_paid = False
        if approve:
            prior = self._leaves.count_approved_in_month(
                user_id=leave.user_id,
                year=leave.date.year,
                month=leave.date.month,
                exclude_leave_id=leave.leave_id,
            )
            policy = self._policies.resolve(leave.user_id)
            is_paid = leave.leave_type == LeaveType.PAID and compute_leave_payment(prior, policy).is_paid

        status = LeaveStatus.APPROVED if approve else LeaveStatus.REJECTED
        decided_at = now_in_org_tz(now)
        ok = self._leaves.decide(
            leave_id=leave.leave_id,
            status=status,
            approved_by=int(admin_user_id),
            approved_at=decided_at,
            is_paid=is_paid,
        )
        if not ok:
            raise ValidationError("Failed to update leave")

        logger.info("Leave %s %s by %s (paid=%s)", leave.leave_id, status.value.lower(), admin_user_id, is_paid)
        return replace(leave, status=status, approved_by=int(admin_user_id), approved_at=decided_at, is_paid=is_paid)

    def approve(self, *, current_role: Role, admin_user_id: int, leave_id: int, now: datetime | None = None) -> LeaveRecord:
        return self._decide(current_role=current_role, admin_user_id=admin_user_id, leave_id=leave_id, approve=True, now=now)

    def reject(self, *, current_role: Role, admin_user_id: int, leave_id: int, now: datetime | None = None) -> LeaveRecord:
        return self._decide(current_role=current_role, admin_user_id=admin_user_id, leave_id=leave_id, approve=False, now=now)

    def cancel(self, *, current_role: Role, user_id: int, leave_id: int) -> None:
        """Withdraw a PENDING request. Allowed for the requester or an administrator."""
        leave = self._get(leave_id)
        if current_role != Role.ADMIN and leave.user_id != int(user_id):
            raise AuthorizationError("You can only cancel your own leave requests")
        if leave.is_terminal:
            raise AdmissionDenied(DenialReason.LEAVE_ALREADY_PROCESSED, "Cannot cancel a processed leave request")

        if not self._leaves.delete(leave.leave_id):
            raise ValidationError("Failed to cancel leave")
        logger.info("Leave %s cancelled by user %s", leave.leave_id, user_id)

    def list_mine(self, *, user_id: int, status: Optional[LeaveStatus] = None) -> Sequence[LeaveRecord]:
        return self._leaves.list_for_user(user_id=int(user_id), status=status)

    def balance(self, *, user_id: int, year: int, month: int) -> LeaveBalance:
        taken = self._leaves.count_approved_in_month(user_id=int(user_id), year=int(year), month=int(month))
        return leave_balance(taken, self._policies.resolve(user_id))
