from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .common.logging_setup import configure_logging
from .leaves.repository import LeaveRepository
from .leaves.service import LeaveService
from .policy.repository import PolicyRepository
from .policy.service import PolicyService
from .reports.service import MonthlyReportService
from .settings import Settings, load_settings
from .workdays.repository import HolidayRepository, OffDayRepository
from .workdays.service import WorkdayService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Container:
    settings: Settings

    policy_service: PolicyService
    workday_service: WorkdayService
    attendance_service: AttendanceService
    leave_service: LeaveService
    report_service: MonthlyReportService


def build_container(
    *,
    policies: PolicyRepository,
    attendance: AttendanceRepository,
    leaves: LeaveRepository,
    holidays: HolidayRepository,
    off_days: OffDayRepository,
    settings: Optional[Settings] = None,
) -> Container:
    """Wire services over storage adapters supplied by the host application."""
    settings = settings or load_settings()
    configure_logging(settings.log_level)

    if settings.seed_default_policy and policies.get_default() is None:
        policies.save_default(settings.default_policy)
        logger.info("Seeded default organization policy from %s", settings.module)

    policy_service = PolicyService(policies)
    workday_service = WorkdayService(holidays, off_days)
    attendance_service = AttendanceService(
        attendance,
        policy_service,
        workday_service,
        edit_window_minutes=settings.edit_window_minutes,
    )
    leave_service = LeaveService(leaves, policy_service, workday_service)
    report_service = MonthlyReportService(attendance, leaves, policy_service)

    return Container(
        settings=settings,
        policy_service=policy_service,
        workday_service=workday_service,
        attendance_service=attendance_service,
        leave_service=leave_service,
        report_service=report_service,
    )
