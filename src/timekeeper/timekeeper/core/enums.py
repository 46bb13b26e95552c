from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Role of the acting user, used for permission checks."""

    ADMIN = "ADMIN"
    EMPLOYEE = "EMPLOYEE"


class LeaveStatus(str, Enum):
    """Approval flow of a leave request. PENDING moves once to a terminal state."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class LeaveType(str, Enum):
    PAID = "PAID"
    UNPAID = "UNPAID"
    SICK = "SICK"
    CASUAL = "CASUAL"


class DenialReason(str, Enum):
    """Enumerable reasons a check-in, check-out or leave request is refused."""

    ALREADY_CHECKED_IN = "ALREADY_CHECKED_IN"
    NOT_CHECKED_IN = "NOT_CHECKED_IN"
    ALREADY_CHECKED_OUT = "ALREADY_CHECKED_OUT"
    NON_WORKING_DAY = "NON_WORKING_DAY"
    HOLIDAY = "HOLIDAY"
    OFF_DAY = "OFF_DAY"
    DUPLICATE_LEAVE = "DUPLICATE_LEAVE"
    PAST_DATED_LEAVE = "PAST_DATED_LEAVE"
    NON_WORKING_DAY_LEAVE = "NON_WORKING_DAY_LEAVE"
    HOLIDAY_LEAVE = "HOLIDAY_LEAVE"
    LEAVE_ALREADY_PROCESSED = "LEAVE_ALREADY_PROCESSED"


DENIAL_MESSAGES = {
    DenialReason.ALREADY_CHECKED_IN: "Already checked in today",
    DenialReason.NOT_CHECKED_IN: "Not checked in today",
    DenialReason.ALREADY_CHECKED_OUT: "Already checked out today",
    DenialReason.NON_WORKING_DAY: "Cannot check in on a non-working day",
    DenialReason.HOLIDAY: "Today is a holiday. Cannot check in.",
    DenialReason.OFF_DAY: "You have an off day today. Cannot check in.",
    DenialReason.DUPLICATE_LEAVE: "Leave already requested for this date",
    DenialReason.PAST_DATED_LEAVE: "Leave date must be in the future",
    DenialReason.NON_WORKING_DAY_LEAVE: "Selected date is not a working day",
    DenialReason.HOLIDAY_LEAVE: "Selected date is a holiday",
    DenialReason.LEAVE_ALREADY_PROCESSED: "Leave has already been processed",
}
