from __future__ import annotations

from typing import Optional

from .enums import DENIAL_MESSAGES, DenialReason


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class NotFoundError(DomainError):
    """Raised when a referenced record does not exist."""


class PolicyMissingError(DomainError):
    """Raised when no organization policy has been configured."""


class InvalidTimeFormatError(ValidationError, ValueError):
    """Raised when an HH:MM value cannot be parsed."""

    def __init__(self, value: object):
        super().__init__(f"Invalid time format (HH:MM): {value!r}")
        self.value = value


class AdmissionDenied(ValidationError):
    """A check-in, check-out or leave request refused for an enumerable reason."""

    def __init__(self, reason: DenialReason, message: Optional[str] = None):
        super().__init__(message or DENIAL_MESSAGES[reason])
        self.reason = reason


class ReasonRequired(ValidationError):
    """Late check-in or early check-out submitted without an explanation.

    Carries the computed minutes so the caller can prompt for the missing
    reason instead of rejecting the request outright.
    """

    def __init__(self, field: str, *, late_minutes: int = 0, early_minutes: int = 0):
        if field == "check_in_reason":
            message = f"Reason is required for late check-in ({late_minutes} minutes late)"
        else:
            message = f"Reason is required for early checkout ({early_minutes} minutes early)"
        super().__init__(message)
        self.field = field
        self.late_minutes = late_minutes
        self.early_minutes = early_minutes
