from __future__ import annotations

from typing import Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_non_negative(value: float, field_name: str) -> float:
    if value is None or value < 0:
        raise ValidationError(f"{field_name} must be zero or greater")
    return value


def clean_optional(value: Optional[str]) -> Optional[str]:
    """Strip free text, mapping blank input to None."""
    return (value or "").strip() or None
