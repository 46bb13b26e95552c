"""Time normalization for the organization timezone.

Every instant the core stores is a timezone-aware datetime. A naive datetime
handed in by a caller is read as organization-local wall clock. HH:MM policy
values are only ever compared after converting to organization-local time, and
no other module does offset arithmetic.
"""

from __future__ import annotations

import calendar
from datetime import date, datetime, time, timedelta
from typing import Optional, Tuple

import pytz

from ..core.constants import (
    DEFAULT_ORG_UTC_OFFSET_MINUTES,
    EMPTY_TIME_DISPLAY,
    HHMM_12H_FORMAT,
    HHMM_FORMAT,
    ISO_DATE_FORMAT,
)
from ..core.exceptions import InvalidTimeFormatError

# Pakistan Standard Time, UTC+05:00 with no daylight saving.
ORG_TZ = pytz.FixedOffset(DEFAULT_ORG_UTC_OFFSET_MINUTES)

_ONE_MINUTE = timedelta(minutes=1)


def utc_now() -> datetime:
    """Current UTC time.

    Note: Wrapped so tests can patch it.
    """
    return datetime.now(pytz.UTC)


def to_org_tz(dt: datetime) -> datetime:
    """Express an instant in the organization timezone."""
    if dt.tzinfo is None:
        return ORG_TZ.localize(dt)
    return dt.astimezone(ORG_TZ)


def now_in_org_tz(now: Optional[datetime] = None) -> datetime:
    """Current organization-local time as an aware datetime."""
    return to_org_tz(now if now is not None else utc_now())


def today_in_org_tz(now: Optional[datetime] = None) -> date:
    """Calendar date as observed in the organization timezone.

    This is the date-only key attendance and leave records are stored under.
    """
    return now_in_org_tz(now).date()


def parse_hhmm(value: str) -> time:
    """Parse an "HH:MM" wall-clock string."""
    if not isinstance(value, str):
        raise InvalidTimeFormatError(value)
    try:
        return datetime.strptime(value.strip(), HHMM_FORMAT).time()
    except ValueError:
        raise InvalidTimeFormatError(value) from None


def combine_org(day: date, hhmm: str) -> datetime:
    """Organization-local instant for HH:MM on the given calendar date."""
    return ORG_TZ.localize(datetime.combine(day, parse_hhmm(hhmm)))


def at_wall_clock(instant: datetime, hhmm: str) -> datetime:
    """Same organization-local date as ``instant`` with hour/minute from ``hhmm``, seconds zeroed."""
    wall = parse_hhmm(hhmm)
    return to_org_tz(instant).replace(hour=wall.hour, minute=wall.minute, second=0, microsecond=0)


def minutes_between(start: datetime, end: datetime) -> int:
    """Whole minutes from ``start`` to ``end``, truncated toward zero."""
    delta = to_org_tz(end) - to_org_tz(start)
    if delta < timedelta(0):
        return -((-delta) // _ONE_MINUTE)
    return delta // _ONE_MINUTE


def format_time(instant: Optional[datetime], *, twelve_hour: bool = False) -> str:
    """Render an instant as organization-local HH:MM (or hh:MM AM/PM)."""
    if instant is None:
        return EMPTY_TIME_DISPLAY
    return to_org_tz(instant).strftime(HHMM_12H_FORMAT if twelve_hour else HHMM_FORMAT)


def format_local_date(value: datetime | date) -> str:
    """YYYY-MM-DD in the host's local calendar.

    Only meant for client-side input boundaries (e.g. the minimum date of a
    leave picker), never for persisted comparisons.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone()
        value = value.date()
    return value.strftime(ISO_DATE_FORMAT)


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, ISO_DATE_FORMAT).date()


def month_bounds(year: int, month: int) -> Tuple[date, date]:
    """First and last calendar date of a month."""
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)
