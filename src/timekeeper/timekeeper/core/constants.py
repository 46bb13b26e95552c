"""Organization-wide defaults and display formats shared by the timekeeper modules."""

DEFAULT_ORG_UTC_OFFSET_MINUTES = 5 * 60
DEFAULT_EDIT_WINDOW_MINUTES = 15

FINE_BLOCK_MINUTES = 30
HHMM_FORMAT = "%H:%M"
HHMM_12H_FORMAT = "%I:%M %p"
ISO_DATE_FORMAT = "%Y-%m-%d"
EMPTY_TIME_DISPLAY = "--:--"

ISO_WEEKDAYS = frozenset(range(1, 8))
