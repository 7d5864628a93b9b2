"""Time-unit constants and types shared across the Gregorian components.

All absolute values and durations in this package are integer
microseconds, so every unit below is expressed in microseconds.
"""

from enum import IntEnum

# =============================================================================
# Time Unit Constants
# =============================================================================

MILLISEC_TO_MICROSEC = 1000
SEC_TO_MICROSEC = 1000 * 1000
MINUTE_TO_MICROSEC = 1000 * 1000 * 60
HOUR_TO_MICROSEC = 1000 * 1000 * 60 * 60
DAY_TO_MICROSEC = 1000 * 1000 * 60 * 60 * 24
WEEK_TO_MICROSEC = DAY_TO_MICROSEC * 7

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 60 * 60
MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24
DAYS_PER_WEEK = 7

# =============================================================================
# Weekday
# =============================================================================


class Weekday(IntEnum):
    """Day of the week, counted from Monday.

    1970-01-01 (day ordinal 0) is a Thursday, so the weekday of any day
    ordinal ``n`` is ``(n + EPOCH_WEEKDAY) % 7``.
    """

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


EPOCH_WEEKDAY = Weekday.THURSDAY
