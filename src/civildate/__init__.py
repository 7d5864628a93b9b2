"""
pyCivilDate: Proleptic Gregorian date arithmetic on epoch microseconds.

This library converts between a linear microsecond count relative to
1970-01-01T00:00:00 and a broken-down civil date (year, month, day,
weekday, time of day). Values are timezone-naive and immutable.
"""

from __future__ import annotations

from .clock import FixedClock, system_clock
from .exceptions import CalendarFieldError, CivilDateError, ClockError, TimeOfDayError
from .gregorian import (
    DAY_TO_MICROSEC,
    HOUR_TO_MICROSEC,
    Date,
    Duration,
    Weekday,
    count_year,
    count_year_rev,
    is_leap,
    yday_to_mday,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Values
    "Date",
    "Duration",
    "Weekday",
    # Calendar algorithms
    "count_year",
    "count_year_rev",
    "is_leap",
    "yday_to_mday",
    # Constants
    "DAY_TO_MICROSEC",
    "HOUR_TO_MICROSEC",
    # Clock
    "FixedClock",
    "system_clock",
    # Exceptions
    "CivilDateError",
    "CalendarFieldError",
    "ClockError",
    "TimeOfDayError",
]
