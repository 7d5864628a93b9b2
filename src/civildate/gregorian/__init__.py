"""Proleptic Gregorian calendar components.

This package contains the calendar tables, the Date value and the Duration
value.
"""

from .common import DAY_TO_MICROSEC, HOUR_TO_MICROSEC, Weekday
from .date import Date
from .duration import Duration
from .tables import count_year, count_year_rev, is_leap, yday_to_mday

__all__ = [
    # Common types
    "DAY_TO_MICROSEC",
    "HOUR_TO_MICROSEC",
    "Weekday",
    # Values
    "Date",
    "Duration",
    # Calendar algorithms
    "count_year",
    "count_year_rev",
    "is_leap",
    "yday_to_mday",
]
