"""Gregorian calendar tables and year/day resolution algorithms.

This module holds the process-wide constant tables of the proleptic
Gregorian calendar and the functions that move between the three
coordinates used by ``Date``:

    day ordinal   Signed day count relative to 1970-01-01 (day 0)
    (year, yday)  Calendar year and 0-based day-of-year
    (month, mday) 1-based month and day-of-month

Year resolution works on whole 400-year Gregorian cycles. A cycle always
holds 146097 days, so a day ordinal is split into cycles by a single floor
division and the year within the cycle is found by bisecting a 401-entry
table of cumulative year starts. The cost is constant for any year, past
or future, and negative ordinals need no special case.

Tables:
    - NORMAL_YEAR_DAYS / LEAP_YEAR_DAYS: 0-based day-of-year at which each
      month starts, with the year length as a trailing sentinel
    - NORMAL_YEAR_DAYS_REV / LEAP_YEAR_DAYS_REV: ``[month][day]`` to 0-based
      day-of-year
"""

from __future__ import annotations

import logging
from bisect import bisect_right
from itertools import accumulate

from ..exceptions import CalendarFieldError

logger = logging.getLogger(__name__)

# =============================================================================
# Calendar Constants
# =============================================================================

EPOCH_YEAR = 1970

MONTHS_IN_YEAR = 12
MAX_MONTH_DAY = 31

YEARS_IN_CYCLE = 400

# Month lengths of a common year
CALENDAR_YEAR: tuple[int, ...] = (
    31, 28, 31, 30,
    31, 30, 31, 31,
    30, 31, 30, 31,
)

# Month lengths of a leap year (Feb 29)
CALENDAR_LEAP: tuple[int, ...] = (CALENDAR_YEAR[0], CALENDAR_YEAR[1] + 1) + CALENDAR_YEAR[2:]


def is_leap(year: int) -> bool:
    """Return True if ``year`` is a leap year in the proleptic Gregorian calendar.

    Divisible by 4, except centuries, except every fourth century. Year 0
    (1 BC) and negative years follow the same rule.
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def year_length(year: int) -> int:
    """Return the number of days in ``year``."""
    return 366 if is_leap(year) else 365


# =============================================================================
# Month Lookup Tables
# =============================================================================


def _forward_table(month_lengths: tuple[int, ...]) -> tuple[int, ...]:
    return tuple(accumulate(month_lengths, initial=0))


def _reverse_table(forward: tuple[int, ...]) -> tuple[tuple[int, ...], ...]:
    # Row 0 is padding so rows are indexed by 1-based month. Every day 0-31 is
    # filled from the month start, so a day past the month's end carries over
    # into the following month instead of failing.
    return ((),) + tuple(
        tuple(forward[month - 1] + day - 1 for day in range(MAX_MONTH_DAY + 1))
        for month in range(1, MONTHS_IN_YEAR + 1)
    )


NORMAL_YEAR_DAYS = _forward_table(CALENDAR_YEAR)
LEAP_YEAR_DAYS = _forward_table(CALENDAR_LEAP)

NORMAL_YEAR_DAYS_REV = _reverse_table(NORMAL_YEAR_DAYS)
LEAP_YEAR_DAYS_REV = _reverse_table(LEAP_YEAR_DAYS)

# =============================================================================
# Gregorian Cycle Tables
# =============================================================================

# Days elapsed in a cycle before each year of the cycle (year 0 of a cycle is
# always a leap year). The final entry is the length of the whole cycle.
_CYCLE_YEAR_STARTS: tuple[int, ...] = tuple(
    accumulate((year_length(year) for year in range(YEARS_IN_CYCLE)), initial=0)
)

DAYS_IN_CYCLE = _CYCLE_YEAR_STARTS[-1]

# Days from 0000-01-01 to the epoch
_EPOCH_DAYS = (EPOCH_YEAR // YEARS_IN_CYCLE) * DAYS_IN_CYCLE + _CYCLE_YEAR_STARTS[EPOCH_YEAR % YEARS_IN_CYCLE]

# =============================================================================
# Year and Day Resolution
# =============================================================================


def count_year(day_ordinal: int) -> tuple[int, int]:
    """Resolve a day ordinal to its calendar year and day-of-year.

    Args:
        day_ordinal: Days since 1970-01-01 (negative before the epoch)

    Returns:
        Tuple of (year, day_of_year) with day_of_year 0-based and never negative
    """
    cycles, day_of_cycle = divmod(day_ordinal + _EPOCH_DAYS, DAYS_IN_CYCLE)
    year_of_cycle = bisect_right(_CYCLE_YEAR_STARTS, day_of_cycle) - 1

    return (
        cycles * YEARS_IN_CYCLE + year_of_cycle,
        day_of_cycle - _CYCLE_YEAR_STARTS[year_of_cycle],
    )


def count_year_rev(year: int) -> int:
    """Return the day ordinal of January 1st of ``year``.

    Inverse of ``count_year``: ``count_year(count_year_rev(y)) == (y, 0)``.
    """
    cycles, year_of_cycle = divmod(year, YEARS_IN_CYCLE)
    return cycles * DAYS_IN_CYCLE + _CYCLE_YEAR_STARTS[year_of_cycle] - _EPOCH_DAYS


def yday_to_mday(day_of_year: int, leap: bool) -> tuple[int, int]:
    """Split a 0-based day-of-year into a 1-based (month, day_of_month).

    The day-of-year is not range checked; callers pass values produced by
    ``count_year``.

    Args:
        day_of_year: 0-based day within the year
        leap: Whether the year is a leap year

    Returns:
        Tuple of (month, day_of_month)
    """
    table = LEAP_YEAR_DAYS if leap else NORMAL_YEAR_DAYS
    month = bisect_right(table, day_of_year)
    return month, day_of_year - table[month - 1] + 1


def _check_month_day(month: int, day: int) -> None:
    if not 1 <= month <= MONTHS_IN_YEAR:
        logger.debug("Rejected month %r", month)
        raise CalendarFieldError(f"Month {month} out of range (1-{MONTHS_IN_YEAR})")
    if not 1 <= day <= MAX_MONTH_DAY:
        logger.debug("Rejected day of month %r", day)
        raise CalendarFieldError(f"Day {day} out of range (1-{MAX_MONTH_DAY})")


def ymd_to_yday(year: int, month: int, day: int) -> int:
    """Return the 0-based day-of-year of a calendar date.

    Only the weak bounds 1-12 and 1-31 are enforced. A day past the end of
    its month (April 31, February 30) is not rejected; it carries over into
    the next month.

    Args:
        year: Calendar year, selects the normal or leap table
        month: Month (1-12)
        day: Day of month (1-31)

    Returns:
        0-based day-of-year

    Raises:
        CalendarFieldError: If month or day is outside the weak bounds
    """
    _check_month_day(month, day)
    table = LEAP_YEAR_DAYS_REV if is_leap(year) else NORMAL_YEAR_DAYS_REV
    return table[month][day]


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in ``month`` of ``year``.

    Raises:
        CalendarFieldError: If month is outside 1-12
    """
    _check_month_day(month, 1)
    return (CALENDAR_LEAP if is_leap(year) else CALENDAR_YEAR)[month - 1]
