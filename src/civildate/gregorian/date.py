"""Civil date value built on an absolute microsecond count.

``Date`` wraps one integer, the number of microseconds since
1970-01-01T00:00:00, and decomposes it once at construction into calendar
fields. The conversion runs in four steps:

    1. Floor-divide the absolute value into a day ordinal and the
       microseconds elapsed within that day (always 0 or more)
    2. Resolve the day ordinal to (year, day-of-year) by Gregorian cycle
    3. Resolve the day-of-year to (month, day-of-month) by table lookup
    4. Split the intraday microseconds by fixed radix into
       hour, minute, second and sub-second

Composition from calendar fields runs the same steps backwards. Every
operation that changes the date builds a new ``Date`` from a new absolute
value, so the fields always match what ``Date.from_i64`` would produce.
Values are timezone-naive.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Self

from ..clock import ClockProvider, read_clock, system_clock
from ..exceptions import TimeOfDayError
from .common import (
    DAY_TO_MICROSEC,
    DAYS_PER_WEEK,
    EPOCH_WEEKDAY,
    HOUR_TO_MICROSEC,
    HOURS_PER_DAY,
    MINUTES_PER_HOUR,
    SEC_TO_MICROSEC,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    WEEK_TO_MICROSEC,
    Weekday,
)
from .duration import Duration
from .tables import count_year, count_year_rev, is_leap, yday_to_mday, ymd_to_yday

logger = logging.getLogger(__name__)


def _hms_to_micros(h: int, m: int, s: int) -> int:
    return (h * SECONDS_PER_HOUR + m * SECONDS_PER_MINUTE + s) * SEC_TO_MICROSEC


@dataclass(frozen=True, order=True)
class Date:
    """Point in time decomposed into proleptic Gregorian calendar fields.

    Equality, ordering and hashing use ``absolute_value`` only; the other
    fields are derived from it and never set directly. ``Date()`` is the
    epoch.

    Attributes:
        absolute_value: Microseconds since 1970-01-01T00:00:00 (may be negative)
        year: Calendar year (0 is 1 BC, negative years continue backwards)
        month: Month (1-12)
        m_day: Day of month (1-31)
        y_day: Day of year (1-366)
        w_day: Day of week (Weekday.MONDAY=0 ... Weekday.SUNDAY=6)
        hour: Hour (0-23)
        minute: Minute (0-59)
        second: Second (0-59)
        sub_second: Microseconds within the second (0-999999)
    """

    absolute_value: int = 0

    year: int = field(init=False, compare=False, repr=False)
    month: int = field(init=False, compare=False, repr=False)
    m_day: int = field(init=False, compare=False, repr=False)
    y_day: int = field(init=False, compare=False, repr=False)
    w_day: Weekday = field(init=False, compare=False, repr=False)
    hour: int = field(init=False, compare=False, repr=False)
    minute: int = field(init=False, compare=False, repr=False)
    second: int = field(init=False, compare=False, repr=False)
    sub_second: int = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        # Floor division keeps the intraday part in [0, DAY_TO_MICROSEC) for
        # instants before the epoch too.
        days, sub_day = divmod(self.absolute_value, DAY_TO_MICROSEC)

        year, y_day = count_year(days)
        month, m_day = yday_to_mday(y_day, is_leap(year))

        seconds, sub_second = divmod(sub_day, SEC_TO_MICROSEC)
        minutes, second = divmod(seconds, SECONDS_PER_MINUTE)
        hour, minute = divmod(minutes, MINUTES_PER_HOUR)

        decomposed = {
            "year": year,
            "month": month,
            "m_day": m_day,
            "y_day": y_day + 1,
            "w_day": Weekday((days + EPOCH_WEEKDAY) % DAYS_PER_WEEK),
            "hour": hour,
            "minute": minute,
            "second": second,
            "sub_second": sub_second,
        }
        for name, value in decomposed.items():
            object.__setattr__(self, name, value)

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def from_i64(cls, n: int) -> Self:
        """Build a date from microseconds since the epoch.

        Every integer is accepted. Values outside the signed 64-bit range
        are converted exactly rather than wrapped.
        """
        return cls(n)

    @classmethod
    def from_ymd(cls, year: int, month: int, day: int) -> Self:
        """Build midnight of a calendar date.

        Only the bounds 1-12 for month and 1-31 for day are checked. A day
        past the end of its month carries over, so ``from_ymd(2023, 2, 30)``
        is 2023-03-02.

        Args:
            year: Calendar year
            month: Month (1-12)
            day: Day of month (1-31)

        Raises:
            CalendarFieldError: If month or day is outside those bounds
        """
        day_ordinal = count_year_rev(year) + ymd_to_yday(year, month, day)
        return cls(day_ordinal * DAY_TO_MICROSEC)

    @classmethod
    def now(cls, clock: ClockProvider = system_clock) -> Self:
        """Return the current instant as read from ``clock``.

        Raises:
            ClockError: If the clock provider fails
        """
        return cls(read_clock(clock))

    def to_i64(self) -> int:
        """Return microseconds since the epoch."""
        return self.absolute_value

    def __int__(self) -> int:
        return self.absolute_value

    # =========================================================================
    # Arithmetic
    # =========================================================================

    def add_hours(self, n: int) -> Date:
        return Date(self.absolute_value + n * HOUR_TO_MICROSEC)

    def add_days(self, n: int) -> Date:
        return Date(self.absolute_value + n * DAY_TO_MICROSEC)

    def add_weeks(self, n: int) -> Date:
        return Date(self.absolute_value + n * WEEK_TO_MICROSEC)

    def add_hms(self, h: int, m: int, s: int) -> Date:
        """Shift by a signed hour/minute/second offset.

        The components are not range checked and may be negative; they are
        summed into one offset.
        """
        return Date(self.absolute_value + _hms_to_micros(h, m, s))

    def set_hms(self, h: int, m: int, s: int) -> Date:
        """Return the same calendar day at time h:m:s.

        The sub-second part is cleared.

        Raises:
            TimeOfDayError: If not 0 <= h < 24, 0 <= m < 60 and 0 <= s < 60
        """
        if not (0 <= h < HOURS_PER_DAY and 0 <= m < MINUTES_PER_HOUR and 0 <= s < SECONDS_PER_MINUTE):
            logger.debug("Rejected time of day %r:%r:%r", h, m, s)
            raise TimeOfDayError(f"Time of day {h}:{m}:{s} out of range (00:00:00-23:59:59)")

        day_ordinal = count_year_rev(self.year) + ymd_to_yday(self.year, self.month, self.m_day)
        return Date(day_ordinal * DAY_TO_MICROSEC + _hms_to_micros(h, m, s))

    def reset_hms(self) -> Date:
        """Return midnight of the same calendar day."""
        return Date.from_ymd(self.year, self.month, self.m_day)

    def duration_since(self, other: Date) -> Duration:
        """Return ``self - other``, negative when ``other`` is later."""
        return Duration.from_micros(self.absolute_value - other.absolute_value)

    def __repr__(self) -> str:
        return (
            f"Date(absolute_value={self.absolute_value}, year={self.year}, month={self.month}, "
            f"m_day={self.m_day}, y_day={self.y_day}, w_day={self.w_day.name}, hour={self.hour}, "
            f"minute={self.minute}, second={self.second}, sub_second={self.sub_second})"
        )
