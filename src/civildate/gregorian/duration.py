"""Elapsed-time value in signed microseconds.

``Duration`` is the result of ``Date.duration_since``. It only offers unit
views over one integer; durations are not added to each other or to dates.

All views divide with truncation toward zero, and the ``subsecs`` /
``subday_micros`` remainders carry the sign of the value, so that for any
duration ``d``::

    d.into_secs() * SEC_TO_MICROSEC + d.subsecs() == d.into_micros()
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Self

from .common import DAY_TO_MICROSEC, HOUR_TO_MICROSEC, MILLISEC_TO_MICROSEC, MINUTE_TO_MICROSEC, SEC_TO_MICROSEC


def _truncating_divmod(value: int, divisor: int) -> tuple[int, int]:
    """divmod() rounding toward zero instead of toward negative infinity."""
    quotient, remainder = divmod(abs(value), divisor)
    if value < 0:
        return -quotient, -remainder
    return quotient, remainder


@dataclass(frozen=True)
class Duration:
    """Signed span of time in microseconds.

    Attributes:
        value: Microsecond count, negative when the span runs backwards
    """

    value: int = 0

    @classmethod
    def from_micros(cls, value: int) -> Self:
        return cls(value)

    def into_micros(self) -> int:
        return self.value

    def into_millis(self) -> int:
        return _truncating_divmod(self.value, MILLISEC_TO_MICROSEC)[0]

    def into_secs(self) -> int:
        return _truncating_divmod(self.value, SEC_TO_MICROSEC)[0]

    def subsecs(self) -> int:
        """Microseconds left over after whole seconds, signed like the value."""
        return _truncating_divmod(self.value, SEC_TO_MICROSEC)[1]

    def into_minutes(self) -> int:
        return _truncating_divmod(self.value, MINUTE_TO_MICROSEC)[0]

    def into_hours(self) -> int:
        return _truncating_divmod(self.value, HOUR_TO_MICROSEC)[0]

    def into_days(self) -> int:
        return _truncating_divmod(self.value, DAY_TO_MICROSEC)[0]

    def subday_micros(self) -> int:
        """Microseconds left over after whole days, signed like the value."""
        return _truncating_divmod(self.value, DAY_TO_MICROSEC)[1]

    def abs(self) -> Duration:
        return Duration(abs(self.value))
