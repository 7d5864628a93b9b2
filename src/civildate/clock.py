"""Wall-clock providers for reading the current time in epoch microseconds.

``Date.now()`` is the only non-deterministic operation in the library. It
reads the time through a provider, a zero-argument callable returning the
number of microseconds since 1970-01-01T00:00:00. Everything else is pure.

Providers:
    - system_clock: Reads the operating system's real-time clock
    - FixedClock: Always returns the same instant (tests, replays)
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from .exceptions import ClockError

logger = logging.getLogger(__name__)

ClockProvider = Callable[[], int]

NANOSEC_PER_MICROSEC = 1000


def system_clock() -> int:
    """Return the system real-time clock as microseconds since the epoch.

    Precision is truncated from the nanosecond reading, so two calls within
    the same microsecond return the same value.
    """
    return time.time_ns() // NANOSEC_PER_MICROSEC


class FixedClock:
    """Clock provider frozen at one instant.

    Attributes:
        micros: Microseconds since the epoch returned by every call
    """

    micros: int

    def __init__(self, micros: int = 0) -> None:
        """Initialize the clock.

        Args:
            micros: Microseconds since the epoch (default 0, the epoch itself)
        """
        self.micros = micros

    def __call__(self) -> int:
        return self.micros

    def __repr__(self) -> str:
        return f"FixedClock(micros={self.micros})"


def read_clock(clock: ClockProvider) -> int:
    """Read a clock provider and check what it returned.

    Args:
        clock: Zero-argument callable returning epoch microseconds

    Returns:
        Microseconds since the epoch

    Raises:
        ClockError: If the provider raises or returns a non-integer
    """
    try:
        micros = clock()
    except Exception as e:
        raise ClockError(f"Clock provider {clock!r} failed: {e}") from e

    # bool is an int subclass but never a timestamp
    if not isinstance(micros, int) or isinstance(micros, bool):
        raise ClockError(f"Clock provider {clock!r} returned {type(micros).__name__}, expected int")

    logger.debug("Read %d microseconds from %r", micros, clock)
    return micros
