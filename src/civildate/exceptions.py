"""pyCivilDate exception classes."""

from __future__ import annotations


class CivilDateError(Exception):
    """Base exception for all pyCivilDate errors."""


class CalendarFieldError(CivilDateError, ValueError):
    """Month or day-of-month outside its accepted range."""


class TimeOfDayError(CivilDateError, ValueError):
    """Hour, minute or second outside a single day."""


class ClockError(CivilDateError):
    """Wall-clock provider failed or returned an unusable value."""
