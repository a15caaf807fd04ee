class JalcalError(Exception):
    """Base error."""

class InvalidDateError(JalcalError, ValueError):
    """Raised when a month or day is out of range for the given year."""

class DateParseError(JalcalError, ValueError):
    """Raised when a date string has the wrong shape or a non-numeric field."""

class DayCountOverflowError(JalcalError, OverflowError):
    """Raised when a timestamp or result leaves the signed 64-bit range."""

class YearOutOfRangeError(JalcalError, ValueError):
    """Raised when a bounded engine (e.g. the break table) is asked for an unsupported year."""
