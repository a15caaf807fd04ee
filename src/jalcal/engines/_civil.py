"""
jalcal.engines._civil
---------------------
Shared month-table logic for the solar calendars: both calendars have twelve
months of fixed length, except one month that gains a day in leap years.
"""

from __future__ import annotations

from typing import Any, Dict, Tuple

from jalcal.core.errors import InvalidDateError
from jalcal.core.types import EngineId


def _is_int(v: Any) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


class CivilCalendarBase:
    """
    Subclasses provide MONTH_DAYS (common-year lengths), LEAP_MONTH and is_leap().
    """
    MONTH_DAYS: Tuple[int, ...] = ()
    LEAP_MONTH: int = 0

    def __init__(self, id: EngineId):
        self.id = id

    def is_leap(self, year: int) -> bool:
        raise NotImplementedError

    def check_year(self, year: int) -> None:
        if not _is_int(year):
            raise InvalidDateError(f"year must be an integer, got {year!r}")

    def days_in_month(self, year: int, month: int) -> int:
        self.check_year(year)
        if not _is_int(month) or not (1 <= month <= 12):
            raise InvalidDateError(f"month {month} is out of range 1..12")
        n = self.MONTH_DAYS[month - 1]
        if month == self.LEAP_MONTH and self.is_leap(year):
            n += 1
        return n

    def days_in_year(self, year: int) -> int:
        return 366 if self.is_leap(year) else 365

    def check(self, year: int, month: int, day: int) -> None:
        """Raise InvalidDateError unless (year, month, day) names an existing day."""
        if not (_is_int(year) and _is_int(month) and _is_int(day)):
            raise InvalidDateError(f"date components must be integers, got {(year, month, day)!r}")
        n = self.days_in_month(year, month)
        if not (1 <= day <= n):
            raise InvalidDateError(f"day {day} is out of range 1..{n} for {year}-{month:02d}")

    def is_valid(self, year: int, month: int, day: int) -> bool:
        try:
            self.check(year, month, day)
        except InvalidDateError:
            return False
        return True

    def info(self) -> Dict[str, Any]:
        return {"id": self.id.__dict__, "leap_month": self.LEAP_MONTH}
