"""
jalcal.engines.break_table
--------------------------
Jalali engine following K. M. Borkowski's break-point table ("The Persian
calendar for 3000 years", Earth, Moon and Planets 74, 1996), the algorithm
popularised by jalaali-js.

Between consecutive break years the leap years follow the 33-year pattern;
each break re-synchronises the pattern with the astronomical vernal equinox.
The table only covers Jalali years -61..3177; outside that range the engine
raises YearOutOfRangeError.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from jalcal.core.errors import InvalidDateError, YearOutOfRangeError
from jalcal.core.time import ymd_to_jdn
from jalcal.core.types import EngineId
from .solar_hijri import SolarHijriEngine

BORKOWSKI_BREAKS = (
    -61, 9, 38, 199, 426, 686, 756, 818, 1111, 1181, 1210,
    1635, 2060, 2097, 2192, 2262, 2324, 2394, 2456, 3178,
)


def _tdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero (the table's native arithmetic)."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _tmod(a: int, b: int) -> int:
    return a - _tdiv(a, b) * b


@dataclass(frozen=True)
class BreakTableParams:
    breaks: Tuple[int, ...] = BORKOWSKI_BREAKS
    # Nowruz of Jalali year jy falls in March of Gregorian year jy + gregorian_offset.
    gregorian_offset: int = 621

    def __post_init__(self) -> None:
        if len(self.breaks) < 2:
            raise ValueError("breaks must list at least two years")
        if list(self.breaks) != sorted(self.breaks):
            raise ValueError("breaks must be increasing")

    @property
    def first_year(self) -> int:
        return self.breaks[0]

    @property
    def last_year(self) -> int:
        return self.breaks[-1] - 1


class BreakTableEngine(SolarHijriEngine):
    def __init__(self, id: EngineId, p: BreakTableParams):
        self.p = p
        super().__init__(id)

    def _cycle(self, year: int) -> Tuple[int, int]:
        """
        Returns (leap, march) for a Jalali year:
          leap  -> position in the 4-year sub-cycle; 0 means the year is leap
          march -> day in March of Gregorian year (year + offset) on which it starts
        """
        breaks = self.p.breaks
        if not isinstance(year, int) or year < breaks[0] or year >= breaks[-1]:
            raise YearOutOfRangeError(
                f"Jalali year {year} is outside the break table ({self.p.first_year}..{self.p.last_year})"
            )

        gy = year + self.p.gregorian_offset
        leap_j = -14
        jp = breaks[0]
        jump = 0
        for jm in breaks[1:]:
            jump = jm - jp
            if year < jm:
                break
            leap_j += _tdiv(jump, 33) * 8 + _tdiv(_tmod(jump, 33), 4)
            jp = jm

        n = year - jp
        leap_j += _tdiv(n, 33) * 8 + _tdiv(_tmod(n, 33) + 3, 4)
        if _tmod(jump, 33) == 4 and jump - n == 4:
            leap_j += 1

        # Leap days of the Gregorian calendar up to gy, on the same footing.
        leap_g = _tdiv(gy, 4) - _tdiv((_tdiv(gy, 100) + 1) * 3, 4) - 150
        march = 20 + leap_j - leap_g

        if jump - n < 6:
            n = n - jump + _tdiv(jump + 4, 33) * 33
        leap = _tmod(_tmod(n + 1, 33) - 1, 4)
        if leap == -1:
            leap = 4
        return leap, march

    def check(self, year: int, month: int, day: int) -> None:
        if isinstance(year, int):
            self._cycle(year)
        super().check(year, month, day)

    def is_valid(self, year: int, month: int, day: int) -> bool:
        try:
            self.check(year, month, day)
        except (InvalidDateError, YearOutOfRangeError):
            return False
        return True

    def is_leap(self, year: int) -> bool:
        return self._cycle(year)[0] == 0

    def year_start(self, year: int) -> int:
        _, march = self._cycle(year)
        return ymd_to_jdn(year + self.p.gregorian_offset, 3, march)

    def info(self) -> Dict[str, Any]:
        out = super().info()
        out["rule"] = "Borkowski break-point table"
        out["years"] = (self.p.first_year, self.p.last_year)
        return out
