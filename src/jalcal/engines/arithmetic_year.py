"""
jalcal.engines.arithmetic_year
------------------------------
Jalali engine driven by the purely arithmetic 33-year cycle: eight leap years
per cycle, one every four years, with the fifth-year gap at the end of the
cycle. It is defined for every integer year, which makes it the default
engine for open-ended conversion.

With r = (year + shift) mod 33, the year is leap iff r is a multiple of 4 and
r != 32. For the standard shift of 1595 this yields ..., 1399, 1403, 1408, ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from jalcal.core.types import EngineId
from .solar_hijri import CYCLE_YEARS, SolarHijriEngine


@dataclass(frozen=True)
class ArithmeticLeapParams:
    # Phase of the 33-year cycle relative to Jalali year 0.
    shift: int = 1595
    # JDN of 1 Farvardin 1 (proleptic Gregorian 622-03-21).
    epoch_jdn: int = 1948320

    def __post_init__(self) -> None:
        if not isinstance(self.shift, int) or not isinstance(self.epoch_jdn, int):
            raise TypeError("shift and epoch_jdn must be integers")


def leap_count(year: int, shift: int = 1595) -> int:
    """
    Number of leap years in the cycle count up to (not including) `year`,
    relative to an arbitrary but fixed origin. Differences of leap_count give
    the leap days between two year starts.
    """
    y = year + shift
    return (y // CYCLE_YEARS) * 8 + (y % CYCLE_YEARS + 3) // 4


class ArithmeticYearEngine(SolarHijriEngine):
    def __init__(self, id: EngineId, p: ArithmeticLeapParams):
        self.p = p
        self._count_1 = leap_count(1, p.shift)
        super().__init__(id)

    def is_leap(self, year: int) -> bool:
        r = (year + self.p.shift) % CYCLE_YEARS
        return r % 4 == 0 and r != 32

    def year_start(self, year: int) -> int:
        return self.p.epoch_jdn + 365 * (year - 1) + leap_count(year, self.p.shift) - self._count_1

    def info(self) -> Dict[str, Any]:
        out = super().info()
        out["rule"] = "33-year arithmetic cycle"
        out["shift"] = self.p.shift
        return out
