"""
jalcal.engines.solar_hijri
--------------------------
Month structure shared by every Jalali (Persian solar Hijri) engine.
Engines differ only in where each year starts, i.e. in the leap-year rule;
the month table and the day-of-year decomposition live here.
"""

from __future__ import annotations

from typing import Any, Dict

from jalcal.core.types import DateTuple, EngineId
from jalcal.engines._civil import CivilCalendarBase

JALALI_MONTH_DAYS = (31, 31, 31, 31, 31, 31, 30, 30, 30, 30, 30, 29)

# Days before the first of each month.
JALALI_MONTH_OFFSETS = (0, 31, 62, 93, 124, 155, 186, 216, 246, 276, 306, 336)

# Mean year of the 33-year cycle (8 leap years): 12053 / 33 days.
CYCLE_DAYS = 12053
CYCLE_YEARS = 33


class SolarHijriEngine(CivilCalendarBase):
    """
    Subclasses implement is_leap() and year_start(); everything else follows.
    """
    MONTH_DAYS = JALALI_MONTH_DAYS
    LEAP_MONTH = 12

    def __init__(self, id: EngineId):
        super().__init__(id)
        self._epoch_jdn = self.year_start(1)

    @property
    def epoch_jdn(self) -> int:
        return self._epoch_jdn

    def year_start(self, year: int) -> int:
        """JDN of 1 Farvardin (Nowruz) of the given year."""
        raise NotImplementedError

    # ---------------------------------------------------------
    # Forward: Jalali date to JDN
    # ---------------------------------------------------------

    def to_jdn(self, year: int, month: int, day: int) -> int:
        self.check(year, month, day)
        return self.year_start(year) + JALALI_MONTH_OFFSETS[month - 1] + day - 1

    # ---------------------------------------------------------
    # Inverse: JDN to Jalali date
    # ---------------------------------------------------------

    def year_of(self, jdn: int) -> int:
        """Jalali year containing jdn."""
        # The mean-year estimate is off by at most one; walk to the owning year.
        year = (jdn - self._epoch_jdn) * CYCLE_YEARS // CYCLE_DAYS + 1
        while jdn < self.year_start(year):
            year -= 1
        while jdn >= self.year_start(year) + self.days_in_year(year):
            year += 1
        return year

    def from_jdn(self, jdn: int) -> DateTuple:
        year = self.year_of(jdn)
        doy = jdn - self.year_start(year)  # 0-based
        if doy < 186:
            return (year, 1 + doy // 31, 1 + doy % 31)
        doy -= 186
        return (year, 7 + doy // 30, 1 + doy % 30)

    def info(self) -> Dict[str, Any]:
        out = super().info()
        out["epoch_jdn"] = self.epoch_jdn
        return out
