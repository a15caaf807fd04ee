"""
jalcal.engines.gregorian
------------------------
Proleptic Gregorian calendar over every integer year (astronomical year
numbering: year 0 is 1 BCE).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from jalcal.core.time import jdn_to_ymd, ymd_to_jdn
from jalcal.core.types import DateTuple, EngineId
from jalcal.engines._civil import CivilCalendarBase

GREGORIAN_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_gregorian_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


@dataclass(frozen=True)
class GregorianParams:
    """The proleptic rule has nothing to tune; the epoch follows from ymd_to_jdn."""


class GregorianEngine(CivilCalendarBase):
    MONTH_DAYS = GREGORIAN_MONTH_DAYS
    LEAP_MONTH = 2

    def __init__(self, id: EngineId, p: GregorianParams):
        super().__init__(id)
        self.p = p
        self._epoch_jdn = ymd_to_jdn(1, 1, 1)

    @property
    def epoch_jdn(self) -> int:
        return self._epoch_jdn

    def is_leap(self, year: int) -> bool:
        return is_gregorian_leap(year)

    def to_jdn(self, year: int, month: int, day: int) -> int:
        self.check(year, month, day)
        return ymd_to_jdn(year, month, day)

    def from_jdn(self, jdn: int) -> DateTuple:
        return jdn_to_ymd(jdn)

    def info(self) -> Dict[str, Any]:
        out = super().info()
        out["epoch_jdn"] = self.epoch_jdn
        return out
