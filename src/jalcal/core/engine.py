"""
Engines encode a civil date to an absolute day count and decode it back.
The day count is the Julian Day Number (JDN): the integer day that starts at
civil midnight, with 2000-01-01 = 2451545 and 1970-01-01 = 2440588.
Two calendars convert into each other by encoding in one and decoding in the
other; no engine knows about any other.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Protocol

from .types import DateTuple, EngineId

class CalendarEngine(Protocol):
    id: EngineId

    @property
    def epoch_jdn(self) -> int:
        """JDN of day 1 of month 1 of year 1 in this calendar."""
        ...

    def info(self) -> Dict[str, Any]: ...
    def is_leap(self, year: int) -> bool: ...
    def days_in_month(self, year: int, month: int) -> int: ...
    def days_in_year(self, year: int) -> int: ...
    def is_valid(self, year: int, month: int, day: int) -> bool: ...

    def to_jdn(self, year: int, month: int, day: int) -> int:
        """
        Encode. Raises InvalidDateError when month/day are out of range,
        YearOutOfRangeError when a bounded engine cannot handle the year.
        """
        ...

    def from_jdn(self, jdn: int) -> DateTuple:
        """
        Decode. Total for unbounded engines; bounded engines raise
        YearOutOfRangeError outside their table.
        """
        ...

@dataclass
class EngineRegistry:
    _engines: Dict[str, CalendarEngine]

    def get(self, name: str) -> CalendarEngine:
        if name not in self._engines:
            raise KeyError(f"Unknown engine '{name}'. Available: {sorted(self._engines)}")
        return self._engines[name]

    def list(self) -> List[str]:
        return sorted(self._engines.keys())

    def register(self, name: str, engine: CalendarEngine, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._engines):
            raise KeyError(f"Engine '{name}' already exists. Use overwrite=True to replace.")
        self._engines[name] = engine
