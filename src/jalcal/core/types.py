from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Any, Dict, Literal, Tuple

DateTuple = Tuple[int, int, int]

@dataclass(frozen=True)
class EngineId:
    family: Literal["gregorian", "jalali", "custom"]
    name: str
    version: str

@dataclass(frozen=True)
class CalendarDate:
    year: int
    month: int
    day: int

    def as_tuple(self) -> DateTuple:
        return (self.year, self.month, self.day)

    def __str__(self) -> str:
        return f"{self.year}-{self.month:02d}-{self.day:02d}"

@dataclass(frozen=True)
class EngineSpec:
    """Top-level wrapper for all engine specifications."""
    kind: Literal["gregorian", "arithmetic", "break_table"]
    id: EngineId
    payload: Any  # GregorianParams | ArithmeticLeapParams | BreakTableParams
    meta: Dict[str, Any] | None = None

    def tweak(self, **kwargs) -> "EngineSpec":
        return replace(self, payload=replace(self.payload, **kwargs))
