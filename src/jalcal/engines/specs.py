from __future__ import annotations

from ..core.types import EngineId, EngineSpec
from .gregorian import GregorianParams
from .arithmetic_year import ArithmeticLeapParams
from .break_table import BreakTableParams, BORKOWSKI_BREAKS


# ============================================================
# GREGORIAN
# ============================================================

GREGORIAN = EngineSpec(
    kind="gregorian",
    id=EngineId("gregorian", "gregorian", "0.1"),
    payload=GregorianParams(),
    meta={"description": "Proleptic Gregorian calendar, every integer year"},
)


# ============================================================
# JALALI: 33-year arithmetic cycle (default)
# ============================================================

# r = (year + 1595) mod 33 puts 1399, 1403, 1408 on leap positions.
JALALI_ARITHMETIC = EngineSpec(
    kind="arithmetic",
    id=EngineId("jalali", "arithmetic", "0.1"),
    payload=ArithmeticLeapParams(shift=1595, epoch_jdn=1948320),
    meta={"description": "33-year arithmetic cycle, every integer year"},
)


# ============================================================
# JALALI: Borkowski break-point table
# ============================================================

JALALI_BORKOWSKI = EngineSpec(
    kind="break_table",
    id=EngineId("jalali", "borkowski", "0.1"),
    payload=BreakTableParams(breaks=BORKOWSKI_BREAKS, gregorian_offset=621),
    meta={"description": "Borkowski break table, Jalali years -61..3177"},
)

JALALI_SPECS = {
    "arithmetic": JALALI_ARITHMETIC,
    "borkowski": JALALI_BORKOWSKI,
}

ALL_SPECS = {"gregorian": GREGORIAN, **JALALI_SPECS}

DEFAULT_JALALI_ENGINE = "arithmetic"
