from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from .core.engine import CalendarEngine, EngineRegistry
from .core.errors import JalcalError
from .core.time import check_i64, jdn_to_unix, unix_to_jdn
from .core.types import DateTuple, EngineSpec
from .engines.factory import make_engine as _make_engine
from .engines.gregorian import is_gregorian_leap
from .engines.specs import DEFAULT_JALALI_ENGINE

logger = logging.getLogger(__name__)

_registry: Optional[EngineRegistry] = None

def set_registry(reg: EngineRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> EngineRegistry:
    if _registry is None:
        raise RuntimeError("Engine registry not initialized")
    return _registry

def list_engines() -> List[str]:
    return _reg().list()

def engine_info(engine: str) -> Dict[str, Any]:
    return _reg().get(engine).info()

def make_engine(spec: EngineSpec) -> CalendarEngine:
    return _make_engine(spec)

def register_engine(name: str, engine: CalendarEngine, *, overwrite: bool = False) -> None:
    _reg().register(name, engine, overwrite=overwrite)

def _gregorian() -> CalendarEngine:
    return _reg().get("gregorian")

def _jalali(engine: str) -> CalendarEngine:
    eng = _reg().get(engine)
    if eng.id.family == "gregorian":
        raise ValueError(f"Engine '{engine}' is not a Jalali engine")
    return eng

def _is_int(v: Any) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)

# ============================================================
# Date <-> date
# ============================================================

def _convert(src: CalendarEngine, dst: CalendarEngine, y: int, m: int, d: int) -> Optional[DateTuple]:
    """Encode in src, decode in dst. None if the input is not a date of src."""
    try:
        jdn = src.to_jdn(y, m, d)
        check_i64(y, "year")
        out = dst.from_jdn(jdn)
        check_i64(out[0], "year")
    except JalcalError as e:
        logger.debug("%s -> %s rejected %r: %s", src.id.name, dst.id.name, (y, m, d), e)
        return None
    return out

def gregorian_to_jalali(y: int, m: int, d: int, *, engine: str = DEFAULT_JALALI_ENGINE) -> Optional[DateTuple]:
    """Gregorian (y, m, d) -> Jalali (jy, jm, jd), or None for an invalid Gregorian date."""
    return _convert(_gregorian(), _jalali(engine), y, m, d)

def jalali_to_gregorian(y: int, m: int, d: int, *, engine: str = DEFAULT_JALALI_ENGINE) -> Optional[DateTuple]:
    """Jalali (jy, jm, jd) -> Gregorian (gy, gm, gd), or None for an invalid Jalali date."""
    return _convert(_jalali(engine), _gregorian(), y, m, d)

# ============================================================
# Unix timestamps (UTC midnight granularity)
# ============================================================

def unix_to_jalali(ts: int, *, engine: str = DEFAULT_JALALI_ENGINE) -> Optional[DateTuple]:
    """
    Jalali date of the UTC day containing ts (seconds since 1970-01-01T00:00:00Z).
    Sub-day precision is floored away, so negative timestamps land on the
    previous day. None if ts is not a 64-bit integer.
    """
    if not _is_int(ts):
        logger.debug("unix_to_jalali rejected non-integer timestamp %r", ts)
        return None
    try:
        return _jalali(engine).from_jdn(unix_to_jdn(ts))
    except JalcalError as e:
        logger.debug("unix_to_jalali rejected %r: %s", ts, e)
        return None

def jalali_to_unix(y: int, m: int, d: int, *, engine: str = DEFAULT_JALALI_ENGINE) -> Optional[int]:
    """Unix seconds at UTC midnight starting the Jalali day, or None."""
    try:
        return jdn_to_unix(_jalali(engine).to_jdn(y, m, d))
    except JalcalError as e:
        logger.debug("jalali_to_unix rejected %r: %s", (y, m, d), e)
        return None

def unix_to_gregorian(ts: int) -> Optional[DateTuple]:
    if not _is_int(ts):
        logger.debug("unix_to_gregorian rejected non-integer timestamp %r", ts)
        return None
    try:
        return _gregorian().from_jdn(unix_to_jdn(ts))
    except JalcalError as e:
        logger.debug("unix_to_gregorian rejected %r: %s", ts, e)
        return None

def gregorian_to_unix(y: int, m: int, d: int) -> Optional[int]:
    try:
        return jdn_to_unix(_gregorian().to_jdn(y, m, d))
    except JalcalError as e:
        logger.debug("gregorian_to_unix rejected %r: %s", (y, m, d), e)
        return None

# ============================================================
# Day-count pivot (JDN)
# ============================================================

def gregorian_to_jdn(y: int, m: int, d: int) -> Optional[int]:
    try:
        return _gregorian().to_jdn(y, m, d)
    except JalcalError:
        return None

def jdn_to_gregorian(jdn: int) -> DateTuple:
    return _gregorian().from_jdn(jdn)

def jalali_to_jdn(y: int, m: int, d: int, *, engine: str = DEFAULT_JALALI_ENGINE) -> Optional[int]:
    try:
        return _jalali(engine).to_jdn(y, m, d)
    except JalcalError:
        return None

def jdn_to_jalali(jdn: int, *, engine: str = DEFAULT_JALALI_ENGINE) -> Optional[DateTuple]:
    try:
        return _jalali(engine).from_jdn(jdn)
    except JalcalError:
        return None

# ============================================================
# Calendar structure
# ============================================================

def is_gregorian_leap_year(year: int) -> bool:
    return is_gregorian_leap(year)

def is_jalali_leap_year(year: int, *, engine: str = DEFAULT_JALALI_ENGINE) -> Optional[bool]:
    """None for a non-integer year or one the engine does not cover."""
    try:
        eng = _jalali(engine)
        eng.check_year(year)
        return eng.is_leap(year)
    except JalcalError:
        return None

def jalali_month_length(year: int, month: int, *, engine: str = DEFAULT_JALALI_ENGINE) -> Optional[int]:
    try:
        return _jalali(engine).days_in_month(year, month)
    except JalcalError:
        return None

def is_valid_jalali_date(y: int, m: int, d: int, *, engine: str = DEFAULT_JALALI_ENGINE) -> bool:
    return _jalali(engine).is_valid(y, m, d)

def is_valid_gregorian_date(y: int, m: int, d: int) -> bool:
    return _gregorian().is_valid(y, m, d)

def nowruz(year: int, *, engine: str = DEFAULT_JALALI_ENGINE) -> Optional[DateTuple]:
    """Gregorian date of 1 Farvardin of the given Jalali year."""
    return jalali_to_gregorian(year, 1, 1, engine=engine)
