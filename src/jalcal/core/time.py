from __future__ import annotations

from .errors import DayCountOverflowError
from .types import DateTuple

SECONDS_PER_DAY = 86400

# 1970-01-01 (proleptic Gregorian) as a Julian Day Number.
JDN_UNIX_EPOCH = 2440588

I64_MIN = -(2 ** 63)
I64_MAX = 2 ** 63 - 1


def check_i64(value: int, what: str = "value") -> int:
    """Raise DayCountOverflowError unless value fits a signed 64-bit integer."""
    if not (I64_MIN <= value <= I64_MAX):
        raise DayCountOverflowError(f"{what} {value} is outside the signed 64-bit range")
    return value


def ymd_to_jdn(y: int, m: int, day: int) -> int:
    """Proleptic Gregorian (y, m, d) -> JDN (Fliegel-Van Flandern, floor division)."""
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045


def jdn_to_ymd(jdn: int) -> DateTuple:
    """Fliegel-Van Flandern inverse of ymd_to_jdn.

    Floor division keeps the formula periodic in 146097 days, so it holds for
    every integer JDN, not just the positive ones.
    """
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return (year, month, day)


def unix_to_jdn(ts: int) -> int:
    """Floor a Unix timestamp (seconds, UTC) to its civil day and return the JDN."""
    if isinstance(ts, bool) or not isinstance(ts, int):
        raise TypeError(f"timestamp must be an int, got {type(ts).__name__}")
    check_i64(ts, "timestamp")
    return ts // SECONDS_PER_DAY + JDN_UNIX_EPOCH


def jdn_to_unix(jdn: int) -> int:
    """JDN -> Unix seconds at UTC midnight of that day."""
    return check_i64((jdn - JDN_UNIX_EPOCH) * SECONDS_PER_DAY, "timestamp")
