"""
jalcal.text.dates
-----------------
Delimited date strings: "Y<sep>M<sep>D" in any of the three digit alphabets
on the way in, Latin digits with zero-padded month and day on the way out.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Optional

from jalcal import api
from jalcal.core.errors import DateParseError
from jalcal.core.types import DateTuple
from jalcal.engines.specs import DEFAULT_JALALI_ENGINE
from .digits import persian_or_arabic_digits_to_latin, to_digits

logger = logging.getLogger(__name__)

_YEAR_RE = re.compile(r"^[+-]?[0-9]+$")
_UNSIGNED_RE = re.compile(r"^[0-9]+$")


def split_date(s: str, sep: str) -> DateTuple:
    """
    Split s on sep into exactly three integer fields.
    Raises DateParseError on a bad separator, field count or field.
    """
    if not isinstance(s, str):
        raise DateParseError(f"expected text, got {type(s).__name__}")
    if not isinstance(sep, str) or len(sep) != 1:
        raise DateParseError(f"separator must be a single character, got {sep!r}")

    fields = [persian_or_arabic_digits_to_latin(f).strip() for f in s.split(sep)]
    if len(fields) != 3:
        raise DateParseError(f"expected 3 fields separated by {sep!r}, got {len(fields)} in {s!r}")

    y, m, d = fields
    if not _YEAR_RE.match(y):
        raise DateParseError(f"year {y!r} is not an integer")
    for name, f in (("month", m), ("day", d)):
        if not _UNSIGNED_RE.match(f):
            raise DateParseError(f"{name} {f!r} is not an unsigned integer")
    try:
        return (int(y), int(m), int(d))
    except ValueError as e:
        # int() refuses digit strings past sys.get_int_max_str_digits()
        raise DateParseError(f"field too long in {s[:40]!r}...") from e


def parse_date_fields(s: str, sep: str) -> Optional[DateTuple]:
    try:
        return split_date(s, sep)
    except DateParseError as e:
        logger.debug("parse rejected %r: %s", s, e)
        return None


def format_date(y: int, m: int, d: int, sep: str = "-", *, digits: str = "latin") -> str:
    """Year at its natural width, month and day padded to two digits."""
    return to_digits(f"{y}{sep}{m:02d}{sep}{d:02d}", digits)


def _convert_string(s: str, sep: str, convert: Callable[..., Optional[DateTuple]], engine: str) -> Optional[str]:
    fields = parse_date_fields(s, sep)
    if fields is None:
        return None
    out = convert(*fields, engine=engine)
    if out is None:
        return None
    return format_date(*out, sep)


def parse_gregorian_string_to_jalali_string(
    s: str, sep: str, *, engine: str = DEFAULT_JALALI_ENGINE
) -> Optional[str]:
    """
    >>> parse_gregorian_string_to_jalali_string("2025-12-27", "-")
    '1404-10-06'
    """
    return _convert_string(s, sep, api.gregorian_to_jalali, engine)


def parse_jalali_string_to_gregorian_string(
    s: str, sep: str, *, engine: str = DEFAULT_JALALI_ENGINE
) -> Optional[str]:
    """
    >>> parse_jalali_string_to_gregorian_string("۱۴۰۴/۱۰/۰۶", "/")
    '2025-12-27'
    """
    return _convert_string(s, sep, api.jalali_to_gregorian, engine)
