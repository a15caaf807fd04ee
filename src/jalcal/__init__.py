"""jalcal public API.

Gregorian <-> Jalali (Persian solar Hijri) date conversion through the Julian
Day Number, Unix-timestamp conversion at UTC-day granularity, delimited date
strings and Persian/Arabic-Indic digit transliteration.

Every fallible function returns None instead of raising.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    gregorian_to_jalali,
    jalali_to_gregorian,
    unix_to_jalali,
    jalali_to_unix,
    unix_to_gregorian,
    gregorian_to_unix,
    gregorian_to_jdn,
    jdn_to_gregorian,
    jalali_to_jdn,
    jdn_to_jalali,
    is_gregorian_leap_year,
    is_jalali_leap_year,
    jalali_month_length,
    is_valid_jalali_date,
    is_valid_gregorian_date,
    nowruz,
    list_engines,
    engine_info,
    make_engine,
    register_engine,
)
from .text.digits import (
    latin_digits_to_persian,
    latin_digits_to_arabic,
    persian_or_arabic_digits_to_latin,
)
from .text.dates import (
    parse_gregorian_string_to_jalali_string,
    parse_jalali_string_to_gregorian_string,
    parse_date_fields,
    format_date,
)
from .core.types import CalendarDate

__all__ = [
    "gregorian_to_jalali",
    "jalali_to_gregorian",
    "unix_to_jalali",
    "jalali_to_unix",
    "unix_to_gregorian",
    "gregorian_to_unix",
    "gregorian_to_jdn",
    "jdn_to_gregorian",
    "jalali_to_jdn",
    "jdn_to_jalali",
    "is_gregorian_leap_year",
    "is_jalali_leap_year",
    "jalali_month_length",
    "is_valid_jalali_date",
    "is_valid_gregorian_date",
    "nowruz",
    "list_engines",
    "engine_info",
    "make_engine",
    "register_engine",
    "latin_digits_to_persian",
    "latin_digits_to_arabic",
    "persian_or_arabic_digits_to_latin",
    "parse_gregorian_string_to_jalali_string",
    "parse_jalali_string_to_gregorian_string",
    "parse_date_fields",
    "format_date",
    "CalendarDate",
]
