"""
jalcal.text.digits
------------------
Transliteration between the three decimal digit alphabets in use around
Persian text. Only digit characters change; separators, whitespace and every
other character are copied verbatim.
"""

from __future__ import annotations

LATIN_DIGITS = "0123456789"
PERSIAN_DIGITS = "۰۱۲۳۴۵۶۷۸۹"  # U+06F0..U+06F9
ARABIC_DIGITS = "٠١٢٣٤٥٦٧٨٩"   # U+0660..U+0669

_LATIN_TO_PERSIAN = str.maketrans(LATIN_DIGITS, PERSIAN_DIGITS)
_LATIN_TO_ARABIC = str.maketrans(LATIN_DIGITS, ARABIC_DIGITS)
_TO_LATIN = str.maketrans(PERSIAN_DIGITS + ARABIC_DIGITS, LATIN_DIGITS * 2)


def latin_digits_to_persian(s: str) -> str:
    return s.translate(_LATIN_TO_PERSIAN)


def latin_digits_to_arabic(s: str) -> str:
    return s.translate(_LATIN_TO_ARABIC)


def persian_or_arabic_digits_to_latin(s: str) -> str:
    """Persian and Arabic-Indic digits -> Latin; Latin digits stay as they are."""
    return s.translate(_TO_LATIN)


def to_digits(s: str, digits: str = "latin") -> str:
    """Render the digits of s in the named alphabet: 'latin', 'persian' or 'arabic'."""
    latin = persian_or_arabic_digits_to_latin(s)
    if digits == "latin":
        return latin
    if digits == "persian":
        return latin_digits_to_persian(latin)
    if digits == "arabic":
        return latin_digits_to_arabic(latin)
    raise ValueError("digits must be 'latin', 'persian' or 'arabic'")
