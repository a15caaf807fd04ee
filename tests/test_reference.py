# tests/test_reference.py
#
# Cross-check against jdatetime, an independent Jalali implementation.

import random
from datetime import date

import jdatetime
import pytest

import jalcal


def _as_tuple(d):
    return (d.year, d.month, d.day)


def test_gregorian_to_jalali_matches_jdatetime():
    random.seed(7)
    lo = date(623, 1, 1).toordinal()
    hi = date(8999, 12, 31).toordinal()
    for _ in range(20000):
        g = date.fromordinal(random.randint(lo, hi))
        expected = _as_tuple(jdatetime.date.fromgregorian(date=g))
        assert jalcal.gregorian_to_jalali(g.year, g.month, g.day) == expected, g


def test_jalali_to_gregorian_matches_jdatetime():
    random.seed(11)
    for _ in range(20000):
        y = random.randint(2, 8377)
        m = random.randint(1, 12)
        d = random.randint(1, jalcal.jalali_month_length(y, m))
        expected = _as_tuple(jdatetime.date(y, m, d).togregorian())
        assert jalcal.jalali_to_gregorian(y, m, d) == expected, (y, m, d)


@pytest.mark.parametrize("start", range(2, 8378, 500))
def test_leap_years_match_jdatetime(start):
    for y in range(start, min(start + 500, 8378)):
        assert jalcal.is_jalali_leap_year(y) == jdatetime.date(y, 1, 1).isleap(), y


def test_borkowski_matches_jdatetime_inside_shared_segment():
    for y in range(1210, 1630):
        expected = _as_tuple(jdatetime.date(y, 1, 1).togregorian())
        assert jalcal.nowruz(y, engine="borkowski") == expected, y
