# tests/test_break_table.py

import random

import pytest

import jalcal
from jalcal.core.errors import YearOutOfRangeError
from jalcal.engines.factory import make_engine
from jalcal.engines.specs import JALALI_BORKOWSKI

ENGINE = "borkowski"


def test_known_leap_years():
    leaps = {1370, 1375, 1379, 1383, 1387, 1391, 1395, 1399, 1403, 1408}
    for y in range(1370, 1410):
        assert jalcal.is_jalali_leap_year(y, engine=ENGINE) == (y in leaps), y


@pytest.mark.parametrize(
    "jy, greg",
    [(1348, (1969, 3, 21)), (1399, (2020, 3, 20)), (1403, (2024, 3, 20)), (1404, (2025, 3, 21))],
)
def test_nowruz(jy, greg):
    assert jalcal.nowruz(jy, engine=ENGINE) == greg


def test_fixed_points():
    assert jalcal.gregorian_to_jalali(2025, 12, 27, engine=ENGINE) == (1404, 10, 6)
    assert jalcal.unix_to_jalali(0, engine=ENGINE) == (1348, 10, 11)
    assert jalcal.jalali_to_unix(1348, 10, 11, engine=ENGINE) == 0
    assert jalcal.jalali_to_gregorian(1403, 12, 30, engine=ENGINE) == (2025, 3, 20)
    assert jalcal.jalali_to_gregorian(1404, 12, 30, engine=ENGINE) is None


def test_agrees_with_arithmetic_cycle_between_breaks():
    """1210..1629 lies inside one break segment whose phase matches the arithmetic cycle."""
    for y in range(1210, 1630):
        assert jalcal.is_jalali_leap_year(y, engine=ENGINE) == jalcal.is_jalali_leap_year(y), y
        assert jalcal.jalali_to_jdn(y, 1, 1, engine=ENGINE) == jalcal.jalali_to_jdn(y, 1, 1), y


def test_year_starts_are_contiguous():
    eng = make_engine(JALALI_BORKOWSKI)
    for y in range(-61, 3177):
        assert eng.year_start(y + 1) - eng.year_start(y) == eng.days_in_year(y), y


def test_roundtrip():
    random.seed(11)
    lo = jalcal.jalali_to_jdn(1, 1, 1, engine=ENGINE)
    hi = jalcal.jalali_to_jdn(3177, 1, 1, engine=ENGINE)
    for _ in range(5000):
        g = jalcal.jdn_to_gregorian(random.randint(lo, hi))
        j = jalcal.gregorian_to_jalali(*g, engine=ENGINE)
        assert j is not None
        assert jalcal.jalali_to_gregorian(*j, engine=ENGINE) == g


def test_out_of_range_signals_none():
    assert jalcal.is_jalali_leap_year(3178, engine=ENGINE) is None
    assert jalcal.is_jalali_leap_year(-62, engine=ENGINE) is None
    assert jalcal.jalali_to_gregorian(3178, 1, 1, engine=ENGINE) is None
    assert jalcal.gregorian_to_jalali(4000, 1, 1, engine=ENGINE) is None
    assert jalcal.gregorian_to_jalali(500, 1, 1, engine=ENGINE) is None
    assert not jalcal.is_valid_jalali_date(3178, 5, 1, engine=ENGINE)
    assert jalcal.is_valid_jalali_date(3177, 5, 1, engine=ENGINE)


def test_out_of_range_raises_inside_engine():
    eng = make_engine(JALALI_BORKOWSKI)
    with pytest.raises(YearOutOfRangeError):
        eng.year_start(3178)
    with pytest.raises(YearOutOfRangeError):
        eng.to_jdn(-62, 1, 1)
