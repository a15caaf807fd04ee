# tests/test_day_count.py

import random
from datetime import date

import pytest

from jalcal.core import time as ts
from jalcal.core.errors import InvalidDateError
from jalcal.engines.specs import JALALI_ARITHMETIC
from jalcal.engines.factory import make_engine
from jalcal.engines.arithmetic_year import leap_count


@pytest.fixture(scope="module")
def jalali():
    return make_engine(JALALI_ARITHMETIC)


def test_known_epochs():
    assert ts.ymd_to_jdn(2000, 1, 1) == 2451545
    assert ts.ymd_to_jdn(1970, 1, 1) == ts.JDN_UNIX_EPOCH == 2440588
    assert ts.ymd_to_jdn(1, 1, 1) == 1721426


def test_gregorian_jdn_matches_datetime():
    """date.toordinal() counts 0001-01-01 as 1, so JDN = ordinal + 1721425."""
    random.seed(42)
    for _ in range(5000):
        ordinal = random.randint(1, date(9999, 12, 31).toordinal())
        d = date.fromordinal(ordinal)
        assert ts.ymd_to_jdn(d.year, d.month, d.day) == ordinal + 1721425
        assert ts.jdn_to_ymd(ordinal + 1721425) == (d.year, d.month, d.day)


def test_gregorian_jdn_roundtrip_proleptic():
    # Negative and far-future years, outside datetime's range
    for jdn in (-1_000_000, -1, 0, 1, 1721425, 5_373_484, 10_000_000):
        assert ts.ymd_to_jdn(*ts.jdn_to_ymd(jdn)) == jdn


def test_unix_flooring():
    assert ts.unix_to_jdn(0) == 2440588
    assert ts.unix_to_jdn(86399) == 2440588
    assert ts.unix_to_jdn(-1) == 2440587
    assert ts.jdn_to_unix(2440589) == 86400


def test_jalali_leap_predicate(jalali):
    leaps = {1370, 1375, 1379, 1383, 1387, 1391, 1395, 1399, 1403, 1408}
    for y in range(1370, 1410):
        assert jalali.is_leap(y) == (y in leaps), y


def test_jalali_leap_count_matches_predicate(jalali):
    for y in range(-200, 4000):
        assert leap_count(y + 1) - leap_count(y) == int(jalali.is_leap(y))


def test_jalali_month_lengths(jalali):
    assert [jalali.days_in_month(1404, m) for m in range(1, 13)] == [31] * 6 + [30] * 5 + [29]
    assert jalali.days_in_month(1403, 12) == 30
    assert jalali.days_in_year(1403) == 366
    assert jalali.days_in_year(1404) == 365


def test_jalali_esfand_30(jalali):
    assert jalali.is_valid(1403, 12, 30)
    assert not jalali.is_valid(1404, 12, 30)
    with pytest.raises(InvalidDateError):
        jalali.to_jdn(1404, 12, 30)


def test_jalali_year_starts_are_contiguous(jalali):
    for y in range(-100, 3500):
        assert jalali.year_start(y + 1) - jalali.year_start(y) == jalali.days_in_year(y)


def test_jalali_encode_decode(jalali):
    assert jalali.to_jdn(1404, 1, 1) == 2460756
    assert jalali.to_jdn(1348, 10, 11) == 2440588
    assert jalali.from_jdn(2461037) == (1404, 10, 6)
    assert jalali.from_jdn(2460755) == (1403, 12, 30)


def test_jalali_decode_is_total(jalali):
    random.seed(7)
    for _ in range(2000):
        jdn = random.randint(-5_000_000, 10_000_000)
        y, m, d = jalali.from_jdn(jdn)
        assert jalali.is_valid(y, m, d)
        assert jalali.to_jdn(y, m, d) == jdn


@pytest.mark.parametrize("bad", [(1404, 0, 1), (1404, 13, 1), (1404, 1, 0), (1404, 1, 32), (1404, 7, 31)])
def test_jalali_invalid(jalali, bad):
    assert not jalali.is_valid(*bad)
    with pytest.raises(InvalidDateError):
        jalali.to_jdn(*bad)


def test_non_integer_components_rejected(jalali):
    assert not jalali.is_valid(1404, 1.0, 1)
    assert not jalali.is_valid(1404, True, 1)
