# tests/test_registry.py

import pytest

import jalcal
from jalcal.core.types import EngineId, EngineSpec
from jalcal.engines.specs import ALL_SPECS, JALALI_ARITHMETIC


def test_standard_engines_registered():
    assert {"gregorian", "arithmetic", "borkowski"} <= set(jalcal.list_engines())
    assert set(ALL_SPECS) <= set(jalcal.list_engines())


def test_engine_info():
    info = jalcal.engine_info("arithmetic")
    assert info["id"]["family"] == "jalali"
    assert info["leap_month"] == 12
    assert info["epoch_jdn"] == 1948320
    assert jalcal.engine_info("borkowski")["years"] == (-61, 3177)
    assert jalcal.engine_info("gregorian")["leap_month"] == 2
    assert jalcal.engine_info("gregorian")["epoch_jdn"] == jalcal.gregorian_to_jdn(1, 1, 1) == 1721426


def test_unknown_engine():
    with pytest.raises(KeyError):
        jalcal.engine_info("hebrew")
    with pytest.raises(KeyError):
        jalcal.gregorian_to_jalali(2025, 1, 1, engine="hebrew")


def test_gregorian_is_not_a_jalali_engine():
    with pytest.raises(ValueError):
        jalcal.gregorian_to_jalali(2025, 1, 1, engine="gregorian")


def test_register_tweaked_engine():
    spec = JALALI_ARITHMETIC.tweak(shift=1596)
    eng = jalcal.make_engine(spec)
    jalcal.register_engine("test-shift-1596", eng, overwrite=True)

    # Shifting the cycle phase by one year moves every leap year back by one
    assert jalcal.is_jalali_leap_year(1402, engine="test-shift-1596") is True
    assert jalcal.is_jalali_leap_year(1403, engine="test-shift-1596") is False

    with pytest.raises(KeyError):
        jalcal.register_engine("test-shift-1596", eng)


def test_make_engine_rejects_mismatched_spec():
    bad = EngineSpec(kind="arithmetic", id=EngineId("custom", "bad", "0"), payload=object())
    with pytest.raises(TypeError):
        jalcal.make_engine(bad)


def test_calendar_date_value():
    d = jalcal.CalendarDate(*jalcal.gregorian_to_jalali(2025, 12, 27))
    assert d.as_tuple() == (1404, 10, 6)
    assert str(d) == "1404-10-06"
