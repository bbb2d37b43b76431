# tests/test_time_scales.py

import random

import pytest

from astrotime.core.calendar import CalendarType, calendar_for, days_in_month
from astrotime.core.errors import InvalidCalendarTransition
from astrotime.core.types import Date
from astrotime.reference import time_scales as ts

G = CalendarType.GREGORIAN
J = CalendarType.JULIAN


def test_j2000_epoch():
    assert ts.julian_day(Date(2000, 1, 1.5, G)) == pytest.approx(2451545.0, abs=1e-9)


@pytest.mark.parametrize(
    "year, month, day, cal, jd",
    [
        # Meeus, Astronomical Algorithms (2nd Ed), ch. 7 examples and table
        (1957, 10, 4.81, G, 2436116.31),
        (333, 1, 27.5, J, 1842713.0),
        (1999, 1, 1.0, G, 2451179.5),
        (1987, 1, 27.0, G, 2446822.5),
        (1987, 6, 19.5, G, 2446966.0),
        (1988, 1, 27.0, G, 2447187.5),
        (1988, 6, 19.5, G, 2447332.0),
        (1900, 1, 1.0, G, 2415020.5),
        (1600, 1, 1.0, G, 2305447.5),
        (1600, 12, 31.0, G, 2305812.5),
        (837, 4, 10.3, J, 2026871.8),
        (-123, 12, 31.0, J, 1676496.5),
        (-122, 1, 1.0, J, 1676497.5),
        (-1000, 7, 12.5, J, 1356001.0),
        (-1000, 2, 29.0, J, 1355866.5),
        (-1001, 8, 17.9, J, 1355671.4),
        (-4712, 1, 1.5, J, 0.0),
    ],
)
def test_meeus_julian_days(year, month, day, cal, jd):
    d = Date(year, month, day, cal)
    assert ts.julian_day(d) == pytest.approx(jd, abs=1e-7)

    back = ts.date_frm_julian_day(jd)
    assert (back.year, back.month, back.calendar_type) == (year, month, cal)
    assert back.decimal_day == pytest.approx(day, abs=1e-6)


def test_meeus_example_7c_inverse():
    d = ts.date_frm_julian_day(1507900.13)
    assert (d.year, d.month, d.calendar_type) == (-584, 5, J)
    assert d.decimal_day == pytest.approx(28.63, abs=1e-6)


def test_cutover_is_contiguous():
    last_julian = ts.julian_day(Date(1582, 10, 4.0, J))
    first_gregorian = ts.julian_day(Date(1582, 10, 15.0, G))
    assert last_julian == 2299159.5
    assert first_gregorian == 2299160.5
    assert first_gregorian - last_julian == 1.0


def test_cutover_boundary_in_inverse():
    d = ts.date_frm_julian_day(ts.GREGORIAN_CUTOVER_JD)
    assert (d.year, d.month, d.decimal_day, d.calendar_type) == (1582, 10, 15.0, G)

    d = ts.date_frm_julian_day(ts.GREGORIAN_CUTOVER_JD - 1e-4)
    assert (d.year, d.month, d.day, d.calendar_type) == (1582, 10, 4, J)

    # no JD maps into the reform gap
    jd = ts.GREGORIAN_CUTOVER_JD - 2.0
    while jd < ts.GREGORIAN_CUTOVER_JD + 2.0:
        d = ts.date_frm_julian_day(jd)
        assert not (d.year == 1582 and d.month == 10 and 5 <= d.day <= 14)
        jd += 0.125


def test_inverse_day_fraction_never_rounds_into_next_day():
    # jd + 0.5 is a tiny negative number: the fraction is 1 - ulp
    d = ts.date_frm_julian_day(-0.5000000000000001)
    assert (d.year, d.month, d.day, d.calendar_type) == (-4713, 12, 31, J)
    assert 31.0 < d.decimal_day < 32.0

    d = ts.date_frm_julian_day(2451544.5 - 1e-10)
    assert (d.year, d.month, d.day) == (1999, 12, 31)
    assert d.decimal_day < 32.0


def _random_valid_date(rng):
    while True:
        year = rng.randint(-4712, 3000)
        month = rng.randint(1, 12)
        cal = calendar_for(year, month, 1.0)
        n = days_in_month(year, month, cal)
        dd = rng.uniform(1.0, n + 0.999)
        cal = calendar_for(year, month, dd)
        try:
            return Date(year, month, dd, cal)
        except InvalidCalendarTransition:
            continue


def test_date_jd_roundtrip():
    rng = random.Random(42)
    for _ in range(5000):
        d0 = _random_valid_date(rng)
        d1 = ts.date_frm_julian_day(ts.julian_day(d0))
        assert (d1.year, d1.month, d1.calendar_type) == (d0.year, d0.month, d0.calendar_type)
        assert d1.decimal_day == pytest.approx(d0.decimal_day, abs=1e-6)


@pytest.mark.parametrize(
    "cal, years",
    [
        (J, range(-120, 120)),
        (G, range(1583, 1800)),
        (G, range(1890, 2110)),
    ],
)
def test_julian_day_is_strictly_increasing_and_contiguous(cal, years):
    prev = None
    for year in years:
        for month in range(1, 13):
            for day in range(1, days_in_month(year, month, cal) + 1):
                jd = ts.julian_day(Date(year, month, float(day), cal))
                if prev is not None:
                    assert jd - prev == 1.0
                prev = jd


def test_julian_day_increases_within_a_day():
    a = ts.julian_day(Date(2024, 2, 29.0, G))
    b = ts.julian_day(Date(2024, 2, 29.25, G))
    c = ts.julian_day(Date(2024, 2, 29.999, G))
    assert a < b < c


# ------------------------------------------------------------
# JDN helpers and weekday
# ------------------------------------------------------------

def test_jd_jdn_relation():
    jd0 = ts.jdn_to_jd(2451545)
    assert jd0 == 2451544.5
    assert ts.jd_to_jdn(jd0) == 2451545
    # noon of the same civil day
    assert ts.jd_to_jdn(jd0 + 0.5) == 2451545
    assert ts.jd_to_jdn(jd0 + 0.999) == 2451545


def test_day_of_week():
    # Meeus example 7.e: 1954 June 30 was a Wednesday
    assert ts.day_of_week(ts.julian_day(Date(1954, 6, 30.0, G))) == 3
    # 2000 January 1 was a Saturday
    assert ts.day_of_week(2451545.0) == 6
    # the reform: Thursday 4 October was followed by Friday 15 October
    assert ts.day_of_week(ts.julian_day(Date(1582, 10, 4.0, J))) == 4
    assert ts.day_of_week(ts.julian_day(Date(1582, 10, 15.0, G))) == 5


# ------------------------------------------------------------
# Julian centuries / millennia / JDE
# ------------------------------------------------------------

def test_julian_cent_and_mill():
    assert ts.julian_cent(2451545.0) == 0.0
    assert ts.julian_cent(2451545.0 + 36525.0) == 1.0
    assert ts.julian_mill(2451545.0 + 365250.0) == 1.0
    # Meeus example 22.a: 1987 April 10, 0h TD
    assert ts.julian_cent(2446895.5) == pytest.approx(-0.127296372348, abs=1e-12)
    assert ts.julian_mill(2446895.5) == pytest.approx(-0.0127296372348, abs=1e-13)


def test_julian_cent_roundtrip():
    jd = 2451545.0 + 12345.678
    assert ts.jd_from_julian_cent(ts.julian_cent(jd)) == pytest.approx(jd, abs=1e-8)


def test_julian_ephemeris_day():
    assert ts.julian_ephemeris_day(2451545.0, 0.0) == 2451545.0
    assert ts.julian_ephemeris_day(2451545.0, 86400.0) == 2451546.0
    assert ts.julian_ephemeris_day(2451545.0, 64.184) == pytest.approx(2451545.0 + 64.184 / 86400.0, abs=1e-12)
    assert ts.julian_ephemeris_day(2451545.0, -43200.0) == 2451544.5
