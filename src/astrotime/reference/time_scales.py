from __future__ import annotations

import math

from astrotime.core.calendar import CalendarType
from astrotime.core.types import Date


# ============================================================
# Constants
# ============================================================

JD_J2000 = 2451545.0  # 2000-01-01 12:00 TT

# JD of 1582-10-15 00:00, the first instant of the Gregorian calendar.
GREGORIAN_CUTOVER_JD = 2299160.5

_DAYS_PER_CENTURY = 36525.0
_SECONDS_PER_DAY = 86400.0


# ============================================================
# Date <-> JD  (Meeus, Astronomical Algorithms, ch. 7)
# ============================================================

def julian_day(date: Date) -> float:
    """
    Julian Day of a Date.

    January and February count as months 13 and 14 of the previous year.
    Gregorian dates add the century correction B = 2 - A + floor(A/4),
    A = floor(Y/100); Julian dates use B = 0.

      julian_day(Date(2000, 1, 1.5)) == 2451545.0
    """
    y = date.year
    m = date.month
    if m <= 2:
        y -= 1
        m += 12

    b = 0
    if date.calendar_type is CalendarType.GREGORIAN:
        a = y // 100
        b = 2 - a + a // 4

    return (
        math.floor(365.25 * (y + 4716))
        + math.floor(30.6001 * (m + 1))
        + date.decimal_day
        + b
        - 1524.5
    )


def date_frm_julian_day(jd: float) -> Date:
    """
    Inverse of julian_day.

    JD >= 2299160.5 (1582-10-15 00:00) yields a Gregorian date, anything
    earlier a Julian one, so the reform gap is never produced.
    """
    jd5 = jd + 0.5
    z = math.floor(jd5)
    f = jd5 - z

    # 2299161 is the JDN of 1582-10-15; branch on z so the split agrees with the integer part
    if z < 2299161:
        a = z
        calendar_type = CalendarType.JULIAN
    else:
        alpha = math.floor((z - 1867216.25) / 36524.25)
        a = z + 1 + alpha - alpha // 4
        calendar_type = CalendarType.GREGORIAN

    b = a + 1524
    c = math.floor((b - 122.1) / 365.25)
    d = math.floor(365.25 * c)
    e = math.floor((b - d) / 30.6001)

    int_day = b - d - math.floor(30.6001 * e)
    day = int_day + f
    # f = 1 - ulp rounds up to the next whole day when added
    if day >= int_day + 1:
        day = math.nextafter(int_day + 1, 0)
    month = e - 1 if e < 14 else e - 13
    year = c - 4716 if month > 2 else c - 4715

    return Date(int(year), int(month), float(day), calendar_type)


# ============================================================
# Basic JD / JDN helpers
# ============================================================

def jd_to_jdn(jd: float) -> int:
    """
    Julian Day Number (integer day starting at midnight) containing JD:
      JDN = floor(JD + 0.5)
    """
    return int(math.floor(jd + 0.5))


def jdn_to_jd(jdn: int) -> float:
    """JD at midnight opening the day jdn."""
    return float(jdn) - 0.5


def day_of_week(jd: float) -> int:
    """Day of the week of the civil day containing jd, 0 = Sunday .. 6 = Saturday."""
    return (jd_to_jdn(jd) + 1) % 7


# ============================================================
# Julian centuries / millennia from J2000.0
# ============================================================

def julian_cent(jd: float) -> float:
    """T = (JD - 2451545.0) / 36525"""
    return (jd - JD_J2000) / _DAYS_PER_CENTURY


def julian_mill(jd: float) -> float:
    """Julian millennia from J2000.0 (the argument of VSOP87 series)."""
    return julian_cent(jd) / 10.0


def jd_from_julian_cent(T: float) -> float:
    """JD = 2451545.0 + 36525*T"""
    return JD_J2000 + _DAYS_PER_CENTURY * T


def julian_ephemeris_day(jd: float, delta_t_seconds: float) -> float:
    """
    Shift a Universal Time JD onto Terrestrial Time:
      JDE = JD + ΔT/86400
    """
    return jd + delta_t_seconds / _SECONDS_PER_DAY
