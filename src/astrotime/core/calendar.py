from __future__ import annotations

from enum import Enum
from typing import Tuple


class CalendarType(str, Enum):
    """Calendar a date is expressed in."""
    JULIAN = "julian"
    GREGORIAN = "gregorian"


# Last Julian day and first Gregorian day of the 1582 reform.
JULIAN_END: Tuple[int, int, int] = (1582, 10, 4)
GREGORIAN_START: Tuple[int, int, int] = (1582, 10, 15)

_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
# days before the first of each month in a common year
_CUMULATIVE_DAYS = (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


# ============================================================
# Leap years
# ============================================================

def is_leap_year(year: int, calendar_type: CalendarType) -> bool:
    """
    Leap-year rule of the given calendar.

    Years use astronomical numbering (year 0 = 1 BCE, year -1 = 2 BCE), so
    the divisibility tests apply unchanged to year 0 and negative years.
    """
    if calendar_type is CalendarType.GREGORIAN:
        return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)
    return year % 4 == 0


def days_in_year(year: int, calendar_type: CalendarType) -> int:
    return 366 if is_leap_year(year, calendar_type) else 365


def days_in_month(year: int, month: int, calendar_type: CalendarType) -> int:
    """Number of days in month (1..12); February has 29 days in leap years."""
    if month == 2 and is_leap_year(year, calendar_type):
        return 29
    return _MONTH_DAYS[month - 1]


def day_of_year(year: int, month: int, day: int, calendar_type: CalendarType) -> int:
    """Ordinal day within the year, 1 for January 1st."""
    n = _CUMULATIVE_DAYS[month - 1] + day
    if month > 2 and is_leap_year(year, calendar_type):
        n += 1
    return n


# ============================================================
# Historical calendar in force
# ============================================================

def calendar_for(year: int, month: int, decimal_day: float) -> CalendarType:
    """
    Calendar in civil use on the given date: Julian up to 1582-10-04,
    Gregorian from 1582-10-15 onwards.

    Dates inside the 1582-10-05..14 gap are reported as Gregorian; building a
    Date from them still fails.
    """
    if (year, month, int(decimal_day)) <= JULIAN_END:
        return CalendarType.JULIAN
    return CalendarType.GREGORIAN
