from __future__ import annotations

import math
from dataclasses import dataclass

from .calendar import (
    CalendarType,
    GREGORIAN_START,
    JULIAN_END,
    day_of_year,
    days_in_month,
    days_in_year,
)
from .errors import InvalidCalendarTransition, InvalidField


def _require_int(name: str, value: object) -> None:
    # bool is an int subclass but never a meaningful calendar field
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidField(f"{name} must be an integer, got {value!r}")


@dataclass(frozen=True)
class DayOfMonth:
    """A day of a month with a clock time (hours, minutes, seconds)."""
    day: int
    hour: float = 0
    minute: float = 0
    second: float = 0.0

    def __post_init__(self) -> None:
        _require_int("day", self.day)
        if not (1 <= self.day <= 31):
            raise InvalidField(f"day must be in 1..31, got {self.day}")
        if not (0 <= self.hour < 24):
            raise InvalidField(f"hour must be in [0,24), got {self.hour}")
        if not (0 <= self.minute < 60):
            raise InvalidField(f"minute must be in [0,60), got {self.minute}")
        if not (0 <= self.second < 60):
            raise InvalidField(f"second must be in [0,60), got {self.second}")


@dataclass(frozen=True)
class Date:
    """
    A calendar instant: year, month, decimal day and calendar type.

    year uses astronomical numbering (0 = 1 BCE, -1 = 2 BCE).
    decimal_day carries the time of day, e.g. 1.5 is noon on the 1st.

    Validity is checked on construction:
      - InvalidField for month outside 1..12 or decimal_day outside
        [1, days_in_month + 1)
      - InvalidCalendarTransition for Gregorian dates before 1582-10-15,
        Julian dates after 1582-10-04 and any date in the ten-day gap.
    """
    year: int
    month: int
    decimal_day: float
    calendar_type: CalendarType = CalendarType.GREGORIAN

    def __post_init__(self) -> None:
        _require_int("year", self.year)
        _require_int("month", self.month)
        if not isinstance(self.calendar_type, CalendarType):
            raise InvalidField(f"calendar_type must be a CalendarType, got {self.calendar_type!r}")
        if not (1 <= self.month <= 12):
            raise InvalidField(f"month must be in 1..12, got {self.month}")

        n = days_in_month(self.year, self.month, self.calendar_type)
        if not (1.0 <= self.decimal_day < n + 1.0):
            raise InvalidField(
                f"decimal_day must be in [1, {n + 1}) for {self.year}-{self.month:02d}, got {self.decimal_day}"
            )

        ymd = (self.year, self.month, self.day)
        if JULIAN_END < ymd < GREGORIAN_START:
            raise InvalidCalendarTransition(
                f"{self.year}-{self.month:02d}-{self.day:02d} falls in the 1582 reform gap "
                "and exists in neither calendar"
            )
        if self.calendar_type is CalendarType.GREGORIAN and ymd < GREGORIAN_START:
            raise InvalidCalendarTransition(
                f"Gregorian date {self.year}-{self.month:02d}-{self.day:02d} precedes 1582-10-15"
            )
        if self.calendar_type is CalendarType.JULIAN and ymd > JULIAN_END:
            raise InvalidCalendarTransition(
                f"Julian date {self.year}-{self.month:02d}-{self.day:02d} follows 1582-10-04"
            )

    @classmethod
    def from_day_of_month(
        cls,
        year: int,
        month: int,
        day: DayOfMonth,
        calendar_type: CalendarType = CalendarType.GREGORIAN,
    ) -> "Date":
        return cls(year, month, decimal_day(day), calendar_type)

    @property
    def day(self) -> int:
        """Integer day of the month."""
        return int(math.floor(self.decimal_day))

    @property
    def day_fraction(self) -> float:
        """Elapsed fraction of the day, in [0,1)."""
        return self.decimal_day - self.day


# ============================================================
# Reductions to real numbers
# ============================================================

def decimal_day(day: DayOfMonth) -> float:
    """day + (hour + minute/60 + second/3600)/24"""
    return day.day + (day.hour + day.minute / 60.0 + day.second / 3600.0) / 24.0


def decimal_year(date: Date) -> float:
    """
    Year plus the elapsed fraction of that year:
      year + (day_of_year - 1 + day_fraction) / (365 or 366)

    The year length follows the leap rule of the date's own calendar. This is
    a calendar quantity and is not the decimal year used to evaluate ΔT
    (see astrotime.reference.deltat).
    """
    doy = day_of_year(date.year, date.month, date.day, date.calendar_type)
    return date.year + (doy - 1 + date.day_fraction) / days_in_year(date.year, date.calendar_type)
