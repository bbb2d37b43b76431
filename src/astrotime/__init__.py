"""astrotime public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .core.calendar import (
    CalendarType,
    is_leap_year,
    days_in_month,
    days_in_year,
    day_of_year,
    calendar_for,
)
from .core.errors import AstrotimeError, InvalidField, InvalidCalendarTransition
from .core.types import Date, DayOfMonth, decimal_day, decimal_year
from .reference.time_scales import (
    julian_day,
    date_frm_julian_day,
    julian_cent,
    julian_mill,
    jd_from_julian_cent,
    julian_ephemeris_day,
    jd_to_jdn,
    jdn_to_jd,
    day_of_week,
)
from .reference.deltat import delta_t, delta_t_seconds
from .reference.sidereal import mn_sidr, apprnt_sidr

__all__ = [
    "CalendarType",
    "Date",
    "DayOfMonth",
    "AstrotimeError",
    "InvalidField",
    "InvalidCalendarTransition",
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "day_of_year",
    "calendar_for",
    "decimal_day",
    "decimal_year",
    "julian_day",
    "date_frm_julian_day",
    "julian_cent",
    "julian_mill",
    "jd_from_julian_cent",
    "julian_ephemeris_day",
    "jd_to_jdn",
    "jdn_to_jd",
    "day_of_week",
    "delta_t",
    "delta_t_seconds",
    "mn_sidr",
    "apprnt_sidr",
]
