class AstrotimeError(Exception):
    """Base error."""

class InvalidField(AstrotimeError, ValueError):
    """Raised when a clock or calendar field lies outside its legal range."""

class InvalidCalendarTransition(AstrotimeError, ValueError):
    """Raised when a date does not exist in the calendar it is tagged with.

    Gregorian dates start on 1582-10-15, Julian dates end on 1582-10-04 and
    the ten days in between exist in neither calendar.
    """
