"""Rejection kinds raised while parsing an RFC 822 date-time stamp."""

from __future__ import annotations


class RFC822Error(ValueError):
    """Raised when a stamp does not represent a valid RFC 822 timestamp."""


class GrammarMismatch(RFC822Error):
    """The stamp does not satisfy the lexical/structural grammar."""


class InvalidDate(RFC822Error):
    """The grammar matched but day/month/year is not a real calendar date."""


class InvalidTime(RFC822Error):
    """The grammar matched but hour/minute/second is out of range."""


class DayOfWeekMismatch(InvalidDate):
    """The day name disagrees with the date (strict mode only)."""
