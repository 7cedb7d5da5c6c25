"""Proleptic Gregorian calendar arithmetic (pure integer functions).

Day numbers count days since 1970-01-01; negative values are days before the epoch. The day-count
algorithm is Howard Hinnant's `days_from_civil`
(http://howardhinnant.github.io/date_algorithms.html), which works in 400-year eras and is valid
for any year, including zero and negative years.
"""

from __future__ import annotations

_DAYS_PER_ERA = 146097
# Days from 0000-03-01 to 1970-01-01.
_EPOCH_SHIFT = 719468
_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    """Gregorian rule: divisible by 4, and not by 100 unless also by 400."""

    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Number of days in `month` (1..12) of `year`."""

    if month == 2 and is_leap_year(year):
        return 29
    return _MONTH_LENGTHS[month - 1]


def days_from_civil(year: int, month: int, day: int) -> int:
    """Return the number of days from 1970-01-01 to `year-month-day`.

    Preconditions: `month` is in [1, 12] and `day` is in [1, days_in_month(year, month)].
    """

    # Shift the year so it starts in March; the leap day then falls at the end of the year.
    y = year - 1 if month <= 2 else year
    era = y // 400
    yoe = y - era * 400  # [0, 399]
    doy = (153 * (month + (-3 if month > 2 else 9)) + 2) // 5 + day - 1  # [0, 365]
    doe = yoe * 365 + yoe // 4 - yoe // 100 + doy  # [0, 146096]
    return era * _DAYS_PER_ERA + doe - _EPOCH_SHIFT


def weekday_from_days(days: int) -> int:
    """Weekday of a day number, Monday == 0 ... Sunday == 6 (1970-01-01 was a Thursday)."""

    return (days + 3) % 7


def is_valid_date(year: int, month: int, day: int) -> bool:
    if month < 1 or month > 12 or day < 1 or day > 31:
        return False
    return day <= days_in_month(year, month)


def is_valid_time(hour: int, minute: int, second: int) -> bool:
    return 0 <= hour <= 23 and 0 <= minute <= 59 and 0 <= second <= 59


def to_epoch_seconds(
        year: int,
        month: int,
        day: int,
        hour: int,
        minute: int,
        second: int,
        offset_minutes: int = 0,
) -> int:
    """Convert a local civil date-time with a UTC offset into seconds since the Unix epoch.

    `offset_minutes` is subtracted: local time 00:00 at -0500 is 05:00 UTC.
    """

    days = days_from_civil(year, month, day)
    local_seconds = ((days * 24 + hour) * 60 + minute) * 60 + second
    return local_seconds - offset_minutes * 60
