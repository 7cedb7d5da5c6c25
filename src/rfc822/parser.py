"""RFC 822 date-time parser.

Strategy:
    1) Match the stamp against the grammar (`GrammarMismatch` on failure).
    2) Convert the tokens to typed fields and validate the calendar date (`InvalidDate`) and the
       time of day (`InvalidTime`).
    3) Resolve the zone and compute the absolute UTC instant.

A stamp either yields a complete `ParsedDateTime` or no result at all.
"""

from __future__ import annotations

import logging

from src.rfc822 import civil
from src.rfc822.errors import DayOfWeekMismatch, InvalidDate, InvalidTime, RFC822Error
from src.rfc822.grammar import DAY_NAMES, MONTH_NAMES, match_stamp
from src.rfc822.schema import DateTimeFields, ParsedDateTime, Tokens
from src.rfc822.zones import zone_offset_minutes

logger = logging.getLogger(__name__)

MONTHS: dict[str, int] = {name: idx + 1 for idx, name in enumerate(MONTH_NAMES)}
WEEKDAYS: dict[str, int] = {name: idx for idx, name in enumerate(DAY_NAMES)}

# Two-digit years are read as 20xx.
_TWO_DIGIT_YEAR_BASE = 2000


def normalize_year(year: int) -> int:
    """Map years under 100 into the 21st century; larger years pass through unchanged."""

    if year < 100:
        return year + _TWO_DIGIT_YEAR_BASE
    return year


def _fields_from_tokens(tokens: Tokens) -> DateTimeFields:
    # The grammar guarantees digit-only tokens and a known month, so int()/lookup cannot fail.
    day = int(tokens.day)
    month = MONTHS[tokens.month]
    year = normalize_year(int(tokens.year))
    hour = int(tokens.hour)
    minute = int(tokens.minute)
    second = int(tokens.second) if tokens.second else 0

    if not civil.is_valid_date(year, month, day):
        raise InvalidDate(f"not a calendar date: year={year} month={month} day={day}")
    if not civil.is_valid_time(hour, minute, second):
        raise InvalidTime(f"time out of range: {hour:02d}:{minute:02d}:{second:02d}")

    return DateTimeFields(
        day=day,
        month=month,
        year=year,
        hour=hour,
        minute=minute,
        second=second,
        zone_offset=zone_offset_minutes(tokens.zone),
    )


def _check_day_of_week(tokens: Tokens, fields: DateTimeFields) -> None:
    if not tokens.day_of_week:
        return

    days = civil.days_from_civil(fields.year, fields.month, fields.day)
    actual = civil.weekday_from_days(days)
    if WEEKDAYS[tokens.day_of_week] != actual:
        raise DayOfWeekMismatch(
            f"day name {tokens.day_of_week} does not match date (expected {DAY_NAMES[actual]})"
        )


def parse_stamp(stamp: str, *, check_day_of_week: bool = False) -> ParsedDateTime:
    """Parse an RFC 822 stamp into a `ParsedDateTime`.

    Args:
        stamp: Candidate date-time text, e.g. `Mon, 02 Jan 2006 15:04:05 -0700`.
        check_day_of_week: Also require a present day name to match the date (RFC 822 §5.2).

    Raises:
        GrammarMismatch: The text is not an RFC 822 date-time.
        InvalidDate: The day/month/year combination does not exist.
        InvalidTime: Hour, minute or second is out of range.
    """

    tokens = match_stamp(stamp)
    fields = _fields_from_tokens(tokens)
    if check_day_of_week:
        _check_day_of_week(tokens, fields)

    absolute_time = civil.to_epoch_seconds(
        fields.year,
        fields.month,
        fields.day,
        fields.hour,
        fields.minute,
        fields.second,
        fields.zone_offset,
    )
    return ParsedDateTime(
        original_text=stamp,
        absolute_time=absolute_time,
        tokens=tokens,
        fields=fields,
    )


def parse(stamp: str, *, check_day_of_week: bool = False) -> ParsedDateTime | None:
    """Parse an RFC 822 stamp; return `None` if it is not a valid timestamp.

    This is the single entry point for callers that do not care why a stamp was rejected.
    """

    try:
        return parse_stamp(stamp, check_day_of_week=check_day_of_week)
    except RFC822Error as exc:
        logger.debug("rejected reason=%s detail=%s stamp=%r", type(exc).__name__, exc, stamp)
        return None
