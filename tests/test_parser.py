"""Tests for RFC 822 stamp validation, UTC conversion and ordering."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

import dateparser
import pytest
from pydantic import ValidationError

from src.rfc822.errors import DayOfWeekMismatch, GrammarMismatch, InvalidDate, InvalidTime
from src.rfc822.parser import normalize_year, parse, parse_stamp


def _expected_epoch(
        year: int,
        month: int,
        day: int,
        hour: int,
        minute: int,
        second: int,
        offset_minutes: int,
) -> int:
    tz = timezone(timedelta(minutes=offset_minutes))
    return int(datetime(year, month, day, hour, minute, second, tzinfo=tz).timestamp())


def test_concrete_scenario() -> None:
    result = parse("Mon, 02 Jan 2006 15:04:05 -0700")
    assert result is not None
    assert result.original_text == "Mon, 02 Jan 2006 15:04:05 -0700"
    assert result.fields.zone_offset == -420
    assert (result.fields.day, result.fields.month, result.fields.year) == (2, 1, 2006)
    assert (result.fields.hour, result.fields.minute, result.fields.second) == (15, 4, 5)
    assert result.utc == datetime(2006, 1, 2, 22, 4, 5, tzinfo=UTC)


@pytest.mark.parametrize(
    ("stamp", "components"),
    [
        ("Sun, 06 Nov 1994 08:49:37 GMT", (1994, 11, 6, 8, 49, 37, 0)),
        ("29 Feb 2000 12:00 GMT", (2000, 2, 29, 12, 0, 0, 0)),
        ("31 Dec 1999 23:59:59 PST", (1999, 12, 31, 23, 59, 59, -480)),
        ("1 Mar 2024 00:00 +1230", (2024, 3, 1, 0, 0, 0, 750)),
        ("15 Jul 2021 10:30:00 Y", (2021, 7, 15, 10, 30, 0, 720)),
        ("15 Jul 2021 10:30:00 M", (2021, 7, 15, 10, 30, 0, -720)),
        ("15 Jul 21 10:30:00 CDT", (2021, 7, 15, 10, 30, 0, -300)),
        ("01 Jan 0100 00:00:00 GMT", (100, 1, 1, 0, 0, 0, 0)),
        ("01 Jan 1601 06:00:00 N", (1601, 1, 1, 6, 0, 0, 60)),
    ],
)
def test_absolute_time_matches_independent_computation(
        stamp: str, components: tuple[int, int, int, int, int, int, int]
) -> None:
    result = parse(stamp)
    assert result is not None
    assert result.absolute_time == _expected_epoch(*components)


@pytest.mark.parametrize(
    "stamp",
    [
        "Mon, 02 Jan 2006 15:04:05 -0700",
        "Sun, 06 Nov 1994 08:49:37 GMT",
    ],
)
def test_absolute_time_agrees_with_dateparser(stamp: str) -> None:
    expected = dateparser.parse(
        stamp,
        settings={"TO_TIMEZONE": "UTC", "RETURN_AS_TIMEZONE_AWARE": True},
    )
    result = parse(stamp)
    assert expected is not None
    assert result is not None
    assert result.absolute_time == int(expected.timestamp())


@pytest.mark.parametrize(
    ("stamp", "error"),
    [
        ("02 Jan 2006 15:04:05 J", GrammarMismatch),
        ("02 Jan 2006 15:04:05 GMT trailing", GrammarMismatch),
        ("31 Apr 2006 00:00 GMT", InvalidDate),
        ("30 Feb 2000 00:00 GMT", InvalidDate),
        ("29 Feb 1900 12:00 GMT", InvalidDate),
        ("29 Feb 2001 12:00 GMT", InvalidDate),
        ("00 Jan 2006 00:00 GMT", InvalidDate),
        ("32 Jan 2006 00:00 GMT", InvalidDate),
        ("02 Jan 2006 24:00 GMT", InvalidTime),
        ("02 Jan 2006 23:60 GMT", InvalidTime),
        ("02 Jan 2006 23:59:60 GMT", InvalidTime),
    ],
)
def test_rejections(stamp: str, error: type[Exception]) -> None:
    with pytest.raises(error):
        parse_stamp(stamp)
    assert parse(stamp) is None


def test_leap_day_boundaries() -> None:
    assert parse("29 Feb 2000 12:00 GMT") is not None
    assert parse("29 Feb 1900 12:00 GMT") is None
    assert parse("29 Feb 2001 12:00 GMT") is None
    assert parse("29 Feb 00 12:00 GMT") is not None  # 2000


def test_two_digit_years_are_normalized() -> None:
    short = parse("01 Jan 70 00:00:00 GMT")
    long = parse("01 Jan 2070 00:00:00 GMT")
    assert short is not None and long is not None
    assert short.fields.year == 2070
    assert short == long

    assert normalize_year(0) == 2000
    assert normalize_year(99) == 2099
    assert normalize_year(100) == 100
    assert normalize_year(1970) == 1970


def test_zero_padded_short_year_is_normalized() -> None:
    result = parse("01 Jan 099 00:00 GMT")
    assert result is not None
    assert result.fields.year == 2099


def test_zone_equivalence() -> None:
    est = parse("01 Jan 1970 00:00:00 EST")
    gmt = parse("01 Jan 1970 05:00:00 GMT")
    utc = parse("01 Jan 1970 05:00:00 +0000")
    diff = parse("01 Jan 1970 00:00:00 -0500")
    assert est is not None and gmt is not None and utc is not None and diff is not None

    assert est.absolute_time == gmt.absolute_time == utc.absolute_time == diff.absolute_time
    assert est == gmt == utc == diff
    assert est.absolute_time == 5 * 3600
    # Local fields are kept as written.
    assert est.fields.hour == 0
    assert gmt.fields.hour == 5


def test_ordering_uses_absolute_time_only() -> None:
    earlier = parse("Tue, 03 Jan 2006 00:00:00 +0100")  # 02 Jan 23:00 UTC
    later = parse("02 Jan 2006 23:30 GMT")
    assert earlier is not None and later is not None

    assert earlier < later
    assert earlier <= later
    assert later > earlier
    assert later >= earlier
    assert earlier != later
    assert not earlier == later
    assert sorted([later, earlier]) == [earlier, later]


def test_equal_instants_hash_together() -> None:
    a = parse("01 Jan 1970 00:00:00 EST")
    b = parse("Thu, 01 Jan 1970 05:00 Z")
    assert a is not None and b is not None
    assert a == b and a <= b and a >= b
    assert len({a, b}) == 1


def test_comparison_with_other_types() -> None:
    result = parse("01 Jan 1970 00:00:00 GMT")
    assert result is not None
    assert result != 0
    with pytest.raises(TypeError):
        _ = result < 0  # type: ignore[operator]


def test_result_is_immutable() -> None:
    result = parse("01 Jan 1970 00:00:00 GMT")
    assert result is not None
    with pytest.raises(ValidationError):
        result.absolute_time = 1  # type: ignore[misc]


@pytest.mark.parametrize(
    "stamp",
    [
        "Mon,02  Jan   2006 15:04:05 -0700",
        "2 Jan 06 15:04 EST",
        "Sun, 06 Nov 1994 08:49:37 GMT",
    ],
)
def test_tokens_reassemble_into_equivalent_stamp(stamp: str) -> None:
    result = parse(stamp)
    assert result is not None
    again = parse(result.reassemble())
    assert again is not None
    assert again == result
    assert again.fields == result.fields
    assert again.tokens == result.tokens


def test_reassemble_normalizes_whitespace() -> None:
    result = parse("Mon,02  Jan   2006 15:04:05 -0700")
    assert result is not None
    assert result.reassemble() == "Mon, 02 Jan 2006 15:04:05 -0700"


def test_day_of_week_is_not_checked_by_default() -> None:
    assert parse("Fri, 02 Jan 2006 15:04:05 -0700") is not None


def test_strict_day_of_week() -> None:
    assert parse("Mon, 02 Jan 2006 15:04:05 -0700", check_day_of_week=True) is not None
    assert parse("02 Jan 2006 15:04:05 -0700", check_day_of_week=True) is not None
    assert parse("Tue, 02 Jan 2006 15:04:05 -0700", check_day_of_week=True) is None

    with pytest.raises(DayOfWeekMismatch) as excinfo:
        parse_stamp("Tue, 02 Jan 2006 15:04:05 -0700", check_day_of_week=True)
    assert isinstance(excinfo.value, InvalidDate)


def test_utc_overflow_past_year_9999() -> None:
    result = parse("31 Dec 9999 23:00 -1200")
    assert result is not None
    assert result.absolute_time == _expected_epoch(9999, 12, 31, 23, 0, 0, 0) + 12 * 3600
    with pytest.raises(OverflowError):
        _ = result.utc
