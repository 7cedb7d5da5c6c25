"""RFC 822 §5.1 date-time grammar.

    date-time   =  [ day "," ] date time
    date        =  1*2DIGIT month 2DIGIT
    time        =  hour zone
    hour        =  2DIGIT ":" 2DIGIT [":" 2DIGIT]
    zone        =  "UT" / "GMT" / "EST" / "EDT" / "CST" / "CDT" / "MST" / "MDT" / "PST" / "PDT"
                /  1ALPHA                             ; military, "J" not used
                /  ( ("+" / "-") 4DIGIT )             ; local differential

The year may have 2 to 4 digits: RSS feeds use four-digit years where RFC 822 calls for two.
Matching is a full-string match; nothing may precede or follow the stamp.
"""

from __future__ import annotations

import re

from src.rfc822.errors import GrammarMismatch
from src.rfc822.schema import Tokens
from src.rfc822.zones import ZONE_NAMES

DAY_NAMES: tuple[str, ...] = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTH_NAMES: tuple[str, ...] = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)

_DAY_PATTERN = "|".join(DAY_NAMES)
_MONTH_PATTERN = "|".join(MONTH_NAMES)
_ZONE_PATTERN = "|".join(ZONE_NAMES)

STAMP_RE = re.compile(
    rf"(?:(?P<dow>{_DAY_PATTERN}),\s*)?"
    rf"(?P<day>\d{{1,2}})\s+(?P<month>{_MONTH_PATTERN})\s+(?P<year>\d{{2,4}})\s+"
    rf"(?P<hour>\d{{2}}):(?P<minute>\d{{2}})(?::(?P<second>\d{{2}}))?\s+"
    rf"(?P<zone>(?P<zone_name>{_ZONE_PATTERN})|(?P<zone_diff>[+-]\d{{4}}))",
    flags=re.ASCII,
)


def match_stamp(stamp: str) -> Tokens:
    """Match `stamp` against the grammar and return its raw tokens.

    Raises:
        GrammarMismatch: If the whole string is not an RFC 822 date-time.
    """

    match = STAMP_RE.fullmatch(stamp)
    if not match:
        raise GrammarMismatch("stamp does not match the RFC 822 date-time grammar")

    return Tokens(
        day_of_week=match.group("dow") or "",
        day=match.group("day"),
        month=match.group("month"),
        year=match.group("year"),
        hour=match.group("hour"),
        minute=match.group("minute"),
        second=match.group("second") or "",
        zone=match.group("zone"),
    )
