"""RFC 822 time zones.

Only the fixed table of RFC 822 §5.1 is supported: Universal Time, the North American zones, four
military letters and a signed `HHMM` local differential. The military letter "J" is not used by
the RFC and is deliberately absent from `Zone`.
"""

from __future__ import annotations

from enum import StrEnum

from src.rfc822.errors import GrammarMismatch


class Zone(StrEnum):
    """Named zones and military letters accepted by the grammar."""

    UT = "UT"
    GMT = "GMT"
    EST = "EST"
    EDT = "EDT"
    CST = "CST"
    CDT = "CDT"
    MST = "MST"
    MDT = "MDT"
    PST = "PST"
    PDT = "PDT"
    Z = "Z"
    A = "A"
    M = "M"
    N = "N"
    Y = "Y"

    @property
    def offset_minutes(self) -> int:
        """Signed offset from UTC, in minutes."""

        return _ZONE_OFFSETS[self]


_ZONE_OFFSETS: dict[Zone, int] = {
    Zone.UT: 0,
    Zone.GMT: 0,
    Zone.Z: 0,
    Zone.EST: -5 * 60,
    Zone.EDT: -4 * 60,
    Zone.CST: -6 * 60,
    Zone.CDT: -5 * 60,
    Zone.MST: -7 * 60,
    Zone.MDT: -6 * 60,
    Zone.PST: -8 * 60,
    Zone.PDT: -7 * 60,
    Zone.A: -1 * 60,
    Zone.M: -12 * 60,
    Zone.N: 1 * 60,
    Zone.Y: 12 * 60,
}

# Longest names first so that a regex alternation never stops at a prefix ("UT" before "U...").
ZONE_NAMES: tuple[str, ...] = tuple(sorted((z.value for z in Zone), key=lambda n: (-len(n), n)))


def parse_local_differential(token: str) -> int:
    """Parse `+HHMM` / `-HHMM` into signed minutes: `sign * (HH * 60 + MM)`.

    Minutes above 59 are not rejected (`+0099` is 99 minutes); the grammar only constrains the
    digit count.
    """

    if len(token) != 5 or token[0] not in "+-" or not token[1:].isascii() or not token[1:].isdigit():
        raise GrammarMismatch(f"malformed local differential: {token!r}")

    sign = -1 if token[0] == "-" else 1
    return sign * (int(token[1:3]) * 60 + int(token[3:5]))


def zone_offset_minutes(token: str) -> int:
    """Resolve a zone token (named, military or differential) to signed minutes from UTC."""

    if token[:1] in ("+", "-"):
        return parse_local_differential(token)

    try:
        return Zone(token).offset_minutes
    except ValueError as exc:
        raise GrammarMismatch(f"unknown zone: {token!r}") from exc
