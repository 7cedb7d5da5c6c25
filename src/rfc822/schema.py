"""Parsed date-time models (Pydantic).

A `ParsedDateTime` is only ever built by the parser once a stamp has passed both the grammar and
the calendar/time checks, so every instance carries a complete, consistent absolute time.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


class Tokens(BaseModel):
    """Raw substrings matched by the grammar.

    `day_of_week` and `second` are empty strings when the stamp omits them. Tokens are kept for
    diagnostics and reformatting only; they are never re-validated.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    day_of_week: str = ""
    day: str
    month: str
    year: str
    hour: str
    minute: str
    second: str = ""
    zone: str

    def to_stamp(self) -> str:
        """Re-concatenate the tokens per the grammar, separated by single spaces."""

        prefix = f"{self.day_of_week}, " if self.day_of_week else ""
        clock = f"{self.hour}:{self.minute}"
        if self.second:
            clock += f":{self.second}"
        return f"{prefix}{self.day} {self.month} {self.year} {clock} {self.zone}"


class DateTimeFields(BaseModel):
    """Typed calendar/time fields as written in the stamp (not adjusted by the zone offset)."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    day: int = Field(ge=1, le=31)
    month: int = Field(ge=1, le=12)
    year: int
    hour: int = Field(ge=0, le=23)
    minute: int = Field(ge=0, le=59)
    second: int = Field(default=0, ge=0, le=59)
    # Examples: EST = -300, +1230 = 750.
    zone_offset: int = 0


class ParsedDateTime(BaseModel):
    """A validated RFC 822 stamp and the UTC instant it represents.

    Ordering, equality and hashing use `absolute_time` only: two different spellings of the same
    instant compare equal.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    original_text: str
    absolute_time: int
    tokens: Tokens
    fields: DateTimeFields

    @property
    def utc(self) -> datetime:
        """The instant as an aware UTC `datetime`.

        Raises:
            OverflowError: If the instant falls outside the range `datetime` can represent.
        """

        return _EPOCH + timedelta(seconds=self.absolute_time)

    def reassemble(self) -> str:
        """Rebuild a stamp from the tokens (equivalent, not necessarily byte-identical)."""

        return self.tokens.to_stamp()

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ParsedDateTime):
            return NotImplemented
        return self.absolute_time == other.absolute_time

    def __ne__(self, other: Any) -> bool:
        if not isinstance(other, ParsedDateTime):
            return NotImplemented
        return self.absolute_time != other.absolute_time

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, ParsedDateTime):
            return NotImplemented
        return self.absolute_time < other.absolute_time

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, ParsedDateTime):
            return NotImplemented
        return self.absolute_time <= other.absolute_time

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, ParsedDateTime):
            return NotImplemented
        return self.absolute_time > other.absolute_time

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, ParsedDateTime):
            return NotImplemented
        return self.absolute_time >= other.absolute_time

    def __hash__(self) -> int:
        return hash(self.absolute_time)
