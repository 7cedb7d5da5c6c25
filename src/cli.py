"""Command-line entry point.

Parses RFC 822 stamps given as arguments (or one per line on stdin) and prints, per accepted stamp,
the UTC instant in ISO 8601 form and as seconds since the Unix epoch, separated by a tab. Rejected
stamps are logged; the exit status is 1 if any stamp was rejected.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterable, Sequence
from typing import TextIO

from src.config.logging import configure_logging
from src.config.settings import load_settings
from src.rfc822.errors import RFC822Error
from src.rfc822.parser import parse_stamp
from src.rfc822.schema import ParsedDateTime

logger = logging.getLogger(__name__)


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rfc822-parse",
        description="Validate RFC 822 date-time stamps and convert them to UTC.",
    )
    parser.add_argument("stamps", nargs="*", help="Stamps to parse (default: read lines from stdin).")
    parser.add_argument(
        "--check-day-of-week",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Require a present day name to match the date.",
    )
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL.")
    return parser


def _iter_stdin_stamps(stream: TextIO) -> Iterable[str]:
    for line in stream:
        stamp = line.rstrip("\r\n")
        if stamp:
            yield stamp


def format_result(result: ParsedDateTime) -> str:
    """Render a parsed stamp as `<iso-utc>\\t<epoch-seconds>`."""

    try:
        iso = result.utc.isoformat()
    except OverflowError:
        # Instants past year 9999 have no `datetime`; the integer instant is still exact.
        iso = "-"
    return f"{iso}\t{result.absolute_time}"


def run(stamps: Iterable[str], *, check_day_of_week: bool, out: TextIO) -> int:
    """Parse every stamp, write accepted results to `out` and return the exit status."""

    rejected = 0
    for stamp in stamps:
        try:
            result = parse_stamp(stamp, check_day_of_week=check_day_of_week)
        except RFC822Error as exc:
            rejected += 1
            logger.warning("rejected reason=%s detail=%s stamp=%r", type(exc).__name__, exc, stamp)
            continue
        out.write(format_result(result) + "\n")

    return 1 if rejected else 0


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_arg_parser().parse_args(argv)
    settings = load_settings()
    configure_logging(args.log_level or settings.log_level)

    check_day_of_week = settings.check_day_of_week
    if args.check_day_of_week is not None:
        check_day_of_week = args.check_day_of_week

    stamps: Iterable[str] = args.stamps or _iter_stdin_stamps(sys.stdin)
    return run(stamps, check_day_of_week=check_day_of_week, out=sys.stdout)


if __name__ == "__main__":
    sys.exit(main())
