"""Text parsing for point-in-time literals.

parse() tries a fixed list of patterns, most specific first, and builds
the value for the first one that matches the whole string:

    ======================  ========================  ===============
    name                    example                   result
    ======================  ========================  ===============
    hour_am_pm              "4pm", "11 am"            Time
    hour                    "16"                      Time
    hour_minute             "9:30", "16:30"           Time
    time                    "16:30:05.25"             Time
    utc_instant             "2017-01-01T09:00:00Z"    Instant
    offset_date_time        "2017-01-01T09:00+01:00"  ZonedDateTime
    zoned_date_time         "...+01:00[Europe/Paris]" ZonedDateTime
    local_date_time         "2017-01-01T09:00"        DateTime
    local_date              "2017-01-01"              Date
    year_month              "2017-01"                 YearMonth
    year                    "2017"                    Year
    ======================  ========================  ===============

Order matters: the bare year pattern comes last so that it never claims
a richer string.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable, Pattern

from tempus.core.date import Date
from tempus.core.datetime import DateTime
from tempus.core.instant import Instant
from tempus.core.time import Time
from tempus.core.year import Year
from tempus.core.year_month import YearMonth
from tempus.core.zoned import ZonedDateTime
from tempus.errors import ParseError, UnsupportedCoercion, ValidationError, variant_name
from tempus.units.zone import Zone

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParsePattern:
    """A text pattern and the builder for the value it denotes.

    Attributes:
        name: Short name for the pattern, used in debug logging.
        pattern: Compiled regex; it must match the whole input.
        build: Function turning the match into a temporal value.
    """

    name: str
    pattern: Pattern[str]
    build: Callable[[re.Match[str]], object]


_DATE = r"(-?\d{4})-(\d{2})-(\d{2})"
_TIME = r"(\d{2}):(\d{2})(?::(\d{2})(?:\.(\d{1,9}))?)?"
_LOCAL_DATE_TIME = rf"{_DATE}T{_TIME}"


def _nanos(fraction: str | None) -> int:
    """Convert a 1-9 digit fraction of a second to nanoseconds."""
    if not fraction:
        return 0
    return int(fraction.ljust(9, "0"))


def _local_date_time(match: re.Match[str]) -> DateTime:
    """Build a DateTime from the first seven groups of a match."""
    year, month, day, hour, minute, second, fraction = match.group(1, 2, 3, 4, 5, 6, 7)
    return DateTime(
        int(year),
        int(month),
        int(day),
        int(hour),
        int(minute),
        int(second or 0),
        _nanos(fraction),
    )


def _build_hour_am_pm(match: re.Match[str]) -> Time:
    hour = int(match.group(1))
    if hour < 1 or hour > 12:
        raise ValidationError(f"hour must be between 1 and 12 with am/pm, got {hour}")
    if match.group(2).lower() == "am":
        return Time(0 if hour == 12 else hour)
    return Time(12 if hour == 12 else hour + 12)


def _build_time(match: re.Match[str]) -> Time:
    hour, minute, second, fraction = match.group(1, 2, 3, 4)
    return Time(int(hour), int(minute), int(second or 0), _nanos(fraction))


def _build_offset_date_time(match: re.Match[str]) -> ZonedDateTime:
    return ZonedDateTime.of_local(_local_date_time(match), Zone.of(match.group(8)))


def _build_zoned_date_time(match: re.Match[str]) -> ZonedDateTime:
    local = _local_date_time(match)
    offset = Zone.of(match.group(8))
    zone = Zone.of(match.group(9))
    # Keep the written offset when it is valid for the zone at that local time
    candidate = ZonedDateTime(ZonedDateTime.of_local(local, offset).instant, zone)
    if candidate.date_time == local:
        return candidate
    return ZonedDateTime.of_local(local, zone)


PATTERNS: tuple[ParsePattern, ...] = (
    ParsePattern(
        "hour_am_pm",
        re.compile(r"(\d{1,2})\s*(am|pm)", re.ASCII | re.IGNORECASE),
        _build_hour_am_pm,
    ),
    ParsePattern(
        "hour",
        re.compile(r"(\d{1,2})", re.ASCII),
        lambda m: Time(int(m.group(1))),
    ),
    ParsePattern(
        "hour_minute",
        re.compile(r"(\d{1,2}):(\d{2})", re.ASCII),
        lambda m: Time(int(m.group(1)), int(m.group(2))),
    ),
    ParsePattern(
        "time",
        re.compile(_TIME, re.ASCII),
        _build_time,
    ),
    ParsePattern(
        "utc_instant",
        re.compile(rf"{_LOCAL_DATE_TIME}Z", re.ASCII),
        lambda m: ZonedDateTime.of_local(_local_date_time(m), Zone.utc()).instant,
    ),
    ParsePattern(
        "offset_date_time",
        re.compile(rf"{_LOCAL_DATE_TIME}([+-]\d{{2}}:\d{{2}})", re.ASCII),
        _build_offset_date_time,
    ),
    ParsePattern(
        "zoned_date_time",
        re.compile(rf"{_LOCAL_DATE_TIME}(Z|[+-]\d{{2}}:\d{{2}})\[([\w/+\-]+)\]", re.ASCII),
        _build_zoned_date_time,
    ),
    ParsePattern(
        "local_date_time",
        re.compile(_LOCAL_DATE_TIME, re.ASCII),
        _local_date_time,
    ),
    ParsePattern(
        "local_date",
        re.compile(_DATE, re.ASCII),
        lambda m: Date(int(m.group(1)), int(m.group(2)), int(m.group(3))),
    ),
    ParsePattern(
        "year_month",
        re.compile(r"(-?\d{4})-(\d{2})", re.ASCII),
        lambda m: YearMonth(int(m.group(1)), int(m.group(2))),
    ),
    ParsePattern(
        "year",
        re.compile(r"(-?\d{4})", re.ASCII),
        lambda m: Year(int(m.group(1))),
    ),
)


def parse(text: str) -> Time | Instant | ZonedDateTime | DateTime | Date | YearMonth | Year:
    """Parse text into the most specific temporal value it denotes.

    Args:
        text: The text to parse. Surrounding whitespace is ignored.

    Returns:
        The value built by the first pattern matching the whole text.

    Raises:
        ParseError: If no pattern matches.
        ValidationError: If a pattern matches but a field is out of range
            (for example "2017-13").
        UnsupportedCoercion: If text is not a string.

    Examples:
        >>> parse("2020-07")
        YearMonth(2020, 7)
        >>> parse("4pm")
        Time(16, 0, 0, 0)
        >>> parse("2017-01-01T09:00:00Z")
        Instant(epoch_second=1483261200, nanosecond=0)
    """
    if not isinstance(text, str):
        raise UnsupportedCoercion(variant_name(text), "str")

    stripped = text.strip()
    for candidate in PATTERNS:
        match = candidate.pattern.fullmatch(stripped)
        if match is not None:
            logger.debug("parsing %r as %s", text, candidate.name)
            return candidate.build(match)  # type: ignore[return-value]

    raise ParseError(text)


__all__ = ["ParsePattern", "PATTERNS", "parse"]
