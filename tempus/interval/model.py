"""Interval projections: start, end and bounds of any temporal value.

Every point-in-time variant names an interval of the time line:

    ==================================  ==========================  ==========================
    value                               start                       end
    ==================================  ==========================  ==========================
    Bounds                              its start                   its end
    Instant, DateTime, ZonedDateTime    the value itself            the value itself
    Date                                midnight (DateTime)         midnight of the next day
    YearMonth                           midnight on the 1st         midnight on the next 1st
    Year                                midnight on 1 January       midnight on next 1 January
    ==================================  ==========================  ==========================

Text is parsed and Suppliers are resolved before projecting, so
``bounds("2020-07")`` is ``[2020-07-01T00:00, 2020-08-01T00:00)``.
"""

from __future__ import annotations

from typing import Union

from tempus._internal.constants import (
    MAX_YEAR,
    MIN_YEAR,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
)
from tempus.arithmetic.ops import between, new_duration
from tempus.coerce import to_date, to_date_time, to_time, to_zoned_date_time
from tempus.core.bounds import Bounds
from tempus.core.date import Date
from tempus.core.datetime import DateTime
from tempus.core.duration import Duration
from tempus.core.instant import Instant
from tempus.core.time import Time
from tempus.core.year import Year
from tempus.core.year_month import YearMonth
from tempus.core.zoned import ZonedDateTime
from tempus.errors import UnsupportedCoercion, variant_name
from tempus.parse import parse
from tempus.supplier import Supplier
from tempus.units.timeunit import TimeUnit
from tempus.units.zone import Zone


def _resolve(value: object) -> object:
    """Resolve a Supplier and parse text."""
    if isinstance(value, Supplier):
        value = value.resolve()
    if isinstance(value, str):
        return parse(value)
    return value


def start(value: object) -> object:
    """Return the inclusive start of a value's interval.

    Examples:
        >>> start(Date(2017, 1, 1))
        DateTime(2017, 1, 1, 0, 0, 0, 0)
        >>> start(Year(2017))
        DateTime(2017, 1, 1, 0, 0, 0, 0)

    Raises:
        UnsupportedCoercion: If the value names no interval.
    """
    value = _resolve(value)
    if isinstance(value, Bounds):
        return value.start
    if isinstance(value, (Instant, DateTime, ZonedDateTime)):
        return value
    if isinstance(value, Date):
        return value.at_start_of_day()
    if isinstance(value, YearMonth):
        return value.at_day(1).at_start_of_day()
    if isinstance(value, Year):
        return Date(value.value, 1, 1).at_start_of_day()
    raise UnsupportedCoercion(variant_name(value), "Bounds")


def end(value: object) -> object:
    """Return the exclusive end of a value's interval.

    Examples:
        >>> end(Date(2017, 12, 31))
        DateTime(2018, 1, 1, 0, 0, 0, 0)
        >>> end(YearMonth(2016, 2))
        DateTime(2016, 3, 1, 0, 0, 0, 0)

    The end of the last supported day, month or year is the edge
    10000-01-01T00:00. It compares and measures like any DateTime but
    cannot be converted to another variant.

    Raises:
        UnsupportedCoercion: If the value names no interval.
    """
    value = _resolve(value)
    if isinstance(value, Bounds):
        return value.end
    if isinstance(value, (Instant, DateTime, ZonedDateTime)):
        return value
    if isinstance(value, Date):
        return _day_start(value.epoch_day + 1)
    if isinstance(value, YearMonth):
        return _day_start(value.at_end_of_month().epoch_day + 1)
    if isinstance(value, Year):
        return _day_start(Date(value.value, 12, 31).epoch_day + 1)
    raise UnsupportedCoercion(variant_name(value), "Bounds")


def _day_start(epoch_day: int) -> DateTime:
    # Unchecked so the day after the last supported date can be named
    return DateTime._from_internal(epoch_day, 0)


def bounds(value: object, end_value: object = None) -> Bounds:
    """Return the Bounds of a value, or from one value's start to another's end.

    Examples:
        >>> bounds("2020-07")
        Bounds(DateTime(2020, 7, 1, 0, 0, 0, 0), DateTime(2020, 8, 1, 0, 0, 0, 0))
        >>> str(bounds(Date(2017, 1, 1), Date(2017, 1, 3)))
        '[2017-01-01T00:00, 2017-01-04T00:00)'
    """
    value = _resolve(value)
    if end_value is None:
        if isinstance(value, Bounds):
            return value
        return Bounds(start(value), end(value))
    return Bounds(start(value), end(end_value))


def duration(
    value: object, unit: Union[str, TimeUnit, None] = None
) -> Duration:
    """Return the length of a value's interval, or build a Duration.

    With an int the call builds a Duration of that many units (default
    seconds). Otherwise the result is end(value) - start(value).

    Examples:
        >>> duration(Date(2017, 1, 1)) == Duration(days=1)
        True
        >>> duration(90, "minutes") == Duration(hours=1, minutes=30)
        True
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return new_duration(value, unit or TimeUnit.SECONDS)
    value = _resolve(value)
    return between(start(value), end(value))  # type: ignore[return-value]


def is_midnight(value: object, zone: Union[Zone, str, None] = None) -> bool:
    """Return True if no time has elapsed since the start of the value's day.

    Dates, YearMonths and Years start at midnight, so they always are.
    Instants are read in UTC unless a zone is given; zoned values are read
    in their own zone.
    """
    value = _resolve(value)
    if isinstance(value, (Date, YearMonth, Year)):
        return True
    return to_time(value, zone) == Time.midnight()


def at(date: object, time: object) -> DateTime:
    """Combine a date and a time of day into a DateTime.

    Examples:
        >>> at(Date(2017, 1, 1), "4pm")
        DateTime(2017, 1, 1, 16, 0, 0, 0)
    """
    return DateTime.combine(to_date(date), to_time(time))


def on(time: object, date: object) -> DateTime:
    """Combine a time of day with a date; at() with the arguments swapped."""
    return at(date, time)


def midnight(date: object) -> DateTime:
    """Return the DateTime at the start of a date."""
    return at(date, Time.midnight())


def noon(date: object) -> DateTime:
    return at(date, Time.noon())


def at_zone(value: object, zone: Union[Zone, str]) -> ZonedDateTime:
    """Place a value in a zone.

    A DateTime or Date is taken as local time in the zone. An Instant or
    ZonedDateTime keeps its instant and is viewed from the zone.

    Examples:
        >>> str(at_zone(DateTime(2017, 7, 1, 12), "Europe/London"))
        '2017-07-01T12:00+01:00[Europe/London]'
    """
    return to_zoned_date_time(value, zone)


def to_local(value: object, zone: Union[Zone, str, None] = None) -> DateTime:
    """Return the local date-time of a value.

    Zoned values give their own local time, or the local time in `zone`
    when one is given. Instants are read in `zone` (default UTC).
    """
    return to_date_time(value, zone)


def _last_date() -> Date:
    return Date(MAX_YEAR, 12, 31)


def _instant_range() -> tuple[Instant, Instant]:
    first = Date(MIN_YEAR, 1, 1).epoch_day * SECONDS_PER_DAY
    last = (_last_date().epoch_day + 1) * SECONDS_PER_DAY - 1
    return Instant(first), Instant(last, NANOS_PER_SECOND - 1)


def _variant(kind_or_value: object) -> type:
    if isinstance(kind_or_value, type):
        return kind_or_value
    return type(_resolve(kind_or_value))


def min_of_type(kind_or_value: object) -> object:
    """Return the earliest representable value of a variant.

    Accepts the variant class or any value of it. ZonedDateTime limits
    are expressed in UTC.

    Examples:
        >>> min_of_type(Date)
        Date(-9999, 1, 1)
        >>> min_of_type(YearMonth(2017, 7))
        YearMonth(-9999, 1)
    """
    kind = _variant(kind_or_value)
    if kind is Instant:
        return _instant_range()[0]
    if kind is ZonedDateTime:
        return ZonedDateTime(_instant_range()[0], Zone.utc())
    if kind is DateTime:
        return DateTime(MIN_YEAR, 1, 1)
    if kind is Date:
        return Date(MIN_YEAR, 1, 1)
    if kind is YearMonth:
        return YearMonth(MIN_YEAR, 1)
    if kind is Year:
        return Year(MIN_YEAR)
    raise UnsupportedCoercion(kind.__name__, "min_of_type")


def max_of_type(kind_or_value: object) -> object:
    """Return the latest representable value of a variant.

    Examples:
        >>> max_of_type(DateTime)
        DateTime(9999, 12, 31, 23, 59, 59, 999999999)
    """
    kind = _variant(kind_or_value)
    if kind is Instant:
        return _instant_range()[1]
    if kind is ZonedDateTime:
        return ZonedDateTime(_instant_range()[1], Zone.utc())
    if kind is DateTime:
        return DateTime(MAX_YEAR, 12, 31, 23, 59, 59, NANOS_PER_SECOND - 1)
    if kind is Date:
        return _last_date()
    if kind is YearMonth:
        return YearMonth(MAX_YEAR, 12)
    if kind is Year:
        return Year(MAX_YEAR)
    raise UnsupportedCoercion(kind.__name__, "max_of_type")


def _upper_edge(kind_or_value: object) -> object:
    """Return the value just past max_of_type, an exclusive end for the variant.

    The edge lies in year 10000, outside the supported range, and is
    only meant for comparison.
    """
    kind = _variant(kind_or_value)
    past_last_day = _last_date().epoch_day + 1
    if kind is Instant:
        return Instant._from_internal(past_last_day * SECONDS_PER_DAY, 0)
    if kind is ZonedDateTime:
        return ZonedDateTime(_upper_edge(Instant), Zone.utc())  # type: ignore[arg-type]
    if kind is DateTime:
        return _day_start(past_last_day)
    if kind is Date:
        return _day_start(past_last_day).date
    if kind is YearMonth:
        return YearMonth._from_internal(MAX_YEAR + 1, 1)
    if kind is Year:
        return Year._from_internal(MAX_YEAR + 1)
    raise UnsupportedCoercion(kind.__name__, "max_of_type")


__all__ = [
    "start",
    "end",
    "bounds",
    "duration",
    "is_midnight",
    "at",
    "on",
    "midnight",
    "noon",
    "at_zone",
    "to_local",
    "min_of_type",
    "max_of_type",
]
