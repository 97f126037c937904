"""Conversion between temporal variants and field extraction.

Each to_<variant>() function accepts any value that carries enough
information to build the requested variant:

    - the library's own point types,
    - text (parsed with tempus.parse.parse first),
    - Supplier objects (resolved once, then converted),
    - standard library datetime/date values,
    - plain ints where a number has an obvious meaning (epoch seconds,
      a year, an hour).

Anything else raises UnsupportedCoercion(from_variant, to_variant).

Converting an Instant to a date-bearing variant uses UTC unless a zone
is passed explicitly.
"""

from __future__ import annotations

import datetime as _datetime
from zoneinfo import ZoneInfo

from tempus._internal.constants import NANOS_PER_MICROSECOND, NANOS_PER_SECOND
from tempus._internal.validation import validate_month
from tempus.core.date import Date
from tempus.core.datetime import DateTime
from tempus.core.instant import Instant
from tempus.core.time import Time
from tempus.core.year import Year
from tempus.core.year_month import YearMonth
from tempus.core.zoned import ZonedDateTime
from tempus.errors import UnsupportedCoercion, variant_name
from tempus.parse import parse
from tempus.supplier import Supplier
from tempus.units.zone import Zone


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _from_py(value: _datetime.date) -> Date | DateTime | ZonedDateTime:
    """Convert a standard library date or datetime."""
    if not isinstance(value, _datetime.datetime):
        return Date(value.year, value.month, value.day)

    local = DateTime(
        value.year,
        value.month,
        value.day,
        value.hour,
        value.minute,
        value.second,
        value.microsecond * NANOS_PER_MICROSECOND,
    )
    offset = value.utcoffset()
    if offset is None:
        return local

    offset_seconds = offset.days * 86_400 + offset.seconds
    if isinstance(value.tzinfo, ZoneInfo):
        zone = Zone.of(value.tzinfo.key)
    else:
        zone = Zone.of_offset(offset_seconds)
    instant = Instant(0, local.local_nanos - offset_seconds * NANOS_PER_SECOND)
    return ZonedDateTime(instant, zone)


def _prepare(value: object) -> object:
    """Resolve suppliers, parse text and convert standard library values."""
    if isinstance(value, Supplier):
        value = value.resolve()
    if isinstance(value, str):
        return parse(value)
    if isinstance(value, _datetime.date):
        return _from_py(value)
    return value


def _resolve_zone(zone: Zone | str | None) -> Zone:
    if zone is None:
        return Zone.utc()
    return to_zone(zone)


def to_instant(value: object, zone: Zone | str | None = None) -> Instant:
    """Convert a value to an Instant.

    DateTime and Date values are taken as local to `zone` (default UTC).
    An int is a count of seconds since the epoch.

    Examples:
        >>> to_instant("2017-01-01")
        Instant(epoch_second=1483228800, nanosecond=0)
        >>> to_instant(60)
        Instant(epoch_second=60, nanosecond=0)
    """
    value = _prepare(value)
    if isinstance(value, Instant):
        return value
    if isinstance(value, ZonedDateTime):
        return value.instant
    if isinstance(value, (DateTime, Date)):
        return to_zoned_date_time(value, zone).instant
    if _is_int(value):
        return Instant(value)
    raise UnsupportedCoercion(variant_name(value), "Instant")


def to_zoned_date_time(value: object, zone: Zone | str | None = None) -> ZonedDateTime:
    """Convert a value to a ZonedDateTime.

    Instants are viewed from `zone`; local values are placed in `zone`;
    zoned values are moved to `zone` keeping the instant. The default
    zone is UTC (zoned values keep their own zone when none is given).
    """
    value = _prepare(value)
    if isinstance(value, ZonedDateTime):
        if zone is None:
            return value
        return value.with_zone_same_instant(to_zone(zone))
    if isinstance(value, Instant):
        return ZonedDateTime(value, _resolve_zone(zone))
    if isinstance(value, DateTime):
        return ZonedDateTime.of_local(value, _resolve_zone(zone))
    if isinstance(value, Date):
        return ZonedDateTime.of_local(value.at_start_of_day(), _resolve_zone(zone))
    if _is_int(value):
        return ZonedDateTime(Instant(value), _resolve_zone(zone))
    raise UnsupportedCoercion(variant_name(value), "ZonedDateTime")


def to_date_time(value: object, zone: Zone | str | None = None) -> DateTime:
    """Convert a value to a DateTime (local date and time).

    Examples:
        >>> to_date_time("2017-01-01")
        DateTime(2017, 1, 1, 0, 0, 0, 0)
    """
    value = _prepare(value)
    if isinstance(value, DateTime):
        return value
    if isinstance(value, Date):
        return value.at_start_of_day()
    if isinstance(value, (ZonedDateTime, Instant)) or _is_int(value):
        return to_zoned_date_time(value, zone).date_time
    raise UnsupportedCoercion(variant_name(value), "DateTime")


def to_date(value: object, zone: Zone | str | None = None) -> Date:
    """Convert a value to a Date.

    Examples:
        >>> to_date("2017-01-01T23:30")
        Date(2017, 1, 1)
        >>> to_date(to_instant("2017-01-01T23:30:00Z"), zone="+01:00")
        Date(2017, 1, 2)
    """
    value = _prepare(value)
    if isinstance(value, Date):
        return value
    if isinstance(value, DateTime):
        return value.date
    if isinstance(value, (ZonedDateTime, Instant)):
        return to_zoned_date_time(value, zone).date
    raise UnsupportedCoercion(variant_name(value), "Date")


def to_year_month(value: object, zone: Zone | str | None = None) -> YearMonth:
    """Convert a value to a YearMonth."""
    value = _prepare(value)
    if isinstance(value, YearMonth):
        return value
    if isinstance(value, (Date, DateTime, ZonedDateTime, Instant)):
        date = to_date(value, zone)
        return YearMonth(date.year, date.month)
    raise UnsupportedCoercion(variant_name(value), "YearMonth")


def to_year(value: object, zone: Zone | str | None = None) -> Year:
    """Convert a value to a Year. An int is the year number.

    Examples:
        >>> to_year(2017)
        Year(2017)
        >>> to_year("2017-07")
        Year(2017)
    """
    value = _prepare(value)
    if isinstance(value, Year):
        return value
    if isinstance(value, YearMonth):
        return value.to_year()
    if isinstance(value, (Date, DateTime, ZonedDateTime, Instant)):
        return Year(to_date(value, zone).year)
    if _is_int(value):
        return Year(value)
    raise UnsupportedCoercion(variant_name(value), "Year")


def to_time(value: object, zone: Zone | str | None = None) -> Time:
    """Convert a value to a Time of day. An int is an hour.

    Examples:
        >>> to_time(9)
        Time(9, 0, 0, 0)
        >>> to_time("2017-01-01T10:15")
        Time(10, 15, 0, 0)
    """
    value = _prepare(value)
    if isinstance(value, Time):
        return value
    if isinstance(value, DateTime):
        return value.time
    if isinstance(value, (ZonedDateTime, Instant)):
        return to_zoned_date_time(value, zone).time
    if _is_int(value):
        return Time(value)
    raise UnsupportedCoercion(variant_name(value), "Time")


def to_zone(value: object) -> Zone:
    """Convert a value to a Zone.

    Text is taken as a zone id ("Europe/London", "+05:30", "UTC"),
    not parsed as a date-time.
    """
    if isinstance(value, Supplier):
        value = value.resolve()
    if isinstance(value, Zone):
        return value
    if isinstance(value, str):
        return Zone.of(value)
    if isinstance(value, ZonedDateTime):
        return value.zone
    if isinstance(value, ZoneInfo):
        return Zone.of(value.key)
    if isinstance(value, _datetime.timezone):
        return Zone.of_offset(int(value.utcoffset(None).total_seconds()))
    raise UnsupportedCoercion(variant_name(value), "Zone")


def to_py_datetime(value: object) -> _datetime.datetime | _datetime.date:
    """Convert to a standard library value.

    Instants become aware UTC datetimes, zoned values aware datetimes in
    their zone, DateTimes naive datetimes and Dates dates. Sub-microsecond
    precision is truncated.

    Raises:
        UnsupportedCoercion: For other variants, or years outside 1..9999.
    """
    value = _prepare(value)
    if isinstance(value, Instant):
        value = ZonedDateTime(value, Zone.utc())

    if isinstance(value, ZonedDateTime):
        local = value.date_time
        tzinfo = value.zone.to_tzinfo()
    elif isinstance(value, DateTime):
        local = value
        tzinfo = None
    elif isinstance(value, Date):
        if value.year < 1:
            raise UnsupportedCoercion(variant_name(value), "date")
        return _datetime.date(value.year, value.month, value.day)
    else:
        raise UnsupportedCoercion(variant_name(value), "datetime")

    if local.year < 1:
        raise UnsupportedCoercion(variant_name(value), "datetime")
    result = _datetime.datetime(
        local.year,
        local.month,
        local.day,
        local.hour,
        local.minute,
        local.second,
        local.nanosecond // NANOS_PER_MICROSECOND,
        tzinfo=tzinfo,
    )
    if tzinfo is not None and isinstance(value, ZonedDateTime):
        # Ambiguous wall times: pick the fold matching the offset
        if int(result.utcoffset().total_seconds()) != value.offset_seconds:
            result = result.replace(fold=1)
    return result


def to_int(value: object) -> int:
    """Extract the natural integer field of a value.

    Instant: nanosecond of second. Year: the year. YearMonth: the month.
    int: itself.

    Examples:
        >>> to_int(Year(2017))
        2017
        >>> to_int(YearMonth(2017, 7))
        7
    """
    value = _prepare(value)
    if _is_int(value):
        return value
    if isinstance(value, Instant):
        return value.nanosecond
    if isinstance(value, ZonedDateTime):
        return value.instant.nanosecond
    if isinstance(value, Year):
        return value.value
    if isinstance(value, YearMonth):
        return value.month
    raise UnsupportedCoercion(variant_name(value), "int")


def to_long(value: object) -> int:
    """Extract the natural large integer field of a value.

    Instant and ZonedDateTime: epoch second. Year and YearMonth: the year.
    int: itself.
    """
    value = _prepare(value)
    if _is_int(value):
        return value
    if isinstance(value, Instant):
        return value.epoch_second
    if isinstance(value, ZonedDateTime):
        return value.instant.epoch_second
    if isinstance(value, Year):
        return value.value
    if isinstance(value, YearMonth):
        return value.year
    raise UnsupportedCoercion(variant_name(value), "long")


def day_of_month(value: object, zone: Zone | str | None = None) -> int:
    """Return the day of the month (1-31) of a date-bearing value."""
    return to_date(value, zone).day


def month(value: object, zone: Zone | str | None = None) -> int:
    """Return the month (1-12) of a value. An int is checked and returned.

    Examples:
        >>> month("2017-07-04")
        7
    """
    value = _prepare(value)
    if _is_int(value):
        validate_month(value)
        return value
    if isinstance(value, YearMonth):
        return value.month
    return to_date(value, zone).month


def day_of_week(value: object, zone: Zone | str | None = None) -> int:
    """Return the day of the week (Monday=0, Sunday=6) of a date-bearing value."""
    return to_date(value, zone).day_of_week


__all__ = [
    "to_instant",
    "to_zoned_date_time",
    "to_date_time",
    "to_date",
    "to_year_month",
    "to_year",
    "to_time",
    "to_zone",
    "to_py_datetime",
    "to_int",
    "to_long",
    "day_of_month",
    "month",
    "day_of_week",
]
