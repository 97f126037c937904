"""Standalone arithmetic operations for temporal types.

This module provides explicit functions for temporal arithmetic that serve
as the canonical implementation of what each variant may be combined with.
Unlike the class operators (which return NotImplemented and so surface as
a plain TypeError), these functions raise TypeMismatch naming both variants.

Type Combinations:
    - Instant +/- Duration -> Instant
    - DateTime +/- (Duration | Period) -> DateTime
    - ZonedDateTime +/- (Duration | Period) -> ZonedDateTime
    - Date +/- (Period | int days) -> Date
    - YearMonth +/- (Period without days | int months) -> YearMonth
    - Year +/- (Period of years | int years) -> Year
    - Duration +/- Duration -> Duration
    - Period +/- Period -> Period
    - point - point (same variant) -> Duration between them
    - Duration * int -> Duration, Period * int -> Period
    - Duration / int -> Duration, Duration / Duration -> int
"""

from __future__ import annotations

from typing import TypeVar, Union

from tempus.core import POINT_TYPES
from tempus.core.date import Date
from tempus.core.datetime import DateTime
from tempus.core.duration import Duration, _truncate
from tempus.core.instant import Instant
from tempus.core.period import Period
from tempus.core.time import Time
from tempus.core.year import Year
from tempus.core.year_month import YearMonth
from tempus.core.zoned import ZonedDateTime
from tempus.errors import TypeMismatch, UnsupportedCoercion, variant_name
from tempus.units.era import Era
from tempus.units.timeunit import TimeUnit
from tempus.units.zone import Zone

T = TypeVar("T")

Quantity = Union[Duration, Period, int]

# Quantity types each variant accepts in add/subtract; int means a count
# of the variant's canonical unit.
_ADDABLE: dict[type, tuple[type, ...]] = {
    Instant: (Duration,),
    DateTime: (Duration, Period),
    ZonedDateTime: (Duration, Period),
    Date: (Period, int),
    YearMonth: (Period, int),
    Year: (Period, int),
    Duration: (Duration,),
    Period: (Period,),
}


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _check_addable(point: object, quantity: object) -> None:
    allowed = _ADDABLE.get(type(point), ())
    if _is_int(quantity):
        ok = int in allowed
    else:
        ok = isinstance(quantity, tuple(t for t in allowed if t is not int))
    if not ok:
        raise TypeMismatch(variant_name(point), variant_name(quantity))


def add(point: T, quantity: Quantity) -> T:
    """Add a quantity to a point in time (or a quantity to a quantity).

    Raises:
        TypeMismatch: If the quantity does not fit the point's variant.

    Examples:
        >>> add(Date(2024, 1, 15), 10)
        Date(2024, 1, 25)
        >>> add(Duration(seconds=2), Duration(seconds=3)) == Duration(seconds=5)
        True
        >>> add(Year(2017), Period(years=2))
        Year(2019)
    """
    _check_addable(point, quantity)
    return point + quantity  # type: ignore[operator,return-value]


def subtract(left: object, right: object) -> object:
    """Subtract a quantity from a point, or measure between two points.

    With two points of the same variant the result is between(right, left),
    the Duration from right to left.

    Raises:
        TypeMismatch: If the operands do not fit together.

    Examples:
        >>> subtract(Date(2024, 1, 15), 15)
        Date(2023, 12, 31)
        >>> subtract(Date(2024, 1, 2), Date(2024, 1, 1))
        Duration(seconds=86400, nanoseconds=0)
    """
    if isinstance(left, POINT_TYPES) and type(left) is type(right):
        return between(right, left)
    _check_addable(left, right)
    return left - right  # type: ignore[operator]


def canonical_step(value: object) -> Quantity:
    """Return one canonical unit for a value's variant.

    One day for Date, one month for YearMonth, one year for Year and one
    second for the instant-like variants and Duration.

    Raises:
        TypeMismatch: If the variant has no canonical unit.
    """
    if isinstance(value, (Date, YearMonth, Year)):
        return 1
    if isinstance(value, (Instant, DateTime, ZonedDateTime, Duration)):
        return Duration(seconds=1)
    raise TypeMismatch(variant_name(value), "canonical unit")


def increment(value: T) -> T:
    """Step forward by one canonical unit.

    Examples:
        >>> increment(YearMonth(2017, 12))
        YearMonth(2018, 1)
    """
    return add(value, canonical_step(value))


def decrement(value: T) -> T:
    """Step back by one canonical unit.

    Examples:
        >>> decrement(Date(2017, 3, 1))
        Date(2017, 2, 28)
    """
    step = canonical_step(value)
    return add(value, -step)


def multiply(quantity: T, scalar: int) -> T:
    """Scale a Duration or Period by an integer.

    Examples:
        >>> multiply(Duration(seconds=30), 3)
        Duration(seconds=90, nanoseconds=0)
    """
    if not isinstance(quantity, (Duration, Period)) or not _is_int(scalar):
        raise TypeMismatch(variant_name(quantity), variant_name(scalar))
    return quantity * scalar  # type: ignore[return-value]


def divide(duration: Duration, divisor: Union[int, Duration]) -> Union[Duration, int]:
    """Divide a Duration by an integer or by another Duration.

    Dividing by an integer divides the exact nanosecond count and truncates
    toward zero. Dividing by a Duration divides whole seconds by whole
    seconds, truncating toward zero; sub-second parts are discarded.

    Raises:
        TypeMismatch: If the operands are not a Duration and an int/Duration.
        ZeroDivisionError: If the divisor is zero.

    Examples:
        >>> divide(Duration(seconds=10), 4)
        Duration(seconds=2, nanoseconds=500000000)
        >>> divide(Duration(hours=1), Duration(minutes=7))
        8
    """
    if not isinstance(duration, Duration) or not (
        _is_int(divisor) or isinstance(divisor, Duration)
    ):
        raise TypeMismatch(variant_name(duration), variant_name(divisor))
    return duration / divisor


def negate(quantity: T) -> T:
    """Return the negation of a Duration or Period."""
    if not isinstance(quantity, (Duration, Period)):
        raise TypeMismatch(variant_name(quantity), "negation")
    return -quantity  # type: ignore[return-value]


def absolute(duration: Duration) -> Duration:
    """Return the absolute value of a Duration."""
    if not isinstance(duration, Duration):
        raise TypeMismatch(variant_name(duration), "Duration")
    return abs(duration)


def new_duration(amount: int, unit: Union[str, TimeUnit] = "seconds") -> Duration:
    """Create a Duration of `amount` fixed-length units.

    Raises:
        UnitNotRecognized: For an unknown unit keyword.
        UnsupportedCoercion: For calendar units, which have no fixed length.

    Examples:
        >>> new_duration(3, "minutes")
        Duration(seconds=180, nanoseconds=0)
        >>> new_duration(1, "half-days").seconds
        43200
    """
    time_unit = TimeUnit.from_keyword(unit)
    if time_unit.exact_nanos is None:
        raise UnsupportedCoercion(time_unit.value, "Duration")
    return Duration(nanoseconds=amount * time_unit.exact_nanos)


_PERIOD_UNITS: dict[TimeUnit, Period] = {
    TimeUnit.DAYS: Period(days=1),
    TimeUnit.WEEKS: Period(weeks=1),
    TimeUnit.MONTHS: Period(months=1),
    TimeUnit.YEARS: Period(years=1),
    TimeUnit.DECADES: Period(years=10),
    TimeUnit.CENTURIES: Period(years=100),
    TimeUnit.MILLENNIA: Period(years=1_000),
}


def new_period(amount: int, unit: Union[str, TimeUnit] = "days") -> Period:
    """Create a Period of `amount` calendar units.

    Raises:
        UnitNotRecognized: For an unknown unit keyword.
        UnsupportedCoercion: For units a Period cannot express (hours, eras...).

    Examples:
        >>> new_period(2, "weeks")
        Period(years=0, months=0, days=14)
        >>> new_period(1, "decades")
        Period(years=10, months=0, days=0)
    """
    time_unit = TimeUnit.from_keyword(unit)
    one = _PERIOD_UNITS.get(time_unit)
    if one is None:
        raise UnsupportedCoercion(time_unit.value, "Period")
    return one * amount


def _local_line(value: object) -> DateTime:
    """Return the local date-time a value starts at, for calendar measurement."""
    if isinstance(value, DateTime):
        return value
    if isinstance(value, ZonedDateTime):
        return value.date_time
    if isinstance(value, Instant):
        return ZonedDateTime(value, Zone.utc()).date_time
    if isinstance(value, Date):
        return value.at_start_of_day()
    if isinstance(value, YearMonth):
        return value.at_day(1).at_start_of_day()
    if isinstance(value, Year):
        return Date(value.value, 1, 1).at_start_of_day()
    raise UnsupportedCoercion(variant_name(value), "DateTime")


def _months_between(start: DateTime, end: DateTime) -> int:
    """Whole months from start to end, counting only completed months.

    Examples:
        >>> _months_between(DateTime(2017, 1, 31), DateTime(2017, 2, 28))
        0
    """
    end_date = end.date
    # An end earlier in the day than the start has not completed its last day
    if end_date > start.date and end.time < start.time:
        end_date = end_date.add_days(-1)
    elif end_date < start.date and end.time > start.time:
        end_date = end_date.add_days(1)
    months = (end_date.year * 12 + end_date.month) - (start.year * 12 + start.month)
    days = end_date.day - start.day
    return _truncate(months * 32 + days, 32)


def between(start: T, end: T, unit: Union[str, TimeUnit, None] = None) -> Union[Duration, int]:
    """Measure from start to end.

    Without a unit the result is the Duration from start to end (Dates,
    YearMonths and Years are measured between their first instants).
    With a unit keyword the result is the whole number of units between
    them, truncated toward zero.

    Raises:
        TypeMismatch: If start and end are different variants.
        UnitNotRecognized: For an unknown unit keyword.
        UnsupportedCoercion: For "forever", or calendar units on a Time.

    Examples:
        >>> between(Date(2017, 1, 1), Date(2017, 1, 1)) == Duration.zero()
        True
        >>> between(Date(2016, 1, 31), Date(2017, 3, 1), "months")
        13
        >>> between(Instant(0), Instant(7_200), "hours")
        2
    """
    if type(start) is not type(end):
        raise TypeMismatch(variant_name(start), variant_name(end))

    if isinstance(start, Time):
        duration = Duration(nanoseconds=end.nano_of_day - start.nano_of_day)  # type: ignore[attr-defined]
    elif isinstance(start, POINT_TYPES):
        duration = end - start  # type: ignore[operator]
    else:
        raise TypeMismatch(variant_name(start), variant_name(end))

    if unit is None:
        return duration

    time_unit = TimeUnit.from_keyword(unit)
    if time_unit is TimeUnit.FOREVER:
        raise UnsupportedCoercion(variant_name(start), time_unit.value)

    if time_unit in (TimeUnit.DAYS, TimeUnit.WEEKS) and isinstance(start, ZonedDateTime):
        # Day-based units follow the local calendar in a zone
        duration = _local_line(end) - _local_line(start)

    if time_unit.exact_nanos is not None:
        return _truncate(duration.total_nanoseconds, time_unit.exact_nanos)

    if isinstance(start, Time):
        raise UnsupportedCoercion(variant_name(start), time_unit.value)

    local_start, local_end = _local_line(start), _local_line(end)
    if time_unit is TimeUnit.ERAS:
        return Era.of_year(local_end.year).ordinal - Era.of_year(local_start.year).ordinal
    return _truncate(_months_between(local_start, local_end), time_unit.months)  # type: ignore[arg-type]


__all__ = [
    "add",
    "subtract",
    "canonical_step",
    "increment",
    "decrement",
    "multiply",
    "divide",
    "negate",
    "absolute",
    "new_duration",
    "new_period",
    "between",
]
