"""Comparison operations for temporal types.

This module provides explicit comparison functions for temporal types.
These serve as the canonical implementation; the comparison operators on
the classes follow the same rules within a variant.

Comparison Rules:
    - Both operands must be the same variant. Nothing is converted
      implicitly: comparing a Date with an Instant raises TypeMismatch.
    - Instant, Date, DateTime, Year, YearMonth, Time: chronological order
    - ZonedDateTime: by instant, whatever the zones
    - Duration: by signed length
    - Period: by total months if neither has days, by days if neither has
      years or months, otherwise by the number of days each spans from a
      reference date (default 1970-01-01)

Chained forms take any number of arguments and hold only if every
adjacent pair satisfies the relation:

    >>> from tempus.core.year import Year
    >>> before(Year(2015), Year(2017), Year(2016))
    False
"""

from __future__ import annotations

from typing import Callable, TypeVar

from tempus.core.date import Date
from tempus.core.datetime import DateTime
from tempus.core.duration import Duration
from tempus.core.instant import Instant
from tempus.core.period import Period
from tempus.core.time import Time
from tempus.core.year import Year
from tempus.core.year_month import YearMonth
from tempus.core.zoned import ZonedDateTime
from tempus.errors import TypeMismatch, variant_name


T = TypeVar("T")

_ORDERED_TYPES: tuple[type, ...] = (
    Instant,
    Date,
    DateTime,
    ZonedDateTime,
    Year,
    YearMonth,
    Time,
    Duration,
)


def compare(left: T, right: T, *, reference: Date | None = None) -> int:
    """Compare two temporal values, returning -1, 0, or 1.

    Args:
        left: First temporal value.
        right: Second temporal value of the same variant.
        reference: Start date for measuring mixed Periods.

    Raises:
        TypeMismatch: If the values are of different (or unordered) variants.

    Examples:
        >>> compare(Date(2024, 1, 15), Date(2024, 1, 16))
        -1
        >>> compare(Period(months=1), Period(days=30), reference=Date(2017, 2, 1))
        -1
    """
    if type(left) is not type(right):
        raise TypeMismatch(variant_name(left), variant_name(right))

    if isinstance(left, Period):
        return left.compare_to(right, reference)  # type: ignore[arg-type]
    if isinstance(left, _ORDERED_TYPES):
        return (left > right) - (left < right)  # type: ignore[operator]
    raise TypeMismatch(variant_name(left), variant_name(right))


def _chain(
    values: tuple[object, ...],
    name: str,
    holds: Callable[[int], bool],
    reference: Date | None,
) -> bool:
    if not values:
        raise ValueError(f"{name} requires at least one argument")
    return all(
        holds(compare(left, right, reference=reference))
        for left, right in zip(values, values[1:])
    )


def before(*values: object, reference: Date | None = None) -> bool:
    """Return True if each value is strictly before the next.

    Examples:
        >>> before(Date(2017, 1, 1), Date(2017, 1, 2))
        True
        >>> before(Date(2017, 1, 1))
        True
    """
    return _chain(values, "before", lambda c: c < 0, reference)


def before_or_equal(*values: object, reference: Date | None = None) -> bool:
    """Return True if each value is before or equal to the next."""
    return _chain(values, "before_or_equal", lambda c: c <= 0, reference)


def after(*values: object, reference: Date | None = None) -> bool:
    """Return True if each value is strictly after the next."""
    return _chain(values, "after", lambda c: c > 0, reference)


def after_or_equal(*values: object, reference: Date | None = None) -> bool:
    """Return True if each value is after or equal to the next."""
    return _chain(values, "after_or_equal", lambda c: c >= 0, reference)


def min_value(*values: T, reference: Date | None = None) -> T:
    """Return the minimum of the given temporal values.

    All values must be of the same variant. On ties the earliest
    argument wins.

    Raises:
        ValueError: If no values provided.
        TypeMismatch: If values are of different variants.

    Examples:
        >>> min_value(Date(2024, 1, 20), Date(2024, 1, 15), Date(2024, 1, 18))
        Date(2024, 1, 15)
    """
    if not values:
        raise ValueError("min_value requires at least one argument")

    result = values[0]
    for value in values[1:]:
        if compare(value, result, reference=reference) < 0:
            result = value
    return result


def max_value(*values: T, reference: Date | None = None) -> T:
    """Return the maximum of the given temporal values.

    All values must be of the same variant. On ties the earliest
    argument wins.

    Raises:
        ValueError: If no values provided.
        TypeMismatch: If values are of different variants.

    Examples:
        >>> max_value(Date(2024, 1, 20), Date(2024, 1, 15), Date(2024, 1, 18))
        Date(2024, 1, 20)
    """
    if not values:
        raise ValueError("max_value requires at least one argument")

    result = values[0]
    for value in values[1:]:
        if compare(value, result, reference=reference) > 0:
            result = value
    return result


__all__ = [
    "compare",
    "before",
    "before_or_equal",
    "after",
    "after_or_equal",
    "min_value",
    "max_value",
]
