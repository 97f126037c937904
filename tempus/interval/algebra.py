"""Interval algebra: partition, intersection, complement and coincidence.

All functions accept anything the interval model can project to Bounds
(Bounds, points, Dates, YearMonths, Years, text, Suppliers).

Complement Semantics:
    The complement of a collection of intervals is every stretch of the
    time line none of them covers. The collection is sorted and merged
    first, so overlapping or unsorted input is accepted. The result runs
    from the earliest representable value of the variant to just past the
    latest, or across the window passed as ``within=``.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence, Union

from tempus.arithmetic.comparisons import before, before_or_equal, max_value, min_value
from tempus.arithmetic.ops import increment
from tempus.arithmetic.range_ops import merge_intervals
from tempus.coerce import to_date, to_instant, to_year, to_year_month
from tempus.core.bounds import Bounds
from tempus.core.date import Date
from tempus.core.datetime import DateTime
from tempus.core.duration import Duration
from tempus.core.instant import Instant
from tempus.core.year import Year
from tempus.core.year_month import YearMonth
from tempus.core.zoned import ZonedDateTime
from tempus.errors import TypeMismatch, ValidationError, variant_name
from tempus.interval.model import (
    _resolve,
    _upper_edge,
    bounds,
    end,
    max_of_type,
    min_of_type,
    start,
)

logger = logging.getLogger(__name__)

CalendarUnit = Union[type[Date], type[YearMonth], type[Year]]

_CALENDAR_UNITS = {
    Date: to_date,
    YearMonth: to_year_month,
    Year: to_year,
}


def _align(local: DateTime, like: object) -> object:
    """Express a local start of unit in the variant of an endpoint."""
    if isinstance(like, Instant):
        return to_instant(local)
    if isinstance(like, ZonedDateTime):
        return ZonedDateTime.of_local(local, like.zone)
    return local


def _divide_by_duration(step: Duration, value: object) -> list[Bounds]:
    if step <= Duration.zero():
        raise ValidationError(f"division length must be positive, got {step}")
    lower, upper = start(value), end(value)
    pieces: list[Bounds] = []
    current = lower
    while current < upper:  # type: ignore[operator]
        if upper - current <= step:  # type: ignore[operator]
            following = upper
        else:
            following = current + step  # type: ignore[operator]
        pieces.append(Bounds(current, following))
        current = following
    return pieces


def divide_by(unit: Union[CalendarUnit, Duration], value: object) -> list:
    """Partition an interval into consecutive units.

    With a calendar unit (the class Date, YearMonth or Year) the result
    holds every unit value from the one containing start(value), for as
    long as the unit's start lies before end(value). Units that only
    partly overlap the interval are included.

    With a Duration the result holds Bounds of that length covering the
    interval, the last one clipped to end(value).

    Instant endpoints are aligned to unit starts in UTC; ZonedDateTime
    endpoints in their own zone.

    Raises:
        TypeMismatch: If unit is neither a calendar unit nor a Duration.
        ValidationError: If a Duration unit is not positive.

    Examples:
        >>> len(divide_by(Date, Year(2017)))
        365
        >>> len(divide_by(Date, Year(2016)))
        366
        >>> divide_by(YearMonth, Year(2017))[-1]
        YearMonth(2017, 12)
    """
    if isinstance(unit, Duration):
        return _divide_by_duration(unit, value)

    convert = _CALENDAR_UNITS.get(unit)  # type: ignore[call-overload]
    if convert is None:
        raise TypeMismatch(getattr(unit, "__name__", variant_name(unit)), "calendar unit")

    lower, upper = start(value), end(value)
    current = convert(lower)
    last = max_of_type(unit)
    units: list = []
    while before(_align(start(current), upper), upper):  # type: ignore[arg-type]
        units.append(current)
        if current == last:
            break
        current = increment(current)
    logger.debug("divided %s into %d %s units", value, len(units), unit.__name__)
    return units


def concur(context: object, candidate: object, *more: object) -> Optional[Bounds]:
    """Return the intersection of intervals, or None if they do not overlap.

    Examples:
        >>> day = Date(2017, 1, 1)
        >>> evening = Bounds(DateTime(2017, 1, 1, 16), DateTime(2017, 1, 2))
        >>> concur(evening, day)
        Bounds(DateTime(2017, 1, 1, 16, 0, 0, 0), DateTime(2017, 1, 2, 0, 0, 0, 0))
        >>> concur(Date(2017, 1, 1), Date(2017, 1, 2)) is None
        True
    """
    spans = [bounds(v) for v in (context, candidate, *more)]
    lower = max_value(*(b.start for b in spans))
    upper = min_value(*(b.end for b in spans))
    if not before(lower, upper):
        return None
    return Bounds(lower, upper)


def complement(
    intervals: Iterable[object], within: object = None
) -> list[Bounds]:
    """Return the stretches of the time line not covered by the intervals.

    The gaps run from the earliest value of the variant (or the start of
    `within`) to the first interval, between the intervals, and from the
    last interval to just past the latest value (or the end of `within`),
    so the last representable value is covered too. Zero-width gaps are
    left out. An empty input gives an empty list.

    Examples:
        >>> day = Bounds(DateTime(2017, 1, 1, 7), DateTime(2017, 1, 1, 22))
        >>> gaps = complement([day], within=Date(2017, 1, 1))
        >>> [str(g) for g in gaps]
        ['[2017-01-01T00:00, 2017-01-01T07:00)', '[2017-01-01T22:00, 2017-01-02T00:00)']
    """
    merged = merge_intervals([bounds(v) for v in intervals])
    if not merged:
        return []

    if within is None:
        window = Bounds(min_of_type(merged[0].start), _upper_edge(merged[0].start))
    else:
        window = bounds(within)

    edges = [window.start]
    for b in merged:
        edges.extend((b.start, b.end))
    edges.append(window.end)

    gaps: list[Bounds] = []
    for lower, upper in zip(edges[::2], edges[1::2]):
        lower = max_value(lower, window.start)
        upper = min_value(upper, window.end)
        if before(lower, upper):
            gaps.append(Bounds(lower, upper))
    return gaps


def _covers(outer: Bounds, inner: object) -> bool:
    inner = _resolve(inner)
    if isinstance(inner, (Instant, DateTime, ZonedDateTime)):
        return before_or_equal(outer.start, inner) and before(inner, outer.end)
    span = bounds(inner)
    return before_or_equal(outer.start, span.start) and before_or_equal(span.end, outer.end)


def is_coincident(value: object, container: Union[object, Sequence[object]]) -> bool:
    """Return True if a point or interval lies within an interval.

    A point is coincident when start <= point < end. An interval-like
    value is coincident when its bounds lie inside the container's. The
    container may also be a list of intervals, any of which may hold
    the value.

    Examples:
        >>> day = Date(2017, 1, 1)
        >>> is_coincident(DateTime(2017, 1, 1, 12), day)
        True
        >>> is_coincident(DateTime(2017, 1, 2), day)
        False
        >>> is_coincident(Bounds(DateTime(2017, 1, 1, 9), DateTime(2017, 1, 1, 17)), day)
        True
    """
    if isinstance(container, (list, tuple)):
        return any(_covers(bounds(c), value) for c in container)
    return _covers(bounds(container), value)


__all__ = [
    "divide_by",
    "concur",
    "complement",
    "is_coincident",
]
