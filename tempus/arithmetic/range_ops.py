"""Range operation helpers for points in time and Bounds.

This module provides utility functions for working with sequences of
points and collections of intervals:
    - time_range: Lazy sequence of points from a start by a fixed step
    - merge_intervals: Merge overlapping or adjacent Bounds
    - find_gaps: Find gaps between Bounds

These functions complement the Bounds class with operations that work
on collections of intervals.
"""

from __future__ import annotations

import itertools
from typing import Generic, Iterator, Optional, Sequence, TypeVar, Union

from tempus.arithmetic.ops import add, canonical_step
from tempus.core.bounds import Bounds
from tempus.core.duration import Duration
from tempus.core.period import Period
from tempus.errors import TypeMismatch, ValidationError, variant_name

T = TypeVar("T")


class TimeRange(Generic[T]):
    """A lazy sequence of points: start, start + step, ... up to stop.

    The stop point is exclusive. Without a stop the range is unbounded;
    take from it with itertools.islice or zip it against something finite.
    Every call to iter() starts again from the start, so a TimeRange can be
    consumed any number of times.

    Attributes:
        start: The first point produced.
        stop: The exclusive upper limit, or None.
        step: The quantity added between points.

    Examples:
        >>> from tempus.core.date import Date
        >>> list(TimeRange(Date(2017, 1, 30), Date(2017, 2, 2)))
        [Date(2017, 1, 30), Date(2017, 1, 31), Date(2017, 2, 1)]
    """

    __slots__ = ("_start", "_stop", "_step")

    def __init__(
        self,
        start: T,
        stop: Optional[T] = None,
        step: Union[Duration, Period, int, None] = None,
    ) -> None:
        """Create a range.

        Raises:
            TypeMismatch: If stop is a different variant from start, or the
                step cannot be added to start.
            ValidationError: If the step does not move forward.
        """
        if stop is not None and type(stop) is not type(start):
            raise TypeMismatch(variant_name(start), variant_name(stop))
        if step is None:
            step = canonical_step(start)

        if not add(start, step) > start:  # type: ignore[operator]
            raise ValidationError(f"range step must advance, got {step}")

        self._start: T = start
        self._stop: Optional[T] = stop
        self._step = step

    @property
    def start(self) -> T:
        return self._start

    @property
    def stop(self) -> Optional[T]:
        return self._stop

    @property
    def step(self) -> Union[Duration, Period, int]:
        return self._step

    @property
    def is_bounded(self) -> bool:
        """Return True if the range has a stop point."""
        return self._stop is not None

    def __iter__(self) -> Iterator[T]:
        current = self._start
        while self._stop is None or current < self._stop:  # type: ignore[operator]
            yield current
            current = add(current, self._step)

    def __repr__(self) -> str:
        return f"TimeRange({self._start!r}, {self._stop!r}, {self._step!r})"


def time_range(
    start: T,
    stop: Optional[T] = None,
    step: Union[Duration, Period, int, None] = None,
) -> TimeRange[T]:
    """Return the points from start (inclusive) to stop (exclusive).

    Args:
        start: The first point.
        stop: The exclusive end, or None for an unbounded range.
        step: The quantity between points; defaults to one canonical unit
            (a second, a day, a month or a year). An int counts canonical
            units.

    Examples:
        >>> from tempus.core.datetime import DateTime
        >>> len(list(time_range(
        ...     DateTime(2017, 1, 1, 12), DateTime(2017, 1, 1, 12, 0, 20),
        ...     Duration(seconds=10))))
        2
    """
    return TimeRange(start, stop, step)


def take(values: TimeRange[T], count: int) -> list[T]:
    """Return the first `count` points of a range, bounded or not."""
    return list(itertools.islice(values, count))


def merge_intervals(intervals: Sequence[Bounds[T]]) -> list[Bounds[T]]:
    """Merge overlapping or adjacent intervals into a minimal set.

    Takes a sequence of Bounds and returns a sorted list with
    overlapping and adjacent intervals merged together.

    Zero-width Bounds are filtered out.

    Args:
        intervals: A sequence of Bounds of one variant.

    Returns:
        A sorted list of non-overlapping Bounds.

    Raises:
        TypeMismatch: If the Bounds hold different variants.

    Examples:
        >>> from tempus.core.date import Date
        >>> b1 = Bounds(Date(2024, 1, 1), Date(2024, 1, 15))
        >>> b2 = Bounds(Date(2024, 1, 10), Date(2024, 1, 20))
        >>> b3 = Bounds(Date(2024, 2, 1), Date(2024, 2, 10))
        >>> merge_intervals([b1, b2, b3])
        [Bounds(Date(2024, 1, 1), Date(2024, 1, 20)), Bounds(Date(2024, 2, 1), Date(2024, 2, 10))]
    """
    non_empty = [b for b in intervals if not b.is_empty]

    if not non_empty:
        return []

    kind = type(non_empty[0].start)
    for b in non_empty[1:]:
        if type(b.start) is not kind:
            raise TypeMismatch(kind.__name__, variant_name(b.start))

    sorted_bounds = sorted(non_empty, key=lambda b: b.start)  # type: ignore[arg-type,return-value]

    result: list[Bounds[T]] = []
    current = sorted_bounds[0]

    for b in sorted_bounds[1:]:
        if b.start <= current.end:  # type: ignore[operator]
            # Overlapping or touching: extend current
            if b.end > current.end:  # type: ignore[operator]
                current = Bounds(current.start, b.end)
        else:
            result.append(current)
            current = b

    result.append(current)
    return result


def find_gaps(intervals: Sequence[Bounds[T]]) -> list[Bounds[T]]:
    """Find gaps between intervals.

    Returns a list of Bounds representing the gaps between the input
    intervals. Input intervals are first merged, then gaps between the
    merged results are returned.

    Examples:
        >>> from tempus.core.date import Date
        >>> b1 = Bounds(Date(2024, 1, 1), Date(2024, 1, 10))
        >>> b2 = Bounds(Date(2024, 1, 20), Date(2024, 1, 30))
        >>> find_gaps([b1, b2])
        [Bounds(Date(2024, 1, 10), Date(2024, 1, 20))]
    """
    merged = merge_intervals(intervals)
    return [
        Bounds(current.end, following.start)
        for current, following in zip(merged, merged[1:])
    ]


__all__ = [
    "TimeRange",
    "time_range",
    "take",
    "merge_intervals",
    "find_gaps",
]
