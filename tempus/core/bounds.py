"""Bounds class representing a half-open interval [start, end).

This module provides the Bounds class: a pair of points of the same
temporal variant with start <= end.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from tempus.errors import TypeMismatch, ValidationError, variant_name

T = TypeVar("T")


class Bounds(Generic[T]):
    """A time span between two points with half-open semantics [start, end).

    - Start is inclusive (contained in the interval)
    - End is exclusive (not contained in the interval)

    So [a,b) and [b,c) meet with no gap or overlap at b. A Bounds whose
    start equals its end is a zero-width interval containing nothing.

    Attributes:
        start: Start of the interval (inclusive).
        end: End of the interval (exclusive).

    Examples:
        >>> from tempus.core.datetime import DateTime
        >>> b = Bounds(DateTime(2017, 1, 1, 9), DateTime(2017, 1, 1, 17))
        >>> DateTime(2017, 1, 1, 12) in b
        True
        >>> DateTime(2017, 1, 1, 17) in b  # End is exclusive
        False
        >>> str(b)
        '[2017-01-01T09:00, 2017-01-01T17:00)'
    """

    __slots__ = ("_start", "_end")

    def __init__(self, start: T, end: T) -> None:
        """Create the interval [start, end).

        Raises:
            TypeMismatch: If start and end are of different variants.
            ValidationError: If end is before start.
        """
        if type(start) is not type(end):
            raise TypeMismatch(variant_name(start), variant_name(end))
        if end < start:  # type: ignore[operator]
            raise ValidationError(
                f"end must not precede start: got start={start}, end={end}"
            )
        self._start: T = start
        self._end: T = end

    @property
    def start(self) -> T:
        return self._start

    @property
    def end(self) -> T:
        return self._end

    @property
    def is_empty(self) -> bool:
        """Return True for a zero-width interval."""
        return self._start == self._end

    def __contains__(self, point: object) -> bool:
        """Check whether start <= point < end."""
        if type(point) is not type(self._start):
            return False
        return self._start <= point < self._end  # type: ignore[operator]

    def __iter__(self):
        """Unpack as (start, end)."""
        yield self._start
        yield self._end

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bounds):
            return NotImplemented
        return self._start == other._start and self._end == other._end

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __hash__(self) -> int:
        return hash(("Bounds", self._start, self._end))

    def __repr__(self) -> str:
        return f"Bounds({self._start!r}, {self._end!r})"

    def __str__(self) -> str:
        return f"[{self._start}, {self._end})"


__all__ = ["Bounds"]
