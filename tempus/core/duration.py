"""Duration class representing an exact span of time.

This module provides the Duration class for representing time spans
with nanosecond precision, stored as signed seconds plus a non-negative
nanosecond remainder.
"""

from __future__ import annotations

from tempus._internal.constants import (
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)


class Duration:
    """A span of time with nanosecond precision.

    Duration represents a length of time, which can be positive, negative,
    or zero. It stores time as whole seconds and nanoseconds within the
    second.

    The internal representation is normalized such that:
    - `_nanos` is always in the range [0, 1_000_000_000)
    - `_seconds` carries the sign for negative durations

    So a duration of -0.5 seconds is stored as seconds=-1, nanoseconds=500000000.

    Attributes:
        seconds: Whole seconds (floor of the total, can be negative).
        nanoseconds: The nanoseconds within the second [0, 1e9).

    Examples:
        >>> Duration(seconds=2) + Duration(seconds=3) == Duration(seconds=5)
        True

        >>> Duration(seconds=90) + Duration(seconds=30) == Duration(minutes=2)
        True

        >>> Duration(milliseconds=-500)
        Duration(seconds=-1, nanoseconds=500000000)
    """

    __slots__ = ("_seconds", "_nanos")

    def __init__(
        self,
        days: int = 0,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        milliseconds: int = 0,
        microseconds: int = 0,
        nanoseconds: int = 0,
        weeks: int = 0,
    ) -> None:
        """Create a Duration from component parts.

        All parameters can be positive, negative, or zero. The resulting
        duration is normalized to canonical form.

        Examples:
            >>> Duration(hours=1, minutes=30)
            Duration(seconds=5400, nanoseconds=0)

            >>> Duration(milliseconds=1500)
            Duration(seconds=1, nanoseconds=500000000)
        """
        total_seconds = (
            (weeks * 7 + days) * SECONDS_PER_DAY
            + hours * SECONDS_PER_HOUR
            + minutes * SECONDS_PER_MINUTE
            + seconds
        )
        total_nanos = (
            total_seconds * NANOS_PER_SECOND
            + milliseconds * NANOS_PER_MILLISECOND
            + microseconds * NANOS_PER_MICROSECOND
            + nanoseconds
        )
        self._seconds, self._nanos = divmod(total_nanos, NANOS_PER_SECOND)

    @classmethod
    def _from_nanos(cls, total_nanos: int) -> Duration:
        """Create a Duration from a total nanosecond count (internal use)."""
        result = object.__new__(cls)
        result._seconds, result._nanos = divmod(total_nanos, NANOS_PER_SECOND)
        return result

    @classmethod
    def zero(cls) -> Duration:
        """Create a zero-length duration.

        Examples:
            >>> Duration.zero()
            Duration(seconds=0, nanoseconds=0)
        """
        return cls()

    @classmethod
    def from_days(cls, days: int) -> Duration:
        """Create a Duration of exactly `days` 24-hour days."""
        return cls(days=days)

    @classmethod
    def from_hours(cls, hours: int) -> Duration:
        """Create a Duration from a number of hours.

        Examples:
            >>> Duration.from_hours(25).seconds
            90000
        """
        return cls(hours=hours)

    @classmethod
    def from_minutes(cls, minutes: int) -> Duration:
        """Create a Duration from a number of minutes."""
        return cls(minutes=minutes)

    @classmethod
    def from_seconds(cls, seconds: int, nanoseconds: int = 0) -> Duration:
        """Create a Duration from seconds and an optional nanosecond adjustment.

        Examples:
            >>> Duration.from_seconds(3, -1)
            Duration(seconds=2, nanoseconds=999999999)
        """
        return cls(seconds=seconds, nanoseconds=nanoseconds)

    @classmethod
    def from_milliseconds(cls, milliseconds: int) -> Duration:
        """Create a Duration from a number of milliseconds."""
        return cls(milliseconds=milliseconds)

    @classmethod
    def from_microseconds(cls, microseconds: int) -> Duration:
        """Create a Duration from a number of microseconds."""
        return cls(microseconds=microseconds)

    @classmethod
    def from_nanoseconds(cls, nanoseconds: int) -> Duration:
        """Create a Duration from a number of nanoseconds.

        Examples:
            >>> Duration.from_nanoseconds(1_500_000_000)
            Duration(seconds=1, nanoseconds=500000000)
        """
        return cls._from_nanos(nanoseconds)

    @property
    def seconds(self) -> int:
        """Return the whole seconds of this duration.

        For negative durations this is the floor, so the nanoseconds
        component stays non-negative.
        """
        return self._seconds

    @property
    def nanoseconds(self) -> int:
        """Return the nanoseconds within the second [0, 1e9)."""
        return self._nanos

    @property
    def total_nanoseconds(self) -> int:
        """Return the total duration in nanoseconds (exact).

        Examples:
            >>> Duration(seconds=1, nanoseconds=500).total_nanoseconds
            1000000500
        """
        return self._seconds * NANOS_PER_SECOND + self._nanos

    @property
    def total_seconds(self) -> float:
        """Return the total duration as seconds (approximate).

        For exact calculations, use total_nanoseconds.
        """
        return self._seconds + self._nanos / NANOS_PER_SECOND

    @property
    def is_negative(self) -> bool:
        """Return True if this is a negative duration."""
        return self._seconds < 0

    @property
    def is_zero(self) -> bool:
        """Return True if this is a zero-length duration."""
        return self._seconds == 0 and self._nanos == 0

    def to_days(self) -> int:
        """Return the number of whole days, truncated toward zero."""
        return _truncate(self.total_nanoseconds, SECONDS_PER_DAY * NANOS_PER_SECOND)

    def to_hours(self) -> int:
        """Return the number of whole hours, truncated toward zero."""
        return _truncate(self.total_nanoseconds, SECONDS_PER_HOUR * NANOS_PER_SECOND)

    def to_minutes(self) -> int:
        """Return the number of whole minutes, truncated toward zero."""
        return _truncate(self.total_nanoseconds, SECONDS_PER_MINUTE * NANOS_PER_SECOND)

    def __add__(self, other: object) -> Duration:
        """Add two durations.

        Examples:
            >>> Duration(seconds=30) + Duration(seconds=45)
            Duration(seconds=75, nanoseconds=0)
        """
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration._from_nanos(self.total_nanoseconds + other.total_nanoseconds)

    def __radd__(self, other: object) -> Duration:
        """Support sum() by handling 0 + Duration."""
        if other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: object) -> Duration:
        """Subtract one duration from another."""
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration._from_nanos(self.total_nanoseconds - other.total_nanoseconds)

    def __mul__(self, other: object) -> Duration:
        """Multiply a duration by an integer.

        Examples:
            >>> Duration(seconds=30) * 3
            Duration(seconds=90, nanoseconds=0)
        """
        if not isinstance(other, int) or isinstance(other, bool):
            return NotImplemented
        return Duration._from_nanos(self.total_nanoseconds * other)

    def __rmul__(self, other: object) -> Duration:
        """Support integer * Duration."""
        return self.__mul__(other)

    def __truediv__(self, other: object) -> Duration | int:
        """Divide a duration by an integer or by another duration.

        Dividing by an integer divides the total nanoseconds exactly and
        truncates toward zero. Dividing by a duration gives how many times
        the divisor's whole seconds go into this duration's whole seconds,
        again truncated toward zero; sub-second parts are ignored.

        Raises:
            ZeroDivisionError: If the divisor is zero (or under one second).

        Examples:
            >>> Duration(seconds=100) / 3
            Duration(seconds=33, nanoseconds=333333333)
            >>> Duration(seconds=-7) / 2
            Duration(seconds=-4, nanoseconds=500000000)
            >>> Duration(minutes=1) / Duration(seconds=7)
            8
        """
        if isinstance(other, Duration):
            if other._seconds == 0:
                raise ZeroDivisionError("duration division by a divisor under one second")
            return _truncate(self._seconds, other._seconds)
        if not isinstance(other, int) or isinstance(other, bool):
            return NotImplemented
        if other == 0:
            raise ZeroDivisionError("duration division by zero")
        return Duration._from_nanos(_truncate(self.total_nanoseconds, other))

    def __floordiv__(self, other: object) -> Duration:
        """Divide a duration by an integer (floor division)."""
        if not isinstance(other, int) or isinstance(other, bool):
            return NotImplemented
        if other == 0:
            raise ZeroDivisionError("integer division or modulo by zero")
        return Duration._from_nanos(self.total_nanoseconds // other)

    def __neg__(self) -> Duration:
        """Return the negation of this duration.

        Examples:
            >>> -Duration(seconds=30)
            Duration(seconds=-30, nanoseconds=0)
        """
        return Duration._from_nanos(-self.total_nanoseconds)

    def __pos__(self) -> Duration:
        return self

    def __abs__(self) -> Duration:
        """Return the absolute value of this duration."""
        if self.is_negative:
            return -self
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._seconds == other._seconds and self._nanos == other._nanos

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        """Check if this duration is shorter than another.

        Examples:
            >>> Duration(seconds=30) < Duration(seconds=60)
            True
        """
        if not isinstance(other, Duration):
            return NotImplemented
        return (self._seconds, self._nanos) < (other._seconds, other._nanos)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return (self._seconds, self._nanos) <= (other._seconds, other._nanos)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return (self._seconds, self._nanos) > (other._seconds, other._nanos)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return (self._seconds, self._nanos) >= (other._seconds, other._nanos)

    def __hash__(self) -> int:
        return hash((self._seconds, self._nanos))

    def __repr__(self) -> str:
        return f"Duration(seconds={self._seconds}, nanoseconds={self._nanos})"

    def __str__(self) -> str:
        """Return an ISO 8601 representation such as "PT1H30M" or "-PT0.5S".

        Examples:
            >>> str(Duration(hours=8, minutes=6, milliseconds=12345))
            'PT8H6M12.345S'
            >>> str(Duration.zero())
            'PT0S'
        """
        if self.is_zero:
            return "PT0S"
        total = abs(self.total_nanoseconds)
        sign = "-" if self.is_negative else ""
        whole, nanos = divmod(total, NANOS_PER_SECOND)
        hours, rest = divmod(whole, SECONDS_PER_HOUR)
        minutes, secs = divmod(rest, SECONDS_PER_MINUTE)

        parts = [f"{sign}PT"]
        if hours:
            parts.append(f"{hours}H")
        if minutes:
            parts.append(f"{minutes}M")
        if secs or nanos:
            parts.append(str(secs))
            if nanos:
                parts.append(f".{nanos:09d}".rstrip("0"))
            parts.append("S")
        return "".join(parts)

    def __bool__(self) -> bool:
        """Return True if this is a non-zero duration."""
        return not self.is_zero


def _truncate(dividend: int, divisor: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(dividend) // abs(divisor)
    return -quotient if (dividend < 0) != (divisor < 0) else quotient


__all__ = ["Duration"]
