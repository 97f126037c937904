"""Time class representing a time of day.

This module provides the Time class for representing time-of-day values
with nanosecond precision. A Time names no point on the time line on its
own; combine it with a Date to get a DateTime.
"""

from __future__ import annotations

from tempus._internal.constants import (
    NANOS_PER_HOUR,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)
from tempus._internal.validation import validate_field


class Time:
    """A time of day with nanosecond precision.

    Time represents the time portion of a day, from midnight (00:00)
    to just before the next midnight (23:59:59.999999999). It does not
    include any date or zone information.

    The internal representation stores the total nanoseconds since
    midnight in a single `_nanos` slot.

    Examples:
        >>> t = Time(14, 30, 45)
        >>> t.hour, t.minute, t.second
        (14, 30, 45)

        >>> str(Time(10, 15))
        '10:15'
        >>> str(Time(10, 15, 30, 500_000_000))
        '10:15:30.500'
    """

    __slots__ = ("_nanos",)

    def __init__(
        self,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nanosecond: int = 0,
    ) -> None:
        """Create a Time from component parts.

        Raises:
            ValidationError: If any component is out of range.
        """
        validate_field("hour", hour, 0, 23)
        validate_field("minute", minute, 0, 59)
        validate_field("second", second, 0, 59)
        validate_field("nanosecond", nanosecond, 0, NANOS_PER_SECOND - 1)
        self._nanos: int = (
            hour * NANOS_PER_HOUR
            + minute * NANOS_PER_MINUTE
            + second * NANOS_PER_SECOND
            + nanosecond
        )

    @classmethod
    def _from_nanos(cls, nanos: int) -> Time:
        """Create a Time from nanoseconds since midnight.

        This is an internal factory method that bypasses validation
        for use when the value is known to be in [0, NANOS_PER_DAY).
        """
        instance = object.__new__(cls)
        instance._nanos = nanos
        return instance

    @classmethod
    def midnight(cls) -> Time:
        """Return 00:00."""
        return cls._from_nanos(0)

    @classmethod
    def noon(cls) -> Time:
        """Return 12:00."""
        return cls._from_nanos(12 * NANOS_PER_HOUR)

    @property
    def hour(self) -> int:
        return self._nanos // NANOS_PER_HOUR

    @property
    def minute(self) -> int:
        return (self._nanos % NANOS_PER_HOUR) // NANOS_PER_MINUTE

    @property
    def second(self) -> int:
        return (self._nanos % NANOS_PER_MINUTE) // NANOS_PER_SECOND

    @property
    def nanosecond(self) -> int:
        """Return the nanoseconds within the second (0-999999999)."""
        return self._nanos % NANOS_PER_SECOND

    @property
    def nano_of_day(self) -> int:
        """Return the total nanoseconds since midnight."""
        return self._nanos

    def to_iso_format(self) -> str:
        """Return the time as an ISO 8601 string.

        Seconds are omitted when they and the fraction are zero; the
        fraction is written in groups of three digits.

        Examples:
            >>> Time(14, 30).to_iso_format()
            '14:30'
            >>> Time(14, 30, 45, 123_456).to_iso_format()
            '14:30:45.000123456'
        """
        return format_nano_of_day(self._nanos)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._nanos == other._nanos

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._nanos < other._nanos

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._nanos <= other._nanos

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._nanos > other._nanos

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._nanos >= other._nanos

    def __hash__(self) -> int:
        return hash(self._nanos)

    def __repr__(self) -> str:
        return f"Time({self.hour}, {self.minute}, {self.second}, {self.nanosecond})"

    def __str__(self) -> str:
        return self.to_iso_format()

    def __bool__(self) -> bool:
        """Times are always truthy (even midnight)."""
        return True


def format_nano_of_day(nanos: int, *, always_seconds: bool = False) -> str:
    """Format nanoseconds since midnight as HH:MM[:SS[.fff]]."""
    hour, rest = divmod(nanos, NANOS_PER_HOUR)
    minute, rest = divmod(rest, NANOS_PER_MINUTE)
    second, fraction = divmod(rest, NANOS_PER_SECOND)

    text = f"{hour:02d}:{minute:02d}"
    if second == 0 and fraction == 0 and not always_seconds:
        return text
    text += f":{second:02d}"
    if fraction == 0:
        return text
    if fraction % 1_000_000 == 0:
        return f"{text}.{fraction // 1_000_000:03d}"
    if fraction % 1_000 == 0:
        return f"{text}.{fraction // 1_000:06d}"
    return f"{text}.{fraction:09d}"


__all__ = ["Time", "format_nano_of_day"]
