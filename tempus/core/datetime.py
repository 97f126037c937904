"""DateTime class combining a date and a time of day without a zone.

This module provides the DateTime class for representing local date-times:
a calendar date plus a wall-clock time, not anchored to any zone. Use
ZonedDateTime for a date-time fixed on the time line.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, overload

from tempus._internal.calendar import epoch_day_to_ymd
from tempus._internal.constants import (
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)
from tempus._internal.validation import validate_year
from tempus.core.date import Date
from tempus.core.time import Time, format_nano_of_day

if TYPE_CHECKING:
    from tempus.core.duration import Duration
    from tempus.core.period import Period
    from tempus.units.era import Era


class DateTime:
    """A date and time of day with nanosecond precision and no zone.

    The internal representation stores days since 1970-01-01 for the date
    component and nanoseconds since midnight for the time component.

    Attributes:
        year: The year component (can be negative for BCE).
        month: The month component (1-12).
        day: The day component (1-31).
        hour: The hour component (0-23).
        minute: The minute component (0-59).
        second: The second component (0-59).
        nanosecond: The nanosecond component (0-999999999).

    Examples:
        >>> dt = DateTime(2024, 1, 15, 14, 30, 45)
        >>> dt.year, dt.hour
        (2024, 14)

        >>> str(DateTime(2017, 1, 1, 10, 15))
        '2017-01-01T10:15'
    """

    __slots__ = ("_days", "_nanos")

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nanosecond: int = 0,
    ) -> None:
        """Create a DateTime from component parts.

        Raises:
            ValidationError: If any component is out of range.
        """
        # Reuse Date and Time validation
        date = Date(year, month, day)
        time = Time(hour, minute, second, nanosecond)

        self._days: int = date.epoch_day
        self._nanos: int = time.nano_of_day

    @classmethod
    def _from_internal(cls, days: int, nanos: int) -> DateTime:
        """Create a DateTime from epoch day + nanos of day.

        This is an internal factory method that bypasses validation.
        """
        instance = object.__new__(cls)
        instance._days = days
        instance._nanos = nanos
        return instance

    @classmethod
    def _from_local_nanos(cls, local_nanos: int) -> DateTime:
        """Create a DateTime from nanoseconds since 1970-01-01T00:00.

        The year is range-checked, since arithmetic can carry a value
        past the supported years.
        """
        days, nanos = divmod(local_nanos, NANOS_PER_DAY)
        validate_year(epoch_day_to_ymd(days)[0])
        return cls._from_internal(days, nanos)

    @classmethod
    def combine(cls, date: Date, time: Time) -> DateTime:
        """Combine a Date and a Time.

        Examples:
            >>> DateTime.combine(Date(2024, 1, 15), Time(14, 30))
            DateTime(2024, 1, 15, 14, 30, 0, 0)
        """
        return cls._from_internal(date.epoch_day, time.nano_of_day)

    @property
    def year(self) -> int:
        return epoch_day_to_ymd(self._days)[0]

    @property
    def month(self) -> int:
        return epoch_day_to_ymd(self._days)[1]

    @property
    def day(self) -> int:
        return epoch_day_to_ymd(self._days)[2]

    @property
    def era(self) -> Era:
        """Return the era (BCE or CE) of this datetime."""
        return self.date.era

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
        return self._nanos % NANOS_PER_SECOND

    @property
    def date(self) -> Date:
        """Return the date component."""
        instance = object.__new__(Date)
        instance._days = self._days
        return instance

    @property
    def time(self) -> Time:
        """Return the time-of-day component."""
        return Time._from_nanos(self._nanos)

    @property
    def local_nanos(self) -> int:
        """Return nanoseconds since 1970-01-01T00:00 on the local time line."""
        return self._days * NANOS_PER_DAY + self._nanos

    def add_duration(self, duration: Duration) -> DateTime:
        """Return a new DateTime moved by an exact Duration.

        Examples:
            >>> from tempus.core.duration import Duration
            >>> DateTime(2024, 1, 15, 23, 0).add_duration(Duration(hours=2))
            DateTime(2024, 1, 16, 1, 0, 0, 0)
        """
        return DateTime._from_local_nanos(self.local_nanos + duration.total_nanoseconds)

    def add_period(self, period: Period) -> DateTime:
        """Return a new DateTime moved by a Period; the time of day is kept."""
        return DateTime._from_internal(self.date.add_period(period).epoch_day, self._nanos)

    def to_iso_format(self) -> str:
        """Return the datetime as an ISO 8601 string.

        Examples:
            >>> DateTime(2024, 1, 15, 14, 30, 45).to_iso_format()
            '2024-01-15T14:30:45'
        """
        return f"{self.date.to_iso_format()}T{format_nano_of_day(self._nanos)}"

    @overload
    def __add__(self, other: Duration) -> DateTime: ...

    @overload
    def __add__(self, other: Period) -> DateTime: ...

    def __add__(self, other: object) -> DateTime:
        """Add a Duration or a Period to this datetime."""
        from tempus.core.duration import Duration
        from tempus.core.period import Period

        if isinstance(other, Duration):
            return self.add_duration(other)
        if isinstance(other, Period):
            return self.add_period(other)
        return NotImplemented

    @overload
    def __sub__(self, other: Duration) -> DateTime: ...

    @overload
    def __sub__(self, other: Period) -> DateTime: ...

    @overload
    def __sub__(self, other: DateTime) -> Duration: ...

    def __sub__(self, other: object) -> DateTime | Duration:
        """Subtract a Duration or Period, or another DateTime.

        Examples:
            >>> (DateTime(2024, 1, 15, 14) - DateTime(2024, 1, 15, 12)).seconds
            7200
        """
        from tempus.core.duration import Duration
        from tempus.core.period import Period

        if isinstance(other, DateTime):
            return Duration(nanoseconds=self.local_nanos - other.local_nanos)
        if isinstance(other, Duration):
            return self.add_duration(-other)
        if isinstance(other, Period):
            return self.add_period(-other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._days == other._days and self._nanos == other._nanos

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return (self._days, self._nanos) < (other._days, other._nanos)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return (self._days, self._nanos) <= (other._days, other._nanos)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return (self._days, self._nanos) > (other._days, other._nanos)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return (self._days, self._nanos) >= (other._days, other._nanos)

    def __hash__(self) -> int:
        return hash(("DateTime", self._days, self._nanos))

    def __repr__(self) -> str:
        year, month, day = epoch_day_to_ymd(self._days)
        return (
            f"DateTime({year}, {month}, {day}, {self.hour}, {self.minute}, "
            f"{self.second}, {self.nanosecond})"
        )

    def __str__(self) -> str:
        return self.to_iso_format()


__all__ = ["DateTime"]
