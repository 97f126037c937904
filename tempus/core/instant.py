"""Instant class representing a point on the UTC time line.

This module provides the Instant class: a count of seconds and
nanoseconds since 1970-01-01T00:00:00Z.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, overload

from tempus._internal.calendar import epoch_day_to_ymd, format_year
from tempus._internal.constants import (
    NANOS_PER_MILLISECOND,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
)
from tempus._internal.validation import validate_year
from tempus.core.time import format_nano_of_day

if TYPE_CHECKING:
    from tempus.core.duration import Duration


class Instant:
    """An instantaneous point on the time line, independent of any zone.

    Stored as seconds since the epoch plus a nanosecond remainder in
    [0, 1e9), so instants before 1970 have a negative epoch_second and a
    non-negative nanosecond.

    Attributes:
        epoch_second: Seconds since 1970-01-01T00:00:00Z.
        nanosecond: Nanoseconds within the second (0-999999999).

    Examples:
        >>> Instant(0)
        Instant(epoch_second=0, nanosecond=0)

        >>> str(Instant(1_483_228_800))
        '2017-01-01T00:00:00Z'

        >>> Instant(-1, 500_000_000).epoch_milli
        -500
    """

    __slots__ = ("_seconds", "_nanos")

    def __init__(self, epoch_second: int = 0, nanosecond: int = 0) -> None:
        """Create an Instant; nanosecond may be any int and is normalized.

        Raises:
            ValidationError: If the instant falls outside years -9999..9999.
        """
        seconds, nanos = divmod(
            epoch_second * NANOS_PER_SECOND + nanosecond, NANOS_PER_SECOND
        )
        validate_year(epoch_day_to_ymd(seconds // SECONDS_PER_DAY)[0])
        self._seconds: int = seconds
        self._nanos: int = nanos

    @classmethod
    def _from_internal(cls, seconds: int, nanos: int) -> Instant:
        """Create an Instant from normalized parts, bypassing validation."""
        instance = object.__new__(cls)
        instance._seconds = seconds
        instance._nanos = nanos
        return instance

    @classmethod
    def epoch(cls) -> Instant:
        """Return 1970-01-01T00:00:00Z."""
        return cls._from_internal(0, 0)

    @classmethod
    def of_epoch_second(cls, epoch_second: int, nanosecond: int = 0) -> Instant:
        """Create an Instant from seconds since the epoch."""
        return cls(epoch_second, nanosecond)

    @classmethod
    def of_epoch_milli(cls, epoch_milli: int) -> Instant:
        """Create an Instant from milliseconds since the epoch.

        Examples:
            >>> Instant.of_epoch_milli(1500)
            Instant(epoch_second=1, nanosecond=500000000)
        """
        return cls(0, epoch_milli * NANOS_PER_MILLISECOND)

    @classmethod
    def of_epoch_nano(cls, epoch_nano: int) -> Instant:
        """Create an Instant from nanoseconds since the epoch."""
        return cls(0, epoch_nano)

    @property
    def epoch_second(self) -> int:
        return self._seconds

    @property
    def nanosecond(self) -> int:
        return self._nanos

    @property
    def epoch_milli(self) -> int:
        """Return milliseconds since the epoch (floored)."""
        return self.epoch_nano // NANOS_PER_MILLISECOND

    @property
    def epoch_nano(self) -> int:
        """Return nanoseconds since the epoch (exact)."""
        return self._seconds * NANOS_PER_SECOND + self._nanos

    def truncated_to_seconds(self) -> Instant:
        """Return this instant with the nanoseconds dropped."""
        return Instant._from_internal(self._seconds, 0)

    def add_duration(self, duration: Duration) -> Instant:
        """Return a new Instant moved by a Duration."""
        return Instant(0, self.epoch_nano + duration.total_nanoseconds)

    def to_iso_format(self) -> str:
        """Return the UTC representation, always with seconds.

        Examples:
            >>> Instant(0, 1_000_000).to_iso_format()
            '1970-01-01T00:00:00.001Z'
        """
        days, second_of_day = divmod(self._seconds, SECONDS_PER_DAY)
        year, month, day = epoch_day_to_ymd(days)
        time_text = format_nano_of_day(
            second_of_day * NANOS_PER_SECOND + self._nanos, always_seconds=True
        )
        return f"{format_year(year)}-{month:02d}-{day:02d}T{time_text}Z"

    def __add__(self, other: object) -> Instant:
        from tempus.core.duration import Duration

        if not isinstance(other, Duration):
            return NotImplemented
        return self.add_duration(other)

    @overload
    def __sub__(self, other: Duration) -> Instant: ...

    @overload
    def __sub__(self, other: Instant) -> Duration: ...

    def __sub__(self, other: object) -> Instant | Duration:
        """Subtract a Duration, or another Instant to get the Duration between.

        Examples:
            >>> Instant(10) - Instant(4)
            Duration(seconds=6, nanoseconds=0)
        """
        from tempus.core.duration import Duration

        if isinstance(other, Instant):
            return Duration(nanoseconds=self.epoch_nano - other.epoch_nano)
        if isinstance(other, Duration):
            return self.add_duration(-other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._seconds == other._seconds and self._nanos == other._nanos

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return (self._seconds, self._nanos) < (other._seconds, other._nanos)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return (self._seconds, self._nanos) <= (other._seconds, other._nanos)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return (self._seconds, self._nanos) > (other._seconds, other._nanos)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return (self._seconds, self._nanos) >= (other._seconds, other._nanos)

    def __hash__(self) -> int:
        return hash(("Instant", self._seconds, self._nanos))

    def __repr__(self) -> str:
        return f"Instant(epoch_second={self._seconds}, nanosecond={self._nanos})"

    def __str__(self) -> str:
        return self.to_iso_format()


__all__ = ["Instant"]
