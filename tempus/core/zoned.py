"""ZonedDateTime class: an instant viewed through a zone.

This module provides the ZonedDateTime class, which pairs an Instant with
a Zone. The local (wall-clock) fields are derived from the zone's offset
at that instant.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, overload

from tempus._internal.constants import NANOS_PER_SECOND
from tempus.core.datetime import DateTime
from tempus.core.instant import Instant
from tempus.units.zone import Zone

if TYPE_CHECKING:
    from tempus.core.date import Date
    from tempus.core.duration import Duration
    from tempus.core.period import Period
    from tempus.core.time import Time


class ZonedDateTime:
    """A point on the time line together with the zone it is viewed in.

    Ordering follows the instant. Equality is structural: the same instant
    seen from two different zones is two unequal values that compare
    neither before nor after each other.

    Examples:
        >>> z = ZonedDateTime.of_local(DateTime(2017, 7, 1, 12), Zone.of("Europe/London"))
        >>> z.offset_seconds
        3600
        >>> str(z)
        '2017-07-01T12:00+01:00[Europe/London]'

        >>> str(ZonedDateTime(Instant(0), Zone.utc()))
        '1970-01-01T00:00Z'
    """

    __slots__ = ("_instant", "_zone", "_offset")

    def __init__(self, instant: Instant, zone: Zone) -> None:
        """Create a ZonedDateTime from an Instant and a Zone."""
        self._instant: Instant = instant
        self._zone: Zone = zone
        self._offset: int = zone.offset_at(instant.epoch_second)

    @classmethod
    def of_local(cls, date_time: DateTime, zone: Zone) -> ZonedDateTime:
        """Place a local date-time in a zone.

        Ambiguous local times (clocks turned back) take the earlier offset;
        local times inside a gap (clocks turned forward) are moved forward
        by the length of the gap.

        Examples:
            >>> london = Zone.of("Europe/London")
            >>> gap = DateTime(2017, 3, 26, 1, 30)  # clocks go 01:00 -> 02:00
            >>> str(ZonedDateTime.of_local(gap, london).date_time)
            '2017-03-26T02:30'
        """
        offset = zone.offset_for_local(
            date_time.date.epoch_day, date_time.time.nano_of_day // NANOS_PER_SECOND
        )
        instant = Instant(0, date_time.local_nanos - offset * NANOS_PER_SECOND)
        return cls(instant, zone)

    @property
    def instant(self) -> Instant:
        return self._instant

    @property
    def zone(self) -> Zone:
        return self._zone

    @property
    def offset_seconds(self) -> int:
        """Return the UTC offset in effect at this instant, in seconds."""
        return self._offset

    @property
    def date_time(self) -> DateTime:
        """Return the local (wall-clock) date-time."""
        return DateTime._from_local_nanos(
            self._instant.epoch_nano + self._offset * NANOS_PER_SECOND
        )

    @property
    def date(self) -> Date:
        return self.date_time.date

    @property
    def time(self) -> Time:
        return self.date_time.time

    @property
    def year(self) -> int:
        return self.date_time.year

    @property
    def month(self) -> int:
        return self.date_time.month

    @property
    def day(self) -> int:
        return self.date_time.day

    @property
    def hour(self) -> int:
        return self.date_time.hour

    @property
    def minute(self) -> int:
        return self.date_time.minute

    @property
    def second(self) -> int:
        return self.date_time.second

    @property
    def nanosecond(self) -> int:
        return self._instant.nanosecond

    def with_zone_same_instant(self, zone: Zone) -> ZonedDateTime:
        """Return the same instant viewed from another zone."""
        return ZonedDateTime(self._instant, zone)

    def with_zone_same_local(self, zone: Zone) -> ZonedDateTime:
        """Return the same wall-clock time placed in another zone."""
        return ZonedDateTime.of_local(self.date_time, zone)

    def add_duration(self, duration: Duration) -> ZonedDateTime:
        """Move along the instant time line by an exact Duration."""
        return ZonedDateTime(self._instant.add_duration(duration), self._zone)

    def add_period(self, period: Period) -> ZonedDateTime:
        """Move the local date by a Period and resolve it again in the zone.

        Examples:
            >>> from tempus.core.period import Period
            >>> london = Zone.of("Europe/London")
            >>> z = ZonedDateTime.of_local(DateTime(2017, 3, 25, 12), london)
            >>> z.add_period(Period(days=1)).hour  # still noon across the change
            12
        """
        return ZonedDateTime.of_local(self.date_time.add_period(period), self._zone)

    def to_iso_format(self) -> str:
        """Return local time, offset and (for regions) the bracketed zone id."""
        offset = "Z" if self._offset == 0 else Zone.of_offset(self._offset).id
        text = f"{self.date_time.to_iso_format()}{offset}"
        if not self._zone.is_fixed:
            text += f"[{self._zone.id}]"
        return text

    def __add__(self, other: object) -> ZonedDateTime:
        from tempus.core.duration import Duration
        from tempus.core.period import Period

        if isinstance(other, Duration):
            return self.add_duration(other)
        if isinstance(other, Period):
            return self.add_period(other)
        return NotImplemented

    @overload
    def __sub__(self, other: Duration) -> ZonedDateTime: ...

    @overload
    def __sub__(self, other: Period) -> ZonedDateTime: ...

    @overload
    def __sub__(self, other: ZonedDateTime) -> Duration: ...

    def __sub__(self, other: object) -> ZonedDateTime | Duration:
        """Subtract a quantity, or another ZonedDateTime (instant difference)."""
        from tempus.core.duration import Duration
        from tempus.core.period import Period

        if isinstance(other, ZonedDateTime):
            return self._instant - other._instant
        if isinstance(other, Duration):
            return self.add_duration(-other)
        if isinstance(other, Period):
            return self.add_period(-other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ZonedDateTime):
            return NotImplemented
        return self._instant == other._instant and self._zone == other._zone

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ZonedDateTime):
            return NotImplemented
        return self._instant < other._instant

    def __le__(self, other: object) -> bool:
        if not isinstance(other, ZonedDateTime):
            return NotImplemented
        return self._instant <= other._instant

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, ZonedDateTime):
            return NotImplemented
        return self._instant > other._instant

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, ZonedDateTime):
            return NotImplemented
        return self._instant >= other._instant

    def __hash__(self) -> int:
        return hash(("ZonedDateTime", self._instant, self._zone))

    def __repr__(self) -> str:
        return f"ZonedDateTime({self._instant!r}, {self._zone!r})"

    def __str__(self) -> str:
        return self.to_iso_format()


__all__ = ["ZonedDateTime"]
