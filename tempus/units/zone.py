"""Zone representation: fixed UTC offsets and rule-based regions.

A Zone is an identifier resolvable to a UTC offset at a given instant.
Fixed offsets ("Z", "+05:30") always resolve to the same offset; region
ids ("Europe/London") resolve through the IANA rules shipped with the
standard zoneinfo module (backed by the tzdata distribution where the
operating system has no zone database).
"""

from __future__ import annotations

import datetime as _datetime
import logging
import re
from typing import ClassVar
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from tempus._internal.constants import (
    MAX_UTC_OFFSET_SECONDS,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from tempus._internal.calendar import epoch_day_to_ymd
from tempus.errors import ZoneError

logger = logging.getLogger(__name__)

_OFFSET_PATTERN = re.compile(r"^([+-])(\d{1,2})(?::?(\d{2}))?(?::?(\d{2}))?$")

_PY_EPOCH = _datetime.datetime(1970, 1, 1, tzinfo=_datetime.timezone.utc)
# zoneinfo works on stdlib datetimes, which stop at years 1 and 9999; rules
# outside that span are taken from the nearest representable moment.
_PY_MIN_SECONDS = int(
    (_datetime.datetime(1, 1, 2, tzinfo=_datetime.timezone.utc) - _PY_EPOCH).total_seconds()
)
_PY_MAX_SECONDS = int(
    (_datetime.datetime(9999, 12, 30, tzinfo=_datetime.timezone.utc) - _PY_EPOCH).total_seconds()
)


class Zone:
    """A time zone: either a fixed UTC offset or a rule-based region.

    Two zones are equal when their ids are equal, so "+01:00" and
    "Europe/Paris" are different zones even when they agree on an offset.

    Attributes:
        id: The normalized zone id ("Z", "+05:30", "Europe/London").
        is_fixed: True for fixed-offset zones.

    Examples:
        >>> Zone.utc().id
        'Z'

        >>> Zone.of("+05:30").fixed_offset_seconds
        19800

        >>> Zone.of("Europe/London").is_fixed
        False
    """

    __slots__ = ("_id", "_offset_seconds", "_info")

    _utc_instance: ClassVar[Zone | None] = None

    def __init__(
        self,
        zone_id: str,
        offset_seconds: int | None = None,
        info: ZoneInfo | None = None,
    ) -> None:
        """Create a Zone. Prefer Zone.of() / Zone.of_offset() / Zone.utc()."""
        if (offset_seconds is None) == (info is None):
            raise ZoneError("a zone is either a fixed offset or a region, not both")
        self._id: str = zone_id
        self._offset_seconds: int | None = offset_seconds
        self._info: ZoneInfo | None = info

    @classmethod
    def utc(cls) -> Zone:
        """Return the UTC zone (a shared instance).

        Examples:
            >>> Zone.utc() is Zone.utc()
            True
        """
        if cls._utc_instance is None:
            cls._utc_instance = cls("Z", offset_seconds=0)
        return cls._utc_instance

    @classmethod
    def of_offset(cls, offset_seconds: int) -> Zone:
        """Create a fixed-offset zone from a number of seconds east of UTC.

        Raises:
            ZoneError: If the offset is outside -18h to +18h.
        """
        if not isinstance(offset_seconds, int):
            raise ZoneError(
                f"offset_seconds must be an integer, got {type(offset_seconds).__name__}"
            )
        if abs(offset_seconds) > MAX_UTC_OFFSET_SECONDS:
            raise ZoneError(
                f"offset_seconds {offset_seconds} is outside valid range "
                f"[-{MAX_UTC_OFFSET_SECONDS}, {MAX_UTC_OFFSET_SECONDS}]"
            )
        if offset_seconds == 0:
            return cls.utc()
        return cls(_format_offset(offset_seconds), offset_seconds=offset_seconds)

    @classmethod
    def from_hours(cls, hours: int, minutes: int = 0) -> Zone:
        """Create a fixed-offset zone; minutes take their sign from hours.

        Examples:
            >>> Zone.from_hours(-5).id
            '-05:00'
            >>> Zone.from_hours(5, 30).id
            '+05:30'
        """
        if minutes < 0 or minutes > 59:
            raise ZoneError(f"minutes must be 0-59, got {minutes}")
        sign = -1 if hours < 0 else 1
        return cls.of_offset(
            hours * SECONDS_PER_HOUR + sign * minutes * SECONDS_PER_MINUTE
        )

    @classmethod
    def of(cls, zone_id: str) -> Zone:
        """Resolve a zone id.

        Supported forms:
            - "Z", "UTC" (any case): UTC
            - "+HH", "+HH:MM", "+HHMM", "+HH:MM:SS": fixed offsets
            - IANA region ids such as "America/New_York"

        Raises:
            ZoneError: If the id is malformed or unknown.
        """
        if not isinstance(zone_id, str):
            raise ZoneError(f"Expected string zone id, got {type(zone_id).__name__}")

        text = zone_id.strip()
        if text.upper() in ("Z", "UTC", "GMT"):
            return cls.utc()

        match = _OFFSET_PATTERN.match(text)
        if match:
            sign_str, hours_str, minutes_str, seconds_str = match.groups()
            hours = int(hours_str)
            minutes = int(minutes_str) if minutes_str else 0
            seconds = int(seconds_str) if seconds_str else 0
            if minutes > 59 or seconds > 59:
                raise ZoneError(f"Offset out of range: {zone_id!r}")
            total = hours * SECONDS_PER_HOUR + minutes * SECONDS_PER_MINUTE + seconds
            return cls.of_offset(-total if sign_str == "-" else total)

        try:
            info = ZoneInfo(text)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ZoneError(f"Unknown zone id: {zone_id!r}") from exc
        logger.debug("resolved region zone %s", text)
        return cls(text, info=info)

    @property
    def id(self) -> str:
        """Return the normalized zone id."""
        return self._id

    @property
    def is_fixed(self) -> bool:
        """Return True if this zone has a single, rule-free offset."""
        return self._info is None

    @property
    def is_utc(self) -> bool:
        """Return True if this is the UTC zone."""
        return self._offset_seconds == 0

    @property
    def fixed_offset_seconds(self) -> int | None:
        """Return the offset of a fixed zone, or None for a region."""
        return self._offset_seconds

    def offset_at(self, epoch_second: int) -> int:
        """Return the offset in seconds in effect at an instant.

        Args:
            epoch_second: Seconds since 1970-01-01T00:00:00Z.

        Examples:
            >>> london = Zone.of("Europe/London")
            >>> london.offset_at(1_500_000_000)  # July 2017, BST
            3600
        """
        if self._offset_seconds is not None:
            return self._offset_seconds

        clamped = min(max(epoch_second, _PY_MIN_SECONDS), _PY_MAX_SECONDS)
        moment = _PY_EPOCH + _datetime.timedelta(seconds=clamped)
        return _offset_seconds(moment.astimezone(self._info).utcoffset())

    def offset_for_local(self, epoch_day: int, second_of_day: int) -> int:
        """Return the offset to use when placing a local date-time in this zone.

        Where a local time is ambiguous (clocks turned back) the earlier
        offset is used. Where it falls in a gap (clocks turned forward) the
        offset from before the gap is used, which moves the resulting
        instant forward by the length of the gap.

        Args:
            epoch_day: The local date as days since 1970-01-01.
            second_of_day: Seconds since local midnight.
        """
        if self._offset_seconds is not None:
            return self._offset_seconds

        local_seconds = epoch_day * SECONDS_PER_DAY + second_of_day
        if local_seconds < _PY_MIN_SECONDS:
            local_seconds = _PY_MIN_SECONDS
        elif local_seconds > _PY_MAX_SECONDS:
            local_seconds = _PY_MAX_SECONDS
        day, seconds = divmod(local_seconds, SECONDS_PER_DAY)
        year, month, dom = epoch_day_to_ymd(day)
        hour, rest = divmod(seconds, SECONDS_PER_HOUR)
        minute, second = divmod(rest, SECONDS_PER_MINUTE)
        naive = _datetime.datetime(year, month, dom, hour, minute, second, tzinfo=self._info)
        return _offset_seconds(naive.utcoffset())

    def to_tzinfo(self) -> _datetime.tzinfo:
        """Return an equivalent standard-library tzinfo."""
        if self._info is not None:
            return self._info
        if self._offset_seconds == 0:
            return _datetime.timezone.utc
        return _datetime.timezone(_datetime.timedelta(seconds=self._offset_seconds))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Zone):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Zone({self._id!r})"

    def __str__(self) -> str:
        return self._id


def _offset_seconds(delta: _datetime.timedelta | None) -> int:
    if delta is None:
        return 0
    return delta.days * SECONDS_PER_DAY + delta.seconds


def _format_offset(offset_seconds: int) -> str:
    """Format an offset as +HH:MM (or +HH:MM:SS when seconds are present)."""
    sign = "+" if offset_seconds >= 0 else "-"
    hours, rest = divmod(abs(offset_seconds), SECONDS_PER_HOUR)
    minutes, seconds = divmod(rest, SECONDS_PER_MINUTE)
    if seconds:
        return f"{sign}{hours:02d}:{minutes:02d}:{seconds:02d}"
    return f"{sign}{hours:02d}:{minutes:02d}"


__all__ = ["Zone"]
