"""TimeUnit enumeration for the unit keyword vocabulary.

This module provides the TimeUnit enum representing the fixed set of unit
keywords used by duration/period construction and by between-style
measurement, from nanoseconds up to "forever".
"""

from __future__ import annotations

from enum import Enum

from tempus._internal.constants import (
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)
from tempus.errors import UnitNotRecognized


class TimeUnit(Enum):
    """Calendar and clock units addressed by keyword.

    Each member's value is its keyword. Units up to WEEKS have an exact
    length in nanoseconds; MONTHS and longer are calendar units whose
    length depends on where they are applied, so exact_nanos is None.

    Examples:
        >>> TimeUnit.from_keyword("half-days")
        <TimeUnit.HALF_DAYS: 'half-days'>

        >>> TimeUnit.HOURS.exact_nanos
        3600000000000

        >>> TimeUnit.MONTHS.exact_nanos is None
        True
    """

    NANOS = "nanos"
    MICROS = "micros"
    MILLIS = "millis"
    SECONDS = "seconds"
    MINUTES = "minutes"
    HOURS = "hours"
    HALF_DAYS = "half-days"
    DAYS = "days"
    WEEKS = "weeks"
    MONTHS = "months"
    YEARS = "years"
    DECADES = "decades"
    CENTURIES = "centuries"
    MILLENNIA = "millennia"
    ERAS = "eras"
    FOREVER = "forever"

    @classmethod
    def from_keyword(cls, keyword: str | TimeUnit) -> TimeUnit:
        """Look up a unit by keyword.

        Args:
            keyword: A unit keyword such as "days", or a TimeUnit.

        Returns:
            The matching TimeUnit.

        Raises:
            UnitNotRecognized: If the keyword is not one of the known units.
        """
        if isinstance(keyword, TimeUnit):
            return keyword
        try:
            return cls(keyword)
        except ValueError:
            raise UnitNotRecognized(keyword) from None

    @property
    def exact_nanos(self) -> int | None:
        """Return the fixed length of one unit in nanoseconds, if it has one."""
        return _EXACT_NANOS.get(self)

    @property
    def months(self) -> int | None:
        """Return the length of one calendar unit in months, if it has one."""
        return _CALENDAR_MONTHS.get(self)

    @property
    def is_calendar_based(self) -> bool:
        """Return True for MONTHS and the longer units built from them."""
        return self in _CALENDAR_MONTHS


_EXACT_NANOS: dict[TimeUnit, int] = {
    TimeUnit.NANOS: 1,
    TimeUnit.MICROS: NANOS_PER_MICROSECOND,
    TimeUnit.MILLIS: NANOS_PER_MILLISECOND,
    TimeUnit.SECONDS: NANOS_PER_SECOND,
    TimeUnit.MINUTES: NANOS_PER_MINUTE,
    TimeUnit.HOURS: NANOS_PER_HOUR,
    TimeUnit.HALF_DAYS: 12 * NANOS_PER_HOUR,
    TimeUnit.DAYS: NANOS_PER_DAY,
    TimeUnit.WEEKS: 7 * NANOS_PER_DAY,
}

_CALENDAR_MONTHS: dict[TimeUnit, int] = {
    TimeUnit.MONTHS: 1,
    TimeUnit.YEARS: 12,
    TimeUnit.DECADES: 120,
    TimeUnit.CENTURIES: 1_200,
    TimeUnit.MILLENNIA: 12_000,
}


def unit(keyword: str | TimeUnit) -> TimeUnit:
    """Return the TimeUnit for a keyword (see TimeUnit.from_keyword)."""
    return TimeUnit.from_keyword(keyword)


__all__ = ["TimeUnit", "unit"]
