"""Date class representing a calendar date.

This module provides the Date class for representing calendar dates
in the proleptic Gregorian calendar with full support for BCE dates.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, overload

from tempus._internal.calendar import (
    days_before_month,
    days_in_month,
    epoch_day_to_day_of_week,
    epoch_day_to_ymd,
    format_year,
    is_leap_year,
    shift_months,
    ymd_to_epoch_day,
)
from tempus._internal.constants import MONTHS_PER_YEAR, SECONDS_PER_DAY
from tempus._internal.validation import validate_day, validate_month, validate_year
from tempus.units.era import Era

if TYPE_CHECKING:
    from tempus.core.datetime import DateTime
    from tempus.core.duration import Duration
    from tempus.core.period import Period
    from tempus.core.time import Time


class Date:
    """A calendar date in the proleptic Gregorian calendar.

    Date represents a specific calendar day with year, month, and day
    components. Years use astronomical numbering, where year 0 exists
    and equals 1 BCE.

    Internal representation is the number of days since 1970-01-01,
    which makes date arithmetic and ordering integer operations.

    Attributes:
        year: The year (can be negative for BCE dates).
        month: The month (1-12).
        day: The day of the month (1-31).

    Examples:
        >>> d = Date(2024, 1, 15)
        >>> d.year, d.month, d.day
        (2024, 1, 15)

        >>> Date(-44, 3, 15).era
        <Era.BCE: 'BCE'>

        >>> Date(2024, 2, 29) + 1
        Date(2024, 3, 1)
    """

    __slots__ = ("_days",)

    def __init__(self, year: int, month: int, day: int) -> None:
        """Create a Date from year, month, and day.

        Raises:
            ValidationError: If any component is out of range.

        Examples:
            >>> Date(2024, 2, 30)
            Traceback (most recent call last):
            ...
            tempus.errors.ValidationError: day must be between 1 and 29 for 2024-02, got 30
        """
        validate_year(year)
        validate_month(month)
        validate_day(year, month, day)

        self._days: int = ymd_to_epoch_day(year, month, day)

    @classmethod
    def _from_epoch_day(cls, days: int) -> Date:
        """Create a Date from days since 1970-01-01 (internal use).

        The year is still range-checked, since arithmetic can carry a
        date past the supported years.
        """
        validate_year(epoch_day_to_ymd(days)[0])
        instance = object.__new__(cls)
        instance._days = days
        return instance

    @classmethod
    def of_epoch_day(cls, days: int) -> Date:
        """Create a Date from a number of days since 1970-01-01.

        Examples:
            >>> Date.of_epoch_day(365)
            Date(1971, 1, 1)
        """
        return cls._from_epoch_day(days)

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
    def epoch_day(self) -> int:
        """Return the number of days since 1970-01-01."""
        return self._days

    @property
    def day_of_week(self) -> int:
        """Return the day of the week (Monday=0, Sunday=6).

        Examples:
            >>> Date(2017, 1, 1).day_of_week  # a Sunday
            6
        """
        return epoch_day_to_day_of_week(self._days)

    @property
    def day_of_year(self) -> int:
        """Return the day of the year (1-366)."""
        year, month, day = epoch_day_to_ymd(self._days)
        return days_before_month(year, month) + day

    @property
    def era(self) -> Era:
        """Return the era (BCE or CE) of this date."""
        return Era.of_year(self.year)

    @property
    def is_leap_year(self) -> bool:
        """Return True if this date falls in a leap year."""
        return is_leap_year(self.year)

    @property
    def length_of_month(self) -> int:
        """Return the number of days in this date's month."""
        year, month, _ = epoch_day_to_ymd(self._days)
        return days_in_month(year, month)

    def add_days(self, days: int) -> Date:
        """Return a new Date offset by the given number of days.

        Raises:
            ValidationError: If the result is out of range.

        Examples:
            >>> Date(2024, 1, 15).add_days(-20)
            Date(2023, 12, 26)
        """
        return Date._from_epoch_day(self._days + days)

    def add_months(self, months: int) -> Date:
        """Return a new Date offset by the given number of months.

        If the resulting day is invalid for the new month, it is
        clamped to the last valid day of that month.

        Examples:
            >>> Date(2024, 1, 31).add_months(1)  # Clamps to Feb 29
            Date(2024, 2, 29)

            >>> Date(2023, 1, 31).add_months(1)  # Clamps to Feb 28
            Date(2023, 2, 28)
        """
        year, month, day = epoch_day_to_ymd(self._days)
        new_year, new_month = shift_months(year, month, months)
        validate_year(new_year)
        return Date(new_year, new_month, min(day, days_in_month(new_year, new_month)))

    def add_years(self, years: int) -> Date:
        """Return a new Date offset by the given number of years.

        Feb 29 is clamped to Feb 28 in non-leap target years.
        """
        return self.add_months(years * MONTHS_PER_YEAR)

    def add_period(self, period: Period) -> Date:
        """Return a new Date offset by a Period.

        Years and months are applied together first, then days, so
        Jan 31 + (1 month, 1 day) is Mar 1 in a non-leap year.
        """
        result = self
        if period.total_months:
            result = result.add_months(period.total_months)
        if period.days:
            result = result.add_days(period.days)
        return result

    def at(self, time: Time) -> DateTime:
        """Combine this date with a time of day.

        Examples:
            >>> from tempus.core.time import Time
            >>> Date(2017, 1, 1).at(Time(10, 15))
            DateTime(2017, 1, 1, 10, 15, 0, 0)
        """
        from tempus.core.datetime import DateTime

        return DateTime._from_internal(self._days, time.nano_of_day)

    def at_start_of_day(self) -> DateTime:
        """Return midnight at the start of this date."""
        from tempus.core.datetime import DateTime

        return DateTime._from_internal(self._days, 0)

    def to_iso_format(self) -> str:
        """Return the date as an ISO 8601 string (YYYY-MM-DD).

        Examples:
            >>> Date(2024, 1, 5).to_iso_format()
            '2024-01-05'
        """
        year, month, day = epoch_day_to_ymd(self._days)
        return f"{format_year(year)}-{month:02d}-{day:02d}"

    @overload
    def __add__(self, other: Period) -> Date: ...

    @overload
    def __add__(self, other: int) -> Date: ...

    def __add__(self, other: object) -> Date:
        """Add a Period or a number of days.

        Examples:
            >>> from tempus.core.period import Period
            >>> Date(2024, 1, 15) + Period(months=1)
            Date(2024, 2, 15)
            >>> Date(2024, 1, 15) + 3
            Date(2024, 1, 18)
        """
        from tempus.core.period import Period

        if isinstance(other, Period):
            return self.add_period(other)
        if isinstance(other, int) and not isinstance(other, bool):
            return self.add_days(other)
        return NotImplemented

    @overload
    def __sub__(self, other: Period) -> Date: ...

    @overload
    def __sub__(self, other: int) -> Date: ...

    @overload
    def __sub__(self, other: Date) -> Duration: ...

    def __sub__(self, other: object) -> Date | Duration:
        """Subtract a Period or a number of days, or another Date.

        Subtracting a Date gives the Duration between the two midnights.

        Examples:
            >>> Date(2024, 1, 15) - Date(2024, 1, 10)
            Duration(seconds=432000, nanoseconds=0)
        """
        from tempus.core.duration import Duration
        from tempus.core.period import Period

        if isinstance(other, Date):
            return Duration(seconds=(self._days - other._days) * SECONDS_PER_DAY)
        if isinstance(other, Period):
            return self.add_period(-other)
        if isinstance(other, int) and not isinstance(other, bool):
            return self.add_days(-other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._days == other._days

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._days < other._days

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._days <= other._days

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._days > other._days

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._days >= other._days

    def __hash__(self) -> int:
        return hash(("Date", self._days))

    def __repr__(self) -> str:
        year, month, day = epoch_day_to_ymd(self._days)
        return f"Date({year}, {month}, {day})"

    def __str__(self) -> str:
        return self.to_iso_format()


__all__ = ["Date"]
