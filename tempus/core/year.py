"""Year class representing a whole calendar year."""

from __future__ import annotations

from typing import TYPE_CHECKING, overload

from tempus._internal.calendar import days_in_year, format_year, is_leap_year
from tempus._internal.validation import validate_year
from tempus.units.era import Era

if TYPE_CHECKING:
    from tempus.core.date import Date
    from tempus.core.duration import Duration
    from tempus.core.period import Period
    from tempus.core.year_month import YearMonth


class Year:
    """A year in the proleptic Gregorian calendar.

    Examples:
        >>> Year(2016).is_leap
        True
        >>> Year(2017) + 3
        Year(2020)
        >>> Year(2017).at_month(7)
        YearMonth(2017, 7)
    """

    __slots__ = ("_value",)

    def __init__(self, value: int) -> None:
        """Create a Year.

        Raises:
            ValidationError: If the year is outside -9999..9999.
        """
        validate_year(value)
        self._value: int = value

    @classmethod
    def _from_internal(cls, value: int) -> Year:
        """Create a Year without validation (internal use)."""
        instance = object.__new__(cls)
        instance._value = value
        return instance

    @property
    def value(self) -> int:
        return self._value

    @property
    def is_leap(self) -> bool:
        return is_leap_year(self._value)

    @property
    def length(self) -> int:
        """Return the number of days in the year (365 or 366)."""
        return days_in_year(self._value)

    @property
    def era(self) -> Era:
        return Era.of_year(self._value)

    def at_month(self, month: int) -> YearMonth:
        """Return the given month of this year."""
        from tempus.core.year_month import YearMonth

        return YearMonth(self._value, month)

    def at_day(self, day_of_year: int) -> Date:
        """Return the date for a 1-based day of this year.

        Examples:
            >>> Year(2017).at_day(32)
            Date(2017, 2, 1)
        """
        from tempus._internal.validation import validate_field
        from tempus.core.date import Date

        validate_field("day_of_year", day_of_year, 1, self.length)
        return Date(self._value, 1, 1).add_days(day_of_year - 1)

    def add_years(self, years: int) -> Year:
        return Year(self._value + years)

    def add_period(self, period: Period) -> Year:
        """Add a Period that carries only years.

        Raises:
            TypeMismatch: If the period has months or days.
        """
        if period.months or period.days:
            from tempus.errors import TypeMismatch

            raise TypeMismatch("Year", f"Period({period})")
        return self.add_years(period.years)

    def to_iso_format(self) -> str:
        return format_year(self._value)

    def __add__(self, other: object) -> Year:
        from tempus.core.period import Period

        if isinstance(other, Period):
            return self.add_period(other)
        if isinstance(other, int) and not isinstance(other, bool):
            return self.add_years(other)
        return NotImplemented

    @overload
    def __sub__(self, other: int) -> Year: ...

    @overload
    def __sub__(self, other: Period) -> Year: ...

    @overload
    def __sub__(self, other: Year) -> Duration: ...

    def __sub__(self, other: object) -> Year | Duration:
        """Subtract years, or another Year (Duration between their starts)."""
        from tempus.core.period import Period

        if isinstance(other, Year):
            from tempus.core.date import Date

            return Date(self._value, 1, 1) - Date(other._value, 1, 1)
        if isinstance(other, Period):
            return self.add_period(-other)
        if isinstance(other, int) and not isinstance(other, bool):
            return self.add_years(-other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Year):
            return NotImplemented
        return self._value == other._value

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Year):
            return NotImplemented
        return self._value < other._value

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Year):
            return NotImplemented
        return self._value <= other._value

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Year):
            return NotImplemented
        return self._value > other._value

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Year):
            return NotImplemented
        return self._value >= other._value

    def __hash__(self) -> int:
        return hash(("Year", self._value))

    def __repr__(self) -> str:
        return f"Year({self._value})"

    def __str__(self) -> str:
        return self.to_iso_format()


__all__ = ["Year"]
