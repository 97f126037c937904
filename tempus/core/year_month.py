"""YearMonth class representing a month of a particular year."""

from __future__ import annotations

from typing import TYPE_CHECKING, overload

from tempus._internal.calendar import days_in_month, format_year, shift_months
from tempus._internal.constants import MONTHS_PER_YEAR
from tempus._internal.validation import validate_day, validate_month, validate_year

if TYPE_CHECKING:
    from tempus.core.date import Date
    from tempus.core.duration import Duration
    from tempus.core.period import Period
    from tempus.core.year import Year


class YearMonth:
    """A year and month, such as 2017-07.

    Examples:
        >>> ym = YearMonth(2016, 2)
        >>> ym.length_of_month
        29
        >>> ym + 11
        YearMonth(2017, 1)
        >>> str(YearMonth(2020, 7))
        '2020-07'
    """

    __slots__ = ("_year", "_month")

    def __init__(self, year: int, month: int) -> None:
        """Create a YearMonth.

        Raises:
            ValidationError: If the year or month is out of range.
        """
        validate_year(year)
        validate_month(month)
        self._year: int = year
        self._month: int = month

    @classmethod
    def _from_internal(cls, year: int, month: int) -> YearMonth:
        """Create a YearMonth without validation (internal use)."""
        instance = object.__new__(cls)
        instance._year = year
        instance._month = month
        return instance

    @property
    def year(self) -> int:
        return self._year

    @property
    def month(self) -> int:
        return self._month

    @property
    def length_of_month(self) -> int:
        return days_in_month(self._year, self._month)

    @property
    def proleptic_month(self) -> int:
        """Return months counted from year 0 January (used for ordering)."""
        return self._year * MONTHS_PER_YEAR + self._month - 1

    def to_year(self) -> Year:
        from tempus.core.year import Year

        return Year(self._year)

    def at_day(self, day: int) -> Date:
        """Return the given day of this month.

        Raises:
            ValidationError: If the day does not exist in this month.
        """
        from tempus.core.date import Date

        validate_day(self._year, self._month, day)
        return Date(self._year, self._month, day)

    def at_end_of_month(self) -> Date:
        """Return the last day of this month."""
        return self.at_day(self.length_of_month)

    def add_months(self, months: int) -> YearMonth:
        year, month = shift_months(self._year, self._month, months)
        return YearMonth(year, month)

    def add_period(self, period: Period) -> YearMonth:
        """Add a Period that carries no days.

        Raises:
            TypeMismatch: If the period has a days component.
        """
        if period.days:
            from tempus.errors import TypeMismatch

            raise TypeMismatch("YearMonth", f"Period({period})")
        return self.add_months(period.total_months)

    def to_iso_format(self) -> str:
        return f"{format_year(self._year)}-{self._month:02d}"

    def __add__(self, other: object) -> YearMonth:
        from tempus.core.period import Period

        if isinstance(other, Period):
            return self.add_period(other)
        if isinstance(other, int) and not isinstance(other, bool):
            return self.add_months(other)
        return NotImplemented

    @overload
    def __sub__(self, other: int) -> YearMonth: ...

    @overload
    def __sub__(self, other: Period) -> YearMonth: ...

    @overload
    def __sub__(self, other: YearMonth) -> Duration: ...

    def __sub__(self, other: object) -> YearMonth | Duration:
        """Subtract months, or another YearMonth (Duration between their starts)."""
        from tempus.core.period import Period

        if isinstance(other, YearMonth):
            return self.at_day(1) - other.at_day(1)
        if isinstance(other, Period):
            return self.add_period(-other)
        if isinstance(other, int) and not isinstance(other, bool):
            return self.add_months(-other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return self._year == other._year and self._month == other._month

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return self.proleptic_month < other.proleptic_month

    def __le__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return self.proleptic_month <= other.proleptic_month

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return self.proleptic_month > other.proleptic_month

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return self.proleptic_month >= other.proleptic_month

    def __hash__(self) -> int:
        return hash(("YearMonth", self._year, self._month))

    def __repr__(self) -> str:
        return f"YearMonth({self._year}, {self._month})"

    def __str__(self) -> str:
        return self.to_iso_format()


__all__ = ["YearMonth"]
