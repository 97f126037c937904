"""Period class representing calendar-based amounts.

This module provides the Period class for representing calendar amounts
that vary by context (months, years) as opposed to exact time spans (Duration).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tempus._internal.constants import MONTHS_PER_YEAR

if TYPE_CHECKING:
    from tempus.core.date import Date


class Period:
    """A calendar-based amount with year, month, and day components.

    Unlike Duration (which is exact nanoseconds), Period represents calendar
    concepts like "1 month" that vary by context. Adding 1 month to Jan 31
    yields Feb 28/29, not exactly 30 or 31 days.

    The components are stored as-is without normalization. For example,
    Period(months=14) remains 14 months rather than being converted to
    1 year and 2 months, and is not equal to Period(years=1, months=2).
    Weeks are accepted at construction and folded into days.

    Attributes:
        years: Number of years (can be negative).
        months: Number of months (can be negative).
        days: Number of days (can be negative).

    Examples:
        >>> p = Period(years=1, months=2)
        >>> p.total_months
        14

        >>> Period(weeks=2).days
        14

        >>> from tempus.core.date import Date
        >>> Date(2024, 1, 31) + Period(months=1)  # Clamps to Feb 29
        Date(2024, 2, 29)
    """

    __slots__ = ("_years", "_months", "_days")

    def __init__(
        self,
        years: int = 0,
        months: int = 0,
        weeks: int = 0,
        days: int = 0,
    ) -> None:
        """Create a Period from component parts.

        Examples:
            >>> Period(years=1, months=6)
            Period(years=1, months=6, days=0)

            >>> Period(weeks=1, days=1)
            Period(years=0, months=0, days=8)
        """
        self._years = years
        self._months = months
        self._days = weeks * 7 + days

    @classmethod
    def of_years(cls, years: int) -> Period:
        """Create a Period of a given number of years."""
        return cls(years=years)

    @classmethod
    def of_months(cls, months: int) -> Period:
        """Create a Period of a given number of months."""
        return cls(months=months)

    @classmethod
    def of_weeks(cls, weeks: int) -> Period:
        """Create a Period of a given number of weeks (stored as days).

        Examples:
            >>> Period.of_weeks(2)
            Period(years=0, months=0, days=14)
        """
        return cls(weeks=weeks)

    @classmethod
    def of_days(cls, days: int) -> Period:
        """Create a Period of a given number of days."""
        return cls(days=days)

    @classmethod
    def zero(cls) -> Period:
        """Create a zero-length period."""
        return cls()

    @property
    def years(self) -> int:
        """Return the years component."""
        return self._years

    @property
    def months(self) -> int:
        """Return the months component."""
        return self._months

    @property
    def days(self) -> int:
        """Return the days component."""
        return self._days

    @property
    def total_months(self) -> int:
        """Return years and months combined as a number of months.

        The days component is ignored.

        Examples:
            >>> Period(years=1, months=6).total_months
            18
        """
        return self._years * MONTHS_PER_YEAR + self._months

    @property
    def is_zero(self) -> bool:
        """Return True if all components are zero."""
        return self._years == 0 and self._months == 0 and self._days == 0

    @property
    def is_negative(self) -> bool:
        """Return True if any component is negative."""
        return self._years < 0 or self._months < 0 or self._days < 0

    def normalized(self) -> Period:
        """Return a copy with months folded into years where possible.

        Days are left unchanged.

        Examples:
            >>> Period(months=14).normalized()
            Period(years=1, months=2, days=0)
        """
        total = self.total_months
        sign = -1 if total < 0 else 1
        years, months = divmod(abs(total), MONTHS_PER_YEAR)
        return Period(years=sign * years, months=sign * months, days=self._days)

    def total_days(self, reference: Date) -> int:
        """Return the number of days this period spans from a reference date.

        Examples:
            >>> from tempus.core.date import Date
            >>> Period(months=1).total_days(Date(2017, 2, 1))
            28
        """
        return (reference + self).epoch_day - reference.epoch_day

    def compare_to(self, other: Period, reference: Date | None = None) -> int:
        """Compare two periods, returning -1, 0 or 1.

        Periods without days compare by total months; periods without
        years or months compare by days. Otherwise both are measured in
        days from `reference` (default 1970-01-01).

        Examples:
            >>> Period(years=1).compare_to(Period(months=11))
            1
            >>> Period(months=1).compare_to(Period(days=31))
            0
        """
        if self._days == 0 and other._days == 0:
            left, right = self.total_months, other.total_months
        elif self.total_months == 0 and other.total_months == 0:
            left, right = self._days, other._days
        else:
            if reference is None:
                from tempus.core.date import Date

                reference = Date(1970, 1, 1)
            left, right = self.total_days(reference), other.total_days(reference)
        return (left > right) - (left < right)

    def __add__(self, other: object) -> Period:
        """Add two periods component-wise.

        Examples:
            >>> Period(months=1) + Period(days=15)
            Period(years=0, months=1, days=15)
        """
        if not isinstance(other, Period):
            return NotImplemented
        return Period(
            years=self._years + other._years,
            months=self._months + other._months,
            days=self._days + other._days,
        )

    def __radd__(self, other: object) -> Period:
        """Support sum() by handling 0 + Period."""
        if other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: object) -> Period:
        """Subtract one period from another component-wise."""
        if not isinstance(other, Period):
            return NotImplemented
        return Period(
            years=self._years - other._years,
            months=self._months - other._months,
            days=self._days - other._days,
        )

    def __neg__(self) -> Period:
        return Period(years=-self._years, months=-self._months, days=-self._days)

    def __pos__(self) -> Period:
        return self

    def __mul__(self, other: object) -> Period:
        """Multiply each component by an integer."""
        if not isinstance(other, int) or isinstance(other, bool):
            return NotImplemented
        return Period(
            years=self._years * other,
            months=self._months * other,
            days=self._days * other,
        )

    def __rmul__(self, other: object) -> Period:
        return self.__mul__(other)

    def __eq__(self, other: object) -> bool:
        """Check structural equality (no normalization).

        Examples:
            >>> Period(years=1) == Period(months=12)
            False
        """
        if not isinstance(other, Period):
            return NotImplemented
        return (
            self._years == other._years
            and self._months == other._months
            and self._days == other._days
        )

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Period):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Period):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Period):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Period):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __hash__(self) -> int:
        return hash((self._years, self._months, self._days))

    def __repr__(self) -> str:
        return f"Period(years={self._years}, months={self._months}, days={self._days})"

    def __str__(self) -> str:
        """Return ISO 8601 format like "P1Y2M3D".

        Examples:
            >>> str(Period(years=1, days=3))
            'P1Y3D'
            >>> str(Period())
            'P0D'
        """
        if self.is_zero:
            return "P0D"
        parts = ["P"]
        if self._years:
            parts.append(f"{self._years}Y")
        if self._months:
            parts.append(f"{self._months}M")
        if self._days:
            parts.append(f"{self._days}D")
        return "".join(parts)

    def __bool__(self) -> bool:
        """Return True if this is a non-zero period."""
        return not self.is_zero


__all__ = ["Period"]
