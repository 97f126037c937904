"""Calendar utilities for Tempus.

This module provides internal functions for calendar calculations,
including epoch-day conversions and leap year logic. Day numbers count
days since 1970-01-01 (the Unix epoch day 0).

The day-number conversions use 400-year era arithmetic, which works
unchanged for negative (BCE) years because Python's // floors.

This module is not part of the public API.
"""

from __future__ import annotations

from tempus._internal.constants import DAYS_IN_MONTH, MONTHS_PER_YEAR

# Days from 0000-03-01 to 1970-01-01 in the proleptic Gregorian calendar.
_EPOCH_SHIFT = 719_468
_DAYS_PER_ERA = 146_097


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check (can be negative for BCE).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2016)
        True
        >>> is_leap_year(2017)
        False
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def days_before_month(year: int, month: int) -> int:
    """Return the number of days in the year before the first of the month."""
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def ymd_to_epoch_day(year: int, month: int, day: int) -> int:
    """Convert year, month, day to days since 1970-01-01.

    Args:
        year: The year (astronomical, can be 0 or negative).
        month: The month (1-12).
        day: The day (1-31).

    Returns:
        Days since the Unix epoch (negative before 1970).

    Examples:
        >>> ymd_to_epoch_day(1970, 1, 1)
        0
        >>> ymd_to_epoch_day(2000, 3, 1)
        11017
    """
    # Count years from March so the leap day falls at the end of the year
    y = year - 1 if month <= 2 else year
    era = y // 400
    year_of_era = y - era * 400
    shifted_month = month - 3 if month > 2 else month + 9
    day_of_year = (153 * shifted_month + 2) // 5 + day - 1
    day_of_era = (
        year_of_era * 365 + year_of_era // 4 - year_of_era // 100 + day_of_year
    )
    return era * _DAYS_PER_ERA + day_of_era - _EPOCH_SHIFT


def epoch_day_to_ymd(epoch_day: int) -> tuple[int, int, int]:
    """Convert days since 1970-01-01 to (year, month, day).

    Examples:
        >>> epoch_day_to_ymd(0)
        (1970, 1, 1)
        >>> epoch_day_to_ymd(-1)
        (1969, 12, 31)
    """
    z = epoch_day + _EPOCH_SHIFT
    era = z // _DAYS_PER_ERA
    day_of_era = z - era * _DAYS_PER_ERA
    year_of_era = (
        day_of_era
        - day_of_era // 1460
        + day_of_era // 36524
        - day_of_era // 146096
    ) // 365
    day_of_year = day_of_era - (
        365 * year_of_era + year_of_era // 4 - year_of_era // 100
    )
    shifted_month = (5 * day_of_year + 2) // 153
    day = day_of_year - (153 * shifted_month + 2) // 5 + 1
    month = shifted_month + 3 if shifted_month < 10 else shifted_month - 9
    year = year_of_era + era * 400 + (1 if month <= 2 else 0)
    return (year, month, day)


def epoch_day_to_day_of_week(epoch_day: int) -> int:
    """Convert days since 1970-01-01 to day of week (Monday=0, Sunday=6).

    1970-01-01 was a Thursday.
    """
    return (epoch_day + 3) % 7


def format_year(year: int) -> str:
    """Format a year with at least four digits and a leading minus for BCE.

    Examples:
        >>> format_year(2017)
        '2017'
        >>> format_year(-44)
        '-0044'
    """
    if year < 0:
        return f"-{-year:04d}"
    return f"{year:04d}"


def shift_months(year: int, month: int, months: int) -> tuple[int, int]:
    """Move a (year, month) pair by a signed number of months.

    Examples:
        >>> shift_months(2024, 11, 3)
        (2025, 2)
        >>> shift_months(2024, 1, -1)
        (2023, 12)
    """
    total_months = year * MONTHS_PER_YEAR + (month - 1) + months
    return (total_months // MONTHS_PER_YEAR, total_months % MONTHS_PER_YEAR + 1)


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "days_before_month",
    "ymd_to_epoch_day",
    "epoch_day_to_ymd",
    "epoch_day_to_day_of_week",
    "shift_months",
    "format_year",
]
