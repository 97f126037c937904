"""Validation utilities for Tempus.

This module provides helpers for ensuring temporal field values are
within valid ranges.

This module is not part of the public API.
"""

from __future__ import annotations

from tempus._internal.constants import MAX_YEAR, MIN_YEAR
from tempus.errors import ValidationError


def validate_year(year: int) -> None:
    """Validate that a year is within the supported range.

    Raises:
        ValidationError: If year is outside MIN_YEAR to MAX_YEAR.
    """
    if not isinstance(year, int) or isinstance(year, bool):
        raise ValidationError(f"year must be an integer, got {type(year).__name__}")
    if year < MIN_YEAR or year > MAX_YEAR:
        raise ValidationError(
            f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}"
        )


def validate_month(month: int) -> None:
    """Validate that a month is within 1-12.

    Raises:
        ValidationError: If month is outside 1-12.
    """
    if month < 1 or month > 12:
        raise ValidationError(f"month must be between 1 and 12, got {month}")


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given year and month.

    Raises:
        ValidationError: If day is invalid for the month.
    """
    from tempus._internal.calendar import days_in_month

    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise ValidationError(
            f"day must be between 1 and {max_day} for {year}-{month:02d}, got {day}"
        )


def validate_field(name: str, value: int, low: int, high: int) -> None:
    """Validate that a named field lies in the inclusive range [low, high].

    Raises:
        ValidationError: If value is out of range.

    Examples:
        >>> validate_field("hour", 24, 0, 23)
        Traceback (most recent call last):
        ...
        tempus.errors.ValidationError: hour must be between 0 and 23, got 24
    """
    if value < low or value > high:
        raise ValidationError(f"{name} must be between {low} and {high}, got {value}")


__all__ = [
    "validate_year",
    "validate_month",
    "validate_day",
    "validate_field",
]
