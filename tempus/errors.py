"""Tempus exception hierarchy.

All Tempus-specific exceptions inherit from TempusError. Each error also
inherits from the closest built-in exception so callers that only know
about ValueError/TypeError still catch them.
"""

from __future__ import annotations


class TempusError(Exception):
    """Base exception for all Tempus errors."""

    pass


class ValidationError(TempusError, ValueError):
    """Invalid input values.

    Raised when a temporal value is out of range or invalid.

    Examples:
        - Month value outside 1-12
        - Day value outside valid range for month
        - Bounds whose end precedes its start
        - A range step that does not advance
    """

    pass


class ParseError(TempusError, ValueError):
    """Text does not match any recognized point-in-time pattern.

    Attributes:
        input: The text that failed to parse.
    """

    def __init__(self, input: str, message: str | None = None) -> None:
        self.input = input
        super().__init__(message or f"Unparseable time string: {input!r}")


class UnsupportedCoercion(TempusError, TypeError):
    """The requested conversion cannot be derived from the source value.

    Raised when the source variant lacks the information the target needs,
    e.g. a bare Year cannot yield a day-of-month.

    Attributes:
        from_variant: Name of the source variant.
        to_variant: Name of the requested variant.
    """

    def __init__(self, from_variant: str, to_variant: str) -> None:
        self.from_variant = from_variant
        self.to_variant = to_variant
        super().__init__(f"cannot coerce {from_variant} to {to_variant}")


class TypeMismatch(TempusError, TypeError):
    """Comparison or arithmetic attempted across incompatible variants.

    Attributes:
        left_variant: Name of the left operand's variant.
        right_variant: Name of the right operand's variant.
    """

    def __init__(self, left_variant: str, right_variant: str) -> None:
        self.left_variant = left_variant
        self.right_variant = right_variant
        super().__init__(
            f"incompatible temporal variants: {left_variant} and {right_variant}"
        )


class UnitNotRecognized(TempusError, ValueError):
    """An unknown unit keyword was passed to a duration/period constructor.

    Attributes:
        keyword: The unrecognized keyword.
    """

    def __init__(self, keyword: object) -> None:
        self.keyword = keyword
        super().__init__(f"Not a unit: {keyword!r}")


class ZoneError(TempusError, ValueError):
    """Invalid or unknown zone.

    Examples:
        - Malformed UTC offset string
        - Offset outside -18h to +18h
        - Region id absent from the zone database
    """

    pass


def variant_name(value: object) -> str:
    """Return the variant name used in error messages for a value."""
    return type(value).__name__


__all__ = [
    "TempusError",
    "ValidationError",
    "ParseError",
    "UnsupportedCoercion",
    "TypeMismatch",
    "UnitNotRecognized",
    "ZoneError",
    "variant_name",
]
