"""Internal utilities for Tempus.

This module contains private implementation details:
    - Constants and magic numbers
    - Calendar arithmetic
    - Field validation helpers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from tempus._internal.validation import (
    validate_day,
    validate_field,
    validate_month,
    validate_year,
)

__all__: list[str] = [
    "validate_day",
    "validate_field",
    "validate_month",
    "validate_year",
]
