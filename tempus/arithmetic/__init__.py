"""Temporal arithmetic operations.

This module provides functions for temporal arithmetic:
    - Addition and subtraction of quantities to points
    - Comparison operations across one variant
    - Measuring between points, in total or in unit counts
    - Ranges of points and merging of intervals

The functions in this module serve as the canonical implementations
for temporal arithmetic. They provide explicit function-based APIs
that complement the operator-based APIs on the core classes.

Arithmetic Operations (from tempus.arithmetic.ops):
    - add, subtract: Combine a point with a Duration, Period or int
    - increment, decrement: Step by one canonical unit
    - multiply, divide, negate, absolute: Scale quantities
    - between: Duration (or unit count) from one point to another
    - new_duration, new_period: Build quantities from unit keywords

Comparison Operations (from tempus.arithmetic.comparisons):
    - compare: Return -1, 0, or 1 for comparison
    - before, before_or_equal, after, after_or_equal: Chained ordering
    - min_value, max_value: Find extremes

Range Operations (from tempus.arithmetic.range_ops):
    - time_range: Lazy, restartable sequence of points
    - merge_intervals, find_gaps: Normalize collections of Bounds
"""

from __future__ import annotations

from tempus.arithmetic.ops import (
    add,
    subtract,
    canonical_step,
    increment,
    decrement,
    multiply,
    divide,
    negate,
    absolute,
    between,
    new_duration,
    new_period,
)
from tempus.arithmetic.comparisons import (
    compare,
    before,
    before_or_equal,
    after,
    after_or_equal,
    min_value,
    max_value,
)
from tempus.arithmetic.range_ops import (
    TimeRange,
    time_range,
    take,
    merge_intervals,
    find_gaps,
)

__all__ = [
    # Arithmetic operations
    "add",
    "subtract",
    "canonical_step",
    "increment",
    "decrement",
    "multiply",
    "divide",
    "negate",
    "absolute",
    "between",
    "new_duration",
    "new_period",
    # Comparison operations
    "compare",
    "before",
    "before_or_equal",
    "after",
    "after_or_equal",
    "min_value",
    "max_value",
    # Range operations
    "TimeRange",
    "time_range",
    "take",
    "merge_intervals",
    "find_gaps",
]
