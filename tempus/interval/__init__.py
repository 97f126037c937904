"""Interval model and algebra.

Interval Model (from tempus.interval.model):
    - start, end, bounds: Project any temporal value onto [start, end)
    - duration: Length of a value's interval
    - at, on, midnight, noon, at_zone, to_local: Build points
    - min_of_type, max_of_type: Limits of each variant

Interval Algebra (from tempus.interval.algebra):
    - divide_by: Partition into calendar units or fixed lengths
    - concur: Intersection
    - complement: Uncovered stretches of the time line
    - is_coincident: Containment of a point or interval
"""

from __future__ import annotations

from tempus.interval.model import (
    start,
    end,
    bounds,
    duration,
    is_midnight,
    at,
    on,
    midnight,
    noon,
    at_zone,
    to_local,
    min_of_type,
    max_of_type,
)
from tempus.interval.algebra import (
    divide_by,
    concur,
    complement,
    is_coincident,
)

__all__ = [
    # Interval model
    "start",
    "end",
    "bounds",
    "duration",
    "is_midnight",
    "at",
    "on",
    "midnight",
    "noon",
    "at_zone",
    "to_local",
    "min_of_type",
    "max_of_type",
    # Interval algebra
    "divide_by",
    "concur",
    "complement",
    "is_coincident",
]
