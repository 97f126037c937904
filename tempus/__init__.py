"""Tempus: polymorphic temporal arithmetic and interval algebra.

Tempus gives one set of operations that works the same way across
instants, dates, local and zoned date-times, years and year-months,
together with a half-open interval model for partitioning, intersecting
and complementing spans of time.

Core Types:
    Instant: Point on the UTC time line
    Date: Calendar date (year, month, day)
    Time: Time of day (hour, minute, second, nanosecond)
    DateTime: Date and time of day without a zone
    ZonedDateTime: Instant viewed through a Zone
    Year, YearMonth: Whole years and months
    Duration: Exact time span with nanosecond precision
    Period: Calendar-based amount (years, months, days)
    Bounds: Half-open interval [start, end)

Units:
    Era: BCE/CE era designation
    TimeUnit: Unit keywords ("seconds", "days", "months", ...)
    Zone: Fixed-offset or IANA time zone

Exceptions:
    TempusError: Base exception
    ValidationError: Invalid field values
    ParseError: Text matched no known form
    UnsupportedCoercion: No conversion between two variants
    TypeMismatch: Operands of incompatible variants
    UnitNotRecognized: Unknown unit keyword
    ZoneError: Unknown zone id or malformed offset

Example:
    >>> from tempus import Date, Year, divide_by, bounds
    >>> len(divide_by(Date, Year(2016)))
    366
    >>> str(bounds("2020-07"))
    '[2020-07-01T00:00, 2020-08-01T00:00)'
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from tempus.core.bounds import Bounds
from tempus.core.date import Date
from tempus.core.datetime import DateTime
from tempus.core.duration import Duration
from tempus.core.instant import Instant
from tempus.core.period import Period
from tempus.core.time import Time
from tempus.core.year import Year
from tempus.core.year_month import YearMonth
from tempus.core.zoned import ZonedDateTime

# Units
from tempus.units.era import Era
from tempus.units.timeunit import TimeUnit, unit
from tempus.units.zone import Zone

# Exceptions
from tempus.errors import (
    ParseError,
    TempusError,
    TypeMismatch,
    UnitNotRecognized,
    UnsupportedCoercion,
    ValidationError,
    ZoneError,
)

# Deferred values and clocks
from tempus.supplier import Supplier
from tempus.clock import (
    NOW,
    TODAY,
    Clock,
    FixedClock,
    OffsetClock,
    SystemClock,
    current_clock,
    epoch,
    just_now,
    now,
    now_zoned,
    today,
    tomorrow,
    use_clock,
    yesterday,
)

# Coercion and parsing
from tempus.parse import parse
from tempus.coerce import (
    day_of_month,
    day_of_week,
    month,
    to_date,
    to_date_time,
    to_instant,
    to_int,
    to_long,
    to_py_datetime,
    to_time,
    to_year,
    to_year_month,
    to_zone,
    to_zoned_date_time,
)

# Arithmetic, comparison and ranges
from tempus.arithmetic import (
    TimeRange,
    absolute,
    add,
    after,
    after_or_equal,
    before,
    before_or_equal,
    between,
    compare,
    decrement,
    divide,
    find_gaps,
    increment,
    max_value,
    merge_intervals,
    min_value,
    multiply,
    negate,
    new_duration,
    new_period,
    subtract,
    take,
    time_range,
)

# Intervals
from tempus.interval import (
    at,
    at_zone,
    bounds,
    complement,
    concur,
    divide_by,
    duration,
    end,
    is_coincident,
    is_midnight,
    max_of_type,
    midnight,
    min_of_type,
    noon,
    on,
    start,
    to_local,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "Bounds",
    "Date",
    "DateTime",
    "Duration",
    "Instant",
    "Period",
    "Time",
    "Year",
    "YearMonth",
    "ZonedDateTime",
    # Units
    "Era",
    "TimeUnit",
    "Zone",
    "unit",
    # Exceptions
    "TempusError",
    "ValidationError",
    "ParseError",
    "UnsupportedCoercion",
    "TypeMismatch",
    "UnitNotRecognized",
    "ZoneError",
    # Deferred values and clocks
    "Supplier",
    "Clock",
    "SystemClock",
    "FixedClock",
    "OffsetClock",
    "current_clock",
    "use_clock",
    "now",
    "just_now",
    "now_zoned",
    "today",
    "tomorrow",
    "yesterday",
    "epoch",
    "NOW",
    "TODAY",
    # Coercion and parsing
    "parse",
    "to_instant",
    "to_zoned_date_time",
    "to_date_time",
    "to_date",
    "to_year_month",
    "to_year",
    "to_time",
    "to_zone",
    "to_py_datetime",
    "to_int",
    "to_long",
    "day_of_month",
    "month",
    "day_of_week",
    # Arithmetic, comparison and ranges
    "add",
    "subtract",
    "increment",
    "decrement",
    "multiply",
    "divide",
    "negate",
    "absolute",
    "between",
    "new_duration",
    "new_period",
    "compare",
    "before",
    "before_or_equal",
    "after",
    "after_or_equal",
    "min_value",
    "max_value",
    "TimeRange",
    "time_range",
    "take",
    "merge_intervals",
    "find_gaps",
    # Intervals
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
    "divide_by",
    "concur",
    "complement",
    "is_coincident",
]
