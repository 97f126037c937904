"""Core temporal types.

This module provides the fundamental temporal types:
    - Instant: Point on the UTC time line
    - Date: Calendar date in the proleptic Gregorian calendar
    - Time: Time of day with nanosecond precision
    - DateTime: Date and time of day without a zone
    - ZonedDateTime: Instant viewed through a Zone
    - Year, YearMonth: Whole years and months
    - Duration: Exact time span with nanosecond precision
    - Period: Calendar-based amount (years, months, days)
    - Bounds: Half-open interval [start, end)
"""

from __future__ import annotations

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

POINT_TYPES: tuple[type, ...] = (
    Instant,
    Date,
    DateTime,
    ZonedDateTime,
    Year,
    YearMonth,
)

__all__: list[str] = [
    "Bounds",
    "Date",
    "DateTime",
    "Duration",
    "Instant",
    "Period",
    "POINT_TYPES",
    "Time",
    "Year",
    "YearMonth",
    "ZonedDateTime",
]
