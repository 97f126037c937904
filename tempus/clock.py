"""Clocks and the scoped clock override.

Every "current time" query (now, today, ...) reads through the clock
returned by current_clock(). By default that is the system clock in UTC.
Within a `use_clock(...)` block a different clock is in effect for the
current thread or task only:

    >>> from tempus.core.instant import Instant
    >>> with use_clock(FixedClock(Instant(1_483_228_800))):
    ...     str(today())
    '2017-01-01'

Overrides nest and are restored on every exit path, including exceptions.
"""

from __future__ import annotations

import contextvars
import logging
import time as _time
from abc import ABC, abstractmethod
from typing import Optional

from tempus.core.date import Date
from tempus.core.duration import Duration
from tempus.core.instant import Instant
from tempus.core.zoned import ZonedDateTime
from tempus.supplier import Supplier
from tempus.units.zone import Zone

logger = logging.getLogger(__name__)


class Clock(ABC):
    """A source of the current instant, together with a zone for local dates."""

    @abstractmethod
    def instant(self) -> Instant:
        """Return the current instant."""

    @property
    @abstractmethod
    def zone(self) -> Zone:
        """Return the zone used to derive local dates and times."""


class SystemClock(Clock):
    """The operating system clock.

    Args:
        zone: Zone for local dates and times (default UTC).
    """

    def __init__(self, zone: Zone | None = None) -> None:
        self._zone = zone or Zone.utc()

    def instant(self) -> Instant:
        return Instant(0, _time.time_ns())

    @property
    def zone(self) -> Zone:
        return self._zone

    def __repr__(self) -> str:
        return f"SystemClock({self._zone!r})"


class FixedClock(Clock):
    """A clock that always reports the same instant.

    Examples:
        >>> clock = FixedClock(Instant(0), Zone.of("+02:00"))
        >>> clock.instant() == clock.instant()
        True
    """

    def __init__(self, instant: Instant, zone: Zone | None = None) -> None:
        self._instant = instant
        self._zone = zone or Zone.utc()

    def instant(self) -> Instant:
        return self._instant

    @property
    def zone(self) -> Zone:
        return self._zone

    def __repr__(self) -> str:
        return f"FixedClock({self._instant!r}, {self._zone!r})"


class OffsetClock(Clock):
    """A clock running a fixed Duration ahead of (or behind) another clock."""

    def __init__(self, base: Clock, offset: Duration) -> None:
        self._base = base
        self._offset = offset

    def instant(self) -> Instant:
        return self._base.instant().add_duration(self._offset)

    @property
    def zone(self) -> Zone:
        return self._base.zone

    def __repr__(self) -> str:
        return f"OffsetClock({self._base!r}, {self._offset!r})"


_SYSTEM_CLOCK = SystemClock()

# Per thread/task clock override
_clock_var: contextvars.ContextVar[Optional[Clock]] = contextvars.ContextVar(
    "tempus_clock", default=None
)


def current_clock() -> Clock:
    """Return the clock in effect: the innermost override, or the system clock."""
    return _clock_var.get() or _SYSTEM_CLOCK


class use_clock:
    """
    Context manager installing a clock for the enclosed block.

    Usage:
        with use_clock(FixedClock(instant)):
            now()  # == instant

        # Overrides nest; leaving the inner block restores the outer clock.
        # The same guard may be entered again while it is active.
    """

    def __init__(self, clock: Clock):
        if not isinstance(clock, Clock):
            raise TypeError(f"use_clock needs a Clock, got {type(clock).__name__}")
        self.clock = clock
        self._tokens: list[contextvars.Token] = []

    def __enter__(self) -> Clock:
        self._tokens.append(_clock_var.set(self.clock))
        logger.debug("clock override installed: %r", self.clock)
        return self.clock

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        _clock_var.reset(self._tokens.pop())
        logger.debug("clock override removed: %r", self.clock)


def now() -> Instant:
    """Return the current instant from the clock in effect."""
    return current_clock().instant()


def just_now() -> Instant:
    """Return the current instant truncated to whole seconds."""
    return now().truncated_to_seconds()


def now_zoned() -> ZonedDateTime:
    """Return the current instant in the clock's zone."""
    clock = current_clock()
    return ZonedDateTime(clock.instant(), clock.zone)


def today() -> Date:
    """Return the current date in the clock's zone."""
    return now_zoned().date


def tomorrow() -> Date:
    return today().add_days(1)


def yesterday() -> Date:
    return today().add_days(-1)


def epoch() -> Instant:
    """Return 1970-01-01T00:00:00Z."""
    return Instant.epoch()


# Deferred forms for passing "the current time" into coercion and interval functions
NOW: Supplier[Instant] = Supplier(now)
TODAY: Supplier[Date] = Supplier(today)


__all__ = [
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
]
