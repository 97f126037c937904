"""Tests for clocks, the clock override and suppliers."""

from __future__ import annotations

import threading

import pytest

from tempus.clock import (
    NOW,
    TODAY,
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
from tempus.coerce import to_date, to_year
from tempus.core.date import Date
from tempus.core.duration import Duration
from tempus.core.instant import Instant
from tempus.core.year import Year
from tempus.interval.algebra import is_coincident
from tempus.supplier import Supplier, resolve
from tempus.units.zone import Zone


class TestCurrentTime:
    """Tests for the "current time" queries under a fixed clock."""

    def test_now(self, fixed_clock: FixedClock) -> None:
        assert now() == Instant(1_483_265_730, 500_000_000)

    def test_just_now_truncates(self, fixed_clock: FixedClock) -> None:
        assert just_now() == Instant(1_483_265_730)

    def test_dates(self, fixed_clock: FixedClock) -> None:
        assert today() == Date(2017, 1, 1)
        assert tomorrow() == Date(2017, 1, 2)
        assert yesterday() == Date(2016, 12, 31)

    def test_now_zoned_uses_clock_zone(self) -> None:
        tokyo = Zone.of("Asia/Tokyo")
        with use_clock(FixedClock(Instant(1_483_265_730), tokyo)):
            z = now_zoned()
            assert z.zone == tokyo
            assert z.hour == 19
            assert today() == Date(2017, 1, 1)

    def test_today_follows_zone(self) -> None:
        late = Instant(1_483_225_200)  # 2016-12-31T23:00Z
        with use_clock(FixedClock(late, Zone.of("+02:00"))):
            assert today() == Date(2017, 1, 1)
        with use_clock(FixedClock(late)):
            assert today() == Date(2016, 12, 31)

    def test_epoch(self) -> None:
        assert epoch() == Instant(0)
        assert str(epoch()) == "1970-01-01T00:00:00Z"


class TestUseClock:
    def test_default_is_system_clock(self) -> None:
        assert isinstance(current_clock(), SystemClock)
        assert current_clock().zone == Zone.utc()

    def test_system_clock_moves_forward(self) -> None:
        first = now()
        assert now() >= first

    def test_overrides_nest(self) -> None:
        outer = FixedClock(Instant(0))
        inner = FixedClock(Instant(100))
        with use_clock(outer):
            with use_clock(inner) as installed:
                assert installed is inner
                assert now() == Instant(100)
            assert now() == Instant(0)
        assert isinstance(current_clock(), SystemClock)

    def test_same_guard_entered_twice(self) -> None:
        guard = use_clock(FixedClock(Instant(0)))
        with guard:
            with guard:
                assert now() == Instant(0)
            assert now() == Instant(0)
        assert isinstance(current_clock(), SystemClock)

    def test_restored_after_exception(self) -> None:
        with pytest.raises(RuntimeError):
            with use_clock(FixedClock(Instant(0))):
                raise RuntimeError("boom")
        assert isinstance(current_clock(), SystemClock)

    def test_rejects_non_clock(self) -> None:
        with pytest.raises(TypeError):
            use_clock(Instant(0))  # type: ignore[arg-type]

    def test_override_is_per_thread(self) -> None:
        seen: list = []

        def worker() -> None:
            seen.append(current_clock())

        with use_clock(FixedClock(Instant(0))):
            thread = threading.Thread(target=worker)
            thread.start()
            thread.join()
        assert isinstance(seen[0], SystemClock)

    def test_offset_clock(self) -> None:
        base = FixedClock(Instant(0), Zone.of("+01:00"))
        ahead = OffsetClock(base, Duration(hours=1))
        assert ahead.instant() == Instant(3_600)
        assert ahead.zone == Zone.of("+01:00")
        with use_clock(ahead):
            assert now() == Instant(3_600)


class TestSuppliers:
    def test_now_and_today_resolve_lazily(self, fixed_clock: FixedClock) -> None:
        assert resolve(NOW) == Instant(1_483_265_730, 500_000_000)
        assert resolve(TODAY) == Date(2017, 1, 1)
        with use_clock(FixedClock(Instant(0))):
            assert resolve(TODAY) == Date(1970, 1, 1)

    def test_coercions_accept_suppliers(self, fixed_clock: FixedClock) -> None:
        assert to_date(NOW) == Date(2017, 1, 1)
        assert to_year(TODAY) == Year(2017)
        assert is_coincident(TODAY, Year(2017))

    def test_of_value(self) -> None:
        assert Supplier.of_value(Year(2017)).resolve() == Year(2017)

    def test_plain_values_pass_through(self) -> None:
        assert resolve(Year(2017)) == Year(2017)

    def test_requires_callable(self) -> None:
        with pytest.raises(TypeError):
            Supplier(Year(2017))  # type: ignore[arg-type]

    def test_repr_names_the_callable(self) -> None:
        assert repr(NOW) == "Supplier(now)"
