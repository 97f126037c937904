"""Tests for Bounds and the interval projections."""

from __future__ import annotations

import pytest

from tempus.core.bounds import Bounds
from tempus.core.date import Date
from tempus.core.datetime import DateTime
from tempus.core.duration import Duration
from tempus.core.instant import Instant
from tempus.core.time import Time
from tempus.core.year import Year
from tempus.core.year_month import YearMonth
from tempus.core.zoned import ZonedDateTime
from tempus.errors import TypeMismatch, UnsupportedCoercion, ValidationError
from tempus.interval.model import (
    at,
    at_zone,
    bounds,
    duration,
    end,
    is_midnight,
    max_of_type,
    midnight,
    min_of_type,
    noon,
    on,
    start,
    to_local,
)
from tempus.supplier import Supplier
from tempus.units.zone import Zone


class TestBoundsConstruction:
    """Tests for Bounds construction and validation."""

    def test_bounded_construction(self) -> None:
        b = Bounds(Date(2024, 1, 1), Date(2024, 1, 31))
        assert b.start == Date(2024, 1, 1)
        assert b.end == Date(2024, 1, 31)
        assert not b.is_empty

    def test_zero_width_is_allowed(self) -> None:
        d = Date(2024, 1, 15)
        assert Bounds(d, d).is_empty

    def test_end_before_start_raises(self) -> None:
        with pytest.raises(ValidationError):
            Bounds(Date(2024, 1, 31), Date(2024, 1, 1))

    def test_mixed_variants_raise(self) -> None:
        with pytest.raises(TypeMismatch):
            Bounds(Date(2024, 1, 1), DateTime(2024, 1, 2))

    def test_half_open_containment(self) -> None:
        b = Bounds(DateTime(2017, 1, 1, 9), DateTime(2017, 1, 1, 17))
        assert DateTime(2017, 1, 1, 9) in b
        assert DateTime(2017, 1, 1, 16, 59) in b
        assert DateTime(2017, 1, 1, 17) not in b
        assert Date(2017, 1, 1) not in b

    def test_unpacking_and_text(self) -> None:
        b = Bounds(DateTime(2017, 1, 1, 9), DateTime(2017, 1, 1, 17))
        lower, upper = b
        assert lower == DateTime(2017, 1, 1, 9)
        assert upper == DateTime(2017, 1, 1, 17)
        assert str(b) == "[2017-01-01T09:00, 2017-01-01T17:00)"

    def test_hashable(self) -> None:
        a = Bounds(Year(2017), Year(2018))
        assert len({a, Bounds(Year(2017), Year(2018))}) == 1


class TestStartAndEnd:
    """Tests for the start/end projections."""

    @pytest.mark.parametrize(
        "value,expected_start,expected_end",
        [
            (Date(2017, 12, 31), DateTime(2017, 12, 31), DateTime(2018, 1, 1)),
            (YearMonth(2016, 2), DateTime(2016, 2, 1), DateTime(2016, 3, 1)),
            (Year(2017), DateTime(2017, 1, 1), DateTime(2018, 1, 1)),
            (DateTime(2017, 1, 1, 9), DateTime(2017, 1, 1, 9), DateTime(2017, 1, 1, 9)),
        ],
    )
    def test_projections(self, value: object, expected_start: object, expected_end: object) -> None:
        assert start(value) == expected_start
        assert end(value) == expected_end

    def test_points_are_zero_width(self) -> None:
        assert start(Instant(5)) == end(Instant(5)) == Instant(5)

    def test_text_is_parsed(self) -> None:
        assert bounds("2020-07") == Bounds(DateTime(2020, 7, 1), DateTime(2020, 8, 1))

    def test_supplier_is_resolved(self) -> None:
        assert start(Supplier(lambda: Date(2017, 1, 1))) == DateTime(2017, 1, 1)

    def test_bounds_pass_through(self) -> None:
        b = Bounds(Instant(0), Instant(10))
        assert bounds(b) is b
        assert start(b) == Instant(0)
        assert end(b) == Instant(10)

    def test_two_argument_bounds(self) -> None:
        b = bounds(Date(2017, 1, 1), Date(2017, 1, 3))
        assert b == Bounds(DateTime(2017, 1, 1), DateTime(2017, 1, 4))

    def test_last_supported_values_have_an_end(self) -> None:
        edge = end(Year(9999))
        assert str(edge) == "10000-01-01T00:00"
        assert end(Date(9999, 12, 31)) == edge
        assert end(YearMonth(9999, 12)) == edge
        assert bounds(max_of_type(Year)) == Bounds(DateTime(9999, 1, 1), edge)
        assert duration(Year(9999)) == Duration(days=365)
        assert max_of_type(DateTime) in bounds(Date(9999, 12, 31))

    def test_unsupported(self) -> None:
        with pytest.raises(UnsupportedCoercion):
            start(Duration(seconds=1))


class TestDuration:
    @pytest.mark.parametrize(
        "value",
        [
            Date(2016, 2, 29),
            YearMonth(2016, 2),
            Year(2016),
            Bounds(Instant(0), Instant(90)),
        ],
    )
    def test_duration_is_end_minus_start(self, value: object) -> None:
        assert duration(value) == end(value) - start(value)

    def test_known_lengths(self) -> None:
        assert duration(Year(2016)) == Duration(days=366)
        assert duration("2017-02") == Duration(days=28)

    def test_int_builds_a_duration(self) -> None:
        assert duration(90, "minutes") == Duration(hours=1, minutes=30)
        assert duration(5) == Duration(seconds=5)


class TestPointBuilders:
    def test_at_and_on(self) -> None:
        assert at(Date(2017, 1, 1), "4pm") == DateTime(2017, 1, 1, 16)
        assert on(Time(9, 30), "2017-01-01") == DateTime(2017, 1, 1, 9, 30)

    def test_midnight_and_noon(self) -> None:
        assert midnight(Date(2017, 1, 1)) == DateTime(2017, 1, 1)
        assert noon("2017-01-01") == DateTime(2017, 1, 1, 12)

    def test_is_midnight(self) -> None:
        assert is_midnight(DateTime(2017, 1, 1))
        assert not is_midnight(DateTime(2017, 1, 1, 0, 0, 0, 1))
        assert is_midnight(Date(2017, 1, 1))
        assert is_midnight(YearMonth(2017, 7))
        assert is_midnight(Year(2017))
        assert is_midnight(Instant(1_483_228_800))
        assert not is_midnight(Instant(1_483_228_800), zone="+01:00")

    def test_at_zone_and_to_local(self) -> None:
        z = at_zone(DateTime(2017, 7, 1, 12), "Europe/London")
        assert str(z) == "2017-07-01T12:00+01:00[Europe/London]"
        assert to_local(z) == DateTime(2017, 7, 1, 12)
        assert to_local(z, "UTC") == DateTime(2017, 7, 1, 11)
        assert to_local(Instant(0)) == DateTime(1970, 1, 1)
        moved = at_zone(Instant(0), Zone.of("+02:00"))
        assert moved.hour == 2


class TestLimits:
    def test_min_and_max_of_type(self) -> None:
        assert min_of_type(Date) == Date(-9999, 1, 1)
        assert max_of_type(Date(2017, 1, 1)) == Date(9999, 12, 31)
        assert max_of_type(DateTime) == DateTime(9999, 12, 31, 23, 59, 59, 999_999_999)
        assert min_of_type(YearMonth) == YearMonth(-9999, 1)
        assert max_of_type(Year) == Year(9999)

    def test_instant_limits(self) -> None:
        lowest = min_of_type(Instant)
        highest = max_of_type(Instant)
        assert str(lowest) == "-9999-01-01T00:00:00Z"
        assert str(highest) == "9999-12-31T23:59:59.999999999Z"

    def test_zoned_limits_are_utc(self) -> None:
        z = min_of_type(ZonedDateTime)
        assert z.zone == Zone.utc()
        assert z.instant == min_of_type(Instant)

    def test_unsupported(self) -> None:
        with pytest.raises(UnsupportedCoercion):
            min_of_type(Duration)
