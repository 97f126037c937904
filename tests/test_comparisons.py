"""Tests for the comparison functions."""

from __future__ import annotations

import pytest

from tempus.arithmetic.comparisons import (
    after,
    after_or_equal,
    before,
    before_or_equal,
    compare,
    max_value,
    min_value,
)
from tempus.core.date import Date
from tempus.core.datetime import DateTime
from tempus.core.duration import Duration
from tempus.core.instant import Instant
from tempus.core.period import Period
from tempus.core.year import Year
from tempus.core.year_month import YearMonth
from tempus.core.zoned import ZonedDateTime
from tempus.errors import TypeMismatch
from tempus.units.zone import Zone


class TestCompare:
    def test_same_variant(self) -> None:
        assert compare(Date(2024, 1, 15), Date(2024, 1, 16)) == -1
        assert compare(Year(2017), Year(2017)) == 0
        assert compare(YearMonth(2017, 2), YearMonth(2017, 1)) == 1

    def test_zoned_orders_by_instant(self) -> None:
        utc = ZonedDateTime(Instant(0), Zone.utc())
        tokyo = ZonedDateTime(Instant(0), Zone.of("Asia/Tokyo"))
        assert compare(utc, tokyo) == 0

    def test_durations(self) -> None:
        assert compare(Duration(minutes=1), Duration(seconds=60)) == 0
        assert compare(Duration(seconds=-1), Duration()) == -1

    def test_periods(self) -> None:
        assert compare(Period(years=1), Period(months=13)) == -1
        assert compare(Period(months=1), Period(days=30), reference=Date(2017, 2, 1)) == -1
        assert compare(Period(months=1), Period(days=30), reference=Date(2017, 1, 1)) == 1

    def test_mixed_variants_raise(self) -> None:
        with pytest.raises(TypeMismatch) as excinfo:
            compare(Date(2017, 1, 1), Instant(0))
        assert excinfo.value.left_variant == "Date"
        assert excinfo.value.right_variant == "Instant"

    def test_period_against_duration_raises(self) -> None:
        with pytest.raises(TypeMismatch):
            compare(Period(days=1), Duration(days=1))


class TestChainedComparisons:
    def test_before_requires_every_adjacent_pair(self) -> None:
        a, b, c = Year(2015), Year(2017), Year(2016)
        assert before(a, c)
        assert not before(b, c)
        assert before(a, b, c) is False

    def test_before_holds_for_ascending_values(self) -> None:
        assert before(Year(2015), Year(2016), Year(2017))

    def test_single_argument_is_true(self) -> None:
        assert before(Date(2017, 1, 1))
        assert after(Date(2017, 1, 1))

    def test_no_arguments_raise(self) -> None:
        with pytest.raises(ValueError):
            before()

    def test_or_equal_forms(self) -> None:
        d = Date(2017, 1, 1)
        assert before_or_equal(d, d, Date(2017, 1, 2))
        assert not before(d, d)
        assert after_or_equal(Date(2017, 1, 2), d, d)
        assert after(DateTime(2017, 1, 2), DateTime(2017, 1, 1))

    def test_chained_mixed_variants_raise(self) -> None:
        with pytest.raises(TypeMismatch):
            before(Date(2017, 1, 1), Date(2017, 1, 2), DateTime(2017, 1, 3))


class TestMinMax:
    def test_min_and_max(self) -> None:
        dates = [Date(2024, 1, 20), Date(2024, 1, 15), Date(2024, 1, 18)]
        assert min_value(*dates) == Date(2024, 1, 15)
        assert max_value(*dates) == Date(2024, 1, 20)

    def test_ties_keep_first_argument(self) -> None:
        first = ZonedDateTime(Instant(0), Zone.utc())
        second = ZonedDateTime(Instant(0), Zone.of("+01:00"))
        assert min_value(first, second) is first
        assert max_value(first, second) is first

    def test_empty_raises(self) -> None:
        with pytest.raises(ValueError):
            min_value()

    def test_mixed_raise(self) -> None:
        with pytest.raises(TypeMismatch):
            max_value(Year(2017), YearMonth(2017, 1))
