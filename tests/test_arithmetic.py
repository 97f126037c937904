"""Tests for the arithmetic functions."""

from __future__ import annotations

import pytest

from tempus.arithmetic.ops import (
    absolute,
    add,
    between,
    canonical_step,
    decrement,
    divide,
    increment,
    multiply,
    negate,
    new_duration,
    new_period,
    subtract,
)
from tempus.core.date import Date
from tempus.core.datetime import DateTime
from tempus.core.duration import Duration
from tempus.core.instant import Instant
from tempus.core.period import Period
from tempus.core.time import Time
from tempus.core.year import Year
from tempus.core.year_month import YearMonth
from tempus.core.zoned import ZonedDateTime
from tempus.errors import TypeMismatch, UnitNotRecognized, UnsupportedCoercion
from tempus.units.zone import Zone


class TestAdd:
    """Tests for add() across the variants."""

    def test_instant_plus_duration(self) -> None:
        assert add(Instant(0), Duration(minutes=1)) == Instant(60)

    def test_instant_rejects_period(self) -> None:
        with pytest.raises(TypeMismatch) as excinfo:
            add(Instant(0), Period(days=1))
        assert excinfo.value.left_variant == "Instant"
        assert excinfo.value.right_variant == "Period"

    def test_date_plus_int_is_days(self) -> None:
        assert add(Date(2024, 1, 15), 10) == Date(2024, 1, 25)

    def test_date_rejects_duration(self) -> None:
        with pytest.raises(TypeMismatch):
            add(Date(2024, 1, 15), Duration(days=1))

    def test_year_month_plus_int_is_months(self) -> None:
        assert add(YearMonth(2017, 11), 3) == YearMonth(2018, 2)

    def test_year_plus_period(self) -> None:
        assert add(Year(2017), Period(years=2)) == Year(2019)

    def test_year_rejects_months(self) -> None:
        with pytest.raises(TypeMismatch):
            add(Year(2017), Period(months=1))

    def test_date_time_and_zoned(self) -> None:
        assert add(DateTime(2017, 1, 31, 9), Period(months=1)) == DateTime(2017, 2, 28, 9)
        z = ZonedDateTime(Instant(0), Zone.utc())
        assert add(z, Duration(hours=1)).hour == 1

    def test_quantities(self) -> None:
        assert add(Duration(seconds=2), Duration(seconds=3)) == Duration(seconds=5)
        assert add(Period(days=1), Period(months=1)) == Period(months=1, days=1)
        with pytest.raises(TypeMismatch):
            add(Duration(seconds=1), Period(days=1))

    def test_bool_is_not_an_int_quantity(self) -> None:
        with pytest.raises(TypeMismatch):
            add(Date(2017, 1, 1), True)

    def test_time_is_not_addable(self) -> None:
        with pytest.raises(TypeMismatch):
            add(Time(9), Duration(hours=1))


class TestSubtract:
    def test_point_minus_quantity(self) -> None:
        assert subtract(Date(2024, 1, 15), 15) == Date(2023, 12, 31)
        assert subtract(Instant(60), Duration(minutes=1)) == Instant(0)

    def test_point_minus_point(self) -> None:
        assert subtract(Date(2024, 1, 2), Date(2024, 1, 1)) == Duration(days=1)
        assert subtract(Instant(0), Instant(60)) == Duration(minutes=-1)

    def test_mismatched_points(self) -> None:
        with pytest.raises(TypeMismatch):
            subtract(Date(2024, 1, 2), DateTime(2024, 1, 1))


class TestStepping:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (Instant(0), Instant(1)),
            (DateTime(2017, 12, 31, 23, 59, 59), DateTime(2018, 1, 1)),
            (Date(2017, 2, 28), Date(2017, 3, 1)),
            (YearMonth(2017, 12), YearMonth(2018, 1)),
            (Year(2017), Year(2018)),
            (Duration(), Duration(seconds=1)),
        ],
    )
    def test_increment(self, value: object, expected: object) -> None:
        assert increment(value) == expected

    def test_decrement(self) -> None:
        assert decrement(Date(2017, 3, 1)) == Date(2017, 2, 28)
        assert decrement(Instant(1)) == Instant(0)

    def test_canonical_step(self) -> None:
        assert canonical_step(Date(2017, 1, 1)) == 1
        assert canonical_step(Instant(0)) == Duration(seconds=1)
        with pytest.raises(TypeMismatch):
            canonical_step(Period(days=1))


class TestScaling:
    def test_multiply(self) -> None:
        assert multiply(Duration(seconds=30), 3) == Duration(seconds=90)
        assert multiply(Period(months=1), 2) == Period(months=2)
        with pytest.raises(TypeMismatch):
            multiply(Date(2017, 1, 1), 2)

    def test_divide(self) -> None:
        assert divide(Duration(seconds=10), 4) == Duration(seconds=2, milliseconds=500)
        assert divide(Duration(hours=1), Duration(minutes=7)) == 8
        with pytest.raises(TypeMismatch):
            divide(Period(days=2), 2)
        with pytest.raises(ZeroDivisionError):
            divide(Duration(seconds=1), 0)

    def test_negate_and_absolute(self) -> None:
        assert negate(Duration(seconds=1)) == Duration(seconds=-1)
        assert negate(Period(days=1)) == Period(days=-1)
        assert absolute(Duration(seconds=-5)) == Duration(seconds=5)
        with pytest.raises(TypeMismatch):
            absolute(Period(days=-1))


class TestBetween:
    """Tests for between()."""

    @pytest.mark.parametrize(
        "point",
        [
            Instant(123, 456),
            Date(2017, 1, 1),
            DateTime(2017, 1, 1, 9),
            ZonedDateTime(Instant(0), Zone.of("Europe/London")),
            Year(2017),
            YearMonth(2017, 7),
        ],
    )
    def test_between_a_point_and_itself_is_zero(self, point: object) -> None:
        assert between(point, point) == Duration.zero()

    def test_between_dates(self) -> None:
        assert between(Date(2017, 1, 1), Date(2017, 1, 3)) == Duration(days=2)
        assert between(Year(2016), Year(2017)) == Duration(days=366)

    def test_between_times(self) -> None:
        assert between(Time(9), Time(17, 30)) == Duration(hours=8, minutes=30)

    def test_mismatched_variants(self) -> None:
        with pytest.raises(TypeMismatch):
            between(Date(2017, 1, 1), Year(2017))

    def test_exact_units_truncate(self) -> None:
        assert between(Instant(0), Instant(7_200), "hours") == 2
        assert between(Instant(0), Instant(7_199), "hours") == 1
        assert between(Instant(7_199), Instant(0), "hours") == -1
        assert between(Date(2017, 1, 1), Date(2017, 1, 15), "weeks") == 2
        assert between(Time(0), Time(13), "half-days") == 1

    def test_calendar_units(self) -> None:
        assert between(Date(2016, 1, 31), Date(2017, 3, 1), "months") == 13
        assert between(Date(2017, 1, 31), Date(2017, 2, 28), "months") == 0
        assert between(Date(2017, 3, 1), Date(2016, 1, 31), "months") == -13
        assert between(Year(2000), Year(2017), "decades") == 1
        assert between(DateTime(2000, 6, 1, 12), DateTime(2001, 6, 1, 11), "years") == 0

    def test_eras(self) -> None:
        assert between(Year(-1), Year(1), "eras") == 1
        assert between(Year(1), Year(2017), "eras") == 0

    def test_days_in_zone_follow_local_calendar(self) -> None:
        london = Zone.of("Europe/London")
        a = ZonedDateTime.of_local(DateTime(2017, 3, 25, 12), london)
        b = ZonedDateTime.of_local(DateTime(2017, 3, 26, 12), london)
        assert between(a, b, "days") == 1
        assert between(a, b, "hours") == 23

    def test_forever_is_unsupported(self) -> None:
        with pytest.raises(UnsupportedCoercion):
            between(Date(2017, 1, 1), Date(2018, 1, 1), "forever")

    def test_unknown_unit(self) -> None:
        with pytest.raises(UnitNotRecognized):
            between(Date(2017, 1, 1), Date(2018, 1, 1), "fortnights")

    def test_calendar_unit_on_times(self) -> None:
        with pytest.raises(UnsupportedCoercion):
            between(Time(1), Time(2), "months")


class TestQuantityConstructors:
    def test_new_duration(self) -> None:
        assert new_duration(3, "minutes") == Duration(minutes=3)
        assert new_duration(1, "half-days") == Duration(hours=12)
        assert new_duration(5) == Duration(seconds=5)
        assert new_duration(2, "weeks") == Duration(days=14)

    def test_new_duration_rejects_calendar_units(self) -> None:
        with pytest.raises(UnsupportedCoercion):
            new_duration(1, "months")
        with pytest.raises(UnitNotRecognized):
            new_duration(1, "lunar-cycles")

    def test_new_period(self) -> None:
        assert new_period(2, "weeks") == Period(days=14)
        assert new_period(3) == Period(days=3)
        assert new_period(1, "decades") == Period(years=10)
        assert new_period(2, "millennia") == Period(years=2_000)

    def test_new_period_rejects_clock_units(self) -> None:
        with pytest.raises(UnsupportedCoercion):
            new_period(1, "hours")
        with pytest.raises(UnsupportedCoercion):
            new_period(1, "eras")
