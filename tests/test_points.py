"""Tests for the point-in-time classes and Time."""

from __future__ import annotations

import pytest

from tempus.core.date import Date
from tempus.core.datetime import DateTime
from tempus.core.duration import Duration
from tempus.core.instant import Instant
from tempus.core.period import Period
from tempus.core.time import Time
from tempus.core.year import Year
from tempus.core.year_month import YearMonth
from tempus.core.zoned import ZonedDateTime
from tempus.errors import TypeMismatch, ValidationError
from tempus.units.era import Era
from tempus.units.zone import Zone


class TestDate:
    """Tests for Date construction, fields and arithmetic."""

    def test_fields(self) -> None:
        d = Date(2017, 1, 1)
        assert (d.year, d.month, d.day) == (2017, 1, 1)
        assert d.epoch_day == 17_167
        assert d.day_of_week == 6  # Sunday
        assert d.day_of_year == 1

    def test_invalid_day_raises(self) -> None:
        with pytest.raises(ValidationError):
            Date(2017, 2, 29)
        with pytest.raises(ValidationError):
            Date(2017, 13, 1)

    def test_year_range(self) -> None:
        assert Date(-9999, 1, 1).era is Era.BCE
        with pytest.raises(ValidationError):
            Date(10_000, 1, 1)

    def test_leap_years(self) -> None:
        assert Date(2016, 2, 29).is_leap_year
        assert not Date(1900, 1, 1).is_leap_year
        assert Date(2000, 2, 1).length_of_month == 29

    def test_add_days_and_months(self) -> None:
        assert Date(2024, 2, 29) + 1 == Date(2024, 3, 1)
        assert Date(2024, 1, 31).add_months(1) == Date(2024, 2, 29)
        assert Date(2024, 2, 29).add_years(1) == Date(2025, 2, 28)
        assert Date(2024, 3, 1) - 1 == Date(2024, 2, 29)

    def test_difference_is_duration(self) -> None:
        assert Date(2024, 1, 15) - Date(2024, 1, 10) == Duration(days=5)

    def test_at(self) -> None:
        assert Date(2017, 1, 1).at(Time(10, 15)) == DateTime(2017, 1, 1, 10, 15)

    def test_str(self) -> None:
        assert str(Date(-44, 3, 15)) == "-0044-03-15"
        assert repr(Date(2024, 2, 29)) == "Date(2024, 2, 29)"


class TestTime:
    """Tests for Time of day."""

    def test_fields(self) -> None:
        t = Time(14, 30, 45, 123)
        assert (t.hour, t.minute, t.second, t.nanosecond) == (14, 30, 45, 123)

    def test_out_of_range(self) -> None:
        with pytest.raises(ValidationError):
            Time(24)

    @pytest.mark.parametrize(
        "time,text",
        [
            (Time(10, 15), "10:15"),
            (Time(10, 15, 30), "10:15:30"),
            (Time(10, 15, 30, 500_000_000), "10:15:30.500"),
            (Time(10, 15, 30, 500_000), "10:15:30.000500"),
        ],
    )
    def test_str(self, time: Time, text: str) -> None:
        assert str(time) == text

    def test_midnight_and_noon(self) -> None:
        assert Time.midnight() == Time()
        assert Time.noon() == Time(12)
        assert Time.midnight()  # truthy


class TestDateTime:
    """Tests for DateTime."""

    def test_combine(self) -> None:
        dt = DateTime.combine(Date(2017, 1, 1), Time(9, 30))
        assert dt.date == Date(2017, 1, 1)
        assert dt.time == Time(9, 30)

    def test_add_duration_crosses_midnight(self) -> None:
        dt = DateTime(2024, 1, 15, 23) + Duration(hours=2)
        assert dt == DateTime(2024, 1, 16, 1)

    def test_add_period_keeps_time(self) -> None:
        dt = DateTime(2024, 1, 31, 8, 45) + Period(months=1)
        assert dt == DateTime(2024, 2, 29, 8, 45)

    def test_difference(self) -> None:
        delta = DateTime(2024, 1, 15, 14) - DateTime(2024, 1, 15, 12, 30)
        assert delta == Duration(minutes=90)

    def test_str(self) -> None:
        assert str(DateTime(2017, 1, 1, 10, 15)) == "2017-01-01T10:15"

    def test_not_comparable_with_date(self) -> None:
        with pytest.raises(TypeError):
            DateTime(2017, 1, 1) < Date(2017, 1, 2)  # type: ignore[operator]


class TestInstant:
    """Tests for Instant."""

    def test_normalization(self) -> None:
        i = Instant(0, -1)
        assert i.epoch_second == -1
        assert i.nanosecond == 999_999_999

    def test_epoch_conversions(self) -> None:
        assert Instant.of_epoch_milli(1_500).epoch_second == 1
        assert Instant.of_epoch_nano(2_000_000_001).nanosecond == 1
        assert Instant(-1, 500_000_000).epoch_milli == -500

    def test_str(self) -> None:
        assert str(Instant(1_483_228_800)) == "2017-01-01T00:00:00Z"
        assert str(Instant(0, 1_000_000)) == "1970-01-01T00:00:00.001Z"

    def test_arithmetic(self) -> None:
        assert Instant(10) + Duration(seconds=5) == Instant(15)
        assert Instant(10) - Instant(4) == Duration(seconds=6)

    def test_truncated_to_seconds(self) -> None:
        assert Instant(5, 999).truncated_to_seconds() == Instant(5)

    def test_out_of_range(self) -> None:
        with pytest.raises(ValidationError):
            Instant(400_000_000_000)


class TestZonedDateTime:
    """Tests for ZonedDateTime."""

    def test_of_local_summer_time(self) -> None:
        london = Zone.of("Europe/London")
        z = ZonedDateTime.of_local(DateTime(2017, 7, 1, 12), london)
        assert z.offset_seconds == 3_600
        assert z.instant == Instant(1_498_906_800)
        assert str(z) == "2017-07-01T12:00+01:00[Europe/London]"

    def test_gap_moves_forward(self) -> None:
        london = Zone.of("Europe/London")
        z = ZonedDateTime.of_local(DateTime(2017, 3, 26, 1, 30), london)
        assert z.date_time == DateTime(2017, 3, 26, 2, 30)

    def test_overlap_takes_earlier_offset(self) -> None:
        london = Zone.of("Europe/London")
        z = ZonedDateTime.of_local(DateTime(2017, 10, 29, 1, 30), london)
        assert z.offset_seconds == 3_600

    def test_period_follows_local_calendar(self) -> None:
        london = Zone.of("Europe/London")
        z = ZonedDateTime.of_local(DateTime(2017, 3, 25, 12), london)
        assert (z + Period(days=1)).hour == 12
        assert (z + Duration(days=1)).hour == 13

    def test_ordering_by_instant_equality_by_zone(self) -> None:
        a = ZonedDateTime(Instant(0), Zone.utc())
        b = ZonedDateTime(Instant(0), Zone.of("+02:00"))
        assert a != b
        assert not a < b and not b < a
        assert b.hour == 2

    def test_utc_text(self) -> None:
        assert str(ZonedDateTime(Instant(0), Zone.utc())) == "1970-01-01T00:00Z"


class TestYearAndYearMonth:
    """Tests for Year and YearMonth."""

    def test_year(self) -> None:
        assert Year(2016).is_leap
        assert Year(2017).length == 365
        assert Year(2017).at_day(32) == Date(2017, 2, 1)
        assert Year(2017) + 3 == Year(2020)
        assert Year(2017) + Period(years=-1) == Year(2016)
        assert Year(0).era is Era.BCE

    def test_year_rejects_months(self) -> None:
        with pytest.raises(TypeMismatch):
            Year(2017) + Period(months=1)

    def test_year_difference(self) -> None:
        assert Year(2017) - Year(2016) == Duration(days=366)

    def test_year_month(self) -> None:
        ym = YearMonth(2016, 2)
        assert ym.length_of_month == 29
        assert ym.at_end_of_month() == Date(2016, 2, 29)
        assert ym + 11 == YearMonth(2017, 1)
        assert ym - Period(years=1) == YearMonth(2015, 2)
        assert ym.to_year() == Year(2016)
        assert str(YearMonth(2020, 7)) == "2020-07"

    def test_year_month_rejects_days(self) -> None:
        with pytest.raises(TypeMismatch):
            YearMonth(2017, 1) + Period(days=1)

    def test_year_month_ordering(self) -> None:
        assert YearMonth(2016, 12) < YearMonth(2017, 1)
        assert YearMonth(2017, 3) - YearMonth(2017, 2) == Duration(days=28)
