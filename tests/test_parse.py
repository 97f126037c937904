"""Tests for parsing point-in-time text."""

from __future__ import annotations

import logging

import pytest

from tempus.core.date import Date
from tempus.core.datetime import DateTime
from tempus.core.instant import Instant
from tempus.core.time import Time
from tempus.core.year import Year
from tempus.core.year_month import YearMonth
from tempus.core.zoned import ZonedDateTime
from tempus.errors import ParseError, UnsupportedCoercion, ValidationError
from tempus.parse import PATTERNS, parse
from tempus.units.zone import Zone


class TestParsePatterns:
    """Each recognised form produces the expected value."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("4pm", Time(16)),
            ("11 am", Time(11)),
            ("12am", Time(0)),
            ("12PM", Time(12)),
            ("16", Time(16)),
            ("16:30", Time(16, 30)),
            ("16:30:05.25", Time(16, 30, 5, 250_000_000)),
            ("9:30", Time(9, 30)),
            ("2017-01-01T09:00:00Z", Instant(1_483_261_200)),
            ("2017-01-01T09:00", DateTime(2017, 1, 1, 9)),
            ("2017-01-01T09:00:00.000000001", DateTime(2017, 1, 1, 9, 0, 0, 1)),
            ("2017-01-01", Date(2017, 1, 1)),
            ("2020-07", YearMonth(2020, 7)),
            ("2017", Year(2017)),
            ("-0044", Year(-44)),
        ],
    )
    def test_parse(self, text: str, expected: object) -> None:
        result = parse(text)
        assert type(result) is type(expected)
        assert result == expected

    def test_offset_date_time(self) -> None:
        z = parse("2017-01-01T09:00+01:00")
        assert isinstance(z, ZonedDateTime)
        assert z.zone == Zone.of("+01:00")
        assert z.instant == Instant(1_483_257_600)

    def test_zoned_date_time(self) -> None:
        z = parse("2017-07-01T12:00+01:00[Europe/London]")
        assert isinstance(z, ZonedDateTime)
        assert z.zone == Zone.of("Europe/London")
        assert str(z) == "2017-07-01T12:00+01:00[Europe/London]"

    def test_zoned_date_time_with_wrong_offset_uses_zone_rules(self) -> None:
        z = parse("2017-07-01T12:00+05:00[Europe/London]")
        assert z.date_time == DateTime(2017, 7, 1, 12)
        assert z.offset_seconds == 3_600

    def test_surrounding_whitespace_is_ignored(self) -> None:
        assert parse("  2017-01-01 ") == Date(2017, 1, 1)

    def test_year_pattern_is_last(self) -> None:
        assert [p.name for p in PATTERNS][-1] == "year"

    def test_time_of_day_patterns_come_first(self) -> None:
        names = [p.name for p in PATTERNS]
        assert names[:4] == ["hour_am_pm", "hour", "hour_minute", "time"]
        assert parse("16:30") == Time(16, 30)
        assert parse("16:30:05") == Time(16, 30, 5)


class TestParseErrors:
    """Tests for rejected text."""

    @pytest.mark.parametrize("text", ["", "tomorrow", "2017/01/01", "1pm-ish"])
    def test_unparseable(self, text: str) -> None:
        with pytest.raises(ParseError) as excinfo:
            parse(text)
        assert excinfo.value.input == text

    @pytest.mark.parametrize("text", ["2017-13", "2017-02-30", "25", "13pm", "0am"])
    def test_out_of_range_fields(self, text: str) -> None:
        with pytest.raises(ValidationError):
            parse(text)

    def test_non_string(self) -> None:
        with pytest.raises(UnsupportedCoercion):
            parse(2017)  # type: ignore[arg-type]

    def test_logs_matched_pattern(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="tempus.parse"):
            parse("2020-07")
        assert "year_month" in caplog.text
