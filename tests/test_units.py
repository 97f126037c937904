"""Tests for unit keywords, eras and zones."""

from __future__ import annotations

import datetime

import pytest

from tempus.errors import UnitNotRecognized, ZoneError
from tempus.units import Era, TimeUnit, Zone, unit

KEYWORDS = [
    "nanos",
    "micros",
    "millis",
    "seconds",
    "minutes",
    "hours",
    "half-days",
    "days",
    "weeks",
    "months",
    "years",
    "decades",
    "centuries",
    "millennia",
    "eras",
    "forever",
]


class TestTimeUnit:
    """Tests for the unit keyword vocabulary."""

    @pytest.mark.parametrize("keyword", KEYWORDS)
    def test_every_keyword_is_a_unit(self, keyword: str) -> None:
        assert unit(keyword).value == keyword

    def test_keyword_count(self) -> None:
        assert [u.value for u in TimeUnit] == KEYWORDS

    def test_unknown_keyword(self) -> None:
        with pytest.raises(UnitNotRecognized) as excinfo:
            unit("fortnights")
        assert excinfo.value.keyword == "fortnights"
        assert "Not a unit" in str(excinfo.value)

    def test_unit_passes_through(self) -> None:
        assert TimeUnit.from_keyword(TimeUnit.DAYS) is TimeUnit.DAYS

    def test_exact_and_calendar_lengths(self) -> None:
        assert TimeUnit.HALF_DAYS.exact_nanos == 12 * 3_600 * 10**9
        assert TimeUnit.WEEKS.exact_nanos == 7 * 86_400 * 10**9
        assert TimeUnit.MONTHS.exact_nanos is None
        assert TimeUnit.CENTURIES.months == 1_200
        assert TimeUnit.CENTURIES.is_calendar_based
        assert not TimeUnit.ERAS.is_calendar_based


class TestEra:
    def test_of_year(self) -> None:
        assert Era.of_year(1) is Era.CE
        assert Era.of_year(0) is Era.BCE
        assert Era.BCE.ordinal < Era.CE.ordinal


class TestZone:
    """Tests for fixed and region zones."""

    @pytest.mark.parametrize("text", ["Z", "UTC", "utc", "GMT"])
    def test_utc_aliases(self, text: str) -> None:
        assert Zone.of(text) is Zone.utc()

    @pytest.mark.parametrize(
        "text,seconds,zone_id",
        [
            ("+05:30", 19_800, "+05:30"),
            ("+0530", 19_800, "+05:30"),
            ("-08", -28_800, "-08:00"),
            ("+01:00:30", 3_630, "+01:00:30"),
        ],
    )
    def test_fixed_offsets(self, text: str, seconds: int, zone_id: str) -> None:
        zone = Zone.of(text)
        assert zone.is_fixed
        assert zone.fixed_offset_seconds == seconds
        assert zone.id == zone_id

    def test_zero_offset_is_utc(self) -> None:
        assert Zone.of("+00:00") is Zone.utc()
        assert Zone.utc().is_utc

    def test_from_hours(self) -> None:
        assert Zone.from_hours(-5).id == "-05:00"
        assert Zone.from_hours(5, 30) == Zone.of("+05:30")

    def test_offset_limits(self) -> None:
        with pytest.raises(ZoneError):
            Zone.of_offset(19 * 3_600)
        with pytest.raises(ZoneError):
            Zone.of("+05:75")

    def test_region(self) -> None:
        london = Zone.of("Europe/London")
        assert not london.is_fixed
        assert london.offset_at(1_500_000_000) == 3_600
        assert london.offset_at(1_483_228_800) == 0

    def test_unknown_region(self) -> None:
        with pytest.raises(ZoneError):
            Zone.of("Mars/Olympus_Mons")

    def test_equality_by_id(self) -> None:
        assert Zone.of("Europe/Paris") == Zone.of("Europe/Paris")
        assert Zone.of("Europe/Paris") != Zone.of("+01:00")
        assert repr(Zone.of("Europe/Paris")) == "Zone('Europe/Paris')"

    def test_to_tzinfo(self) -> None:
        assert Zone.utc().to_tzinfo() is datetime.timezone.utc
        offset = Zone.of("+02:00").to_tzinfo().utcoffset(None)
        assert offset == datetime.timedelta(hours=2)
