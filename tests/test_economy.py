"""Tests for the regime, macro and allocation payloads."""

from datetime import datetime, timezone

import pytest

from oracle.config.countries import (
    ALLOCATIONS,
    REGIME_DATA,
    resolve_allocation_country,
    resolve_regime_country,
    resolve_sector_country,
)
from oracle.economy import allocation_snapshot, macro_indicators, regime_snapshot

NOW = datetime(2025, 3, 1, tzinfo=timezone.utc)


class TestCountryResolution:
    @pytest.mark.parametrize(
        "requested,resolved",
        [
            ("France", "France"),
            ("FRA", "France"),
            ("usa", "États-Unis"),
            ("États-Unis", "États-Unis"),
            ("DEU", "Allemagne"),
            ("Atlantis", "France"),
            (None, "France"),
            ("", "France"),
        ],
    )
    def test_regime_country(self, requested, resolved):
        assert resolve_regime_country(requested) == resolved

    def test_allocation_country(self):
        assert resolve_allocation_country("États-Unis") == "USA"
        assert resolve_allocation_country("DEU") == "Germany"
        assert resolve_allocation_country("Japon") == "France"

    def test_sector_country(self):
        assert resolve_sector_country("fra") == "FRA"
        assert resolve_sector_country("XXX") == "USA"
        assert resolve_sector_country(None) == "USA"


class TestRegimeSnapshot:
    def test_known_country(self):
        payload = regime_snapshot("Japon", now=NOW)

        assert payload["regime"] == "STAGFLATION"
        assert payload["confidence"] == 70
        assert payload["badge_color"] == "orange"
        assert payload["indicators"] == {"croissance": 1.2, "inflation": 3.5, "chomage": 2.8}
        assert payload["timestamp"] == NOW.isoformat()

    def test_unknown_country_gets_france_record(self):
        payload = regime_snapshot("Atlantis", now=NOW)

        assert payload["country"] == "France"
        assert payload["requested_country"] == "Atlantis"
        assert payload["regime"] == REGIME_DATA["France"]["regime"].value

    def test_indicators_are_copied(self):
        payload = regime_snapshot("France")
        payload["indicators"]["croissance"] = 99
        assert REGIME_DATA["France"]["indicators"]["croissance"] == 2.5

    def test_confidence_in_range(self):
        for name in REGIME_DATA:
            assert 0 <= regime_snapshot(name)["confidence"] <= 100


class TestMacroIndicators:
    def test_english_keys(self):
        payload = macro_indicators("CAN", now=NOW)

        assert payload["country"] == "Canada"
        assert payload["indicators"] == {"growth": 2.9, "inflation": 2.4, "unemployment": 5.2}
        assert payload["last_update"] == NOW.isoformat()


class TestAllocationSnapshot:
    @pytest.mark.parametrize("country", list(ALLOCATIONS))
    def test_sums_to_100(self, country):
        payload = allocation_snapshot(country)
        assert sum(payload["allocations"].values()) == 100
        assert payload["total"] == 100

    def test_chart_data(self):
        payload = allocation_snapshot("USA", now=NOW)

        assert payload["regime"] == "EXPANSION"
        assert [s["name"] for s in payload["chartData"]] == ["Actions", "Obligations", "Or", "Liquidités"]
        assert payload["chartData"][0]["value"] == 70

    def test_unknown_country_gets_france(self):
        payload = allocation_snapshot("Atlantis")
        assert payload["country"] == "France"
        assert payload["allocations"] == ALLOCATIONS["France"]
