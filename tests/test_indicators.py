"""Tests for the indicators breakdown and its fallback policy."""

import httpx
import pytest

from oracle.config.indicators import FALLBACK_BREAKDOWN
from oracle.indicators import (
    DataStatus,
    IndicatorsClient,
    UpstreamError,
    fallback_breakdown,
    get_indicators_breakdown,
    impact_score,
    overall_score,
)

UPSTREAM_URL = "http://indicators.test/breakdown"


def client_for(handler):
    return IndicatorsClient(url=UPSTREAM_URL, transport=httpx.MockTransport(handler))


class TestScoring:
    def test_impact_scores(self):
        assert impact_score("positive") == 1.0
        assert impact_score("negative") == 0.0
        assert impact_score("neutral") == 0.5
        assert impact_score("POSITIVE") == 1.0
        assert impact_score(None) == 0.5
        assert impact_score("sideways") == 0.5

    def test_fallback_score(self):
        assert overall_score(FALLBACK_BREAKDOWN) == pytest.approx(0.8202, abs=1e-3)

    def test_empty_breakdown_scores_zero(self):
        assert overall_score({}) == 0.0

    def test_zero_weights_score_zero(self):
        breakdown = {"x": {"weight": 0, "confidence": 1, "impact": "positive"}}
        assert overall_score(breakdown) == 0.0

    def test_score_bounded_by_confidence(self):
        breakdown = {
            "a": {"weight": 0.5, "confidence": 0.6, "impact": "positive"},
            "b": {"weight": 0.5, "confidence": 0.6, "impact": "positive"},
        }
        assert overall_score(breakdown) == pytest.approx(0.6)

    def test_all_negative_scores_zero(self):
        breakdown = {"a": {"weight": 1, "confidence": 0.9, "impact": "negative"}}
        assert overall_score(breakdown) == 0.0


class TestFallbackBreakdown:
    def test_sources_tagged(self):
        breakdown = fallback_breakdown()
        assert breakdown["electricity"]["source"] == "EIA (fallback)"
        assert all(r["source"].endswith("(fallback)") for r in breakdown.values())

    def test_config_untouched(self):
        fallback_breakdown()
        assert FALLBACK_BREAKDOWN["electricity"]["source"] == "EIA"

    def test_weights_sum_to_one(self):
        assert sum(r["weight"] for r in FALLBACK_BREAKDOWN.values()) == pytest.approx(1.0)


class TestIndicatorsClient:
    def test_unconfigured(self):
        assert IndicatorsClient().configured is False
        assert IndicatorsClient(url=UPSTREAM_URL).configured is True

    @pytest.mark.asyncio
    async def test_fetch_returns_json(self):
        client = client_for(lambda request: httpx.Response(200, json={"country": "FRA"}))
        assert await client.fetch() == {"country": "FRA"}

    @pytest.mark.asyncio
    async def test_fetch_raises_on_status(self):
        client = client_for(lambda request: httpx.Response(503))
        with pytest.raises(UpstreamError, match="503"):
            await client.fetch()

    @pytest.mark.asyncio
    async def test_fetch_raises_on_bad_json(self):
        client = client_for(lambda request: httpx.Response(200, content=b"<html>"))
        with pytest.raises(UpstreamError):
            await client.fetch()

    @pytest.mark.asyncio
    async def test_fetch_raises_on_non_object(self):
        client = client_for(lambda request: httpx.Response(200, json=[1, 2, 3]))
        with pytest.raises(UpstreamError, match="not an object"):
            await client.fetch()

    @pytest.mark.asyncio
    async def test_fetch_raises_on_connect_error(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(UpstreamError, match="unavailable"):
            await client_for(handler).fetch()


class TestGetIndicatorsBreakdown:
    @pytest.mark.asyncio
    async def test_unconfigured_serves_fallback(self):
        payload = await get_indicators_breakdown(IndicatorsClient(), "FRA")

        assert payload["data_status"] == DataStatus.FALLBACK.value
        assert payload["country"] == "FRA"
        assert payload["overall_score"] == pytest.approx(0.8202, abs=1e-3)
        assert len(payload["indicators_breakdown"]) == 7
        assert payload["fallback_reason"]
        assert payload["sources"]["fallback_reason"] == payload["fallback_reason"]

    @pytest.mark.asyncio
    async def test_live_breakdown(self):
        upstream = {
            "country": "FRA",
            "indicators_breakdown": {
                "pmi": {"weight": 1.0, "confidence": 0.8, "impact": "positive", "source": "FRED"},
            },
            "timestamp": "2025-03-01T00:00:00+00:00",
            "sources": {"pmi": "FRED"},
        }
        client = client_for(lambda request: httpx.Response(200, json=upstream))

        payload = await get_indicators_breakdown(client, "FRA")

        assert payload["data_status"] == DataStatus.LIVE.value
        assert payload["overall_score"] == pytest.approx(0.8)
        assert payload["timestamp"] == "2025-03-01T00:00:00+00:00"
        assert payload["sources"] == {"pmi": "FRED"}

    @pytest.mark.asyncio
    async def test_empty_breakdown_is_no_data(self):
        client = client_for(lambda request: httpx.Response(200, json={"indicators_breakdown": {}}))

        payload = await get_indicators_breakdown(client, "DEU")

        assert payload["data_status"] == DataStatus.NO_DATA.value
        assert payload["overall_score"] == 0.0
        assert payload["country"] == "DEU"

    @pytest.mark.asyncio
    async def test_upstream_error_serves_fallback(self):
        client = client_for(lambda request: httpx.Response(500))

        payload = await get_indicators_breakdown(client, "FRA")

        assert payload["data_status"] == DataStatus.FALLBACK.value
        assert "500" in payload["fallback_reason"]

    @pytest.mark.asyncio
    async def test_malformed_breakdown_serves_fallback(self):
        client = client_for(lambda request: httpx.Response(200, json={"indicators_breakdown": [1]}))

        payload = await get_indicators_breakdown(client, "FRA")

        assert payload["data_status"] == DataStatus.FALLBACK.value

    @pytest.mark.asyncio
    async def test_unexpected_error_is_reported(self):
        class BrokenClient(IndicatorsClient):
            async def fetch(self):
                raise RuntimeError("boom")

        payload = await get_indicators_breakdown(BrokenClient(url=UPSTREAM_URL), "FRA")

        assert payload["data_status"] == DataStatus.ERROR.value
        assert payload["error"] == "boom"
        assert payload["indicators_breakdown"] == {}
