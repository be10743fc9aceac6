"""Pytest configuration and fixtures."""

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from oracle.api.dependencies import CommonDependencies, get_common_deps
from oracle.app import app
from oracle.cache import TTLCache
from oracle.indicators import IndicatorsClient
from oracle.market import MarketDataService, PriceHistory
from oracle.random_source import RandomSource
from oracle.settings import Settings


def make_history(symbol, closes, start=datetime(2025, 1, 2, tzinfo=timezone.utc)):
    """Build a PriceHistory with one close per day."""
    return PriceHistory(
        symbol=symbol,
        dates=[start + timedelta(days=i) for i in range(len(closes))],
        closes=list(closes),
        volumes=[1_000_000 + i for i in range(len(closes))],
    )


class StubMarketService(MarketDataService):
    """Market service serving canned data instead of calling Yahoo Finance."""

    def __init__(self, histories=None, quotes=None):
        super().__init__(enabled=True)
        self.histories = histories or {}
        self.quotes = quotes or {}
        self.history_calls = 0

    def get_price_history(self, symbol, period=None, interval="1d"):
        self.history_calls += 1
        return self.histories.get(symbol)

    def get_quote(self, symbol):
        return self.quotes.get(symbol)


class FakeClock:
    """Manually advanced clock for cache tests."""

    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def market():
    return StubMarketService()


@pytest.fixture
def deps(market, clock):
    """Dependencies with no network access and deterministic jitter."""
    return CommonDependencies(
        settings=Settings(live_market_data=False, indicators_url="", random_seed=7),
        market=market,
        indicators=IndicatorsClient(url=""),
        sector_cache=TTLCache("sectors-test", ttl_seconds=300, clock=clock),
        rng=RandomSource(seed=7),
    )


@pytest.fixture
def client(deps):
    async def override_deps():
        return deps

    app.dependency_overrides[get_common_deps] = override_deps
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def history_factory():
    return make_history
