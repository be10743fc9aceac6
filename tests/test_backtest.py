"""Tests for the backtesting summary."""

from datetime import date, datetime, timezone

import pytest

from oracle.backtest import (
    InvalidPeriodError,
    compute_performance,
    max_drawdown,
    parse_period,
    run_backtest,
)

NOW = datetime(2025, 1, 15, tzinfo=timezone.utc)


class TestParsePeriod:
    def test_defaults(self):
        start, end = parse_period(None, None, today=date(2025, 1, 15))
        assert start == date(2023, 1, 1)
        assert end == date(2025, 1, 15)

    def test_invalid_date(self):
        with pytest.raises(InvalidPeriodError):
            parse_period("2023-13-01", None)

    def test_end_before_start(self):
        with pytest.raises(InvalidPeriodError, match="before"):
            parse_period("2024-01-01", "2023-01-01")


class TestMetrics:
    def test_max_drawdown(self):
        assert max_drawdown([100, 120, 90, 130]) == pytest.approx(-25.0)
        assert max_drawdown([100, 110, 120]) == 0.0
        assert max_drawdown([]) == 0.0

    def test_single_point_is_flat(self):
        performance = compute_performance([date(2024, 1, 1)], [100.0])
        assert performance.total_return == 0.0
        assert performance.volatility == 0.0

    def test_one_year_doubling(self):
        dates = [date(2023, 1, 1), date(2024, 1, 1)]
        performance = compute_performance(dates, [100.0, 200.0])

        assert performance.total_return == 100.0
        assert performance.annualized_return == pytest.approx(100.0, abs=0.5)
        assert performance.max_drawdown == 0.0


class TestRunBacktest:
    def test_full_series(self):
        payload = run_backtest(now=NOW)

        assert payload["status"] == "API OK"
        assert payload["country"] == "France"
        assert payload["performance"]["totalReturn"] == 24.5
        assert payload["performance"]["maxDrawdown"] == 0.0
        assert payload["performance"]["volatility"] > 0
        assert payload["period"] == {"start": "2023-01-01", "end": "2025-01-15", "days": 745}
        assert len(payload["historicalData"]) == 8
        assert payload["historicalData"][0]["return"] == 0.0
        assert payload["historicalData"][-1]["return"] == 24.5
        assert payload["metrics"]["rendement"] == "24.50%"

    def test_window_rebases_returns(self):
        payload = run_backtest("2024-01-01", "2024-12-31", country="USA", now=NOW)

        assert payload["country"] == "USA"
        assert [p["date"] for p in payload["historicalData"]] == ["2024-03-01", "2024-06-01", "2024-08-01"]
        assert payload["historicalData"][0]["return"] == 0.0
        assert payload["performance"]["totalReturn"] == pytest.approx((124.5 / 118.9 - 1) * 100, abs=0.01)

    def test_empty_window(self):
        payload = run_backtest("2020-01-01", "2020-06-01", now=NOW)

        assert payload["historicalData"] == []
        assert payload["performance"]["totalReturn"] == 0.0

    def test_invalid_dates_raise(self):
        with pytest.raises(InvalidPeriodError):
            run_backtest("not-a-date", now=NOW)
