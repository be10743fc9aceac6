"""
Backtest - Performance summary of the model portfolio over a date window.

The value path is the model portfolio series from config (base 100). Metrics
are derived from the points that fall inside the requested window.
"""

import math
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Optional, Sequence

import numpy as np

from oracle.config.markets import (
    BACKTEST_SERIES,
    DEFAULT_BACKTEST_COUNTRY,
    DEFAULT_BACKTEST_START,
)

DAYS_PER_YEAR = 365.25


class InvalidPeriodError(ValueError):
    """Raised when backtest dates are malformed or out of order."""


@dataclass
class BacktestPerformance:
    total_return: float = 0.0
    annualized_return: float = 0.0
    volatility: float = 0.0
    sharpe_ratio: float = 0.0
    max_drawdown: float = 0.0

    def to_dict(self) -> dict:
        return {
            "totalReturn": self.total_return,
            "annualizedReturn": self.annualized_return,
            "volatility": self.volatility,
            "sharpeRatio": self.sharpe_ratio,
            "maxDrawdown": self.max_drawdown,
        }

    def formatted(self) -> dict:
        """Display strings for the metrics table."""
        return {
            "rendement": f"{self.total_return:.2f}%",
            "volatilite": f"{self.volatility:.2f}%",
            "sharpe": f"{self.sharpe_ratio:.2f}",
            "maxDrawdown": f"{self.max_drawdown:.2f}%",
        }


def parse_period(start: Optional[str], end: Optional[str], today: Optional[date] = None) -> tuple[date, date]:
    """Parse ISO dates, defaulting start to the series start and end to today."""
    today = today or datetime.now(timezone.utc).date()
    try:
        start_date = date.fromisoformat(start) if start else date.fromisoformat(DEFAULT_BACKTEST_START)
        end_date = date.fromisoformat(end) if end else today
    except ValueError as e:
        raise InvalidPeriodError(f"Invalid date: {e}") from e
    if end_date < start_date:
        raise InvalidPeriodError("endDate must not be before startDate")
    return start_date, end_date


def max_drawdown(values: Sequence[float]) -> float:
    """Largest peak-to-trough decline in percent (0 or negative)."""
    if len(values) == 0:
        return 0.0
    arr = np.asarray(values, dtype=float)
    running_max = np.maximum.accumulate(arr)
    return float(np.min(arr / running_max - 1) * 100)


def compute_performance(dates: Sequence[date], values: Sequence[float]) -> BacktestPerformance:
    """Total return, CAGR, annualized volatility, Sharpe and max drawdown."""
    if len(values) < 2:
        return BacktestPerformance()

    arr = np.asarray(values, dtype=float)
    total_return = (arr[-1] / arr[0] - 1) * 100

    years = (dates[-1] - dates[0]).days / DAYS_PER_YEAR
    if years > 0:
        annualized = ((arr[-1] / arr[0]) ** (1 / years) - 1) * 100
    else:
        annualized = 0.0

    returns = arr[1:] / arr[:-1] - 1
    periods_per_year = len(returns) / years if years > 0 else 0
    ddof = 1 if len(returns) > 1 else 0
    volatility = float(np.std(returns, ddof=ddof) * math.sqrt(periods_per_year) * 100)
    sharpe = annualized / volatility if volatility > 0 else 0.0

    return BacktestPerformance(
        total_return=round(float(total_return), 2),
        annualized_return=round(float(annualized), 2),
        volatility=round(volatility, 2),
        sharpe_ratio=round(float(sharpe), 2),
        max_drawdown=round(max_drawdown(arr), 2),
    )


def run_backtest(
    start: Optional[str] = None,
    end: Optional[str] = None,
    country: Optional[str] = None,
    now: Optional[datetime] = None,
) -> dict:
    """Build the backtesting card payload.

    Raises:
        InvalidPeriodError: If the dates cannot be parsed or end precedes start
    """
    now = now or datetime.now(timezone.utc)
    start_date, end_date = parse_period(start, end, today=now.date())

    points = [
        (date.fromisoformat(d), v)
        for d, v in BACKTEST_SERIES
        if start_date <= date.fromisoformat(d) <= end_date
    ]
    dates = [d for d, _ in points]
    values = [v for _, v in points]
    performance = compute_performance(dates, values)
    base = values[0] if values else 1.0

    return {
        "status": "API OK",
        "performance": performance.to_dict(),
        "period": {
            "start": start_date.isoformat(),
            "end": end_date.isoformat(),
            "days": (end_date - start_date).days,
        },
        "historicalData": [
            {"date": d.isoformat(), "value": v, "return": round((v / base - 1) * 100, 2)}
            for d, v in points
        ],
        "metrics": performance.formatted(),
        "timestamp": now.isoformat(),
        "country": country or DEFAULT_BACKTEST_COUNTRY,
    }
