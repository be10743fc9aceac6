"""
Sectors - Country-weighted sector aggregation.

For each sector category the aggregator picks the representative ETF, applies
the country's weighting factor and derives performance and risk either from
live daily closes or from the static base constants. Allocations are then
rescaled so the set sums to 100.

Usage:
    histories = await market.get_price_histories(sector_symbols())
    sectors = aggregate_sectors('FRA', histories, rng=RandomSource(42))
    stats = compute_stats(sectors)
"""

import logging
import math
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Iterable, Mapping, Optional, Sequence

import numpy as np

from oracle.config.countries import SECTOR_MULTIPLIERS, resolve_sector_country
from oracle.config.sectors import (
    BASE_ALLOCATION,
    BASE_PERFORMANCE,
    BASE_RISK,
    BENCHMARK_SYMBOL,
    DERIVED_FACTORS,
    DIRECT_FACTORS,
    HIGH_RISK_THRESHOLD,
    HISTORY_POINTS,
    MEDIUM_RISK_THRESHOLD,
    SECTOR_ETFS,
    SECTOR_METADATA,
    TRADING_DAYS_PER_YEAR,
    SectorType,
)
from oracle.market import PriceHistory
from oracle.random_source import RandomSource

logger = logging.getLogger(__name__)

LIVE_SOURCE = "Yahoo Finance"
FALLBACK_SOURCE = "static (fallback)"

GRADE_RANK = {"A": 5, "B": 4, "C": 3, "D": 2, "F": 1}
TREND_RANK = {"up": 3, "stable": 2, "down": 1}
SORT_FIELDS = ("name", "allocation", "performance", "risk", "grade", "trend")


@dataclass(frozen=True)
class Sector:
    """Static reference data for one sector category."""

    id: str
    name: str
    description: str
    icon: str
    color: str
    risk_level: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "icon": self.icon,
            "color": self.color,
            "riskLevel": self.risk_level,
        }


@dataclass(frozen=True)
class SectorMetrics:
    """Computed figures for one sector; replaced wholesale on every refresh."""

    allocation: float
    performance: float
    risk_score: float
    volatility: float
    confidence: float
    trend: str
    sharpe_ratio: float
    beta: float
    last_updated: datetime

    def to_dict(self) -> dict:
        return {
            "allocation": self.allocation,
            "performance": self.performance,
            "riskScore": self.risk_score,
            "volatility": self.volatility,
            "confidence": self.confidence,
            "trend": self.trend,
            "sharpeRatio": self.sharpe_ratio,
            "beta": self.beta,
            "lastUpdated": self.last_updated.isoformat(),
        }


@dataclass(frozen=True)
class SectorData:
    """A sector with its metrics, grade and recommendations."""

    sector_type: SectorType
    symbol: str
    metadata: Sector
    metrics: SectorMetrics
    grade: str
    recommendations: tuple[str, ...]
    historical_data: tuple[dict, ...] = ()
    source: str = FALLBACK_SOURCE

    def to_dict(self) -> dict:
        return {
            "type": self.sector_type.value,
            "symbol": self.symbol,
            "metadata": self.metadata.to_dict(),
            "metrics": self.metrics.to_dict(),
            "grade": self.grade,
            "recommendations": list(self.recommendations),
            "historicalData": list(self.historical_data),
            "source": self.source,
        }


def sector_symbols() -> list[str]:
    """ETF symbols needed for a full aggregation, benchmark included."""
    return list(dict.fromkeys([*SECTOR_ETFS.values(), BENCHMARK_SYMBOL]))


def risk_level(base_risk: float) -> str:
    if base_risk >= HIGH_RISK_THRESHOLD:
        return "high"
    if base_risk >= MEDIUM_RISK_THRESHOLD:
        return "medium"
    return "low"


def get_sector_metadata(sector_type: SectorType) -> Sector:
    """Reference data for a category (TECHNOLOGY if unknown)."""
    sector_id, name, description, icon, color = SECTOR_METADATA.get(
        sector_type, SECTOR_METADATA[SectorType.TECHNOLOGY]
    )
    return Sector(
        id=sector_id,
        name=name,
        description=description,
        icon=icon,
        color=color,
        risk_level=risk_level(BASE_RISK.get(sector_type, 60)),
    )


def sector_multiplier(sector_type: SectorType, multipliers: Mapping[str, float]) -> float:
    """Country weighting factor for a category.

    The five headline categories read their factor directly; the others take a
    fixed fraction of a related category's factor.
    """
    if sector_type in DIRECT_FACTORS:
        return multipliers[DIRECT_FACTORS[sector_type]]
    if sector_type in DERIVED_FACTORS:
        key, fraction = DERIVED_FACTORS[sector_type]
        return multipliers[key] * fraction
    return 1.0


def calculate_grade(performance: float) -> str:
    """Letter grade from performance: >=15 A, >=10 B, >=5 C, >=0 D, else F."""
    if performance >= 15:
        return "A"
    if performance >= 10:
        return "B"
    if performance >= 5:
        return "C"
    if performance >= 0:
        return "D"
    return "F"


def determine_trend(performance: float) -> str:
    if performance > 0:
        return "up"
    if performance < -2:
        return "down"
    return "stable"


def generate_recommendations(name: str, performance: float, risk: float) -> list[str]:
    """Templated advice lines keyed on performance and risk thresholds."""
    recommendations = []

    if performance > 10:
        recommendations.append(f"Excellent secteur {name} avec {performance:.1f}% de performance")
    elif performance < -5:
        recommendations.append(f"Attention: secteur {name} en baisse ({performance:.1f}%)")

    if risk > 80:
        recommendations.append(f"Secteur à haut risque ({risk:.0f}) - Surveiller de près")

    if not recommendations:
        recommendations.append(f"Secteur {name} stable - Performance modérée")

    return recommendations


def daily_returns(closes: Sequence[float]) -> np.ndarray:
    """Simple day-over-day returns."""
    prices = np.asarray(closes, dtype=float)
    if len(prices) < 2:
        return np.array([])
    return prices[1:] / prices[:-1] - 1


def annualized_volatility(returns: np.ndarray) -> float:
    """Population standard deviation of daily returns, annualized, in percent."""
    if len(returns) == 0:
        return 0.0
    return float(np.std(returns) * math.sqrt(TRADING_DAYS_PER_YEAR) * 100)


def sharpe_ratio(returns: np.ndarray) -> float:
    """Annualized mean over annualized volatility of daily returns (risk-free 0)."""
    if len(returns) == 0:
        return 0.0
    std = float(np.std(returns))
    if std == 0:
        return 0.0
    return float(np.mean(returns) / std * math.sqrt(TRADING_DAYS_PER_YEAR))


def beta(returns: np.ndarray, benchmark_returns: np.ndarray) -> float:
    """Beta against a benchmark over the overlapping trailing window (1.0 if undefined)."""
    n = min(len(returns), len(benchmark_returns))
    if n < 2:
        return 1.0
    r = returns[-n:]
    b = benchmark_returns[-n:]
    if not (np.all(np.isfinite(r)) and np.all(np.isfinite(b))):
        return 1.0
    variance = float(np.var(b))
    if variance == 0:
        return 1.0
    covariance = float(np.mean((r - r.mean()) * (b - b.mean())))
    return covariance / variance


def _history_points(history: PriceHistory) -> tuple[dict, ...]:
    start = max(0, len(history) - HISTORY_POINTS)
    return tuple(
        {
            "date": history.dates[i].isoformat(),
            "price": history.closes[i],
            "volume": history.volumes[i] if i < len(history.volumes) else 0,
        }
        for i in range(start, len(history))
    )


class InvalidPriceHistory(ValueError):
    """Closes that cannot produce finite sector figures."""


def live_figures(
    history: PriceHistory,
    multiplier: float,
    benchmark: Optional[PriceHistory] = None,
) -> tuple[float, float, float, float]:
    """Performance, volatility, Sharpe and beta from daily closes.

    Raises:
        InvalidPriceHistory: If a close is non-positive or non-finite, or a
            figure comes out non-finite
    """
    closes = np.asarray(history.closes, dtype=float)
    if not np.all(np.isfinite(closes)) or np.any(closes <= 0):
        raise InvalidPriceHistory(f"Non-positive or missing close in {history.symbol}")

    returns = daily_returns(closes)
    performance = (closes[-1] / closes[-2] - 1) * 100 * multiplier
    volatility = annualized_volatility(returns)
    sharpe = sharpe_ratio(returns)
    benchmark_returns = daily_returns(benchmark.closes) if benchmark is not None else np.array([])
    sector_beta = beta(returns, benchmark_returns)

    figures = (float(performance), volatility, sharpe, sector_beta)
    if not all(math.isfinite(f) for f in figures):
        raise InvalidPriceHistory(f"Non-finite figures for {history.symbol}")
    return figures


def build_sector(
    sector_type: SectorType,
    multipliers: Mapping[str, float],
    history: Optional[PriceHistory],
    rng: RandomSource,
    now: datetime,
    benchmark: Optional[PriceHistory] = None,
) -> SectorData:
    """Compute one sector's un-normalized figures from live history or static constants."""
    metadata = get_sector_metadata(sector_type)
    multiplier = sector_multiplier(sector_type, multipliers)
    allocation = BASE_ALLOCATION.get(sector_type, 5) * multiplier
    symbol = SECTOR_ETFS[sector_type]

    if history is not None and len(history) >= 2:
        performance, volatility, sharpe, sector_beta = live_figures(history, multiplier, benchmark)
        risk = min(volatility * 2.5, 100.0)
        metrics = SectorMetrics(
            allocation=allocation,
            performance=performance,
            risk_score=risk,
            volatility=volatility,
            confidence=rng.uniform(85, 95),
            trend=determine_trend(performance),
            sharpe_ratio=sharpe,
            beta=sector_beta,
            last_updated=now,
        )
        historical_data = _history_points(history)
        source = LIVE_SOURCE
    else:
        performance = BASE_PERFORMANCE.get(sector_type, 8.0) * multiplier
        risk = float(BASE_RISK.get(sector_type, 60))
        volatility = risk / 2.5
        metrics = SectorMetrics(
            allocation=allocation,
            performance=performance,
            risk_score=risk,
            volatility=volatility,
            confidence=rng.uniform(75, 90),
            trend=determine_trend(performance),
            sharpe_ratio=performance / volatility if volatility else 0.0,
            beta=rng.uniform(0.7, 1.5),
            last_updated=now,
        )
        historical_data = ()
        source = FALLBACK_SOURCE

    return SectorData(
        sector_type=sector_type,
        symbol=symbol,
        metadata=metadata,
        metrics=metrics,
        grade=calculate_grade(performance),
        recommendations=tuple(generate_recommendations(metadata.name, performance, risk)),
        historical_data=historical_data,
        source=source,
    )


def normalize_allocations(sectors: Sequence[SectorData]) -> list[SectorData]:
    """Rescale allocations so they sum to 100. Returns new SectorData instances."""
    total = sum(s.metrics.allocation for s in sectors)
    if total <= 0:
        return list(sectors)
    return [
        replace(s, metrics=replace(s.metrics, allocation=s.metrics.allocation / total * 100))
        for s in sectors
    ]


def aggregate_sectors(
    country: Optional[str],
    histories: Optional[Mapping[str, Optional[PriceHistory]]] = None,
    rng: Optional[RandomSource] = None,
    now: Optional[datetime] = None,
) -> list[SectorData]:
    """Build normalized sector data for a country.

    Args:
        country: ISO alpha-3 code; unknown codes use the USA factors
        histories: Optional live histories keyed by ETF symbol; missing or
            None entries fall back to the static constants for that sector only
        rng: Randomness for confidence/beta jitter
        now: Timestamp stamped on every metric

    Returns:
        One SectorData per category, allocations summing to 100
    """
    code = resolve_sector_country(country)
    multipliers = SECTOR_MULTIPLIERS[code]
    histories = histories or {}
    rng = rng or RandomSource()
    now = now or datetime.now(timezone.utc)
    benchmark = histories.get(BENCHMARK_SYMBOL)

    sectors = []
    for sector_type, symbol in SECTOR_ETFS.items():
        history = histories.get(symbol)
        if symbol in histories and (history is None or len(history) < 2):
            logger.warning(f"Using static figures for {sector_type.value} ({symbol})")
        try:
            sector = build_sector(sector_type, multipliers, history, rng, now, benchmark)
        except Exception as e:
            if history is None:
                raise
            logger.warning(f"Live figures failed for {sector_type.value} ({symbol}), using static: {e}")
            sector = build_sector(sector_type, multipliers, None, rng, now)
        sectors.append(sector)

    return normalize_allocations(sectors)


def diversification_score(allocations: Iterable[float]) -> float:
    """Inverted Herfindahl-Hirschman index on percentage allocations.

    100% in one sector scores 0; N equal weights score 100 * (1 - 1/N).
    """
    hhi = sum((a / 100) ** 2 for a in allocations)
    return max(0.0, (1 - hhi) * 100)


def compute_stats(sectors: Sequence[SectorData], last_update: Optional[datetime] = None) -> Optional[dict]:
    """Allocation-weighted aggregates for the sector summary cards."""
    if not sectors:
        return None

    allocations = [s.metrics.allocation for s in sectors]
    return {
        "totalAllocation": sum(allocations),
        "averagePerformance": sum(s.metrics.performance * s.metrics.allocation / 100 for s in sectors),
        "averageRisk": sum(s.metrics.risk_score * s.metrics.allocation / 100 for s in sectors),
        "diversificationScore": diversification_score(allocations),
        "sectorsCount": len(sectors),
        "lastUpdate": last_update.isoformat() if last_update else None,
    }


def _sort_key(sector: SectorData, field: str):
    if field == "name":
        return sector.metadata.name.lower()
    if field == "performance":
        return sector.metrics.performance
    if field == "risk":
        return sector.metrics.risk_score
    if field == "grade":
        return GRADE_RANK.get(sector.grade, 0)
    if field == "trend":
        return TREND_RANK.get(sector.metrics.trend, 0)
    return sector.metrics.allocation


def sort_sectors(
    sectors: Sequence[SectorData], field: str = "allocation", direction: str = "desc"
) -> list[SectorData]:
    """Sort by a table column. Unknown fields sort by allocation; ties keep input order."""
    if field not in SORT_FIELDS:
        field = "allocation"
    return sorted(sectors, key=lambda s: _sort_key(s, field), reverse=direction == "desc")


def paginate(items: Sequence, page: int = 1, per_page: int = 10) -> tuple[list, int]:
    """Slice one page (1-based). Returns the page and the total page count."""
    per_page = max(1, per_page)
    total_pages = math.ceil(len(items) / per_page)
    page = max(1, page)
    start = (page - 1) * per_page
    return list(items[start:start + per_page]), total_pages
