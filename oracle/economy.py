"""
Economy - Country regime, macro snapshot and portfolio allocation payloads.

All lookups tolerate unknown countries by falling back to the default
country's record rather than failing.
"""

from datetime import datetime, timezone
from typing import Optional

from oracle.config.countries import (
    ALLOCATION_CHART,
    ALLOCATIONS,
    REGIME_DATA,
    resolve_allocation_country,
    resolve_regime_country,
)

SOURCE = "Oracle Portfolio Analytics"


def _timestamp(now: Optional[datetime]) -> str:
    return (now or datetime.now(timezone.utc)).isoformat()


def regime_snapshot(country: Optional[str], now: Optional[datetime] = None) -> dict:
    """Regime card payload for a country (France record when unknown)."""
    resolved = resolve_regime_country(country)
    record = REGIME_DATA[resolved]
    return {
        "regime": record["regime"].value,
        "confidence": record["confidence"],
        "indicators": dict(record["indicators"]),
        "badge_color": record["badge_color"],
        "country": resolved,
        "requested_country": country or resolved,
        "source": SOURCE,
        "timestamp": _timestamp(now),
    }


def macro_indicators(country: Optional[str], now: Optional[datetime] = None) -> dict:
    """Growth/inflation/unemployment snapshot in percent."""
    resolved = resolve_regime_country(country)
    indicators = REGIME_DATA[resolved]["indicators"]
    return {
        "indicators": {
            "growth": indicators["croissance"],
            "inflation": indicators["inflation"],
            "unemployment": indicators["chomage"],
        },
        "country": resolved,
        "last_update": _timestamp(now),
    }


def allocation_snapshot(country: Optional[str], now: Optional[datetime] = None) -> dict:
    """Stocks/bonds/commodities/cash split with pie-chart slices."""
    resolved = resolve_allocation_country(country)
    allocations = dict(ALLOCATIONS[resolved])
    regime = REGIME_DATA[resolve_regime_country(resolved)]["regime"]
    return {
        "allocations": allocations,
        "total": sum(allocations.values()),
        "timestamp": _timestamp(now),
        "country": resolved,
        "regime": regime.value,
        "source": SOURCE,
        "chartData": [
            {"name": label, "value": allocations[key], "color": color}
            for key, (label, color) in ALLOCATION_CHART.items()
        ],
    }
