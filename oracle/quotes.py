"""
Quotes - ETF watchlist and market stress payloads.

Live quotes are merged over the static table symbol by symbol; a symbol whose
fetch failed keeps its static quote and is tagged as fallback.
"""

from datetime import datetime, timezone
from typing import Mapping, Optional

from oracle.config.markets import (
    EXTREME_STRESS_FACTOR,
    QUOTE_SOURCE,
    STATIC_QUOTES,
    STRESS_COLORS,
    STRESS_GAUGES,
    YAHOO_QUOTE_URL,
)
from oracle.indicators import DataStatus

FALLBACK_QUOTE_SOURCE = f"{QUOTE_SOURCE} (fallback)"


def watchlist() -> list[str]:
    return list(STATIC_QUOTES)


def quote_color(change: float) -> str:
    return "green" if change >= 0 else "red"


def build_market_data(
    country: str,
    live_quotes: Optional[Mapping[str, Optional[dict]]] = None,
    now: Optional[datetime] = None,
) -> dict:
    """Assemble the ETF watchlist payload.

    Args:
        country: Echoed back for the dashboard header
        live_quotes: Optional quotes keyed by symbol (price, change, changePercent, volume)
        now: Timestamp for the payload
    """
    live_quotes = live_quotes or {}
    etfs = {}
    live_count = 0
    for symbol, static in STATIC_QUOTES.items():
        quote = live_quotes.get(symbol)
        if quote:
            live_count += 1
            values = {**static, **quote}
            source = QUOTE_SOURCE
        else:
            values = dict(static)
            source = FALLBACK_QUOTE_SOURCE
        etfs[symbol] = {
            "name": values["name"],
            "price": values["price"],
            "change": values["change"],
            "changePercent": values["changePercent"],
            "volume": values["volume"],
            "url": YAHOO_QUOTE_URL.format(symbol=symbol),
            "color": quote_color(values["change"]),
            "source": source,
        }

    now = now or datetime.now(timezone.utc)
    return {
        "etfs": etfs,
        "timestamp": now.isoformat(),
        "source": QUOTE_SOURCE,
        "country": country,
        "data_status": (
            DataStatus.LIVE.value if live_count == len(STATIC_QUOTES) else DataStatus.FALLBACK.value
        ),
        "lastUpdate": now.strftime("%Y-%m-%d %H:%M:%S"),
    }


def gauge_status(value: float, threshold: float) -> str:
    """NORMAL below threshold, ELEVATED up to 1.5x threshold, EXTREME beyond."""
    if value < threshold:
        return "NORMAL"
    if value <= threshold * EXTREME_STRESS_FACTOR:
        return "ELEVATED"
    return "EXTREME"


def stress_level(gauges: Mapping[str, dict]) -> str:
    statuses = [g["status"] for g in gauges.values()]
    if "EXTREME" in statuses:
        return "EXTRÊME"
    calm = all(g["value"] < g["threshold"] / 2 for g in gauges.values())
    if calm:
        return "FAIBLE"
    return "MODÉRÉ"


def build_market_stress(
    country: str,
    readings: Optional[Mapping[str, float]] = None,
    now: Optional[datetime] = None,
) -> dict:
    """VIX and high-yield spread gauges with an overall stress level.

    Args:
        country: Echoed back for the dashboard header
        readings: Optional overrides for gauge values keyed by gauge name
        now: Timestamp for the payload
    """
    readings = readings or {}
    gauges = {}
    for name, config in STRESS_GAUGES.items():
        value = readings.get(name, config["value"])
        status = gauge_status(value, config["threshold"])
        color_key = {"NORMAL": "normal", "ELEVATED": "moderate", "EXTREME": "extreme"}[status]
        gauges[name] = {
            "value": value,
            "status": status,
            "threshold": config["threshold"],
            "gauge": {"min": config["min"], "max": config["max"], "color": STRESS_COLORS[color_key]},
        }

    return {
        "level": stress_level(gauges),
        **gauges,
        "timestamp": (now or datetime.now(timezone.utc)).isoformat(),
        "sources": {name: config["source"] for name, config in STRESS_GAUGES.items()},
        "country": country,
        "colors": dict(STRESS_COLORS),
    }
