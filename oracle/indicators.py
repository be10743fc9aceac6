"""
Indicators - Physical/macro indicator breakdown and its composite score.

The breakdown comes from an optional upstream service. When it is not
configured, unreachable or returns garbage, the static breakdown is served
instead and tagged FALLBACK.
"""

import copy
import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Mapping, Optional

import httpx

from oracle.config.indicators import (
    DEFAULT_INDICATORS_COUNTRY,
    FALLBACK_BREAKDOWN,
    FALLBACK_SUFFIX,
    IMPACT_SCORES,
)
from oracle.settings import settings

logger = logging.getLogger(__name__)


class DataStatus(str, Enum):
    """Provenance of a breakdown payload."""

    LIVE = "LIVE"
    FALLBACK = "FALLBACK"
    ERROR = "ERROR"
    NO_DATA = "NO_DATA"


class UpstreamError(Exception):
    """The upstream breakdown service failed or answered with an unusable payload."""


def impact_score(impact: Optional[str]) -> float:
    """positive -> 1, negative -> 0, neutral (or unknown) -> 0.5."""
    return IMPACT_SCORES.get((impact or "neutral").lower(), IMPACT_SCORES["neutral"])


def overall_score(breakdown: Mapping[str, Mapping[str, Any]]) -> float:
    """Weighted score: sum(impact * weight * confidence) / sum(weight).

    Returns 0.0 for an empty breakdown or when the weights sum to zero.
    """
    total_weight = 0.0
    weighted = 0.0
    for reading in breakdown.values():
        weight = float(reading.get("weight", 0) or 0)
        confidence = float(reading.get("confidence", 0) or 0)
        weighted += impact_score(reading.get("impact")) * weight * confidence
        total_weight += weight
    if total_weight == 0:
        return 0.0
    return round(weighted / total_weight, 4)


def fallback_breakdown() -> dict:
    """Static breakdown with every source tagged as fallback."""
    breakdown = copy.deepcopy(FALLBACK_BREAKDOWN)
    for reading in breakdown.values():
        reading["source"] = f"{reading['source']} {FALLBACK_SUFFIX}"
    return breakdown


class IndicatorsClient:
    """Reads the breakdown from the upstream indicators service."""

    def __init__(
        self,
        url: str = "",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.url = url
        self.timeout = timeout
        self._transport = transport

    @property
    def configured(self) -> bool:
        return bool(self.url)

    async def fetch(self) -> dict:
        """GET the upstream payload.

        Raises:
            UpstreamError: On transport errors, non-2xx status or non-JSON body
        """
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(self.url, headers={"Content-Type": "application/json"})
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPStatusError as e:
            raise UpstreamError(f"Upstream indicators error: {e.response.status_code}") from e
        except (httpx.HTTPError, ValueError) as e:
            raise UpstreamError(f"Upstream indicators unavailable: {e}") from e

        if not isinstance(payload, dict):
            raise UpstreamError("Upstream indicators payload is not an object")
        return payload


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def build_fallback_payload(country: str, reason: str) -> dict:
    breakdown = fallback_breakdown()
    return {
        "country": country,
        "indicators_breakdown": breakdown,
        "overall_score": overall_score(breakdown),
        "timestamp": _now(),
        "data_status": DataStatus.FALLBACK.value,
        "message": "Utilisation données de fallback",
        "sources": {
            "fallback_reason": reason,
            "last_update": _now(),
        },
        "fallback_reason": reason,
    }


def build_error_payload(country: str, error: Exception) -> dict:
    return {
        "country": country,
        "indicators_breakdown": {},
        "overall_score": 0.0,
        "timestamp": _now(),
        "data_status": DataStatus.ERROR.value,
        "error": str(error),
    }


async def get_indicators_breakdown(
    client: IndicatorsClient, country: str = DEFAULT_INDICATORS_COUNTRY
) -> dict:
    """Resolve the breakdown: upstream when usable, else static fallback.

    Never raises; unexpected failures become a data_status ERROR payload.
    """
    try:
        if not client.configured:
            return build_fallback_payload(country, "Upstream indicators service not configured")

        try:
            payload = await client.fetch()
        except UpstreamError as e:
            logger.warning(f"Indicators upstream failed, serving fallback: {e}")
            return build_fallback_payload(country, str(e))

        breakdown = payload.get("indicators_breakdown") or {}
        if not isinstance(breakdown, dict):
            return build_fallback_payload(country, "Upstream breakdown is not an object")

        result = dict(payload)
        result["country"] = payload.get("country", country)
        result["indicators_breakdown"] = breakdown
        result["overall_score"] = overall_score(breakdown)
        result["timestamp"] = payload.get("timestamp", _now())
        result["data_status"] = DataStatus.LIVE.value if breakdown else DataStatus.NO_DATA.value
        return result
    except Exception as e:
        logger.exception("Unexpected error building indicators breakdown")
        return build_error_payload(country, e)


# Global client instance
_client: Optional[IndicatorsClient] = None


def get_indicators_client() -> IndicatorsClient:
    """Get or create the upstream indicators client."""
    global _client
    if _client is None:
        _client = IndicatorsClient(url=settings.indicators_url, timeout=settings.indicators_timeout)
    return _client
