"""System API routes for health, version and cache endpoints."""

import logging
import time
from datetime import datetime, timezone
from typing import Any, Callable, Optional

from fastapi import APIRouter, Depends
from typing_extensions import Annotated

from oracle.api.dependencies import CommonDependencies, get_common_deps
from oracle.cache import TTLCache
from oracle.version import VERSION

logger = logging.getLogger(__name__)

router = APIRouter(tags=["system"])
cache_router = APIRouter(prefix="/cache", tags=["cache"])

_started_at = time.monotonic()


def format_uptime(seconds: float) -> str:
    seconds = int(seconds)
    days, rem = divmod(seconds, 86400)
    hours, rem = divmod(rem, 3600)
    minutes, secs = divmod(rem, 60)
    if days:
        return f"{days}d {hours}h {minutes}m"
    if hours:
        return f"{hours}h {minutes}m {secs}s"
    return f"{minutes}m {secs}s"


def _check(name: str, probe: Callable[[], str]) -> dict:
    """Run one service probe; an exception marks the service down."""
    started = time.perf_counter()
    try:
        status = probe()
    except Exception as e:
        logger.error(f"Health check failed for {name}: {e}")
        status = "down"
    return {
        "name": name,
        "status": status,
        "responseTime": round((time.perf_counter() - started) * 1000, 2),
    }


def _probe_cache(cache: TTLCache) -> str:
    cache.stats()
    return "operational"


@router.get("/health")
async def health() -> dict[str, Any]:
    """Health check endpoint."""
    return {
        "status": "healthy",
        "version": VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.get("/version")
async def version() -> dict[str, str]:
    """Return the application version."""
    return {"version": VERSION}


@router.get("/getSystemHealth")
async def system_health(
    deps: Annotated[CommonDependencies, Depends(get_common_deps)],
) -> dict[str, Any]:
    """Status of the API and the collaborators it depends on.

    Overall status is degraded when any service probe raised.
    """
    services = [
        _check("API Gateway", lambda: "operational"),
        _check("Cache", lambda: _probe_cache(deps.sector_cache)),
        _check("Market Data", lambda: "operational" if deps.market.enabled else "disabled"),
        _check("Indicators", lambda: "operational" if deps.indicators.configured else "fallback"),
    ]

    uptime_seconds = time.monotonic() - _started_at
    degraded = any(s["status"] == "down" for s in services)
    return {
        "status": "degraded" if degraded else "healthy",
        "services": services,
        "uptime": format_uptime(uptime_seconds),
        "uptime_seconds": round(uptime_seconds, 1),
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": VERSION,
    }


# Cache router endpoints


@cache_router.get("/stats")
async def get_cache_stats() -> dict:
    """Get statistics for all caches."""
    return TTLCache.get_all_stats()


@cache_router.post("/clear")
async def clear_cache(name: Optional[str] = None) -> dict:
    """
    Clear cache entries.

    Args:
        name: Specific cache name to clear (e.g., 'sectors'), or None for all caches
    """
    if name:
        cache = TTLCache.named(name)
        return {"cleared": {name: cache.clear() if cache else 0}}
    return {"cleared": TTLCache.clear_all()}
