"""Sector API routes."""

import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, Query
from typing_extensions import Annotated

from oracle.api.dependencies import CommonDependencies, get_common_deps
from oracle.api.errors import server_error
from oracle.config.countries import resolve_sector_country
from oracle.sectors import (
    aggregate_sectors,
    compute_stats,
    paginate,
    sector_symbols,
    sort_sectors,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sectors", tags=["sectors"])

SOURCE = "Yahoo Finance"


async def _load_sectors(deps: CommonDependencies, code: str, refresh: bool):
    """Read-through: cached (sectors, computed_at) for a country, else fetch and compute."""
    if refresh:
        deps.sector_cache.invalidate(code)
    cached = deps.sector_cache.get(code)
    if cached is not None:
        return cached, True

    histories = await deps.market.get_price_histories(sector_symbols())
    now = datetime.now(timezone.utc)
    sectors = aggregate_sectors(code, histories, rng=deps.rng, now=now)
    entry = (sectors, now)
    deps.sector_cache.set(code, entry)
    live = sum(1 for s in sectors if s.historical_data)
    logger.info(f"Computed {len(sectors)} sectors for {code} ({live} live)")
    return entry, False


@router.get("")
@router.get("/{country}")
async def get_sectors(
    deps: Annotated[CommonDependencies, Depends(get_common_deps)],
    country: Optional[str] = None,
    sort: str = Query(default="allocation"),
    order: str = Query(default="desc", pattern="^(asc|desc)$"),
    page: Optional[int] = Query(default=None, ge=1),
    per_page: int = Query(default=10, ge=1, le=100),
    refresh: bool = Query(default=False),
):
    """Country-weighted sector data with summary stats.

    Args:
        country: ISO alpha-3 code; unknown codes use the USA weighting
        sort: Column to sort by (name, allocation, performance, risk, grade, trend)
        order: asc or desc
        page: Optional 1-based page; all sectors are returned when omitted
        per_page: Page size when paginating
        refresh: Bypass the per-country cache
    """
    requested = country or deps.settings.default_sector_country
    code = resolve_sector_country(requested)
    try:
        (sectors, computed_at), cached = await _load_sectors(deps, code, refresh)

        ordered = sort_sectors(sectors, sort, order)
        response = {
            "success": True,
            "country": code,
            "requested_country": requested,
            "count": len(ordered),
            "stats": compute_stats(sectors, computed_at),
            "timestamp": computed_at.isoformat(),
            "source": SOURCE,
            "cached": cached,
        }
        if page is not None:
            ordered, total_pages = paginate(ordered, page, per_page)
            response["pagination"] = {"page": page, "perPage": per_page, "totalPages": total_pages}
        response["sectors"] = [s.to_dict() for s in ordered]
        return response
    except Exception as e:
        logger.exception(f"Error building sectors for {code}")
        return server_error(
            e,
            error="Erreur lors de la récupération des données sectorielles",
            success=False,
        )
