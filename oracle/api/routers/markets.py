"""Market API routes: ETF watchlist and market stress gauges."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from typing_extensions import Annotated

from oracle.api.dependencies import CommonDependencies, get_common_deps
from oracle.api.errors import server_error
from oracle.quotes import build_market_data, build_market_stress, watchlist

logger = logging.getLogger(__name__)

router = APIRouter(tags=["markets"])


@router.get("/market-data")
async def get_market_data(
    deps: Annotated[CommonDependencies, Depends(get_common_deps)],
    country: Optional[str] = Query(default=None),
):
    """Latest ETF quotes; symbols without a live quote keep their static values."""
    country = country or deps.settings.default_market_country
    try:
        quotes = await deps.market.get_quotes(watchlist())
        return build_market_data(country, quotes)
    except Exception as e:
        logger.exception(f"Error building market data for {country}")
        return server_error(e)


@router.get("/market-stress")
async def get_market_stress(
    deps: Annotated[CommonDependencies, Depends(get_common_deps)],
    country: Optional[str] = Query(default=None),
):
    """VIX and high-yield spread gauges."""
    country = country or deps.settings.default_market_country
    try:
        return build_market_stress(country)
    except Exception as e:
        logger.exception(f"Error building market stress for {country}")
        return server_error(e)
