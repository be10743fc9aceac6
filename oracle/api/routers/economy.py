"""Economy API routes: regime, allocations and macro indicators."""

import logging
from typing import Optional

from fastapi import APIRouter, Query

from oracle.api.errors import server_error
from oracle.economy import allocation_snapshot, macro_indicators, regime_snapshot
from oracle.settings import settings

logger = logging.getLogger(__name__)

router = APIRouter(tags=["economy"])


@router.get("/regime")
async def get_regime(country: Optional[str] = Query(default=None)):
    """Economic regime card for a country (France when unknown)."""
    try:
        return regime_snapshot(country or settings.default_regime_country)
    except Exception as e:
        logger.exception(f"Error building regime for {country}")
        return server_error(e)


@router.get("/allocations")
async def get_allocations(country: Optional[str] = Query(default=None)):
    """Stocks/bonds/commodities/cash split for a country."""
    try:
        return allocation_snapshot(country)
    except Exception as e:
        logger.exception(f"Error building allocations for {country}")
        return server_error(e)


@router.get("/indicators")
async def get_indicators(country: Optional[str] = Query(default=None)):
    """Growth, inflation and unemployment snapshot."""
    try:
        return macro_indicators(country or settings.default_regime_country)
    except Exception as e:
        logger.exception(f"Error building indicators for {country}")
        return server_error(e)
