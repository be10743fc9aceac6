"""Indicator breakdown API route."""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from typing_extensions import Annotated

from oracle.api.dependencies import CommonDependencies, get_common_deps
from oracle.config.indicators import DEFAULT_INDICATORS_COUNTRY
from oracle.indicators import get_indicators_breakdown

router = APIRouter(tags=["indicators"])


@router.get("/getIndicatorsBreakdown")
async def indicators_breakdown(
    deps: Annotated[CommonDependencies, Depends(get_common_deps)],
    country: Optional[str] = Query(default=None),
) -> dict:
    """Physical indicator breakdown with its weighted overall score.

    Always answers 200; the data_status field tells LIVE, FALLBACK, NO_DATA
    and ERROR apart.
    """
    return await get_indicators_breakdown(deps.indicators, country or DEFAULT_INDICATORS_COUNTRY)
