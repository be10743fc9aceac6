"""Backtesting API route."""

import logging
from typing import Optional

from fastapi import APIRouter, Query

from oracle.api.errors import bad_request, server_error
from oracle.backtest import InvalidPeriodError, run_backtest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["backtest"])


@router.get("/backtesting")
async def get_backtesting(
    start_date: Optional[str] = Query(default=None, alias="startDate"),
    end_date: Optional[str] = Query(default=None, alias="endDate"),
    country: Optional[str] = Query(default=None),
):
    """Model portfolio performance between two ISO dates."""
    try:
        return run_backtest(start_date, end_date, country)
    except InvalidPeriodError as e:
        return bad_request(str(e))
    except Exception as e:
        logger.exception("Error running backtest")
        return server_error(e)
