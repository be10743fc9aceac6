"""API routers for Oracle.

Each router handles a specific domain of the API.
"""

from oracle.api.routers.auth import router as auth_router
from oracle.api.routers.backtest import router as backtest_router
from oracle.api.routers.economy import router as economy_router
from oracle.api.routers.indicators import router as indicators_router
from oracle.api.routers.markets import router as markets_router
from oracle.api.routers.sectors import router as sectors_router
from oracle.api.routers.system import cache_router
from oracle.api.routers.system import router as system_router

__all__ = [
    "auth_router",
    "backtest_router",
    "cache_router",
    "economy_router",
    "indicators_router",
    "markets_router",
    "sectors_router",
    "system_router",
]
