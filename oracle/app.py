"""
Oracle Web API - FastAPI entry point.

Usage:
    uvicorn oracle.app:app --host 0.0.0.0 --port 8000
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response

from oracle.api.errors import CORS_HEADERS, install_exception_handlers
from oracle.api.routers import (
    auth_router,
    backtest_router,
    cache_router,
    economy_router,
    indicators_router,
    markets_router,
    sectors_router,
    system_router,
)
from oracle.settings import settings
from oracle.version import VERSION

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    # Startup
    logger.info(f"{settings.service_name} {VERSION} starting up...")
    if not settings.live_market_data:
        logger.warning("Live market data disabled, serving static figures")
    if not settings.indicators_url:
        logger.info("No upstream indicators service configured, breakdown uses fallback data")
    yield
    # Shutdown
    logger.info(f"{settings.service_name} shutting down...")


app = FastAPI(
    title=f"{settings.service_name}",
    description="Market and economic data for the Oracle Portfolio dashboard",
    version=VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)


@app.middleware("http")
async def preflight_middleware(request: Request, call_next):
    """Answer every OPTIONS request with an empty 200 and open CORS headers."""
    if request.method == "OPTIONS":
        return Response(status_code=200, headers=CORS_HEADERS)
    return await call_next(request)


install_exception_handlers(app)

# Include API routers
app.include_router(system_router, prefix="/api")
app.include_router(cache_router, prefix="/api")
app.include_router(economy_router, prefix="/api")
app.include_router(indicators_router, prefix="/api")
app.include_router(markets_router, prefix="/api")
app.include_router(sectors_router, prefix="/api")
app.include_router(backtest_router, prefix="/api")
app.include_router(auth_router, prefix="/api")
