"""FastAPI dependencies for API routers.

Provides common dependencies that can be injected into route handlers.
Tests replace them through app.dependency_overrides.
"""

from dataclasses import dataclass
from typing import Optional

from oracle.auth import CredentialVerifier, SettingsCredentialVerifier
from oracle.cache import TTLCache
from oracle.indicators import IndicatorsClient, get_indicators_client
from oracle.market import MarketDataService, get_market_data_service
from oracle.random_source import RandomSource
from oracle.settings import Settings, settings


@dataclass
class CommonDependencies:
    """Common dependencies used across API routes.

    Usage:
        @router.get("/endpoint")
        async def my_endpoint(deps: Annotated[CommonDependencies, Depends(get_common_deps)]):
            market = deps.market
            # ...
    """

    settings: Settings
    market: MarketDataService
    indicators: IndicatorsClient
    sector_cache: TTLCache
    rng: RandomSource


_sector_cache: Optional[TTLCache] = None
_rng: Optional[RandomSource] = None


def get_sector_cache() -> TTLCache:
    """Per-country cache of sector payloads."""
    global _sector_cache
    if _sector_cache is None:
        _sector_cache = TTLCache("sectors", ttl_seconds=settings.cache_ttl_seconds)
    return _sector_cache


def get_random_source() -> RandomSource:
    global _rng
    if _rng is None:
        _rng = RandomSource(settings.random_seed)
    return _rng


async def get_common_deps() -> CommonDependencies:
    """Factory for common dependencies.

    Returns process-wide instances of the settings, market data service,
    indicators client, sector cache and random source.
    """
    return CommonDependencies(
        settings=settings,
        market=get_market_data_service(),
        indicators=get_indicators_client(),
        sector_cache=get_sector_cache(),
        rng=get_random_source(),
    )


def get_credential_verifier() -> CredentialVerifier:
    """Default verifier backed by settings; override to plug in a real provider."""
    return SettingsCredentialVerifier(
        username=settings.auth_username,
        password_sha256=settings.auth_password_sha256,
    )
