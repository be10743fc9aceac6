"""Configuration settings for the Oracle Portfolio API."""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from oracle.version import VERSION


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="ORACLE_",
        case_sensitive=False,
    )

    # Service configuration
    service_name: str = "Oracle Portfolio API"
    version: str = VERSION
    host: str = "0.0.0.0"  # nosec B104 - container needs to bind to all interfaces
    port: int = 8000

    # Logging
    log_level: str = "INFO"

    # Country defaults per endpoint family
    default_regime_country: str = "France"
    default_sector_country: str = "USA"
    default_market_country: str = "USA"

    # Sector response cache
    cache_ttl_seconds: int = 300

    # Market data (yfinance)
    live_market_data: bool = True
    market_data_timeout: float = 5.0
    history_period: str = "1mo"

    # Upstream indicators breakdown service (optional)
    indicators_url: str = ""
    indicators_timeout: float = 10.0

    # Deterministic jitter for confidence/volume fields
    random_seed: Optional[int] = None

    # Dashboard login (empty = logins refused)
    auth_username: str = ""
    auth_password_sha256: str = ""


settings = Settings()
