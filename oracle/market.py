"""Market data service wrapping the yfinance library."""

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Iterable, List, Optional

import yfinance as yf

from oracle.settings import settings

logger = logging.getLogger(__name__)


@dataclass
class PriceHistory:
    """Daily closes and volumes for one symbol, oldest first."""

    symbol: str
    dates: List[datetime] = field(default_factory=list)
    closes: List[float] = field(default_factory=list)
    volumes: List[int] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.closes)


class MarketDataService:
    """Fetches ETF price history and quotes from Yahoo Finance.

    Every public method swallows provider errors and returns None (or an empty
    mapping entry) so callers can substitute static values symbol by symbol.
    """

    def __init__(
        self,
        enabled: bool = True,
        timeout: float = 5.0,
        period: str = "1mo",
    ):
        self.enabled = enabled
        self.timeout = timeout
        self.period = period

    def get_price_history(
        self,
        symbol: str,
        period: Optional[str] = None,
        interval: str = "1d",
    ) -> Optional[PriceHistory]:
        """Get daily price history.

        Args:
            symbol: Yahoo Finance symbol (e.g., "XLK")
            period: Time period (1d, 5d, 1mo, 3mo, 6mo, 1y, ...); defaults to the service period
            interval: Data interval (1d, 1wk, 1mo)

        Returns:
            PriceHistory or None if unavailable
        """
        if not self.enabled:
            return None

        try:
            ticker = yf.Ticker(symbol)
            hist = ticker.history(
                period=period or self.period,
                interval=interval,
                timeout=self.timeout,
            )
            if hist is None or hist.empty:
                logger.warning(f"No price history returned for {symbol}")
                return None

            hist = hist.dropna(subset=["Close"])
            history = PriceHistory(symbol=symbol)
            for date, row in hist.iterrows():
                history.dates.append(date.to_pydatetime())
                history.closes.append(float(row["Close"]))
                volume = row.get("Volume", 0)
                history.volumes.append(int(volume) if volume == volume else 0)
            return history
        except Exception as e:
            logger.error(f"Failed to get price history for {symbol}: {e}")
            return None

    def get_quote(self, symbol: str) -> Optional[dict]:
        """Get latest price and day change from the last two daily closes.

        Returns:
            Dict with price, change, changePercent and volume, or None
        """
        history = self.get_price_history(symbol, period="5d")
        if history is None or len(history) < 2:
            return None

        price = history.closes[-1]
        previous = history.closes[-2]
        change = price - previous
        return {
            "price": round(price, 2),
            "change": round(change, 2),
            "changePercent": round(change / previous * 100, 2) if previous else 0.0,
            "volume": history.volumes[-1],
        }

    async def get_price_histories(
        self, symbols: Iterable[str]
    ) -> Dict[str, Optional[PriceHistory]]:
        """Fetch histories for several symbols concurrently, one thread per symbol."""
        unique = list(dict.fromkeys(symbols))
        results = await asyncio.gather(
            *(asyncio.to_thread(self.get_price_history, symbol) for symbol in unique),
            return_exceptions=True,
        )
        histories: Dict[str, Optional[PriceHistory]] = {}
        for symbol, result in zip(unique, results):
            if isinstance(result, BaseException):
                logger.error(f"Price history task failed for {symbol}: {result}")
                histories[symbol] = None
            else:
                histories[symbol] = result
        return histories

    async def get_quotes(self, symbols: Iterable[str]) -> Dict[str, Optional[dict]]:
        """Fetch quotes for several symbols concurrently."""
        unique = list(dict.fromkeys(symbols))
        results = await asyncio.gather(
            *(asyncio.to_thread(self.get_quote, symbol) for symbol in unique),
            return_exceptions=True,
        )
        quotes: Dict[str, Optional[dict]] = {}
        for symbol, result in zip(unique, results):
            if isinstance(result, BaseException):
                logger.error(f"Quote task failed for {symbol}: {result}")
                quotes[symbol] = None
            else:
                quotes[symbol] = result
        return quotes


# Global service instance
_service: Optional[MarketDataService] = None


def get_market_data_service() -> MarketDataService:
    """Get or create the market data service instance."""
    global _service
    if _service is None:
        _service = MarketDataService(
            enabled=settings.live_market_data,
            timeout=settings.market_data_timeout,
            period=settings.history_period,
        )
    return _service
