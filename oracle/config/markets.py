"""
Markets Configuration - ETF watchlist, stress gauges and backtest series.

STATIC_QUOTES holds the last known quote per ETF and is served when yfinance
cannot provide one.
"""

YAHOO_QUOTE_URL = "https://finance.yahoo.com/quote/{symbol}"

STATIC_QUOTES = {
    "SPY": {
        "name": "SPDR S&P 500 ETF",
        "price": 445.67,
        "change": 2.34,
        "changePercent": 0.53,
        "volume": 45678900,
    },
    "TLT": {
        "name": "iShares 20+ Year Treasury Bond ETF",
        "price": 89.45,
        "change": -0.67,
        "changePercent": -0.74,
        "volume": 12345600,
    },
    "GLD": {
        "name": "SPDR Gold Shares",
        "price": 178.92,
        "change": 1.23,
        "changePercent": 0.69,
        "volume": 8765400,
    },
    "HYG": {
        "name": "iShares iBoxx $ High Yield Corporate Bond ETF",
        "price": 76.34,
        "change": 0.12,
        "changePercent": 0.16,
        "volume": 5432100,
    },
    "VTI": {
        "name": "Vanguard Total Stock Market ETF",
        "price": 234.56,
        "change": 1.89,
        "changePercent": 0.81,
        "volume": 23456700,
    },
    "VEA": {
        "name": "Vanguard FTSE Developed Markets ETF",
        "price": 45.78,
        "change": -0.34,
        "changePercent": -0.74,
        "volume": 9876500,
    },
}

QUOTE_SOURCE = "Yahoo Finance"

# Market stress gauges: value, threshold and gauge range
STRESS_GAUGES = {
    "vix": {"value": 16.52, "threshold": 20, "min": 0, "max": 50, "source": "CBOE"},
    "hySpread": {"value": 6.92, "threshold": 10, "min": 0, "max": 20, "source": "fred.stlouisfed.org"},
}

STRESS_COLORS = {
    "normal": "#00d4ff",
    "moderate": "#ffa500",
    "extreme": "#ff0000",
}

# Above threshold by more than this factor counts as extreme
EXTREME_STRESS_FACTOR = 1.5

# Model portfolio value path (base 100) used by the backtesting card
BACKTEST_SERIES = [
    ("2023-01-01", 100.0),
    ("2023-03-01", 105.2),
    ("2023-06-01", 108.7),
    ("2023-09-01", 112.1),
    ("2023-12-01", 115.8),
    ("2024-03-01", 118.9),
    ("2024-06-01", 122.3),
    ("2024-08-01", 124.5),
]

DEFAULT_BACKTEST_START = "2023-01-01"
DEFAULT_BACKTEST_COUNTRY = "France"
