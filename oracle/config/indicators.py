"""
Indicators Configuration - Static physical/macro indicator breakdown.

Served whenever the upstream breakdown service is not configured or fails.
Weights sum to 1.0.
"""

DEFAULT_INDICATORS_COUNTRY = "FRA"

FALLBACK_BREAKDOWN = {
    "electricity": {
        "current_value": 102.3,
        "weight": 0.25,
        "confidence": 0.85,
        "trend": "up",
        "impact": "positive",
        "unit": "TWh",
        "source": "EIA",
    },
    "copper": {
        "current_value": 8420.50,
        "weight": 0.20,
        "confidence": 0.92,
        "trend": "up",
        "impact": "positive",
        "unit": "USD/t",
        "source": "Alpha Vantage",
    },
    "pmi": {
        "current_value": 51.2,
        "weight": 0.20,
        "confidence": 0.90,
        "trend": "up",
        "impact": "positive",
        "unit": "index",
        "source": "FRED",
    },
    "oil": {
        "current_value": 73.85,
        "weight": 0.15,
        "confidence": 0.90,
        "trend": "down",
        "impact": "positive",
        "unit": "USD/bbl",
        "source": "Alpha Vantage",
    },
    "natural_gas": {
        "current_value": 3.42,
        "weight": 0.10,
        "confidence": 0.85,
        "trend": "stable",
        "impact": "neutral",
        "unit": "USD/MMBtu",
        "source": "Alpha Vantage",
    },
    "gold": {
        "current_value": 1945.20,
        "weight": 0.05,
        "confidence": 0.90,
        "trend": "up",
        "impact": "positive",
        "unit": "USD/oz",
        "source": "Alpha Vantage",
    },
    "silver": {
        "current_value": 24.85,
        "weight": 0.05,
        "confidence": 0.85,
        "trend": "stable",
        "impact": "neutral",
        "unit": "USD/oz",
        "source": "Alpha Vantage",
    },
}

IMPACT_SCORES = {
    "positive": 1.0,
    "negative": 0.0,
    "neutral": 0.5,
}

FALLBACK_SUFFIX = "(fallback)"
