"""
Countries Configuration - Per-country economic snapshots and allocation tables.

The dashboard addresses countries two ways: French display names for the
regime and allocation cards ("France", "États-Unis") and ISO alpha-3 codes for
the sector module ("FRA", "USA"). COUNTRY_ALIASES maps codes onto the display
names so either form resolves.
"""

from enum import Enum


class Regime(str, Enum):
    """Categorical macroeconomic state."""

    EXPANSION = "EXPANSION"
    RECOVERY = "RECOVERY"
    RECESSION = "RECESSION"
    STAGFLATION = "STAGFLATION"


DEFAULT_REGIME_COUNTRY = "France"

# Regime snapshot per country: growth/inflation/unemployment in percent
REGIME_DATA = {
    "France": {
        "regime": Regime.EXPANSION,
        "confidence": 85,
        "indicators": {"croissance": 2.5, "inflation": 2.8, "chomage": 7.5},
        "badge_color": "green",
    },
    "États-Unis": {
        "regime": Regime.EXPANSION,
        "confidence": 90,
        "indicators": {"croissance": 3.2, "inflation": 3.1, "chomage": 6.5},
        "badge_color": "green",
    },
    "Chine": {
        "regime": Regime.RECOVERY,
        "confidence": 75,
        "indicators": {"croissance": 5.5, "inflation": 2.2, "chomage": 5.5},
        "badge_color": "blue",
    },
    "Japon": {
        "regime": Regime.STAGFLATION,
        "confidence": 70,
        "indicators": {"croissance": 1.2, "inflation": 3.5, "chomage": 2.8},
        "badge_color": "orange",
    },
    "Allemagne": {
        "regime": Regime.EXPANSION,
        "confidence": 82,
        "indicators": {"croissance": 2.8, "inflation": 2.9, "chomage": 5.8},
        "badge_color": "green",
    },
    "Inde": {
        "regime": Regime.EXPANSION,
        "confidence": 88,
        "indicators": {"croissance": 6.8, "inflation": 4.2, "chomage": 8.2},
        "badge_color": "green",
    },
    "Royaume-Uni": {
        "regime": Regime.RECOVERY,
        "confidence": 78,
        "indicators": {"croissance": 2.1, "inflation": 4.8, "chomage": 4.2},
        "badge_color": "blue",
    },
    "Italie": {
        "regime": Regime.STAGFLATION,
        "confidence": 65,
        "indicators": {"croissance": 1.8, "inflation": 5.2, "chomage": 9.1},
        "badge_color": "orange",
    },
    "Brésil": {
        "regime": Regime.RECOVERY,
        "confidence": 72,
        "indicators": {"croissance": 3.8, "inflation": 6.5, "chomage": 11.2},
        "badge_color": "blue",
    },
    "Canada": {
        "regime": Regime.EXPANSION,
        "confidence": 86,
        "indicators": {"croissance": 2.9, "inflation": 2.4, "chomage": 5.2},
        "badge_color": "green",
    },
}

COUNTRY_ALIASES = {
    "FRA": "France",
    "USA": "États-Unis",
    "US": "États-Unis",
    "Etats-Unis": "États-Unis",
    "CHN": "Chine",
    "JPN": "Japon",
    "DEU": "Allemagne",
    "Germany": "Allemagne",
    "IND": "Inde",
    "GBR": "Royaume-Uni",
    "ITA": "Italie",
    "BRA": "Brésil",
    "Bresil": "Brésil",
    "CAN": "Canada",
}

# Portfolio allocation per country (percent, each row sums to 100)
DEFAULT_ALLOCATION_COUNTRY = "France"

ALLOCATIONS = {
    "France": {"stocks": 65, "bonds": 25, "commodities": 5, "cash": 5},
    "USA": {"stocks": 70, "bonds": 20, "commodities": 7, "cash": 3},
    "Germany": {"stocks": 60, "bonds": 30, "commodities": 5, "cash": 5},
}

ALLOCATION_ALIASES = {
    "FRA": "France",
    "États-Unis": "USA",
    "Etats-Unis": "USA",
    "US": "USA",
    "DEU": "Germany",
    "Allemagne": "Germany",
}

# Pie chart slices: allocation key -> (label, colour)
ALLOCATION_CHART = {
    "stocks": ("Actions", "#00d4ff"),
    "bonds": ("Obligations", "#1a1a2e"),
    "commodities": ("Or", "#ffd700"),
    "cash": ("Liquidités", "#e5e7eb"),
}

# Sector weighting factors per ISO country code
DEFAULT_SECTOR_COUNTRY = "USA"

SECTOR_MULTIPLIERS = {
    "FRA": {"tech": 1.0, "finance": 1.2, "healthcare": 1.1, "industrials": 1.1, "energy": 0.9},
    "USA": {"tech": 1.5, "finance": 1.3, "healthcare": 1.2, "industrials": 1.0, "energy": 1.1},
    "CHN": {"tech": 1.2, "finance": 1.0, "healthcare": 0.9, "industrials": 1.4, "energy": 1.2},
    "DEU": {"tech": 1.1, "finance": 1.1, "healthcare": 1.2, "industrials": 1.3, "energy": 1.0},
    "GBR": {"tech": 1.2, "finance": 1.4, "healthcare": 1.1, "industrials": 0.9, "energy": 1.0},
    "JPN": {"tech": 1.3, "finance": 1.0, "healthcare": 1.1, "industrials": 1.2, "energy": 0.8},
    "CAN": {"tech": 1.0, "finance": 1.2, "healthcare": 1.0, "industrials": 1.1, "energy": 1.3},
    "AUS": {"tech": 0.9, "finance": 1.1, "healthcare": 1.0, "industrials": 1.2, "energy": 1.4},
    "IND": {"tech": 1.1, "finance": 0.8, "healthcare": 0.9, "industrials": 1.2, "energy": 1.0},
    "ITA": {"tech": 0.9, "finance": 1.0, "healthcare": 1.0, "industrials": 1.1, "energy": 0.8},
    "BRA": {"tech": 0.7, "finance": 0.9, "healthcare": 0.8, "industrials": 1.0, "energy": 1.2},
}


def resolve_regime_country(country: str | None) -> str:
    """Map a display name or ISO code onto a REGIME_DATA key (France if unknown)."""
    if not country:
        return DEFAULT_REGIME_COUNTRY
    name = country.strip()
    name = COUNTRY_ALIASES.get(name.upper(), COUNTRY_ALIASES.get(name, name))
    return name if name in REGIME_DATA else DEFAULT_REGIME_COUNTRY


def resolve_allocation_country(country: str | None) -> str:
    """Map a display name or ISO code onto an ALLOCATIONS key (France if unknown)."""
    if not country:
        return DEFAULT_ALLOCATION_COUNTRY
    name = country.strip()
    name = ALLOCATION_ALIASES.get(name.upper(), ALLOCATION_ALIASES.get(name, name))
    return name if name in ALLOCATIONS else DEFAULT_ALLOCATION_COUNTRY


def resolve_sector_country(country: str | None) -> str:
    """Normalize an ISO code for SECTOR_MULTIPLIERS (USA if unknown)."""
    code = (country or "").strip().upper()
    return code if code in SECTOR_MULTIPLIERS else DEFAULT_SECTOR_COUNTRY
