"""
Sectors Configuration - Reference data for the eleven sector categories.

Base allocation, performance and risk figures are the static fallbacks used
when no live ETF history is available for a category.
"""

from enum import Enum


class SectorType(str, Enum):
    """Sector categories shown on the dashboard."""

    TECHNOLOGY = "TECHNOLOGY"
    FINANCE = "FINANCE"
    HEALTHCARE = "HEALTHCARE"
    INDUSTRY = "INDUSTRY"
    ENERGY = "ENERGY"
    CONSUMER = "CONSUMER"
    COMMUNICATION = "COMMUNICATION"
    MATERIALS = "MATERIALS"
    UTILITIES = "UTILITIES"
    REAL_ESTATE = "REAL_ESTATE"
    SERVICES = "SERVICES"


# Representative SPDR ETF per category (SERVICES uses Industrials as proxy)
SECTOR_ETFS = {
    SectorType.TECHNOLOGY: "XLK",
    SectorType.FINANCE: "XLF",
    SectorType.HEALTHCARE: "XLV",
    SectorType.INDUSTRY: "XLI",
    SectorType.ENERGY: "XLE",
    SectorType.CONSUMER: "XLP",
    SectorType.COMMUNICATION: "XLC",
    SectorType.MATERIALS: "XLB",
    SectorType.UTILITIES: "XLU",
    SectorType.REAL_ESTATE: "XLRE",
    SectorType.SERVICES: "XLI",
}

# Benchmark used for sector beta
BENCHMARK_SYMBOL = "SPY"

# Categories without their own country factor borrow a fraction of a related one
DIRECT_FACTORS = {
    SectorType.TECHNOLOGY: "tech",
    SectorType.FINANCE: "finance",
    SectorType.HEALTHCARE: "healthcare",
    SectorType.INDUSTRY: "industrials",
    SectorType.ENERGY: "energy",
}

DERIVED_FACTORS = {
    SectorType.CONSUMER: ("tech", 0.8),
    SectorType.COMMUNICATION: ("tech", 0.9),
    SectorType.MATERIALS: ("industrials", 0.8),
    SectorType.UTILITIES: ("energy", 0.7),
    SectorType.REAL_ESTATE: ("finance", 0.8),
    SectorType.SERVICES: ("industrials", 0.9),
}

BASE_ALLOCATION = {
    SectorType.TECHNOLOGY: 18,
    SectorType.FINANCE: 16,
    SectorType.HEALTHCARE: 14,
    SectorType.INDUSTRY: 12,
    SectorType.ENERGY: 10,
    SectorType.CONSUMER: 8,
    SectorType.COMMUNICATION: 7,
    SectorType.MATERIALS: 6,
    SectorType.UTILITIES: 4,
    SectorType.REAL_ESTATE: 3,
    SectorType.SERVICES: 2,
}

BASE_PERFORMANCE = {
    SectorType.TECHNOLOGY: 12.5,
    SectorType.FINANCE: 8.2,
    SectorType.HEALTHCARE: 9.8,
    SectorType.INDUSTRY: 7.1,
    SectorType.ENERGY: 15.3,
    SectorType.CONSUMER: 6.9,
    SectorType.COMMUNICATION: 11.2,
    SectorType.MATERIALS: 4.8,
    SectorType.UTILITIES: 3.2,
    SectorType.REAL_ESTATE: 5.7,
    SectorType.SERVICES: 8.9,
}

BASE_RISK = {
    SectorType.TECHNOLOGY: 78,
    SectorType.FINANCE: 69,
    SectorType.HEALTHCARE: 47,
    SectorType.INDUSTRY: 63,
    SectorType.ENERGY: 82,
    SectorType.CONSUMER: 58,
    SectorType.COMMUNICATION: 71,
    SectorType.MATERIALS: 76,
    SectorType.UTILITIES: 32,
    SectorType.REAL_ESTATE: 54,
    SectorType.SERVICES: 61,
}

# Display metadata: id, name, description, icon, color
SECTOR_METADATA = {
    SectorType.TECHNOLOGY: (
        "technology", "Technologies",
        "IT, Software, Hardware, Intelligence Artificielle", "💻", "#00d4ff",
    ),
    SectorType.FINANCE: (
        "finance", "Finance",
        "Banque, Assurance, Investissement, Fintech", "🏦", "#00ff88",
    ),
    SectorType.HEALTHCARE: (
        "healthcare", "Santé",
        "Médical, Pharmaceutique, Biotech, Équipement médical", "🏥", "#ff6b6b",
    ),
    SectorType.INDUSTRY: (
        "industry", "Industrie",
        "Manufacture, Automobile, Aéronautique, Défense", "🏭", "#ffa500",
    ),
    SectorType.ENERGY: (
        "energy", "Énergie",
        "Pétrole, Gaz, Renouvelables, Nucléaire", "⚡", "#ffeb3b",
    ),
    SectorType.CONSUMER: (
        "consumer", "Consommation",
        "Retail, E-commerce, Biens de consommation", "🛒", "#9c27b0",
    ),
    SectorType.COMMUNICATION: (
        "communication", "Communication",
        "Télécom, Média, Internet, Réseaux sociaux", "📡", "#2196f3",
    ),
    SectorType.MATERIALS: (
        "materials", "Matériaux",
        "Chimie, Construction, Métaux, Mines", "🏗️", "#795548",
    ),
    SectorType.UTILITIES: (
        "utilities", "Services publics",
        "Électricité, Eau, Gaz, Infrastructure", "🔌", "#607d8b",
    ),
    SectorType.REAL_ESTATE: (
        "real_estate", "Immobilier",
        "Construction, Gestion immobilière, REITs", "🏠", "#4caf50",
    ),
    SectorType.SERVICES: (
        "services", "Services",
        "Consulting, Transport, Logistique, Services aux entreprises", "🚚", "#ff9800",
    ),
}

# Risk level buckets on the base risk constant
HIGH_RISK_THRESHOLD = 75
MEDIUM_RISK_THRESHOLD = 50

TRADING_DAYS_PER_YEAR = 252
HISTORY_POINTS = 30
