"""
Oracle - Market and economic data API for the Oracle Portfolio dashboard.

Usage:
    from oracle import aggregate_sectors, compute_stats, TTLCache

    sectors = aggregate_sectors('FRA')
    stats = compute_stats(sectors)
"""

from oracle.cache import TTLCache
from oracle.random_source import RandomSource
from oracle.sectors import aggregate_sectors, calculate_grade, compute_stats
from oracle.version import VERSION

__all__ = [
    "TTLCache",
    "RandomSource",
    "aggregate_sectors",
    "calculate_grade",
    "compute_stats",
    "VERSION",
]
