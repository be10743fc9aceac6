"""
Cache - Named in-memory caches whose entries expire after a fixed lifetime.

The sector endpoint keeps one computed payload per country here so repeated
dashboard refreshes do not hit Yahoo Finance again within the TTL.

Usage:
    from oracle.cache import TTLCache

    sectors = TTLCache('sectors', ttl_seconds=300)
    sectors.set('USA', payload)
    sectors.get('USA')           # None once 300 s have passed
    TTLCache.get_all_stats()     # {'sectors': {...}}

The clock is injectable, so expiry can be driven by hand:

    now = [1000.0]
    cache = TTLCache('test', ttl_seconds=10, clock=lambda: now[0])
"""

import time
from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar('T')

Clock = Callable[[], float]


@dataclass
class CacheEntry(Generic[T]):
    value: T
    created_at: float
    expires_at: float

    def alive(self, now: float) -> bool:
        return now < self.expires_at


class TTLCache(Generic[T]):
    """
    Per-key TTL cache keyed by string.

    Every instance is registered under its name; a second cache created with
    the same name takes over the registry slot.
    """

    _registry: dict[str, 'TTLCache'] = {}

    def __init__(self, name: str, ttl_seconds: float = 300, clock: Optional[Clock] = None):
        self._name = name
        self._ttl = ttl_seconds
        self._clock = clock or time.time
        self._entries: dict[str, CacheEntry[T]] = {}
        self._hits = 0
        self._misses = 0
        TTLCache._registry[name] = self

    @property
    def name(self) -> str:
        return self._name

    @property
    def ttl_seconds(self) -> float:
        return self._ttl

    def _lookup(self, key: str) -> Optional[CacheEntry[T]]:
        """Live entry for key; an expired one is evicted on the way."""
        entry = self._entries.get(key)
        if entry is not None and not entry.alive(self._clock()):
            del self._entries[key]
            entry = None
        return entry

    def get(self, key: str) -> Optional[T]:
        """Cached value, or None when absent or expired. Counts a hit or a miss."""
        entry = self._lookup(key)
        if entry is None:
            self._misses += 1
            return None
        self._hits += 1
        return entry.value

    def set(self, key: str, value: T, ttl_seconds: Optional[float] = None) -> None:
        """
        Store value under key.

        Args:
            key: Cache key (a country code for the sector cache)
            value: Anything; None cannot be told apart from a miss
            ttl_seconds: Lifetime for this entry only; the cache TTL when omitted
        """
        now = self._clock()
        lifetime = self._ttl if ttl_seconds is None else ttl_seconds
        self._entries[key] = CacheEntry(value=value, created_at=now, expires_at=now + lifetime)

    def invalidate(self, key: str) -> bool:
        """Drop one key. True if something was stored under it."""
        return self._entries.pop(key, None) is not None

    def clear(self) -> int:
        """Drop everything; returns how many entries were held."""
        dropped = len(self._entries)
        self._entries = {}
        return dropped

    def stats(self) -> dict:
        """Live entry count plus hit/miss counters since creation."""
        now = self._clock()
        lookups = self._hits + self._misses
        return {
            'name': self._name,
            'entries': sum(1 for entry in self._entries.values() if entry.alive(now)),
            'ttl_seconds': self._ttl,
            'hits': self._hits,
            'misses': self._misses,
            'hit_rate': self._hits / lookups if lookups else 0.0,
        }

    @classmethod
    def named(cls, name: str) -> Optional['TTLCache']:
        return cls._registry.get(name)

    @classmethod
    def get_all_stats(cls) -> dict[str, dict]:
        return {name: cache.stats() for name, cache in cls._registry.items()}

    @classmethod
    def clear_all(cls) -> dict[str, int]:
        """Clear every registered cache; entries dropped per cache name."""
        return {name: cache.clear() for name, cache in cls._registry.items()}
