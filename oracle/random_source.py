"""
RandomSource - Injectable randomness for jittered payload fields.

Confidence, beta and volume values carry a small random component. Routing all
of it through one seeded generator makes responses reproducible in tests:

    rng = RandomSource(seed=42)
    rng.uniform(75, 90)
"""

import random
from typing import Optional


class RandomSource:
    """Thin wrapper around random.Random so callers never touch global state."""

    def __init__(self, seed: Optional[int] = None):
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    def random(self) -> float:
        """Float in [0, 1)."""
        return self._rng.random()

    def uniform(self, low: float, high: float) -> float:
        """Float in [low, high)."""
        return low + (high - low) * self._rng.random()

    def reseed(self, seed: Optional[int] = None) -> None:
        self._seed = seed
        self._rng.seed(seed)
