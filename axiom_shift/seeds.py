"""A seed together with the random generator it drives."""

from __future__ import annotations

import random
import time
from typing import Optional


class SeedManager:
    """Keeps a seed and a generator; changing the seed reseeds the generator."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self.seed = time.time_ns() if seed is None else seed

    @property
    def seed(self) -> int:
        return self._seed

    @seed.setter
    def seed(self, value: int) -> None:
        self._seed = value
        self._rng = random.Random(value)

    def random_float(self) -> float:
        """A float in [0, 1)."""
        return self._rng.random()

    def random_int(self, low: int, high: int) -> int:
        """An integer in [low, high); raises ValueError when the range is empty."""
        if high <= low:
            raise ValueError(f"empty range [{low}, {high})")
        return self._rng.randrange(low, high)