"""Seeded generation of the square rule matrix used in battles."""

from __future__ import annotations

import random

from axiom_shift.matrix import Matrix


def rule_matrix(seed: int, size: int) -> Matrix:
    """A ``size`` x ``size`` matrix of values in [-1, 1) drawn from ``seed``."""
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    rng = random.Random(seed)
    return Matrix([[rng.random() * 2 - 1 for _ in range(size)] for _ in range(size)])