"""The enemy, whose matrix grows toward the input and the rule's strongest cell."""

from __future__ import annotations

from typing import Optional

from axiom_shift.matrix import Matrix

TARGET_GAIN = 1.0
SPREAD_GAIN = 0.1
RULE_GAIN = 0.5


class Enemy:
    """Holds the enemy's matrix and the state it returns to on reset."""

    def __init__(
        self, name: str, initial_state: Optional[Matrix], growth_rate: float
    ) -> None:
        self.name = name
        self._initial = initial_state.copy() if initial_state is not None else Matrix()
        self.matrix: Optional[Matrix] = (
            initial_state.copy() if initial_state is not None else None
        )
        self.growth_rate = growth_rate

    def reset(self) -> None:
        """Restore the matrix to a copy of the initial state."""
        self.matrix = self._initial.copy()

    def grow(self, value: float, rule: Optional[Matrix]) -> None:
        """Grow toward the cell selected by ``value`` and the largest cell of ``rule``."""
        m = self.matrix
        if m is None or rule is None or m.rows == 0 or m.cols == 0:
            return
        if rule.rows == 0 or rule.cols == 0:
            return
        total = m.rows * m.cols
        index = min(max(int(value * (total - 1) + 0.5), 0), total - 1)
        target = divmod(index, m.cols)
        m.data = [
            [
                v + (TARGET_GAIN if (i, j) == target else SPREAD_GAIN) * self.growth_rate
                for j, v in enumerate(row)
            ]
            for i, row in enumerate(m.data)
        ]
        best, (bi, bj) = rule.data[0][0], (0, 0)
        for i, row in enumerate(rule.data):
            for j, v in enumerate(row):
                if v > best:
                    best, (bi, bj) = v, (i, j)
        m.data[bi][bj] += RULE_GAIN * self.growth_rate