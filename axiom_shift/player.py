"""The player, whose matrix grows with each chosen input."""

from __future__ import annotations

from typing import Optional

from axiom_shift.matrix import Matrix

TARGET_GAIN = 1.0
SPREAD_GAIN = 0.1


class Player:
    """Holds the player's matrix and the state it returns to on reset."""

    def __init__(self, initial_state: Optional[Matrix], growth_rate: float) -> None:
        self._initial = initial_state.copy() if initial_state is not None else Matrix()
        self.matrix: Optional[Matrix] = (
            initial_state.copy() if initial_state is not None else None
        )
        self.growth_rate = growth_rate

    def reset(self) -> None:
        """Restore the matrix to a copy of the initial state."""
        self.matrix = self._initial.copy()

    def update_matrix(self, value: float) -> None:
        """Grow every cell, the one selected by ``value`` in [0, 1] the most."""
        m = self.matrix
        if m is None or m.rows == 0 or m.cols == 0:
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