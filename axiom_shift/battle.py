"""One battle between the player and the enemy under a rule matrix."""

from __future__ import annotations

from typing import Optional

from axiom_shift.enemy import Enemy
from axiom_shift.matrix import Matrix
from axiom_shift.player import Player

BASE_GROWTH = 0.5
GROWTH_PER_BATTLE = 0.1
MAX_ENEMY_GROWTH_TRIES = 10


class BattleService:
    """Runs battles and turns for one player, one enemy and one rule matrix."""

    def __init__(self, player: Player, enemy: Enemy, rules: Optional[Matrix]) -> None:
        self.player = player
        self.enemy = enemy
        self.rules = rules

    def execute_battle(self, player_input: float) -> tuple[float, bool]:
        """Grow the player, normalise both sides and score them.

        Returns the outcome and whether the player won (outcome above zero).
        """
        self.player.update_matrix(player_input)
        for m in (self.player.matrix, self.enemy.matrix):
            if m is not None:
                m.normalize()
        result = self.outcome()
        return result, result > 0

    def do_battle_turn(self, value: float, battle_count: int) -> tuple[float, bool]:
        """Play one turn; after a player win the enemy grows until it no longer loses."""
        self.player.growth_rate = BASE_GROWTH + GROWTH_PER_BATTLE * battle_count
        result, win = self.execute_battle(value)
        if win:
            for _ in range(MAX_ENEMY_GROWTH_TRIES):
                self.enemy.grow(value, self.rules)
                _, still_winning = self.execute_battle(value)
                if not still_winning:
                    break
        return result, win

    def outcome(self) -> float:
        """Mean of (player x rules - enemy), or 0 when the shapes do not allow it."""
        player_matrix = self.player.matrix
        enemy_matrix = self.enemy.matrix
        rules = self.rules
        if player_matrix is None or enemy_matrix is None or rules is None:
            return 0.0
        if rules.rows == 0 or rules.cols == 0:
            return 0.0
        try:
            return player_matrix.multiply(rules).subtract(enemy_matrix).scalar_value()
        except ValueError:
            return 0.0