"""Search for a rule seed under which both the player and the enemy can win."""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass
from typing import Optional

from axiom_shift.battle import BattleService
from axiom_shift.enemy import Enemy
from axiom_shift.matrix import Matrix
from axiom_shift.player import Player
from axiom_shift.rules import rule_matrix

log = logging.getLogger(__name__)

INPUT_CHOICES = 10
BEAM_WIDTH = 3
MAX_TRIES = 1000
_Z_99 = 2.576


@dataclass(frozen=True)
class SeedSearchResult:
    """A seed together with one winning path for each side."""

    seed: int
    player_path: tuple[int, ...]
    enemy_path: tuple[int, ...]


class SeedNotFoundError(RuntimeError):
    """No seed met the requirements within the allowed number of tries."""


def wilson_interval(wins: int, n: int) -> tuple[float, float]:
    """99% Wilson score interval for a win rate, clamped to [0, 1]."""
    if n == 0:
        return 0.0, 1.0
    p = wins / n
    z = _Z_99
    denom = 1 + z * z / n
    center = p + z * z / (2 * n)
    pm = z * math.sqrt(p * (1 - p) / n + z * z / (4 * n * n))
    low = max((center - pm) / denom, 0.0)
    high = min((center + pm) / denom, 1.0)
    return low, high


def _player_wins(
    player: Player, enemy: Enemy, rule: Matrix, inputs: list[int]
) -> bool:
    player.reset()
    enemy.reset()
    service = BattleService(player, enemy, rule)
    win = False
    for battle, choice in enumerate(inputs):
        _, win = service.do_battle_turn(choice / 9, battle)
    return win


def find_valid_seed(
    battle_max: int,
    player: Player,
    enemy: Enemy,
    rng: Optional[random.Random] = None,
) -> SeedSearchResult:
    """Find a rule seed for which ``battle_max`` battles can end either way.

    Raises ValueError for bad arguments and SeedNotFoundError when the search
    gives up.
    """
    if battle_max <= 0 or player is None or enemy is None:
        raise ValueError(
            "battle_max must be > 0, player and enemy must not be None"
        )
    rng = rng if rng is not None else random.Random()

    size = 2
    if player.matrix is not None and player.matrix.rows > 0:
        size = player.matrix.rows
    rough_samples = 50 * size * size
    deep_samples = 200 * size * size
    max_nodes = 1000 * size * size

    def simulate(rule: Matrix, samples: int) -> int:
        return sum(
            _player_wins(
                player,
                enemy,
                rule,
                [rng.randrange(INPUT_CHOICES) for _ in range(battle_max)],
            )
            for _ in range(samples)
        )

    def prove(rule: Matrix) -> Optional[tuple[list[int], list[int]]]:
        player_paths: list[list[int]] = []
        enemy_paths: list[list[int]] = []
        nodes = 0

        def dfs(inputs: list[int]) -> None:
            nonlocal nodes
            if nodes >= max_nodes:
                return
            nodes += 1
            if len(inputs) == battle_max:
                if _player_wins(player, enemy, rule, inputs):
                    player_paths.append(inputs)
                else:
                    enemy_paths.append(inputs)
                return
            choices = list(range(INPUT_CHOICES))
            rng.shuffle(choices)
            for choice in choices[:BEAM_WIDTH]:
                dfs([*inputs, choice])
                if nodes >= max_nodes:
                    return

        dfs([])
        if not player_paths or not enemy_paths:
            return None
        return rng.choice(player_paths), rng.choice(enemy_paths)

    for attempt in range(1, MAX_TRIES + 1):
        seed = rng.getrandbits(63)
        rule = rule_matrix(seed, size)

        low, high = wilson_interval(simulate(rule, rough_samples), rough_samples)
        if not (low < 0.99 and high > 0.01):
            continue

        p_hat = simulate(rule, deep_samples) / deep_samples
        if p_hat in (0.0, 1.0):
            continue

        paths = prove(rule)
        log.debug("proof for seed %d (attempt %d): ok=%s", seed, attempt, paths is not None)
        if paths is not None:
            player_path, enemy_path = paths
            log.info(
                "found valid seed %d with player path %s, enemy path %s",
                seed,
                player_path,
                enemy_path,
            )
            return SeedSearchResult(seed, tuple(player_path), tuple(enemy_path))
        if attempt % 100 == 0:
            log.info("tried %d seeds so far, still searching", attempt)

    raise SeedNotFoundError(f"valid seed not found after {MAX_TRIES} tries")