# Axiom Shift

A small puzzle game about matrices. You and an enemy each hold a 3×3
matrix. A rule matrix, generated from a seed, decides every battle: your
matrix is multiplied by the rule, the enemy's matrix is subtracted, and
the mean of what is left is the result. A result above zero is a win.

Each turn you choose a number from 0 to 9. It picks which cell of your
matrix grows most; every other cell grows a little. Both matrices are then
scaled to unit length before the battle is scored. Whenever you win a
turn, the enemy grows as well (toward your chosen cell and toward the
rule's largest cell), up to ten times, until it no longer loses. After ten
battles, the last battle decides the game.

Unless a seed is given, the game first searches for a seed whose rule can
be won by the player and also by the enemy, so a game is winnable but not
trivial. The search reports its progress through the `logging` module and
can take a while.

## Installing

    pip install .

## Playing

    axiom-shift

To play a particular rule and skip the seed search:

    axiom-shift --seed 12345

Controls:

- `0`–`9`: choose your input for the next battle
- `Enter`: confirm and fight
- `Backspace`: choose again
- `R`: after the tenth battle, retry with the same rule

The window shows the battle log, a bar for the last result (green to the
right when you are ahead, red to the left when the enemy is), both
matrices as coloured cells, and the seed in use.

## Using the pieces

The game logic works without a window:

```python
from axiom_shift.matrix import Matrix
from axiom_shift.player import Player
from axiom_shift.enemy import Enemy
from axiom_shift.rules import rule_matrix
from axiom_shift.battle import BattleService

player = Player(Matrix([[2.0, 0.0], [0.0, 2.0]]), 0.5)
enemy = Enemy("Enemy", Matrix([[0.0, 2.0], [2.0, 0.0]]), 0.5)
service = BattleService(player, enemy, rule_matrix(42, 2))

result, win = service.do_battle_turn(5 / 9, 0)
```

- `Matrix` offers `multiply`, `subtract`, `scalar_value` (the mean),
  `normalize` (in place, to unit L2 norm) and `copy`. `multiply` and
  `subtract` raise `ValueError` for empty matrices or mismatched shapes.
- `rule_matrix(seed, size)` gives the same `size`×`size` matrix of values
  in [-1, 1) for the same seed.
- `BattleService.outcome()` returns 0 when the shapes do not allow a score.
- `axiom_shift.seeds.SeedManager` keeps a seed and a generator driven by it.
- `axiom_shift.seed_finder.find_valid_seed(battle_max, player, enemy, rng=None)`
  runs the same seed search the game uses and returns a `SeedSearchResult`
  holding the seed and one winning input path for each side. It raises
  `ValueError` for bad arguments and `SeedNotFoundError` when no seed
  qualifies within 1000 tries. `wilson_interval(wins, n)` is the 99%
  confidence interval it filters with.
- `axiom_shift.game.Game(seed=None)` holds the game state; `handle_key`,
  `update`, `draw` and `reset` drive it from any pygame loop.

## Running the tests

    pip install ".[test]"
    python -m pytest