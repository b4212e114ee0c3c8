import pygame
import pytest

from axiom_shift.game import Game, Phase, format_float, win_lose_label
from axiom_shift.matrix import Matrix
from axiom_shift.rules import rule_matrix

SEED = 42


def _play(game, digit):
    game.handle_key(pygame.K_0 + digit)
    game.handle_key(pygame.K_RETURN)
    game.update()


def test_initial_state():
    game = Game(seed=SEED)
    assert game.phase is Phase.INPUT
    assert game.battle_count == 0
    assert game.last_result is None
    assert game.ui.battle_log == ()
    assert game.rule == rule_matrix(SEED, 3)
    assert game.player.matrix == Matrix([[2, 0, 0], [0, 2, 0], [0, 0, 2]])
    assert game.enemy.matrix == Matrix([[0, 0, 2], [0, 2, 0], [2, 0, 0]])


def test_digit_key_moves_to_confirm():
    game = Game(seed=SEED)
    game.handle_key(pygame.K_7)
    assert game.phase is Phase.CONFIRM
    assert game.input_value == 7


def test_non_digit_ignored_in_input():
    game = Game(seed=SEED)
    game.handle_key(pygame.K_a)
    game.handle_key(pygame.K_RETURN)
    assert game.phase is Phase.INPUT


def test_backspace_returns_to_input():
    game = Game(seed=SEED)
    game.handle_key(pygame.K_3)
    game.handle_key(pygame.K_BACKSPACE)
    assert game.phase is Phase.INPUT


def test_update_outside_battle_does_nothing():
    game = Game(seed=SEED)
    game.handle_key(pygame.K_3)
    game.update()
    assert game.phase is Phase.CONFIRM
    assert game.battle_count == 0


def test_one_battle_logs_and_returns_to_input():
    game = Game(seed=SEED)
    _play(game, 5)
    assert game.phase is Phase.INPUT
    assert game.battle_count == 1
    assert game.last_result is not None
    (entry,) = game.ui.battle_log
    assert entry.startswith("Battle 1: Input=5 Result=")
    assert format_float(game.last_result) in entry
    assert entry.endswith(("Win/Lose=WIN", "Win/Lose=LOSE"))


def test_full_game_ends():
    game = Game(seed=SEED)
    for digit in range(10):
        _play(game, digit)
    assert game.phase is Phase.END
    assert game.battle_count == game.battle_max
    log = game.ui.battle_log
    assert len(log) == game.battle_max + 2
    assert log[-2] == "---"
    expected = "[GAME WIN] Congratulations!" if game.last_win else "[GAME LOSE] Try again!"
    assert log[-1] == expected
    assert log[-3].endswith(f"Win/Lose={win_lose_label(game.last_win)}")


def test_same_seed_same_inputs_same_log():
    first, second = Game(seed=SEED), Game(seed=SEED)
    for digit in (9, 0, 4, 4, 2):
        _play(first, digit)
        _play(second, digit)
    assert first.ui.battle_log == second.ui.battle_log
    assert first.player.matrix == second.player.matrix


def test_r_key_resets_after_end():
    game = Game(seed=SEED)
    for _ in range(game.battle_max):
        _play(game, 1)
    game.handle_key(pygame.K_r)
    assert game.phase is Phase.INPUT
    assert game.battle_count == 0
    assert game.last_result is None
    assert game.last_win is False
    assert game.ui.battle_log == ()
    assert game.rule == rule_matrix(SEED, 3)
    assert game.player.matrix == Matrix([[2, 0, 0], [0, 2, 0], [0, 0, 2]])


def test_r_key_ignored_before_end():
    game = Game(seed=SEED)
    _play(game, 2)
    game.handle_key(pygame.K_r)
    assert game.battle_count == 1


def test_replay_after_reset_is_identical():
    game = Game(seed=SEED)
    for digit in (3, 8, 1):
        _play(game, digit)
    before = game.ui.battle_log
    game.reset()
    for digit in (3, 8, 1):
        _play(game, digit)
    assert game.ui.battle_log == before


@pytest.mark.parametrize("value, text", [(0.5, "0.50"), (-1.234, "-1.23")])
def test_format_float(value, text):
    assert format_float(value) == text


def test_win_lose_label():
    assert win_lose_label(True) == "WIN"
    assert win_lose_label(False) == "LOSE"


def test_draw_matrices_and_bar():
    game = Game(seed=SEED)
    surface = pygame.Surface((640, 480))
    game.draw(surface)
    # no battle yet, so the result bar area stays black
    assert surface.get_at((121, 415)) == (0, 0, 0, 255)
    r, g, b, _ = surface.get_at((205, 315))
    assert (r, g) == (0, 0) and b >= 64
    r, g, b, _ = surface.get_at((385, 315))
    assert (g, b) == (0, 0) and r >= 64

    _play(game, 6)
    game.draw(surface)
    assert tuple(surface.get_at((121, 415)))[:3] in {(80, 80, 80), (200, 80, 80)}