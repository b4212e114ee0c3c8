"""The game loop: phases, key handling, battles and drawing."""

from __future__ import annotations

import argparse
import enum
import logging
from typing import Optional

import pygame

from axiom_shift.battle import BattleService
from axiom_shift.enemy import Enemy
from axiom_shift.matrix import Matrix
from axiom_shift.player import Player
from axiom_shift.rules import rule_matrix
from axiom_shift.seed_finder import find_valid_seed
from axiom_shift.ui import UI, draw_text

SCREEN_WIDTH = 640
SCREEN_HEIGHT = 480
TITLE = "Axiom Shift"
FPS = 60
BATTLE_MAX = 10
GROWTH_RATE = 0.5

_DIGIT_KEYS = {pygame.K_0 + i: i for i in range(10)}

_CELL_SIZE = 18
_CELL_MARGIN = 3
_MATRIX_X = 200
_MATRIX_Y = 310
_MATRIX_GAP = 180

_BAR_X = 120
_BAR_Y = 410
_BAR_W = 400
_BAR_H = 18
_BAR_BACKGROUND = (80, 80, 80)
_BAR_CENTER = (255, 255, 255)
_BAR_PLAYER = (80, 200, 80)
_BAR_ENEMY = (200, 80, 80)


class Phase(enum.Enum):
    INPUT = "input"
    CONFIRM = "confirm"
    BATTLE = "battle"
    END = "end"


def format_float(value: float) -> str:
    """A number with two decimals, as used in all battle output."""
    return f"{value:.2f}"


def win_lose_label(win: bool) -> str:
    return "WIN" if win else "LOSE"


def _fill_rect(surface: pygame.Surface, x: float, y: float, w: float, h: float, color) -> None:
    if w <= 0 or h <= 0:
        return
    surface.fill(color, pygame.Rect(int(x), int(y), int(w), int(h)))


def _intensity(value: float) -> int:
    return int(64 + 191 * min(max(value, 0.0), 1.0))


def _draw_matrix(surface: pygame.Surface, matrix: Matrix, x: int, y: int, color_of, label: str) -> None:
    step = _CELL_SIZE + _CELL_MARGIN
    for i, row in enumerate(matrix.data):
        for j, value in enumerate(row):
            _fill_rect(surface, x + j * step, y + i * step, _CELL_SIZE, _CELL_SIZE, color_of(_intensity(value)))
    draw_text(surface, label, x, y - 18)


def _draw_result_bar(surface: pygame.Surface, result: float) -> None:
    _fill_rect(surface, _BAR_X, _BAR_Y, _BAR_W, _BAR_H, _BAR_BACKGROUND)
    center = _BAR_X + _BAR_W // 2
    _fill_rect(surface, center - 1, _BAR_Y, 2, _BAR_H, _BAR_CENTER)
    clamped = min(max(result, -1.0), 1.0)
    bar_len = int((_BAR_W // 2) * clamped)
    if bar_len > 0:
        _fill_rect(surface, center, _BAR_Y, bar_len, _BAR_H, _BAR_PLAYER)
    elif bar_len < 0:
        _fill_rect(surface, center + bar_len, _BAR_Y, -bar_len, _BAR_H, _BAR_ENEMY)
    draw_text(surface, "Result", _BAR_X - 70, _BAR_Y + 2)


class Game:
    """A run of battles between the player and the enemy under one rule seed."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self.player = Player(
            Matrix([[2.0, 0.0, 0.0], [0.0, 2.0, 0.0], [0.0, 0.0, 2.0]]), GROWTH_RATE
        )
        self.enemy = Enemy(
            "Enemy",
            Matrix([[0.0, 0.0, 2.0], [0.0, 2.0, 0.0], [2.0, 0.0, 0.0]]),
            GROWTH_RATE,
        )
        self.battle_max = BATTLE_MAX
        if seed is None:
            seed = find_valid_seed(self.battle_max, self.player, self.enemy).seed
        self.seed = seed
        self.player.reset()
        self.enemy.reset()
        self.rule = rule_matrix(seed, self.player.matrix.rows)
        self.ui = UI()
        self.battle_count = 0
        self.input_value = 0
        self.phase = Phase.INPUT
        self.last_win = False
        self.last_result: Optional[float] = None

    def handle_key(self, key: int) -> None:
        """React to a pressed key according to the current phase."""
        if self.phase is Phase.INPUT:
            if key in _DIGIT_KEYS:
                self.input_value = _DIGIT_KEYS[key]
                self.phase = Phase.CONFIRM
        elif self.phase is Phase.CONFIRM:
            if key == pygame.K_RETURN:
                self.phase = Phase.BATTLE
            elif key == pygame.K_BACKSPACE:
                self.phase = Phase.INPUT
        elif self.phase is Phase.END:
            if key == pygame.K_r:
                self.reset()

    def update(self) -> None:
        """Advance one frame; a confirmed input is fought out here."""
        if self.phase is not Phase.BATTLE:
            return
        service = BattleService(self.player, self.enemy, self.rule)
        result, win = service.do_battle_turn(self.input_value / 9, self.battle_count)
        self.last_result = result
        self.battle_count += 1
        self.ui.add_battle_log(
            f"Battle {self.battle_count}: Input={self.input_value} "
            f"Result={format_float(result)} Win/Lose={win_lose_label(win)}"
        )
        if self.battle_count >= self.battle_max:
            self.phase = Phase.END
            self.ui.add_battle_log("---")
            self.last_win = win
            self.ui.add_battle_log(
                "[GAME WIN] Congratulations!" if win else "[GAME LOSE] Try again!"
            )
        else:
            self.phase = Phase.INPUT

    def draw(self, surface: pygame.Surface) -> None:
        self.ui.draw(surface)
        if self.phase is Phase.INPUT:
            hint = "Press 0-9 to input"
        elif self.phase is Phase.CONFIRM:
            hint = f"Input: {self.input_value}  [Enter: OK / Backspace: Re-input]"
        elif self.phase is Phase.BATTLE:
            hint = "Battle processing..."
        elif self.last_win:
            hint = "GAME WIN! Press R to retry same rule."
        else:
            hint = "GAME LOSE! Press R to retry same rule."
        draw_text(surface, hint, 10, 460)
        draw_text(surface, f"Seed: {self.seed}", 485, 460)
        if self.last_result is not None:
            _draw_result_bar(surface, self.last_result)
        if self.player.matrix is not None:
            _draw_matrix(
                surface, self.player.matrix, _MATRIX_X, _MATRIX_Y,
                lambda v: (0, 0, v), "Player",
            )
        if self.enemy.matrix is not None:
            _draw_matrix(
                surface, self.enemy.matrix, _MATRIX_X + _MATRIX_GAP, _MATRIX_Y,
                lambda v: (v, 0, 0), "Enemy",
            )

    def reset(self) -> None:
        """Start over with the same seed."""
        self.battle_count = 0
        self.player.reset()
        self.enemy.reset()
        self.rule = rule_matrix(self.seed, self.player.matrix.rows)
        self.ui.clear_battle_log()
        self.phase = Phase.INPUT
        self.last_win = False
        self.last_result = None


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="axiom-shift", description=TITLE)
    parser.add_argument("--seed", type=int, default=None, help="rule seed to play")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    game = Game(seed=args.seed)
    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(TITLE)
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    game.handle_key(event.key)
            game.update()
            game.draw(screen)
            pygame.display.flip()
            clock.tick(FPS)
    finally:
        pygame.quit()
    return 0