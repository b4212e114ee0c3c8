"""Battle log display and text drawing on a pygame surface."""

from __future__ import annotations

from functools import lru_cache

import pygame

TEXT_COLOR = (255, 255, 255)
BACKGROUND = (0, 0, 0)
FONT_SIZE = 18
LOG_LEFT = 10
LOG_TOP = 10
LOG_LINE_HEIGHT = 20
LOG_BOTTOM = 460


@lru_cache(maxsize=1)
def _font() -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, FONT_SIZE)


def draw_text(surface: pygame.Surface, message: str, x: int, y: int) -> None:
    """Draw ``message`` in white with its top-left corner at (x, y)."""
    image = _font().render(message, True, TEXT_COLOR)
    surface.blit(image, (x, y))


class UI:
    """Keeps the battle log and draws it from the top of the screen down."""

    def __init__(self) -> None:
        self._battle_log: list[str] = []

    @property
    def battle_log(self) -> tuple[str, ...]:
        return tuple(self._battle_log)

    def add_battle_log(self, entry: str) -> None:
        self._battle_log.append(entry)

    def clear_battle_log(self) -> None:
        self._battle_log = []

    def draw(self, surface: pygame.Surface) -> None:
        """Clear the surface to black and draw the log lines that fit."""
        surface.fill(BACKGROUND)
        for i, entry in enumerate(self._battle_log):
            y = LOG_TOP + i * LOG_LINE_HEIGHT
            if y > LOG_BOTTOM:
                break
            draw_text(surface, entry, LOG_LEFT, y)