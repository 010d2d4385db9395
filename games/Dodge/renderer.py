"""
Dodge - Renderer

Draws one frame from the game's current state. Rendering never changes the
game, so drawing the same state twice gives the same picture.
"""
from typing import Dict, Optional, Tuple, TYPE_CHECKING

import pygame

from models import Color
from pilotlou.games import GameState
from games.Dodge import config

if TYPE_CHECKING:
    from games.Dodge.game_mode import DodgeMode


# Phase prompt: text, color, baseline position
PROMPTS: Dict[GameState, Tuple[str, Color, Tuple[int, int]]] = {
    GameState.GAME_OVER: ("Click to start over.", config.RED, (63, 435)),
    GameState.WAITING: ("Click red guy to start!", config.GREEN, (40, 435)),
    GameState.PAUSED: ("Click red guy to resume!", config.RED, (40, 435)),
    GameState.PLAYING: ("Click to pause!", config.GRAY, (110, 435)),
}

GAME_OVER_BANNER = "Ded"


def format_seconds(milliseconds: float) -> str:
    """Milliseconds as seconds with three decimals ('12.345')."""
    return f"{milliseconds / 1000:.3f}"


class DodgeRenderer:
    """Draws the arena, entities, HUD and phase prompt.

    Fonts are created on first use, after pygame.font is initialized.
    """

    def __init__(self):
        self._hud_font: Optional[pygame.font.Font] = None
        self._banner_font: Optional[pygame.font.Font] = None

    def _ensure_fonts(self) -> None:
        if self._hud_font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._hud_font = pygame.font.SysFont(config.FONT_NAME, config.HUD_FONT_SIZE)
            self._banner_font = pygame.font.SysFont(config.FONT_NAME, config.BANNER_FONT_SIZE)

    def render(self, surface: pygame.Surface, game: 'DodgeMode') -> None:
        """Draw one frame of game onto surface."""
        self._ensure_fonts()
        width, height = surface.get_size()
        margin = config.ARENA_MARGIN

        # Background, then the white arena inset by the margin
        surface.fill(config.BACKGROUND_COLOR.as_tuple)
        arena = pygame.Rect(margin, margin, max(0, width - 2 * margin), max(0, height - 2 * margin))
        pygame.draw.rect(surface, config.ARENA_COLOR.as_tuple, arena)

        # Enemies first so the player is always on top
        for entity in [*game.enemies, game.player]:
            pygame.draw.rect(surface, entity.color.as_tuple, entity.bounds.as_pygame_rect())

        self._render_hud(surface, game)
        self._render_prompt(surface, game.state)

    def _render_hud(self, surface: pygame.Surface, game: 'DodgeMode') -> None:
        self._draw_text(surface, self._hud_font, f"Time {format_seconds(game.last_elapsed_time)}",
                        config.GREEN, config.TIME_TEXT_POS)
        self._draw_text(surface, self._hud_font, f"Best {format_seconds(game.best_time)}",
                        config.RED, config.BEST_TEXT_POS)

    def _render_prompt(self, surface: pygame.Surface, state: GameState) -> None:
        if state == GameState.GAME_OVER:
            self._draw_text(surface, self._banner_font, GAME_OVER_BANNER,
                            config.RED, config.BANNER_POS)

        prompt = PROMPTS.get(state)
        if prompt is not None:
            text, color, position = prompt
            self._draw_text(surface, self._hud_font, text, color, position)

    @staticmethod
    def _draw_text(
        surface: pygame.Surface,
        font: pygame.font.Font,
        text: str,
        color: Color,
        baseline: Tuple[int, int],
    ) -> None:
        # Positions are canvas-style baselines; blit takes the top-left corner
        rendered = font.render(text, True, color.as_rgb_tuple)
        x, y = baseline
        surface.blit(rendered, (x, y - font.get_ascent()))
