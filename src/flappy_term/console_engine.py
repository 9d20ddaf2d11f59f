"""
console_engine.py: A character-cell display and keyboard backend on top of pygame.

The game draws into a WIDTH x HEIGHT grid of glyphs; this module owns the
window, the frame clock and the per-frame key presses.
"""

from typing import Dict, Set, Tuple

import pygame

from .constants import BACKGROUND, CELL_HEIGHT, CELL_WIDTH, TARGET_FPS
from .game_state import Key

Color = Tuple[int, int, int]

KEY_BINDINGS = {
    pygame.K_RETURN: Key.ENTER,
    pygame.K_KP_ENTER: Key.ENTER,
    pygame.K_SPACE: Key.SPACE,
    pygame.K_UP: Key.UP,
    pygame.K_p: Key.P,
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_q: Key.Q,
}


class ConsoleEngine:
    def __init__(self, width: int, height: int, fps: int = TARGET_FPS,
                 title: str = "Flappy Bird"):
        pygame.init()
        self.width = width
        self.height = height
        self.fps = fps
        self.screen = pygame.display.set_mode((width * CELL_WIDTH, height * CELL_HEIGHT))
        pygame.display.set_caption(title)
        self.font = pygame.font.SysFont("monospace", CELL_HEIGHT - 8, bold=True)
        self.clock = pygame.time.Clock()

        self.cells: Dict[Tuple[int, int], Tuple[str, Color]] = {}
        self.pressed: Set[Key] = set()
        self._glyph_cache: Dict[Tuple[str, Color], pygame.Surface] = {}

    def set_pixel(self, x: int, y: int, glyph: str, color: Color):
        """Off-grid writes are ignored, so callers can draw partly visible shapes."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self.cells[(x, y)] = (glyph, color)

    def clear(self):
        self.cells.clear()

    def draw(self):
        self.screen.fill(BACKGROUND)
        for (x, y), (glyph, color) in self.cells.items():
            surface = self._render_glyph(glyph, color)
            rect = surface.get_rect(center=(
                x * CELL_WIDTH + CELL_WIDTH // 2,
                y * CELL_HEIGHT + CELL_HEIGHT // 2,
            ))
            self.screen.blit(surface, rect)
        pygame.display.flip()

    def is_key_pressed(self, key: Key) -> bool:
        """True if the key went down since the previous frame."""
        return key in self.pressed

    def wait_frame(self):
        """Blocks until the next frame is due, then collects this frame's key presses."""
        self.clock.tick(self.fps)
        self.pressed.clear()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                # Closing the window behaves like the quit key
                self.pressed.add(Key.Q)
            elif event.type == pygame.KEYDOWN and event.key in KEY_BINDINGS:
                self.pressed.add(KEY_BINDINGS[event.key])

    def close(self):
        pygame.quit()

    def _render_glyph(self, glyph: str, color: Color) -> pygame.Surface:
        surface = self._glyph_cache.get((glyph, color))
        if surface is None:
            surface = self.font.render(glyph, True, color)
            self._glyph_cache[(glyph, color)] = surface
        return surface
