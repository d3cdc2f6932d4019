#!/usr/bin/env python3
"""
pygame_client.py

Playable front end: a pygame window that acts as the game's console and
input source, plus the host loop that drives GameSession once per frame.
"""

import argparse
import logging
from typing import Dict, List, Optional, Tuple

import pygame

from .console import Color
from .constants import RENDER_FPS, TILE_SIZE, BLACK, WHITE, SPAWN_MODES
from .data_models import Action
from .session import GameSession
from .settings import GameSettings, load_settings

logger = logging.getLogger(__name__)

KEY_ACTIONS: Dict[int, Action] = {
    pygame.K_SPACE: Action.FLAP,
    pygame.K_ESCAPE: Action.ESCAPE,
    pygame.K_p: Action.PLAY,
    pygame.K_q: Action.QUIT,
}

FONT_NAMES = "dejavusansmono,consolas,menlo,monospace"


class PygameConsole:
    """Console implementation that draws a cell grid onto a pygame surface."""

    def __init__(self, surface: pygame.Surface, width: int, height: int, tile_size: int = TILE_SIZE):
        self.surface = surface
        self.width = width
        self.height = height
        self.tile_size = tile_size
        self.font = pygame.font.SysFont(FONT_NAMES, tile_size)
        self._glyph_cache: Dict[Tuple[str, Color], pygame.Surface] = {}

    def _glyph(self, glyph: str, fg: Color) -> pygame.Surface:
        key = (glyph, fg)
        if key not in self._glyph_cache:
            self._glyph_cache[key] = self.font.render(glyph, True, fg)
        return self._glyph_cache[key]

    def cls(self):
        self.surface.fill(BLACK)

    def cls_bg(self, color: Color):
        self.surface.fill(color)

    def set(self, x: int, y: int, fg: Color, bg: Color, glyph: str):
        ts = self.tile_size
        cell = pygame.Rect(x * ts, y * ts, ts, ts)
        pygame.draw.rect(self.surface, bg, cell)
        glyph_surf = self._glyph(glyph, fg)
        self.surface.blit(glyph_surf, glyph_surf.get_rect(center=cell.center))

    def set_fancy(self, x: float, y: float, rotation: float, scale: float, fg: Color, bg: Color, glyph: str):
        sprite = pygame.transform.rotozoom(self._glyph(glyph, fg), -rotation, scale)
        self.surface.blit(sprite, (int(x * self.tile_size), int(y * self.tile_size)))

    def print(self, x: int, y: int, text: str):
        self.surface.blit(self.font.render(text, True, WHITE), (x * self.tile_size, y * self.tile_size))

    def print_centered(self, y: int, text: str):
        text_surf = self.font.render(text, True, WHITE)
        x = self.surface.get_width() // 2 - text_surf.get_width() // 2
        self.surface.blit(text_surf, (x, y * self.tile_size))


class FlappyClient:
    def __init__(self, settings: GameSettings, fps: int = RENDER_FPS):
        pygame.init()
        self.settings = settings
        self.fps = fps
        self.screen = pygame.display.set_mode(
            (settings.screen_width * TILE_SIZE, settings.screen_height * TILE_SIZE)
        )
        pygame.display.set_caption("Flappy Dragon")

        self.console = PygameConsole(self.screen, settings.screen_width, settings.screen_height)
        self.session = GameSession(settings)
        self.clock = pygame.time.Clock()

    def _poll_action(self) -> Optional[Action]:
        """Drains the event queue and reports the first mapped key press."""
        actions: List[Action] = []
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.session.quit()
            elif event.type == pygame.KEYDOWN and event.key in KEY_ACTIONS:
                actions.append(KEY_ACTIONS[event.key])
        return actions[0] if actions else None

    def run(self):
        """The main host loop. Returns once the session asks to quit."""
        logger.info("Starting Flappy Dragon at %d FPS (spawn mode: %s)", self.fps, self.settings.spawn_mode)
        try:
            while not self.session.quitting:
                frame_time_ms = float(self.clock.tick(self.fps))
                action = self._poll_action()
                if self.session.quitting:
                    break
                self.session.tick(self.console, frame_time_ms, action)
                pygame.display.flip()
        finally:
            pygame.quit()
        logger.info("Exited with score %d", self.session.score)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Flappy Dragon")
    parser.add_argument("--seed", type=int, default=None, help="Seed for obstacle generation")
    parser.add_argument("--fps", type=int, default=RENDER_FPS, help="Render frame rate cap")
    parser.add_argument("--spawn-mode", choices=SPAWN_MODES, default=GameSettings.spawn_mode,
                        help="Obstacle cadence: per physics tick, or the legacy per-frame roll")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )

    if args.fps <= 0:
        parser.error(f"--fps must be positive, got {args.fps}")
    try:
        settings = load_settings(seed=args.seed, spawn_mode=args.spawn_mode)
    except ValueError as e:
        parser.error(str(e))

    FlappyClient(settings, fps=args.fps).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
