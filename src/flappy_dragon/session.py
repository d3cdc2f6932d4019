"""
session.py: The game-mode state machine. One call to tick() per display frame.
"""

import logging
from typing import Callable, Dict, Optional

from .console import Console
from .constants import (
    DRAGON_FRAMES, WALL_GLYPH, GROUND_GLYPH, PLAYER_SCREEN_X, PLAYER_SCALE,
    WHITE, NAVY
)
from .data_models import Action, GameMode
from .physics_engine import FrameTimer, WorldEngine
from .settings import GameSettings, load_settings

logger = logging.getLogger(__name__)


class GameSession:
    """
    Everything one run of the game owns: the world, the frame timer, the
    current mode, and the quit flag the host watches.
    """

    def __init__(self, settings: Optional[GameSettings] = None):
        if settings is None:
            settings = load_settings()
        settings.validate()

        self.settings = settings
        self.world = WorldEngine(settings=settings)
        self.timer = FrameTimer(duration_ms=settings.frame_duration_ms)
        self.mode = GameMode.MENU
        self.quitting = False

        self._handlers: Dict[GameMode, Callable[[Console, float, Optional[Action]], None]] = {
            GameMode.MENU: self._main_menu,
            GameMode.PLAYING: self._play,
            GameMode.PAUSED: self._pause_menu,
            GameMode.DEAD: self._dead,
        }

    @property
    def score(self) -> int:
        return self.world.score

    @property
    def player(self):
        return self.world.player

    @property
    def obstacles(self):
        return self.world.obstacles

    def tick(self, console: Console, frame_time_ms: float, action: Optional[Action] = None):
        """Runs exactly one mode handler for this frame."""
        self._handlers[self.mode](console, frame_time_ms, action)

    # ---------------- Transitions ----------------

    def restart(self):
        self.world.reset()
        self.timer.reset()
        self._set_mode(GameMode.PLAYING)
        logger.info("New game started")

    def continue_game(self):
        self._set_mode(GameMode.PLAYING)

    def quit(self):
        self.quitting = True
        logger.info("Quit requested from %s", self.mode.value)

    def _set_mode(self, mode: GameMode):
        if mode is not self.mode:
            logger.info("Mode %s -> %s", self.mode.value, mode.value)
        self.mode = mode

    # ---------------- Mode handlers ----------------

    def _play(self, console: Console, frame_time_ms: float, action: Optional[Action]):
        world = self.world
        console.cls_bg(NAVY)

        if self.timer.accumulate(frame_time_ms):
            world.step()

        if action is Action.FLAP:
            world.flap_player()
        elif action is Action.ESCAPE:
            self._set_mode(GameMode.PAUSED)

        world.maybe_spawn_on_frame(self.timer.elapsed_ms)

        self._render_player(console)
        console.print(0, 0, "Press SPACE to flap.")
        console.print(0, 1, "Press ESC to pause.")
        console.print(0, 2, f"Score {world.score}")
        self._render_world(console)

        world.retire_passed()

        if world.is_dead():
            self._set_mode(GameMode.DEAD)
            logger.info("Dragon down with %d points", world.score)

    def _main_menu(self, console: Console, frame_time_ms: float, action: Optional[Action]):
        console.cls()
        console.print_centered(5, "Welcome to Flappy Dragon")
        console.print_centered(8, "(P) Play Game")
        console.print_centered(9, "(Q) Quit Game")

        if action is Action.PLAY:
            self.restart()
        elif action is Action.QUIT:
            self.quit()

    def _pause_menu(self, console: Console, frame_time_ms: float, action: Optional[Action]):
        console.cls()
        console.print_centered(5, "Pause!")
        console.print_centered(8, "(ESC) Continue Game")
        console.print_centered(9, "(Q) Quit Game")

        if action is Action.ESCAPE:
            self.continue_game()
        elif action is Action.QUIT:
            self.quit()

    def _dead(self, console: Console, frame_time_ms: float, action: Optional[Action]):
        console.cls()
        console.print_centered(5, "You are dead!")
        console.print_centered(6, f"You earned {self.world.score} points")
        console.print_centered(8, "(P) Play Game")
        console.print_centered(9, "(Q) Quit Game")

        if action is Action.PLAY:
            self.restart()
        elif action is Action.QUIT:
            self.quit()

    # ---------------- Rendering ----------------

    def _render_player(self, console: Console):
        player = self.world.player
        console.set_fancy(
            PLAYER_SCREEN_X, player.y, 0.0, PLAYER_SCALE,
            WHITE, NAVY, DRAGON_FRAMES[player.frame]
        )

    def _render_world(self, console: Console):
        width = self.settings.screen_width
        height = self.settings.screen_height
        ground_top = height - self.settings.ground_rows
        player_x = self.world.player.x

        for y in range(ground_top, height):
            for x in range(width):
                console.set(x, y, WHITE, WHITE, GROUND_GLYPH)

        for obstacle in self.world.obstacles:
            screen_x = obstacle.x - player_x
            if not 0 <= screen_x < width:
                continue
            for y in range(0, max(obstacle.gap_top, 0)):
                console.set(screen_x, y, WHITE, NAVY, WALL_GLYPH)
            # Bottom wall stops above the ground
            for y in range(obstacle.gap_bottom, ground_top):
                console.set(screen_x, y, WHITE, NAVY, WALL_GLYPH)
