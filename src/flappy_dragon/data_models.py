"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass
from enum import Enum

from .constants import PLAYER_START_X, PLAYER_START_Y


@dataclass
class Player:
    """The dragon. Row 0 is the top of the screen, so falling means y grows."""
    x: int = PLAYER_START_X
    y: float = float(PLAYER_START_Y)
    velocity: float = 0.0
    frame: int = 0                  # Index into DRAGON_FRAMES


@dataclass
class Obstacle:
    """A gate: one wall column with a gap centred on gap_y."""
    x: int
    gap_y: int
    size: int

    @property
    def half_size(self) -> int:
        return self.size // 2

    @property
    def gap_top(self) -> int:
        return self.gap_y - self.half_size

    @property
    def gap_bottom(self) -> int:
        return self.gap_y + self.half_size


class GameMode(Enum):
    MENU = "menu"
    PLAYING = "playing"
    PAUSED = "paused"
    DEAD = "dead"


class Action(Enum):
    """Logical key presses reported by the host, at most one per frame."""
    FLAP = "flap"
    ESCAPE = "escape"       # Pause while playing, resume while paused
    PLAY = "play"
    QUIT = "quit"
