"""
physics_core.py: The deterministic kinematic functions and collision logic.
"""

import random
from dataclasses import dataclass, field

from .constants import GRAVITY, MAX_FALL_VELOCITY, FLAP_VELOCITY, DRAGON_FRAMES
from .data_models import Player, Obstacle
from .settings import GameSettings, load_settings


@dataclass
class PhysicsCore:
    """
    Per-tick rules for the dragon and the gates. Holds no world state of its
    own; the engine built on top of it owns the player and the obstacles.
    """
    settings: GameSettings = field(default_factory=load_settings)

    def apply_gravity_and_movement(self, player: Player) -> None:
        """
        Advances the player by exactly one fixed tick. This is the only
        place the player's x changes.
        """
        player.velocity = min(player.velocity + GRAVITY, MAX_FALL_VELOCITY)
        player.y = max(player.y + player.velocity, 0.0)

        player.x += 1
        player.frame = (player.frame + 1) % len(DRAGON_FRAMES)

    def flap(self, player: Player) -> None:
        """Overrides (never adds to) the current velocity."""
        player.velocity = FLAP_VELOCITY

    def create_obstacle(self, x: int, rng: random.Random) -> Obstacle:
        """Builds a gate at x whose whole gap sits inside the playable rows."""
        size = self.settings.effective_gate_size
        half_size = size // 2
        gap_y = rng.randint(half_size, self.settings.playable_bottom - half_size)
        return Obstacle(x=x, gap_y=gap_y, size=size)

    def check_collision(self, obstacle: Obstacle, player: Player) -> bool:
        """
        True when the player is in the gate's column and outside its gap.
        Relies on x moving in whole steps of 1 so the column is never skipped.
        """
        if player.x != obstacle.x:
            return False
        return player.y < obstacle.gap_top or player.y > obstacle.gap_bottom

    def fell_out(self, player: Player) -> bool:
        """True once the player has dropped past the bottom of the screen."""
        return player.y > self.settings.screen_height
