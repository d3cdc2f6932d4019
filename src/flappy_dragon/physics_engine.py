"""
physics_engine.py: Fixed-timestep accumulator and the world simulation
(player, obstacle stream, score).
"""

import logging
import random
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Optional

from .constants import (
    FRAME_DURATION_MS, LEGACY_SPAWN_MODULUS, LEGACY_SPAWN_ROLL,
    SPAWN_MODE_TICK, SPAWN_MODE_LEGACY
)
from .data_models import Player, Obstacle
from .physics_core import PhysicsCore

logger = logging.getLogger(__name__)


@dataclass
class FrameTimer:
    """
    Turns variable frame durations into fixed physics ticks: at most one
    tick per frame, fired when the accumulated time crosses the threshold.
    """
    duration_ms: float = FRAME_DURATION_MS
    elapsed_ms: float = 0.0

    def accumulate(self, frame_time_ms: float) -> bool:
        """Adds one frame's duration. Returns True if a tick is due."""
        if frame_time_ms < 0:
            raise ValueError(f"Frame time cannot be negative, got {frame_time_ms}")

        self.elapsed_ms += frame_time_ms
        if self.elapsed_ms > self.duration_ms:
            self.elapsed_ms = 0.0
            return True
        return False

    def reset(self):
        self.elapsed_ms = 0.0


@dataclass
class WorldEngine(PhysicsCore):
    """
    Owns everything that lives in the world during a run. Inherits the
    per-tick rules from PhysicsCore. The random source is created once from
    the settings' seed and kept across restarts.
    """
    player: Player = field(init=False, default_factory=Player)
    obstacles: Deque[Obstacle] = field(init=False, default_factory=deque)
    score: int = field(init=False, default=0)
    tick_count: int = field(init=False, default=0)
    rng: random.Random = field(init=False, repr=False)

    def __post_init__(self):
        self.settings.validate()
        self.rng = random.Random(self.settings.seed)
        self.reset()

    def reset(self):
        """Fresh player, a single gate one screen ahead, zero score."""
        self.player = Player(
            x=self.settings.player_start_x,
            y=float(self.settings.player_start_y)
        )
        self.obstacles = deque([self.create_obstacle(self.settings.spawn_distance, self.rng)])
        self.score = 0
        self.tick_count = 0

    def step(self):
        """One fixed physics tick."""
        self.apply_gravity_and_movement(self.player)
        self.tick_count += 1

        if self.settings.spawn_mode == SPAWN_MODE_TICK:
            if self.rng.randrange(self.settings.spawn_odds) == 0:
                self.spawn_obstacle()

    def flap_player(self):
        self.flap(self.player)

    def maybe_spawn_on_frame(self, frame_time_ms: float) -> Optional[Obstacle]:
        """
        Legacy cadence: evaluated every frame against the accumulated frame
        time, so it depends on the display frame rate.
        """
        if self.settings.spawn_mode != SPAWN_MODE_LEGACY:
            return None
        if int(frame_time_ms) % LEGACY_SPAWN_MODULUS != 0:
            return None
        if self.rng.randint(*LEGACY_SPAWN_ROLL) % self.settings.spawn_odds != 0:
            return None
        return self.spawn_obstacle()

    def spawn_obstacle(self) -> Optional[Obstacle]:
        """Appends a gate one spawn distance ahead of the player."""
        x = self.player.x + self.settings.spawn_distance
        if self.obstacles and x <= self.obstacles[-1].x:
            # Player has not moved since the last spawn
            return None

        obstacle = self.create_obstacle(x, self.rng)
        self.obstacles.append(obstacle)
        logger.debug("Spawned gate at x=%d gap_y=%d", obstacle.x, obstacle.gap_y)
        return obstacle

    def retire_passed(self) -> int:
        """Pops every gate the player is past, one point each."""
        retired = 0
        while self.obstacles and self.player.x > self.obstacles[0].x:
            obstacle = self.obstacles.popleft()
            self.score += 1
            retired += 1
            logger.debug("Passed gate at x=%d, score=%d", obstacle.x, self.score)
        return retired

    def is_dead(self) -> bool:
        if self.fell_out(self.player):
            return True
        return any(self.check_collision(obstacle, self.player) for obstacle in self.obstacles)
