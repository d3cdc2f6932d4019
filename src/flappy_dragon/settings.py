"""
settings.py: Typed, validated view over the game constants.
"""

from dataclasses import dataclass, replace
from typing import Optional

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, GROUND_ROWS, FRAME_DURATION_MS,
    PLAYER_START_X, PLAYER_START_Y, GATE_SIZE, MIN_GATE_SIZE,
    SPAWN_DISTANCE, SPAWN_ODDS, SPAWN_MODE_TICK, SPAWN_MODES
)


@dataclass(frozen=True)
class GameSettings:
    """
    Every tunable the core reads. Immutable so a running session cannot
    drift from what was validated at startup.
    """
    screen_width: int = SCREEN_WIDTH
    screen_height: int = SCREEN_HEIGHT
    ground_rows: int = GROUND_ROWS
    frame_duration_ms: float = FRAME_DURATION_MS
    player_start_x: int = PLAYER_START_X
    player_start_y: int = PLAYER_START_Y
    gate_size: int = GATE_SIZE
    min_gate_size: int = MIN_GATE_SIZE
    spawn_distance: int = SPAWN_DISTANCE
    spawn_odds: int = SPAWN_ODDS
    spawn_mode: str = SPAWN_MODE_TICK
    seed: Optional[int] = None

    @property
    def effective_gate_size(self) -> int:
        return max(self.min_gate_size, self.gate_size)

    @property
    def playable_bottom(self) -> int:
        """Lowest row a gap may reach (the row above the ground)."""
        return self.screen_height - self.ground_rows - 1

    def with_overrides(self, **changes) -> "GameSettings":
        """Copy with some fields replaced, validated."""
        settings = replace(self, **changes)
        settings.validate()
        return settings

    def validate(self) -> None:
        """
        Check configuration consistency.

        Raises:
            ValueError: If any value would make the game unplayable.
        """
        if self.screen_width <= 0 or self.screen_height <= 0:
            raise ValueError(
                f"Screen size must be positive, got {self.screen_width}x{self.screen_height}"
            )
        if not 0 <= self.ground_rows < self.screen_height:
            raise ValueError(f"ground_rows must be in [0, {self.screen_height}), got {self.ground_rows}")
        if self.frame_duration_ms <= 0:
            raise ValueError(f"frame_duration_ms must be positive, got {self.frame_duration_ms}")
        if self.spawn_distance <= 0:
            raise ValueError(f"spawn_distance must be positive, got {self.spawn_distance}")
        if self.spawn_odds < 1:
            raise ValueError(f"spawn_odds must be at least 1, got {self.spawn_odds}")
        if self.min_gate_size <= 0:
            raise ValueError(f"min_gate_size must be positive, got {self.min_gate_size}")
        if self.spawn_mode not in SPAWN_MODES:
            raise ValueError(f"spawn_mode must be one of {SPAWN_MODES}, got '{self.spawn_mode}'")

        half_size = self.effective_gate_size // 2
        if self.playable_bottom - half_size < half_size:
            raise ValueError(
                f"Gate size {self.effective_gate_size} does not fit in "
                f"{self.playable_bottom + 1} playable rows"
            )
        if not 0 <= self.player_start_y <= self.screen_height:
            raise ValueError(
                f"player_start_y must be in [0, {self.screen_height}], got {self.player_start_y}"
            )


def load_settings(**overrides) -> GameSettings:
    """Build settings from the constants plus overrides, validated."""
    settings = GameSettings(**overrides)
    settings.validate()
    return settings
