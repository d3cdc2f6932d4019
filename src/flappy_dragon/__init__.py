"""
Flappy Dragon: a side-scrolling reflex game.

The core (physics, obstacle stream, mode state machine) is headless and
draws through the Console protocol; pygame_client supplies a window.
"""

from .data_models import Action, GameMode, Obstacle, Player
from .physics_core import PhysicsCore
from .physics_engine import FrameTimer, WorldEngine
from .session import GameSession
from .settings import GameSettings, load_settings

__all__ = [
    "Action",
    "GameMode",
    "Obstacle",
    "Player",
    "PhysicsCore",
    "FrameTimer",
    "WorldEngine",
    "GameSession",
    "GameSettings",
    "load_settings",
]
