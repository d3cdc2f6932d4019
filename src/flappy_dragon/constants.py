"""
constants.py: Centralized configuration for the game world, physics and display.
"""

# -------- Screen Config (console cells) --------
SCREEN_WIDTH = 80
SCREEN_HEIGHT = 50
GROUND_ROWS = 1                 # The last row is ground, not playable
TILE_SIZE = 16                  # Pixels per console cell in the pygame window

# -------- Time Config --------
FRAME_DURATION_MS = 40.0        # Accumulated frame time that triggers one physics tick
RENDER_FPS = 60                 # Display refresh target for the host loop

# -------- Player Config --------
PLAYER_START_X = 5
PLAYER_START_Y = 25
PLAYER_SCREEN_X = 0             # Dragon is always drawn at the left edge
PLAYER_SCALE = 2.0

# -------- Physics Config (cells / tick) --------
GRAVITY = 0.1                   # Velocity gained per tick
MAX_FALL_VELOCITY = 2.0         # Clamp for fall speed
FLAP_VELOCITY = -1.0            # Negative: row 0 is the top of the screen

# -------- Obstacle Config --------
GATE_SIZE = 40
MIN_GATE_SIZE = 10
SPAWN_DISTANCE = SCREEN_WIDTH   # New gates appear one screen ahead of the dragon
SPAWN_ODDS = 10                 # 1-in-N chance per tick
LEGACY_SPAWN_MODULUS = 50       # Frame-time modulus used by the legacy cadence
LEGACY_SPAWN_ROLL = (1, 39)     # Inclusive range of the legacy per-frame roll

SPAWN_MODE_TICK = "tick"
SPAWN_MODE_LEGACY = "legacy"
SPAWN_MODES = (SPAWN_MODE_TICK, SPAWN_MODE_LEGACY)

# -------- Glyphs --------
DRAGON_FRAMES = ("@", "☺", "☻", "♥", "☻", "☺")
WALL_GLYPH = "│"
GROUND_GLYPH = "#"

# -------- Colours (RGB) --------
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
NAVY = (0, 0, 128)
