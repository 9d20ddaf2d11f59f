"""
constants.py: Centralized configuration for the game field, timing and persistence.
"""

# -------- Field Config --------
WIDTH = 22
HEIGHT = 10
PLAYER_CHAR = 'B'
PIPE_CHAR = '#'
MIN_PIPE_GAP = 2
PIPE_WIDTH = 1

# -------- Timing Config (seconds) --------
TARGET_FPS = 60
SPAWN_PIPE_TIME = 3.0           # Time between obstacle pair spawns
PIPE_SPEED = 2.0                # Cells per second (one shared scroll tick every 1 / PIPE_SPEED)
MAX_PIPES = 5
GRAVITY_TIME = 1.0              # Player falls one cell per interval
JUMP_TIME = 0.25                # Jump cooldown
UPDATE_SCORE_TIME = 2.0         # Cooldown between scored gap crossings

# -------- Persistence --------
SCORE_FILE = "data.bin"
SCORE_FORMAT = "<i"             # Little-endian signed 32-bit integer

# -------- Colors (RGB) --------
WHITE = (255, 255, 255)
RED = (255, 0, 0)
GREEN = (0, 150, 0)
GOLD = (255, 215, 0)
BACKGROUND = (0, 0, 0)

# -------- Window Config (pygame backend) --------
CELL_WIDTH = 24
CELL_HEIGHT = 36
