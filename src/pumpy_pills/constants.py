"""
constants.py: Centralized configuration for the game world, physics and difficulty.

All distances are pixels, all rates are per simulation tick.
"""

import math

# -------- Timing --------
TICK_RATE = 60                  # Simulation ticks per second
TICK_TIME = 1.0 / TICK_RATE     # Fixed time step for the frame driver
RENDER_FPS = 60
MAX_FRAME_TIME = 0.25           # Clamp for long stalls (seconds)

# -------- Game World Config --------
SCREEN_WIDTH = 480
SCREEN_HEIGHT = 800
PLAYER_X = 100                  # Fixed player X position
SPAWN_Y = SCREEN_HEIGHT // 2

# -------- Physics Config (pixels / tick) --------
GRAVITY = 0.35
MAX_FALL = 8.0
JUMP_STRENGTH = -6.5
GRAVITY_SCALE = 0.95            # Slightly softer gravity for forgiveness
MAX_FALL_SCALE = 1.05
JUMP_SCALE = 1.05
JUMP_BOOST = 0.6                # Extra upward velocity on the second quick jump
FALLING_THRESHOLD = 0.5         # vy above this resets the jump chain
PLAYER_RADIUS = 18
COLLISION_FORGIVENESS = 0.8     # Collision radius = PLAYER_RADIUS * this

# Visual rotation (radians)
ROTATION_MIN = -math.pi / 6
ROTATION_MAX = math.pi / 4
ROTATION_PER_VY = 0.2
ROTATION_LERP = 0.1
ROTATION_JUMP_LERP = 0.3
ROTATION_LERP_DECAY = 0.02

# -------- Obstacle Config --------
OBSTACLE_WIDTH = 70
MIN_GAP = 150
BASE_GAP = 230
EDGE_MARGIN = 50                # Minimum distance from the gap center to a canvas edge
PRUNE_MARGIN = 50               # Obstacles are dropped this far past the left edge
RUG_ADJUSTMENT = 10             # Fixed deduction from every gap
JITTER_MAX = 10                 # Decorative height jitter, never used for collision

# -------- Difficulty Config --------
BASE_SPEED = 1.4
SPEED_SLOPE = 0.08
SPEED_CAP = 3.2
GAP_SLOPE = 10
BASE_SPACING = 330
MIN_SPACING = 240
SPACING_SLOPE = 15
START_OBSTACLES_NEEDED = 3
MAX_OBSTACLES_NEEDED = 50
OBSTACLES_NEEDED_GROWTH = 1.5

# -------- Pattern Config --------
PATTERN_SWITCH_MIN = 4          # Spawns between pattern switches (inclusive range)
PATTERN_SWITCH_MAX = 8
MAX_SWITCH_ATTEMPTS = 10
PATTERN_HISTORY = 32           # Recent switches kept for debugging
EDGE_BOUNDARY = 150             # Staircase turns around this close to an edge
STAIRCASE_STEP = 50
WAVE_AMPLITUDE = 100
WAVE_PERIOD = 6
ZIGZAG_OFFSET = 80
RHYTHM_OFFSET = 100
NARROW_JITTER = 50
STANDARD_JITTER = 60
SURPRISE_CHANCE = 0.2
SURPRISE_JITTER = 50
NARROW_GAP_FACTOR = 0.75
NARROW_SAFETY_BUFFER = 10
BREATHER_CHANCE = 0.1
BREATHER_FACTOR = 1.2

# -------- Scoring --------
INITIAL_PORTFOLIO = 50000.0
PORTFOLIO_CAP = 1e9
PORTFOLIO_GAIN = 1000.0         # Per obstacle passed, multiplied by the level
SCORE_LEVEL_FACTOR = 0.15

# -------- Chart Trail --------
CANDLE_WIDTH = 12
MAX_CANDLES = 60
CANDLE_BUFFER = 10
VERTICAL_FILL_FACTOR = 1.2

# -------- Particles --------
MAX_PARTICLES = 12
PARTICLE_LIFE = 30
PARTICLE_SPREAD = 2.0
PARTICLE_RADIUS = 3

# -------- Input --------
DEBOUNCE_MS = 100

# -------- Performance Monitor --------
FPS_UPDATE_INTERVAL_MS = 1000
FRAME_HISTORY = 60
HISTORY_RESET_MS = 300000

# -------- Character Selection --------
CHARACTER_TILE = 60
CHARACTER_STRIDE = 70
CHARACTER_OFFSET_START = 120    # Tile row below the screen center
CHARACTER_OFFSET_GAMEOVER = 150

# -------- Colors (RGB) --------
COLOR_BG = (13, 20, 33)
COLOR_MINT = (110, 231, 183)
COLOR_GREEN = (52, 211, 153)
COLOR_GRAY = (178, 181, 190)
COLOR_WHITE = (255, 255, 255)
COLOR_DANGER = (255, 85, 85)
COLOR_WARN = (255, 170, 85)
COLOR_CANDLE_UP = (76, 175, 80)
COLOR_CANDLE_DOWN = (229, 115, 115)
COLOR_SELECT = (0, 212, 255)
