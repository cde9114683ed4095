"""
constants.py: Centralized configuration for game, asset and storage settings.
"""

import os

# -------- Game World Config --------
SCREEN_WIDTH = 400
SCREEN_HEIGHT = 600
RENDER_FPS = 60                 # Render tick cap (not delta corrected)
BIRD_X = 50                     # Fixed bird X position
BIRD_START_Y = 300
BIRD_WIDTH = 32
BIRD_HEIGHT = 32

# -------- Physics Config (units / tick) --------
GRAVITY = 0.4                   # Added to velocity every tick
JUMP_IMPULSE = -8               # Velocity set on a jump

# -------- Pipe Config --------
PIPE_WIDTH = 60
PIPE_SPEED = 2                  # Horizontal scroll per tick
DIFFICULTY = 6                  # Gap height = BIRD_HEIGHT * DIFFICULTY
PIPE_MARGIN = 50                # Minimum distance between gap and screen edge
PIPE_SPAWN_INTERVAL_MS = 2000   # Wall-clock spawn period

# -------- Persistence --------
DB_FILE = "flappy_highscore.db"
HIGHSCORE_KEY = "flappyHighscore"

# -------- Assets --------
ASSETS_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "resources")
PIPE_TEXTURE_PATH = os.path.join(ASSETS_PATH, "pipe.bmp")
TAP_SOUND_PATH = os.path.join(ASSETS_PATH, "tap.wav")
DIE_SOUND_PATH = os.path.join(ASSETS_PATH, "die.wav")
URL_FETCH_TIMEOUT = 10.0        # seconds
MUTE = False

# -------- Render Config --------
BACKGROUND_COLOR = (0, 0, 0)
BIRD_COLOR = (255, 255, 0)
TEXT_COLOR = (255, 255, 255)
GAME_OVER_COLOR = (255, 0, 0)
BUTTON_COLOR = (0, 150, 0)
HUD_FONT_SIZE = 28
GAME_OVER_FONT_SIZE = 40
HINT_FONT_SIZE = 20
HUD_MARGIN = 10
