"""
Via Romana: Global Configuration
"""

from typing import Optional

# --- Display ---
GAME_WIDTH: int = 800               # Windowed viewport width
GAME_HEIGHT: int = 400              # Windowed viewport height
FPS: int = 60
START_FULLSCREEN: bool = True
DOUBLE_CLICK_MS: int = 400          # Max gap between clicks to toggle fullscreen
WINDOW_TITLE: str = "Via Romana"

# --- Map ---
TILE_SIZE: int = 40
MAP_MARGIN_TILES: int = 2           # Extra tiles beyond the screen so no edge shows
DEFAULT_MAP_WIDTH: int = 30
DEFAULT_MAP_HEIGHT: int = 20
RANDOM_SEED: Optional[int] = None   # None = fresh city every run

# --- Player ---
PLAYER_SPEED: int = 5               # Pixels per tick, per axis
PLAYER_SIZE: int = 30

# --- Coins ---
COIN_VALUE: int = 10
COIN_SIZE: int = 15
INITIAL_COINS: int = 10
MIN_COINS: int = 15                 # Floor kept after any collection
COIN_SPAWN_ATTEMPT_FACTOR: int = 10 # Random tries = factor * width * height

# --- Textures ---
TEXTURE_VARIANTS: int = 4

# --- Logging ---
LOG_DIR: str = "logs"
