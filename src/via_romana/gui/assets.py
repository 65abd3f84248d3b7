"""
Sprite & Texture System: Roman Aesthetic
==========================================
Cobblestone textures are generated programmatically as pygame Surfaces,
off the main thread, and published to a TextureStore. The renderer asks
the store with try_get() every frame and paints flat colours until the
textures are ready.
"""

import math
import threading
from enum import Enum
from typing import Callable, List, Optional

import pygame

from via_romana.config import TILE_SIZE, TEXTURE_VARIANTS
from via_romana.core.errors import TextureLoadError
from via_romana.core.logger import GameLogger

# ============================================================
# COLOR PALETTE
# ============================================================

COLORS = {
    # --- Road stone ---
    "cobble_base":      (169, 169, 169),
    "mortar":           (119, 119, 119),

    # --- Temple ---
    "marble_white":     (255, 255, 255),
    "roof_red":         (139, 0, 0),

    # --- Insula ---
    "door_wood":        (139, 69, 19),
    "window_light":     (240, 230, 140),

    # --- Legionary ---
    "tunic_brown":      (139, 69, 19),
    "helmet_bronze":    (205, 133, 63),
    "shield_red":       (165, 42, 42),

    # --- Coin ---
    "gold":             (255, 215, 0),

    # --- UI ---
    "ui_bg":            (42, 35, 28),
    "ui_border_gold":   (195, 168, 92),
    "ui_text":          (228, 218, 195),
    "ui_text_accent":   (215, 185, 92),
}


# ============================================================
# COBBLESTONE GENERATOR
# ============================================================

def create_cobblestone_texture(size: int, seed: int = 0) -> pygame.Surface:
    """Deterministic cobblestone tile; `seed` selects the variant."""
    if size <= 0:
        raise TextureLoadError(f"Invalid texture size {size}")

    surf = pygame.Surface((size, size))
    surf.fill(COLORS["cobble_base"])

    stone_size = max(4, size // 10)
    gap = 1
    stones_per_row = size // (stone_size + gap)
    base = COLORS["cobble_base"][0]

    for sy in range(stones_per_row):
        for sx in range(stones_per_row):
            stone_x = sx * (stone_size + gap) + gap
            stone_y = sy * (stone_size + gap) + gap

            variation = (sx * 7 + sy * 13 + seed * 17) % 30
            grey = base - variation

            irregularity = (math.sin(sx * 0.7 + sy * 0.9 + seed) * 2 - 1) * 0.5
            actual = max(1, round(stone_size + irregularity))

            pygame.draw.rect(surf, (grey, grey, grey),
                             (stone_x, stone_y, actual, actual))

            # Worn highlight on some stones
            if (sx + sy + seed) % 3 == 0:
                half = max(1, actual // 2)
                shine = pygame.Surface((half, half), pygame.SRCALPHA)
                shine.fill((255, 255, 255, 51))
                surf.blit(shine, (stone_x, stone_y))

    for i in range(1, stones_per_row):
        line = i * (stone_size + gap)
        pygame.draw.line(surf, COLORS["mortar"], (0, line), (size, line))
        pygame.draw.line(surf, COLORS["mortar"], (line, 0), (line, size))

    return surf


# ============================================================
# TEXTURE STORE
# ============================================================

TextureProvider = Callable[[int, int], pygame.Surface]


class TextureState(Enum):
    EMPTY = "empty"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


class TextureStore:
    """Holds the road textures and loads them on a background thread."""

    def __init__(self, tile_size: int = TILE_SIZE, count: int = TEXTURE_VARIANTS,
                 provider: TextureProvider = create_cobblestone_texture) -> None:
        self.tile_size = tile_size
        self.count = count
        self.provider = provider
        self.state = TextureState.EMPTY
        self._textures: List[pygame.Surface] = []
        self._lock = threading.Lock()
        self._thread: Optional[threading.Thread] = None

    @classmethod
    def preloaded(cls, textures: List[pygame.Surface]) -> "TextureStore":
        store = cls(count=len(textures))
        store._textures = list(textures)
        store.state = TextureState.READY
        return store

    def load_async(self) -> None:
        with self._lock:
            if self.state is not TextureState.EMPTY:
                return
            self.state = TextureState.LOADING
        self._thread = threading.Thread(target=self._load, daemon=True)
        self._thread.start()

    def load(self) -> None:
        """Load on the calling thread."""
        with self._lock:
            if self.state is not TextureState.EMPTY:
                return
            self.state = TextureState.LOADING
        self._load()

    def wait(self, timeout: Optional[float] = None) -> None:
        if self._thread is not None:
            self._thread.join(timeout)

    def try_get(self) -> Optional[List[pygame.Surface]]:
        """Textures if ready, else None. Never blocks on loading."""
        with self._lock:
            if self.state is TextureState.READY and self._textures:
                return list(self._textures)
        return None

    def _load(self) -> None:
        logger = GameLogger()
        logger.log_event("TEXTURE", "Loading cobblestone textures...")
        textures = []
        try:
            for i in range(self.count):
                try:
                    textures.append(self.provider(self.tile_size, i))
                except (TextureLoadError, pygame.error) as e:
                    logger.log_warning("TEXTURE", f"Failed to load cobblestone texture {i}: {e}")
        except Exception as e:
            logger.log_error("TEXTURE", f"Failed to load cobblestone textures: {e}")
            with self._lock:
                self.state = TextureState.FAILED
            return

        with self._lock:
            self._textures = textures
            self.state = TextureState.READY
        logger.log_event("TEXTURE", f"Loaded {len(textures)} cobblestone textures")
