import math
from typing import Tuple

from via_romana.config import TILE_SIZE, GAME_WIDTH, GAME_HEIGHT


def compute_camera_offset(player, viewport_w: int, viewport_h: int,
                          map_w_px: int, map_h_px: int) -> Tuple[float, float]:
    """Centre the viewport on the player's box, clamped to the map.

    On an axis where the map is narrower than the viewport the offset
    is pinned to 0.
    """
    cx, cy = player.center
    offset_x = cx - viewport_w / 2
    offset_y = cy - viewport_h / 2

    max_x = max(0, map_w_px - viewport_w)
    max_y = max(0, map_h_px - viewport_h)

    return max(0, min(offset_x, max_x)), max(0, min(offset_y, max_y))


class Camera:
    """Follows the player; offsets are derived, never set directly."""

    def __init__(self, map_width_px, map_height_px,
                 viewport_w=GAME_WIDTH, viewport_h=GAME_HEIGHT,
                 tile_size=TILE_SIZE):
        self.scroll_x = 0.0
        self.scroll_y = 0.0
        self.map_w = map_width_px
        self.map_h = map_height_px
        self.viewport_w = viewport_w
        self.viewport_h = viewport_h
        self.tile_size = tile_size

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def follow(self, player):
        """Recompute the offset from the player's current position."""
        self.scroll_x, self.scroll_y = compute_camera_offset(
            player, self.viewport_w, self.viewport_h, self.map_w, self.map_h)

    def resize_viewport(self, width, height):
        self.viewport_w = width
        self.viewport_h = height

    def set_map_size(self, map_width_px, map_height_px):
        self.map_w = map_width_px
        self.map_h = map_height_px

    @property
    def offset(self):
        return self.scroll_x, self.scroll_y

    def apply(self, x, y):
        """World Pixels → Screen Pixels."""
        return int(x - self.scroll_x), int(y - self.scroll_y)

    def unapply(self, sx, sy):
        """Screen Pixels → World Pixels."""
        return sx + self.scroll_x, sy + self.scroll_y

    def get_visible_bounds(self):
        """Returns (min_x, min_y, max_x, max_y) in tile indices, max exclusive.

        Not clipped to the grid; callers skip indices outside it.
        """
        ts = self.tile_size
        min_x = math.floor(self.scroll_x / ts)
        min_y = math.floor(self.scroll_y / ts)
        max_x = math.ceil((self.scroll_x + self.viewport_w) / ts)
        max_y = math.ceil((self.scroll_y + self.viewport_h) / ts)
        return min_x, min_y, max_x, max_y
