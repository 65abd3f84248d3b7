import math
from enum import Enum
from typing import Dict, List, Optional, Tuple


class TileType(Enum):
    EMPTY = 0
    ROAD = 1
    BUILDING = 2
    TEMPLE = 3
    WALL = 4
    WATER = 5


TILE_COLORS: Dict[TileType, Tuple[int, int, int]] = {
    TileType.EMPTY:    (139, 115, 85),   # Dirt / ground
    TileType.ROAD:     (169, 169, 169),  # Stone road
    TileType.BUILDING: (205, 133, 63),   # Wooden building
    TileType.TEMPLE:   (245, 245, 220),  # Marble temple
    TileType.WALL:     (105, 105, 105),  # Stone wall
    TileType.WATER:    (70, 130, 180),   # Tiber
}


class GameMap:
    """Rectangular grid of tile types, origin top-left, indexed tiles[y][x]."""

    def __init__(self, width: int, height: int,
                 fill: TileType = TileType.EMPTY) -> None:
        self.width = width
        self.height = height
        self.tiles: List[List[TileType]] = [
            [fill for _ in range(width)] for _ in range(height)
        ]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_tile(self, x: int, y: int) -> Optional[TileType]:
        if self.in_bounds(x, y):
            return self.tiles[y][x]
        return None

    def set_tile(self, x: int, y: int, tile_type: TileType) -> bool:
        """Write one cell; writes outside the grid are dropped."""
        if not self.in_bounds(x, y):
            return False
        self.tiles[y][x] = tile_type
        return True

    def fill_rect(self, x1: int, y1: int, x2: int, y2: int,
                  tile_type: TileType) -> None:
        """Fill [x1, x2) x [y1, y2), clipped to the grid."""
        for y in range(max(0, y1), min(self.height, y2)):
            for x in range(max(0, x1), min(self.width, x2)):
                self.tiles[y][x] = tile_type

    def area_is_empty(self, x: int, y: int, width: int, height: int,
                      buffer: int = 1) -> bool:
        """True if the footprint plus `buffer` tiles around it is all EMPTY.

        Cells of the buffer that fall outside the grid are ignored.
        """
        for cy in range(y - buffer, y + height + buffer):
            for cx in range(x - buffer, x + width + buffer):
                tile = self.get_tile(cx, cy)
                if tile is not None and tile is not TileType.EMPTY:
                    return False
        return True

    def is_water(self, x: int, y: int) -> bool:
        return self.get_tile(x, y) is TileType.WATER

    def count(self, tile_type: TileType) -> int:
        return sum(row.count(tile_type) for row in self.tiles)

    def pixel_size(self, tile_size: int) -> Tuple[int, int]:
        return self.width * tile_size, self.height * tile_size


def calculate_map_size(screen_width: int, screen_height: int,
                       tile_size: int, margin: int = 2) -> Tuple[int, int]:
    """Tiles needed to cover the screen, plus a margin so no edge shows."""
    map_width = math.ceil(screen_width / tile_size) + margin
    map_height = math.ceil(screen_height / tile_size) + margin
    return map_width, map_height
