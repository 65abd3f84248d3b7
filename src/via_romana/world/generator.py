"""
World Generator: procedural Roman town.

Passes run in a fixed order and each one writes over the last:

  1. Bare ground
  2. Cardo and Decumanus (3 wide, full span) plus secondary streets
  3. Forum plaza at the crossing, a few smaller piazzas
  4. Insulae (2x2 .. 3x3), only on clear ground with a 1-tile margin
  5. The main temple beside the forum, small shrines on clear ground
  6. The Tiber, which overwrites everything in its bed

Only insulae and shrines look before they build; a rejected site is
skipped, never retried.
"""

import random
from typing import Optional

from .map import GameMap, TileType
from via_romana.core.logger import GameLogger


ROAD_HALF_WIDTH = 1
INTERSECTION_CLEARANCE = 3
PLAZA_CLEARANCE = 10


class WorldGenerator:
    @staticmethod
    def generate_rome(width: int, height: int,
                      seed: Optional[int] = None) -> GameMap:
        logger = GameLogger()
        logger.log_event("WORLD", f"Generating Rome map with dimensions: {width}x{height}")
        rng = random.Random(seed)
        world = GameMap(width, height)

        cardo_x = width // 2
        decumanus_y = height // 2
        logger.log_event("WORLD", f"Main roads: Cardo at x={cardo_x}, Decumanus at y={decumanus_y}")

        WorldGenerator._carve_main_roads(world, cardo_x, decumanus_y)
        WorldGenerator._carve_secondary_roads(world, rng, cardo_x, decumanus_y)
        WorldGenerator._add_plazas(world, rng, cardo_x, decumanus_y)
        WorldGenerator._add_buildings(world, rng)
        WorldGenerator._add_temples(world, rng, cardo_x, decumanus_y)
        WorldGenerator._add_river(world)

        logger.log_event("WORLD", "Map generation complete")
        return world

    @staticmethod
    def river_column(width: int) -> int:
        return max(3, width // 4)

    # ------------------------------------------------------------------
    # Roads
    # ------------------------------------------------------------------

    @staticmethod
    def _carve_column(world, x, skip_near_y=None):
        for y in range(world.height):
            if skip_near_y is not None and abs(y - skip_near_y) <= INTERSECTION_CLEARANCE:
                continue
            for dx in range(-ROAD_HALF_WIDTH, ROAD_HALF_WIDTH + 1):
                world.set_tile(x + dx, y, TileType.ROAD)

    @staticmethod
    def _carve_row(world, y, skip_near_x=None):
        for x in range(world.width):
            if skip_near_x is not None and abs(x - skip_near_x) <= INTERSECTION_CLEARANCE:
                continue
            for dy in range(-ROAD_HALF_WIDTH, ROAD_HALF_WIDTH + 1):
                world.set_tile(x, y + dy, TileType.ROAD)

    @staticmethod
    def _carve_main_roads(world, cardo_x, decumanus_y):
        WorldGenerator._carve_column(world, cardo_x)
        WorldGenerator._carve_row(world, decumanus_y)

    @staticmethod
    def _carve_secondary_roads(world, rng, cardo_x, decumanus_y):
        count = min(3, min(world.width, world.height) // 10)
        GameLogger().log_event("WORLD", f"Adding {count} secondary roads")

        for _ in range(count):
            road_x = rng.randrange(max(1, world.width - 6)) + 3
            WorldGenerator._carve_column(world, road_x, skip_near_y=decumanus_y)

            road_y = rng.randrange(max(1, world.height - 6)) + 3
            WorldGenerator._carve_row(world, road_y, skip_near_x=cardo_x)

    # ------------------------------------------------------------------
    # Plazas
    # ------------------------------------------------------------------

    @staticmethod
    def _stamp_plaza(world, cx, cy, size):
        half = size // 2
        world.fill_rect(cx - half, cy - half, cx + half + 1, cy + half + 1, TileType.ROAD)

    @staticmethod
    def _add_plazas(world, rng, cardo_x, decumanus_y):
        short_side = min(world.width, world.height)

        plaza_size = min(7, short_side // 6)
        GameLogger().log_event("WORLD", f"Adding main plaza of size {plaza_size}")
        WorldGenerator._stamp_plaza(world, cardo_x, decumanus_y, plaza_size)

        count = min(3, short_side // 15)
        small_size = min(5, short_side // 10)
        placed = 0
        for _ in range(count):
            px = rng.randrange(max(1, world.width - 10)) + 5
            py = rng.randrange(max(1, world.height - 10)) + 5
            # Too close to the forum: skip this one
            if abs(px - cardo_x) <= PLAZA_CLEARANCE and abs(py - decumanus_y) <= PLAZA_CLEARANCE:
                continue
            WorldGenerator._stamp_plaza(world, px, py, small_size)
            placed += 1
        GameLogger().log_event("WORLD", f"Added {placed}/{count} smaller plazas")

    # ------------------------------------------------------------------
    # Buildings & temples
    # ------------------------------------------------------------------

    @staticmethod
    def _add_buildings(world, rng):
        target = min(30, world.width * world.height // 40)
        placed = 0

        for _ in range(target):
            w = 2 if rng.random() < 0.5 else 3
            h = 2 if rng.random() < 0.5 else 3
            x = rng.randrange(max(1, world.width - w - 2)) + 1
            y = rng.randrange(max(1, world.height - h - 2)) + 1

            if not world.area_is_empty(x, y, w, h, buffer=1):
                continue
            world.fill_rect(x, y, x + w, y + h, TileType.BUILDING)
            placed += 1

        GameLogger().log_event("WORLD", f"Added {placed}/{target} buildings")

    @staticmethod
    def _add_temples(world, rng, cardo_x, decumanus_y):
        main_x = min(cardo_x + 5, world.width - 4)
        main_y = min(decumanus_y + 5, world.height - 4)
        temple_w = min(4, world.width - main_x)
        temple_h = min(4, world.height - main_y)
        GameLogger().log_event("WORLD", f"Adding main temple at ({main_x}, {main_y})")
        world.fill_rect(main_x, main_y, main_x + temple_w, main_y + temple_h, TileType.TEMPLE)

        count = min(3, min(world.width, world.height) // 15)
        placed = 0
        for _ in range(count):
            tx = rng.randrange(max(1, world.width - 3))
            ty = rng.randrange(max(1, world.height - 3))
            if not world.area_is_empty(tx, ty, 2, 2, buffer=1):
                continue
            world.fill_rect(tx, ty, tx + 2, ty + 2, TileType.TEMPLE)
            placed += 1
        GameLogger().log_event("WORLD", f"Added {placed}/{count} smaller temples")

    # ------------------------------------------------------------------
    # Water
    # ------------------------------------------------------------------

    @staticmethod
    def _add_river(world):
        river_x = WorldGenerator.river_column(world.width)
        GameLogger().log_event("WORLD", f"Adding Tiber river at x={river_x}")

        for y in range(world.height):
            for dx in (-1, 0, 1):
                world.set_tile(river_x + dx, y, TileType.WATER)
            # Bulges give the bed a slight meander
            if y % 5 == 0:
                world.set_tile(river_x + 2, y, TileType.WATER)
            if y % 7 == 0:
                world.set_tile(river_x - 2, y, TileType.WATER)
