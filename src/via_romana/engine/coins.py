"""
Coins: spawning on dry land and collection by the player.
"""

import random
from typing import List, Optional

from via_romana.config import (
    COIN_VALUE, MIN_COINS, COIN_SPAWN_ATTEMPT_FACTOR, TILE_SIZE,
)
from via_romana.core.logger import GameLogger
from via_romana.world.entities import Entity, make_coin
from via_romana.world.map import GameMap


def find_dry_tile(world: GameMap, rng: random.Random) -> Optional[tuple]:
    """Pick a random non-water tile.

    Random tries are capped at COIN_SPAWN_ATTEMPT_FACTOR * w * h; after
    that the first dry tile in row order is used. None only if the whole
    map is under water.
    """
    attempts = COIN_SPAWN_ATTEMPT_FACTOR * world.width * world.height
    for _ in range(attempts):
        x = rng.randrange(world.width)
        y = rng.randrange(world.height)
        if not world.is_water(x, y):
            return x, y

    for y in range(world.height):
        for x in range(world.width):
            if not world.is_water(x, y):
                return x, y
    return None


def spawn_coin(world: GameMap, rng: random.Random,
               tile_size: int = TILE_SIZE) -> Optional[Entity]:
    tile = find_dry_tile(world, rng)
    if tile is None:
        GameLogger().log_warning("ENGINE", "No dry tile left, coin not spawned")
        return None
    tx, ty = tile
    return make_coin(tx * tile_size + tile_size / 4, ty * tile_size + tile_size / 4)


def spawn_coins(coins: List[Entity], count: int, world: GameMap,
                rng: random.Random, tile_size: int = TILE_SIZE) -> int:
    """Append up to `count` new coins; returns how many were added."""
    added = 0
    for _ in range(count):
        coin = spawn_coin(world, rng, tile_size)
        if coin is None:
            break
        coins.append(coin)
        added += 1
    return added


def check_collisions(player: Entity, coins: List[Entity], world: GameMap,
                     rng: random.Random, tile_size: int = TILE_SIZE,
                     coin_value: int = COIN_VALUE,
                     min_coins: int = MIN_COINS) -> int:
    """Collect every coin the player overlaps; returns the points earned.

    The scan runs over the coins present at the start of the tick, from
    the last index down. Collected coins are removed once the scan is
    done. A replacement is spawned as each coin is taken if the set would
    otherwise fall under `min_coins`, and the set is topped back up to
    `min_coins` after removal.
    """
    earned = 0
    to_remove = []

    for i in range(len(coins) - 1, -1, -1):
        if not player.intersects(coins[i]):
            continue
        earned += coin_value
        to_remove.append(i)

        if len(coins) - len(to_remove) < min_coins:
            spawn_coins(coins, 1, world, rng, tile_size)

    # Indices were collected high to low, so deleting in order is safe
    for i in to_remove:
        del coins[i]

    if to_remove and len(coins) < min_coins:
        spawn_coins(coins, min_coins - len(coins), world, rng, tile_size)

    return earned
