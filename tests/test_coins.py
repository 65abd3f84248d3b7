"""Tests for coin spawning and collection."""

import random

from via_romana.config import COIN_VALUE, MIN_COINS
from via_romana.engine.coins import check_collisions, find_dry_tile, spawn_coin, spawn_coins
from via_romana.world.entities import make_coin, make_player
from via_romana.world.generator import WorldGenerator
from via_romana.world.map import GameMap, TileType


def coin_tile(coin, tile_size=40):
    return int(coin.x // tile_size), int(coin.y // tile_size)


def test_coin_sits_quarter_tile_into_its_cell(plain_map, rng):
    coin = spawn_coin(plain_map, rng, tile_size=40)
    tx, ty = coin_tile(coin)
    assert coin.x == tx * 40 + 10
    assert coin.y == ty * 40 + 10


def test_coins_never_spawn_on_water():
    for seed in range(10):
        world = WorldGenerator.generate_rome(30, 20, seed=seed)
        rng = random.Random(seed)
        coins = []
        spawn_coins(coins, 50, world, rng)
        assert len(coins) == 50
        for coin in coins:
            assert not world.is_water(*coin_tile(coin))


def test_spawn_falls_back_to_scan_when_random_tries_run_out():
    world = GameMap(6, 4, fill=TileType.WATER)
    world.set_tile(5, 3, TileType.ROAD)

    class AlwaysWater(random.Random):
        def randrange(self, *args, **kwargs):
            return 0

    assert find_dry_tile(world, AlwaysWater()) == (5, 3)


def test_all_water_map_spawns_nothing(rng):
    world = GameMap(4, 4, fill=TileType.WATER)
    assert find_dry_tile(world, rng) is None
    coins = []
    assert spawn_coins(coins, 3, world, rng) == 0
    assert coins == []


def test_collecting_a_coin_scores_and_keeps_the_floor(plain_map, rng):
    player = make_player(100, 100)
    coins = [make_coin(110, 110)]
    earned = check_collisions(player, coins, plain_map, rng)
    assert earned == COIN_VALUE
    assert len(coins) == MIN_COINS
    assert all(c.x != 110 or c.y != 110 for c in coins)


def test_no_collision_changes_nothing(plain_map, rng):
    player = make_player(0, 0)
    coins = [make_coin(200, 200), make_coin(300, 100)]
    assert check_collisions(player, coins, plain_map, rng) == 0
    assert [(c.x, c.y) for c in coins] == [(200, 200), (300, 100)]


def test_several_coins_in_one_tick(plain_map, rng):
    player = make_player(100, 100)
    far = [make_coin(300 + i, 250) for i in range(20)]
    near = [make_coin(100, 100), make_coin(120, 120), make_coin(95, 95)]
    coins = far[:10] + near + far[10:]
    earned = check_collisions(player, coins, plain_map, rng)
    assert earned == 3 * COIN_VALUE
    # Every far coin survives and no collected coin remains
    for coin in far:
        assert coin in coins
    for coin in near:
        assert all(c is not coin for c in coins)
    assert len(coins) >= MIN_COINS


def test_replacement_only_below_floor(plain_map, rng):
    player = make_player(100, 100)
    coins = [make_coin(300 + i, 250) for i in range(20)] + [make_coin(105, 105)]
    check_collisions(player, coins, plain_map, rng)
    assert len(coins) == 20


def test_edge_touch_collects(plain_map, rng):
    player = make_player(100, 100)
    # Coin's left edge exactly on the player's right edge
    coins = [make_coin(130, 100)]
    assert check_collisions(player, coins, plain_map, rng) == COIN_VALUE


def test_replacement_coins_are_on_dry_land(plain_map, rng):
    player = make_player(100, 100)
    coins = [make_coin(105, 105)]
    check_collisions(player, coins, plain_map, rng)
    for coin in coins:
        assert coin_tile(coin)[0] != 2
