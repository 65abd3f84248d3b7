"""Tests for the frame renderer, drawn onto an off-screen surface."""

import pygame

from via_romana.engine.loop import new_session
from via_romana.gui.assets import COLORS, TextureStore
from via_romana.gui.hud import ScoreBoard
from via_romana.gui.renderer import Renderer
from via_romana.world.entities import make_coin, make_player
from via_romana.world.map import GameMap, TileType, TILE_COLORS


def rgb(surface, pos):
    return tuple(surface.get_at(pos))[:3]


def make_town():
    """10x5 tiles = 400x200 px, exactly one viewport, so the camera sits at 0."""
    world = GameMap(10, 5)
    world.set_tile(1, 0, TileType.ROAD)
    world.set_tile(2, 0, TileType.ROAD)
    world.set_tile(4, 1, TileType.BUILDING)
    world.set_tile(7, 3, TileType.TEMPLE)
    world.set_tile(9, 0, TileType.WATER)
    session = new_session(viewport=(400, 200), tile_size=40, initial_coins=0, world=world)
    session.coins.append(make_coin(10, 130))
    return session


def draw(session, textures=None, hud=None):
    screen = pygame.Surface((400, 200))
    Renderer(screen, textures or TextureStore(), hud).draw_frame(session)
    return screen


def test_ground_fills_background():
    screen = draw(make_town())
    assert rgb(screen, (20, 180)) == TILE_COLORS[TileType.EMPTY]


def test_roads_fall_back_to_flat_colour_without_textures():
    screen = draw(make_town())
    assert rgb(screen, (60, 20)) == TILE_COLORS[TileType.ROAD]
    assert rgb(screen, (100, 20)) == TILE_COLORS[TileType.ROAD]


def test_roads_use_textures_by_position_once_ready():
    red = pygame.Surface((40, 40))
    red.fill((255, 0, 0))
    blue = pygame.Surface((40, 40))
    blue.fill((0, 0, 255))
    screen = draw(make_town(), TextureStore.preloaded([red, blue]))
    # (1 + 0) % 2 = 1 -> blue, (2 + 0) % 2 = 0 -> red
    assert rgb(screen, (60, 20)) == (0, 0, 255)
    assert rgb(screen, (100, 20)) == (255, 0, 0)


def test_non_road_tiles_get_a_darker_border():
    screen = draw(make_town())
    base = TILE_COLORS[TileType.EMPTY]
    assert rgb(screen, (0, 180)) == tuple(c - 15 for c in base)
    assert rgb(screen, (370, 20)) == TILE_COLORS[TileType.WATER]


def test_building_has_door_and_windows():
    screen = draw(make_town())
    sx, sy = 160, 40
    assert rgb(screen, (sx + 5, sy + 30)) == TILE_COLORS[TileType.BUILDING]
    assert rgb(screen, (sx + 12, sy + 12)) == COLORS["window_light"]
    assert rgb(screen, (sx + 25, sy + 12)) == COLORS["window_light"]
    assert rgb(screen, (sx + 20, sy + 35)) == COLORS["door_wood"]


def test_temple_has_columns_and_roof():
    screen = draw(make_town())
    sx, sy = 280, 120
    assert rgb(screen, (sx + 6, sy + 20)) == COLORS["marble_white"]
    assert rgb(screen, (sx + 32, sy + 20)) == COLORS["marble_white"]
    assert rgb(screen, (sx + 20, sy + 30)) == TILE_COLORS[TileType.TEMPLE]
    # Roof pokes into the tile above
    assert rgb(screen, (sx + 20, sy - 3)) == COLORS["roof_red"]


def test_player_and_coin_are_drawn():
    session = make_town()
    screen = draw(session)
    assert (session.player.x, session.player.y) == (200, 80)
    assert rgb(screen, (215, 95)) == session.player.color
    assert rgb(screen, (210, 77)) == COLORS["helmet_bronze"]
    assert rgb(screen, (197, 95)) == COLORS["shield_red"]
    assert rgb(screen, (17, 137)) == COLORS["gold"]


def test_drawing_follows_camera_offset():
    world = GameMap(20, 5)
    world.set_tile(10, 0, TileType.ROAD)
    session = new_session(viewport=(400, 200), tile_size=40, initial_coins=0, world=world)
    session.player = make_player(770, 80)
    session.camera.follow(session.player)
    assert session.camera.offset == (400, 0)

    screen = draw(session)
    assert rgb(screen, (20, 20)) == TILE_COLORS[TileType.ROAD]
    # Player at world x=770 lands at screen x=370
    assert rgb(screen, (380, 95)) == session.player.color


def test_hud_draws_score_box():
    board = ScoreBoard()
    board(120)
    assert board.score == 120
    screen = draw(make_town(), hud=board)
    assert rgb(screen, (10, 10)) == COLORS["ui_border_gold"]


def test_roof_from_row_below_viewport_is_drawn():
    # 6 rows on a 5-row viewport; the bottom screen edge lands on a tile boundary
    world = GameMap(10, 6)
    world.set_tile(7, 5, TileType.TEMPLE)
    session = new_session(viewport=(400, 200), tile_size=40, initial_coins=0, world=world)
    session.player = make_player(0, 0)
    session.camera.follow(session.player)
    assert session.camera.offset == (0, 0)

    screen = draw(session)
    assert rgb(screen, (300, 197)) == COLORS["roof_red"]
