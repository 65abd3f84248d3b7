import os
import random

# Headless pygame for every test
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from via_romana.core import logger as game_logger
from via_romana.world.map import GameMap, TileType


@pytest.fixture(autouse=True, scope="session")
def log_dir(tmp_path_factory):
    """Keep the day's log file out of the working directory."""
    path = tmp_path_factory.mktemp("logs")
    game_logger.LOG_DIR = str(path)
    game_logger.GameLogger._instance = None
    return path


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def plain_map():
    """10x8 map, all ground, with a water column at x=2."""
    world = GameMap(10, 8)
    world.fill_rect(2, 0, 3, 8, TileType.WATER)
    return world
