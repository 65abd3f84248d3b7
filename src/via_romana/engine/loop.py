"""
Game Engine: the per-frame orchestrator.

Tick order:
  1. Apply queued input to the player's intent flags
  2. Move the player (clamped to the map)
  3. Re-centre the camera on the player
  4. Collect overlapped coins, replenish, add to the score

Rendering is a separate call made by the window after each tick.
All state lives in one GameSession; nothing here touches pygame.
"""

import random
import time
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional, Tuple

from via_romana.config import (
    DEFAULT_MAP_WIDTH, DEFAULT_MAP_HEIGHT, GAME_WIDTH, GAME_HEIGHT,
    TILE_SIZE, INITIAL_COINS, PLAYER_SPEED, RANDOM_SEED,
)
from via_romana.core.logger import GameLogger
from via_romana.engine.coins import check_collisions, spawn_coins
from via_romana.engine.input import InputEvent, InputKind
from via_romana.gui.camera import Camera
from via_romana.world.entities import Entity, clamp_to_map, make_player, update_player
from via_romana.world.generator import WorldGenerator
from via_romana.world.map import GameMap


ScoreSink = Callable[[int], None]


@dataclass
class GameSession:
    world: GameMap
    player: Entity
    camera: Camera
    rng: random.Random
    tile_size: int = TILE_SIZE
    coins: List[Entity] = field(default_factory=list)
    score: int = 0
    tick_count: int = 0

    @property
    def map_size_px(self) -> Tuple[int, int]:
        return self.world.pixel_size(self.tile_size)


def _coin_rng(seed: Optional[int]) -> random.Random:
    return random.Random(None if seed is None else seed + 1)


def new_session(map_width: int = DEFAULT_MAP_WIDTH,
                map_height: int = DEFAULT_MAP_HEIGHT,
                viewport: Tuple[int, int] = (GAME_WIDTH, GAME_HEIGHT),
                tile_size: int = TILE_SIZE,
                seed: Optional[int] = RANDOM_SEED,
                initial_coins: int = INITIAL_COINS,
                world: Optional[GameMap] = None) -> GameSession:
    """Build a fresh session: map, player on the centre tile, starting coins."""
    if world is None:
        world = WorldGenerator.generate_rome(map_width, map_height, seed)

    player = make_player((world.width // 2) * tile_size,
                         (world.height // 2) * tile_size)
    camera = Camera(world.width * tile_size, world.height * tile_size,
                    viewport[0], viewport[1], tile_size)
    session = GameSession(world=world, player=player, camera=camera,
                          rng=_coin_rng(seed), tile_size=tile_size)
    spawn_coins(session.coins, initial_coins, world, session.rng, tile_size)
    camera.follow(player)
    return session


def apply_input(session: GameSession, event: InputEvent) -> None:
    if event.kind is InputKind.MOVE and session.player.intent is not None:
        session.player.intent.set(event.direction, event.pressed)


def step(session: GameSession, events: Iterable[InputEvent] = (),
         dt: float = 0.0, speed: float = PLAYER_SPEED) -> GameSession:
    """Advance one tick. Movement is per tick, so `dt` only feeds bookkeeping."""
    for event in events:
        apply_input(session, event)

    map_w, map_h = session.map_size_px
    update_player(session.player, map_w, map_h, speed)
    session.camera.follow(session.player)

    session.score += check_collisions(session.player, session.coins,
                                      session.world, session.rng,
                                      session.tile_size)
    session.tick_count += 1
    return session


class GameEngine:
    """Owns the session and its lifecycle: start, pause, restart, resize."""

    def __init__(self, map_size: Tuple[int, int] = (DEFAULT_MAP_WIDTH, DEFAULT_MAP_HEIGHT),
                 viewport: Tuple[int, int] = (GAME_WIDTH, GAME_HEIGHT),
                 tile_size: int = TILE_SIZE,
                 seed: Optional[int] = RANDOM_SEED,
                 score_sink: Optional[ScoreSink] = None,
                 clock: Callable[[], float] = time.perf_counter) -> None:
        self.tile_size = tile_size
        self.seed = seed
        self.score_sink = score_sink
        self.clock = clock

        self.running: bool = False
        self.elapsed: float = 0.0
        self._last_time: Optional[float] = None
        self._pending: List[InputEvent] = []
        self._viewport = viewport

        self.session = new_session(map_size[0], map_size[1], viewport,
                                   tile_size, seed)
        self._publish_score()

    @property
    def world(self) -> GameMap:
        return self.session.world

    # ================================================================
    # LIFECYCLE
    # ================================================================

    def start(self) -> None:
        if self.running:
            return
        self.running = True
        self._last_time = self.clock()
        GameLogger().log_event("ENGINE", "Game started")

    def pause(self) -> None:
        if not self.running:
            return
        self.running = False
        self._last_time = None
        GameLogger().log_event("ENGINE", "Game paused")

    def resume(self) -> None:
        self.start()

    def restart(self) -> None:
        self.pause()
        world = self.session.world
        self.session = new_session(world.width, world.height, self._viewport,
                                   self.tile_size, self.seed)
        self._pending.clear()
        self._publish_score()
        GameLogger().log_event("ENGINE", "Game restarted")
        self.start()

    def resize(self, viewport_w: int, viewport_h: int,
               map_size: Optional[Tuple[int, int]] = None) -> None:
        """Apply a new viewport; regenerate the map if its tile size changed.

        The replacement map is built completely before it is swapped in.
        """
        session = self.session
        self._viewport = (viewport_w, viewport_h)
        session.camera.resize_viewport(viewport_w, viewport_h)

        if map_size is not None and map_size != (session.world.width, session.world.height):
            self._regenerate(*map_size)

        session.camera.follow(session.player)

    def _regenerate(self, width: int, height: int) -> None:
        session = self.session
        world = WorldGenerator.generate_rome(width, height, self.seed)
        ts = session.tile_size

        session.world = world
        session.camera.set_map_size(width * ts, height * ts)
        clamp_to_map(session.player, width * ts, height * ts)

        kept = []
        for coin in session.coins:
            tx, ty = int(coin.x // ts), int(coin.y // ts)
            if world.in_bounds(tx, ty) and not world.is_water(tx, ty):
                kept.append(coin)
        session.coins = kept
        if len(kept) < INITIAL_COINS:
            spawn_coins(session.coins, INITIAL_COINS - len(kept), world, session.rng, ts)

        GameLogger().log_event("ENGINE", f"Map regenerated at {width}x{height}")

    # ================================================================
    # INPUT & UPDATE
    # ================================================================

    def handle_input(self, event: InputEvent) -> bool:
        """Consume engine-level input. Returns False for window-level events."""
        if event.kind is InputKind.MOVE:
            if self.running:
                self._pending.append(event)
            else:
                # Releases still land while stopped so no key sticks
                apply_input(self.session, event)
            return True
        if event.kind is InputKind.START:
            self.start()
            return True
        if event.kind is InputKind.RESTART:
            self.restart()
            return True
        return False

    def update(self) -> bool:
        """Run one tick if running. Returns True if a tick happened."""
        if not self.running:
            return False

        now = self.clock()
        dt = now - self._last_time if self._last_time is not None else 0.0
        self._last_time = now
        self.elapsed += dt

        events, self._pending = self._pending, []
        previous = self.session.score
        step(self.session, events, dt)

        if self.session.score != previous:
            GameLogger().log_event("SCORE", f"+{self.session.score - previous} denarii, total {self.session.score}")
            self._publish_score()
        return True

    def _publish_score(self) -> None:
        if self.score_sink is not None:
            self.score_sink(self.session.score)
