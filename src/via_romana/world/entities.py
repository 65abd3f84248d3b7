"""
Entities: the legionary and the coins on the map.

Both are axis-aligned boxes in world pixels (top-left corner). Only two
kinds exist, so a kind tag on one dataclass replaces a class hierarchy;
behaviour that differs by kind lives in plain functions.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from via_romana.config import PLAYER_SIZE, PLAYER_SPEED, COIN_SIZE


PLAYER_COLOR = (139, 69, 19)
COIN_COLOR = (255, 215, 0)


class EntityKind(Enum):
    PLAYER = "player"
    COIN = "coin"


class Direction(Enum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


@dataclass
class MovementIntent:
    """Held directions; set by input, read once per tick."""
    left: bool = False
    right: bool = False
    up: bool = False
    down: bool = False

    def set(self, direction: Direction, pressed: bool) -> None:
        setattr(self, direction.value, pressed)

    def clear(self) -> None:
        self.left = self.right = self.up = self.down = False


@dataclass
class Entity:
    kind: EntityKind
    x: float
    y: float
    width: float
    height: float
    color: Tuple[int, int, int]
    velocity_x: float = 0.0
    velocity_y: float = 0.0
    intent: Optional[MovementIntent] = None

    @property
    def center(self) -> Tuple[float, float]:
        return self.x + self.width / 2, self.y + self.height / 2

    def intersects(self, other: "Entity") -> bool:
        """Overlap test; boxes that only touch along an edge still count."""
        return not (
            self.x + self.width < other.x
            or other.x + other.width < self.x
            or self.y + self.height < other.y
            or other.y + other.height < self.y
        )


def make_player(x: float, y: float) -> Entity:
    return Entity(EntityKind.PLAYER, x, y, PLAYER_SIZE, PLAYER_SIZE,
                  PLAYER_COLOR, intent=MovementIntent())


def make_coin(x: float, y: float) -> Entity:
    return Entity(EntityKind.COIN, x, y, COIN_SIZE, COIN_SIZE, COIN_COLOR)


def update_player(player: Entity, map_width_px: int, map_height_px: int,
                  speed: float = PLAYER_SPEED) -> None:
    """Advance the player one tick and keep the whole box inside the map.

    Velocity is rebuilt from the intent flags every tick. Right beats left
    and down beats up when both are held. Diagonals are not normalised.
    """
    intent = player.intent or MovementIntent()

    player.velocity_x = 0.0
    player.velocity_y = 0.0
    if intent.left:
        player.velocity_x = -speed
    if intent.right:
        player.velocity_x = speed
    if intent.up:
        player.velocity_y = -speed
    if intent.down:
        player.velocity_y = speed

    player.x += player.velocity_x
    player.y += player.velocity_y

    clamp_to_map(player, map_width_px, map_height_px)


def clamp_to_map(entity: Entity, map_width_px: int, map_height_px: int) -> None:
    entity.x = max(0, min(entity.x, map_width_px - entity.width))
    entity.y = max(0, min(entity.y, map_height_px - entity.height))
