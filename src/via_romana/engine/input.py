"""
Input: turns pygame events into game intents.

The engine never sees pygame events; it consumes InputEvent values.
Movement keys produce MOVE events while the session runs. While it is
stopped, any key or click produces START instead.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

import pygame

from via_romana.config import DOUBLE_CLICK_MS
from via_romana.world.entities import Direction


class InputKind(Enum):
    MOVE = "move"
    START = "start"
    RESTART = "restart"
    EXIT_FULLSCREEN = "exit_fullscreen"
    TOGGLE_FULLSCREEN = "toggle_fullscreen"
    QUIT = "quit"


@dataclass(frozen=True)
class InputEvent:
    kind: InputKind
    direction: Optional[Direction] = None
    pressed: bool = False


KEY_BINDINGS = {
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
}


def move(direction: Direction, pressed: bool) -> InputEvent:
    return InputEvent(InputKind.MOVE, direction, pressed)


class InputTranslator:
    def __init__(self, double_click_ms: int = DOUBLE_CLICK_MS) -> None:
        self.double_click_ms = double_click_ms
        self._last_click_ms: Optional[int] = None

    def translate(self, event, running: bool,
                  now_ms: Optional[int] = None) -> List[InputEvent]:
        if event.type == pygame.QUIT:
            return [InputEvent(InputKind.QUIT)]

        if event.type == pygame.KEYDOWN:
            if not running:
                return [InputEvent(InputKind.START)]
            if event.key in KEY_BINDINGS:
                return [move(KEY_BINDINGS[event.key], True)]
            if event.key == pygame.K_ESCAPE:
                return [InputEvent(InputKind.EXIT_FULLSCREEN)]
            if event.key == pygame.K_r:
                return [InputEvent(InputKind.RESTART)]
            return []

        if event.type == pygame.KEYUP:
            # Releases are honoured even while paused so no key sticks
            if event.key in KEY_BINDINGS:
                return [move(KEY_BINDINGS[event.key], False)]
            return []

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            now = pygame.time.get_ticks() if now_ms is None else now_ms
            events = []
            if not running:
                events.append(InputEvent(InputKind.START))
            last = self._last_click_ms
            if last is not None and now - last <= self.double_click_ms:
                events.append(InputEvent(InputKind.TOGGLE_FULLSCREEN))
                self._last_click_ms = None
            else:
                self._last_click_ms = now
            return events

        return []
