"""
Window: the pygame shell around the engine.

Owns the display surface, fullscreen switching, the event pump and the
frame clock. Each frame: translate events, tick the engine, draw, flip.
"""

import pygame

from via_romana.config import (
    GAME_WIDTH, GAME_HEIGHT, FPS, TILE_SIZE, MAP_MARGIN_TILES,
    START_FULLSCREEN, RANDOM_SEED, WINDOW_TITLE,
)
from via_romana.core.errors import GameInitError, DisplayModeError
from via_romana.core.logger import GameLogger
from via_romana.engine.input import InputKind, InputTranslator
from via_romana.engine.loop import GameEngine
from via_romana.world.map import calculate_map_size
from .assets import TextureStore
from .hud import ScoreBoard
from .renderer import Renderer


WINDOWED_FLAGS = pygame.RESIZABLE


class GameWindow:
    def __init__(self, fullscreen=START_FULLSCREEN, seed=RANDOM_SEED,
                 tile_size=TILE_SIZE):
        self.logger = GameLogger()
        try:
            pygame.init()
            desktop_w, desktop_h = self._desktop_size()
            self.screen = pygame.display.set_mode((GAME_WIDTH, GAME_HEIGHT), WINDOWED_FLAGS)
        except pygame.error as e:
            raise GameInitError(f"Could not open the game window: {e}") from e
        pygame.display.set_caption(WINDOW_TITLE)

        self.tile_size = tile_size
        self.clock = pygame.time.Clock()
        self.is_fullscreen = False

        # Size the city for the whole screen so fullscreen never shows an edge
        map_size = calculate_map_size(desktop_w, desktop_h, tile_size, MAP_MARGIN_TILES)
        self.logger.log_event("WORLD", f"Map size calculated: {map_size[0]}x{map_size[1]} tiles")

        self.scoreboard = ScoreBoard()
        self.engine = GameEngine(map_size, self.screen.get_size(), tile_size,
                                 seed, score_sink=self.scoreboard)
        self.textures = TextureStore(tile_size)
        self.textures.load_async()
        self.renderer = Renderer(self.screen, self.textures, self.scoreboard)
        self.input = InputTranslator()

        if fullscreen:
            self.enter_fullscreen()
        self.engine.start()

    @staticmethod
    def _desktop_size():
        info = pygame.display.Info()
        if info.current_w > 0 and info.current_h > 0:
            return info.current_w, info.current_h
        return GAME_WIDTH, GAME_HEIGHT

    # ================================================================
    # DISPLAY MODES
    # ================================================================

    def _set_mode(self, size, flags):
        try:
            self.screen = pygame.display.set_mode(size, flags)
        except pygame.error as e:
            raise DisplayModeError(str(e)) from e
        self.renderer.screen = self.screen

    def enter_fullscreen(self):
        try:
            self._set_mode((0, 0), pygame.FULLSCREEN)
        except DisplayModeError as e:
            self.logger.log_error("DISPLAY", f"Error entering fullscreen mode: {e}")
            return False
        self.is_fullscreen = True
        self._apply_resize(*self.screen.get_size())
        return True

    def exit_fullscreen(self):
        try:
            self._set_mode((GAME_WIDTH, GAME_HEIGHT), WINDOWED_FLAGS)
        except DisplayModeError as e:
            self.logger.log_error("DISPLAY", f"Error exiting fullscreen mode: {e}")
            return False
        self.is_fullscreen = False
        self._apply_resize(*self.screen.get_size())
        return True

    def toggle_fullscreen(self):
        if self.is_fullscreen:
            self.exit_fullscreen()
        else:
            self.enter_fullscreen()

    def _apply_resize(self, width, height):
        map_size = None
        if self.is_fullscreen:
            map_size = calculate_map_size(width, height, self.tile_size, MAP_MARGIN_TILES)
        self.engine.resize(width, height, map_size)

    # ================================================================
    # MAIN LOOP
    # ================================================================

    def run(self):
        running = True
        while running:
            self.clock.tick(FPS)

            for event in pygame.event.get():
                if event.type == pygame.VIDEORESIZE and not self.is_fullscreen:
                    self.screen = pygame.display.get_surface()
                    self.renderer.screen = self.screen
                    self._apply_resize(event.w, event.h)
                    continue
                if event.type == pygame.WINDOWFOCUSLOST:
                    self.engine.pause()
                    continue

                for intent in self.input.translate(event, self.engine.running):
                    if intent.kind is InputKind.QUIT:
                        running = False
                    elif intent.kind is InputKind.EXIT_FULLSCREEN:
                        if self.is_fullscreen:
                            self.exit_fullscreen()
                    elif intent.kind is InputKind.TOGGLE_FULLSCREEN:
                        self.logger.log_event("INPUT", "Double-click, toggling fullscreen")
                        self.toggle_fullscreen()
                    else:
                        self.engine.handle_input(intent)

            self.engine.update()
            self.renderer.draw_frame(self.engine.session)
            pygame.display.flip()

        self.logger.log_event("SCORE", f"Session over. Final score: {self.engine.session.score}")
        pygame.quit()
