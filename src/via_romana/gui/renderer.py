"""
Renderer: Camera-relative 2D Rome
====================================
Draws one frame onto any pygame Surface:
  - Ground colour over the whole viewport
  - Only the tiles inside the camera window
  - Cobblestone textures on roads once loaded, flat colour before
  - Temple columns and roofs, insula doors and windows
  - The legionary, then the coins
  - Score HUD on top
"""

import pygame

from via_romana.world.entities import EntityKind
from via_romana.world.map import TILE_COLORS, TileType
from .assets import COLORS, TextureStore


class Renderer:
    def __init__(self, screen, textures=None, hud=None):
        self.screen = screen
        self.textures = textures if textures is not None else TextureStore()
        self.hud = hud

    def draw_frame(self, session):
        self.screen.fill(TILE_COLORS[TileType.EMPTY])

        self._render_terrain(session)
        self._render_entities(session)

        if self.hud is not None:
            self.hud.draw(self.screen)

    # ================================================================
    # TERRAIN
    # ================================================================

    def _render_terrain(self, session):
        camera = session.camera
        world = session.world
        ts = session.tile_size

        min_x, min_y, max_x, max_y = camera.get_visible_bounds()
        # One extra row and column: temple roofs reach 10px into the tile above
        min_x = max(0, min_x)
        min_y = max(0, min_y)
        max_x = min(world.width, max_x + 1)
        max_y = min(world.height, max_y + 1)

        cobbles = self.textures.try_get()

        for y in range(min_y, max_y):
            for x in range(min_x, max_x):
                tile = world.tiles[y][x]
                sx, sy = camera.apply(x * ts, y * ts)

                if tile is TileType.ROAD:
                    if cobbles:
                        self.screen.blit(cobbles[(x + y) % len(cobbles)], (sx, sy))
                    else:
                        pygame.draw.rect(self.screen, TILE_COLORS[tile], (sx, sy, ts, ts))
                else:
                    color = TILE_COLORS[tile]
                    pygame.draw.rect(self.screen, color, (sx, sy, ts, ts))
                    darker = tuple(max(0, c - 15) for c in color)
                    pygame.draw.rect(self.screen, darker, (sx, sy, ts, ts), 1)

                if tile is TileType.TEMPLE:
                    self._draw_temple(sx, sy, ts)
                elif tile is TileType.BUILDING:
                    self._draw_insula(sx, sy, ts)

    def _draw_temple(self, sx, sy, ts):
        column_h = ts - 10
        pygame.draw.rect(self.screen, COLORS["marble_white"], (sx + 5, sy + 5, 5, column_h))
        pygame.draw.rect(self.screen, COLORS["marble_white"], (sx + ts - 10, sy + 5, 5, column_h))
        pygame.draw.polygon(self.screen, COLORS["roof_red"],
                            [(sx, sy), (sx + ts // 2, sy - 10), (sx + ts, sy)])

    def _draw_insula(self, sx, sy, ts):
        pygame.draw.rect(self.screen, COLORS["door_wood"], (sx + ts // 2 - 5, sy + ts - 15, 10, 15))
        pygame.draw.rect(self.screen, COLORS["window_light"], (sx + 10, sy + 10, 8, 8))
        pygame.draw.rect(self.screen, COLORS["window_light"], (sx + ts - 18, sy + 10, 8, 8))

    # ================================================================
    # ENTITIES
    # ================================================================

    def _render_entities(self, session):
        self._draw_entity(session.player, session.camera)
        for coin in session.coins:
            self._draw_entity(coin, session.camera)

    def _draw_entity(self, entity, camera):
        sx, sy = camera.apply(entity.x, entity.y)
        w, h = int(entity.width), int(entity.height)

        if entity.kind is EntityKind.PLAYER:
            # Legionary: tunic, helmet, shield
            pygame.draw.rect(self.screen, entity.color, (sx, sy, w, h))
            pygame.draw.rect(self.screen, COLORS["helmet_bronze"], (sx + 5, sy - 5, w - 10, 5))
            pygame.draw.rect(self.screen, COLORS["shield_red"], (sx - 5, sy + 5, 5, h - 10))
        elif entity.kind is EntityKind.COIN:
            pygame.draw.circle(self.screen, entity.color,
                               (sx + w // 2, sy + h // 2), w // 2)
