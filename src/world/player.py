"""Player movement on the tile map.

Position is the point between the player's feet, in world pixels. Walls
block movement; a blocked diagonal move slides along whichever axis is
still free.
"""

from __future__ import annotations

import math
from typing import Tuple

import pygame
from pygame.math import Vector2

from config import PLAYER_SIZE, PLAYER_SPEED
from world.tile_map import TileMap

LEFT_KEYS = (pygame.K_LEFT, pygame.K_a)
RIGHT_KEYS = (pygame.K_RIGHT, pygame.K_d)
UP_KEYS = (pygame.K_UP, pygame.K_w)
DOWN_KEYS = (pygame.K_DOWN, pygame.K_s)


def _pressed(keys, codes) -> bool:
    return any(keys[c] for c in codes)


class Player:
    def __init__(
        self,
        tile_map: TileMap,
        position: Tuple[float, float] | None = None,
        *,
        size: float = PLAYER_SIZE,
        speed: float = PLAYER_SPEED,
    ):
        self.tile_map = tile_map
        self.size = size
        self.speed = speed
        if position is None:
            sx, sy = tile_map.spawn_point
            position = (sx, sy + size * 0.5)
        self.position = Vector2(position)
        self.facing = Vector2(0, 1)

    # ------------------------------------------------------------------
    def rect_at(self, pos: Vector2) -> Tuple[float, float, float, float]:
        half = self.size * 0.5
        return pos.x - half, pos.y - self.size, self.size, self.size

    def _fits(self, pos: Vector2) -> bool:
        return not self.tile_map.blocked(*self.rect_at(pos))

    def move(self, dx: float, dy: float) -> bool:
        """Try to move by (dx, dy). Returns True if the player moved at all."""
        old = Vector2(self.position)
        target = old + Vector2(dx, dy)
        if self._fits(target):
            self.position = target
            return True
        # Slide along X only, then along Y only
        pos_x = Vector2(target.x, old.y)
        if dx and self._fits(pos_x):
            self.position = pos_x
            return True
        pos_y = Vector2(old.x, target.y)
        if dy and self._fits(pos_y):
            self.position = pos_y
            return True
        return False

    def direction_from_keys(self, keys) -> Vector2:
        d = Vector2(
            float(_pressed(keys, RIGHT_KEYS)) - float(_pressed(keys, LEFT_KEYS)),
            float(_pressed(keys, DOWN_KEYS)) - float(_pressed(keys, UP_KEYS)),
        )
        if d.length_squared() > 0:
            d = d.normalize()
        return d

    def update(self, keys, dt: float) -> None:
        d = self.direction_from_keys(keys)
        if d.length_squared() == 0 or dt <= 0 or not math.isfinite(dt):
            return
        self.facing = Vector2(d)
        step = d * self.speed * dt
        self.move(step.x, step.y)

    def draw(self, scroll_x: float, scroll_y: float):  # pragma: no cover - visual
        from OpenGL.GL import glBegin, glEnd, glColor3f, glVertex2f, GL_QUADS

        x, y, w, h = self.rect_at(self.position)
        x -= scroll_x
        y -= scroll_y
        glColor3f(0.85, 0.7, 0.45)
        glBegin(GL_QUADS)
        glVertex2f(x, y)
        glVertex2f(x + w, y)
        glVertex2f(x + w, y + h)
        glVertex2f(x, y + h)
        glEnd()
