"""Tile grid for the dungeon floor plan.

Tiles are stored in a numpy array (``FLOOR`` / ``WALL``), rows first. The
border is always solid and a small area around the spawn tile is kept
clear so the player never starts boxed in.
"""

from __future__ import annotations

from typing import Iterator, Optional, Tuple

import numpy as np

from config import (
    MAP_COLS,
    MAP_ROWS,
    MAP_SEED,
    SPAWN_CLEAR_RADIUS,
    TILE_SIZE,
    WALL_DENSITY,
)

FLOOR = 0
WALL = 1

FLOOR_COLOR = (0.32, 0.29, 0.25)
WALL_COLOR = (0.16, 0.15, 0.17)


class TileMap:
    def __init__(self, tiles: np.ndarray, tile_size: int = TILE_SIZE):
        self.tiles = np.asarray(tiles, dtype=np.uint8)
        self.tile_size = tile_size
        self.rows, self.cols = self.tiles.shape
        # Per-tile brightness jitter so the floor doesn't look flat
        rng = np.random.default_rng(self.rows * 7919 + self.cols)
        self._shade = rng.uniform(0.85, 1.1, size=self.tiles.shape).astype(np.float32)

    @classmethod
    def generate(
        cls,
        cols: int = MAP_COLS,
        rows: int = MAP_ROWS,
        *,
        density: float = WALL_DENSITY,
        seed: Optional[int] = MAP_SEED,
        tile_size: int = TILE_SIZE,
    ) -> "TileMap":
        rng = np.random.default_rng(seed)
        tiles = np.where(rng.random((rows, cols)) < density, WALL, FLOOR).astype(np.uint8)
        tiles[0, :] = WALL
        tiles[-1, :] = WALL
        tiles[:, 0] = WALL
        tiles[:, -1] = WALL

        tile_map = cls(tiles, tile_size)
        sc, sr = tile_map.spawn_tile
        r = SPAWN_CLEAR_RADIUS
        tile_map.tiles[
            max(1, sr - r) : min(rows - 1, sr + r + 1),
            max(1, sc - r) : min(cols - 1, sc + r + 1),
        ] = FLOOR
        return tile_map

    # ------------------------------------------------------------------
    @property
    def pixel_size(self) -> Tuple[int, int]:
        return self.cols * self.tile_size, self.rows * self.tile_size

    @property
    def spawn_tile(self) -> Tuple[int, int]:
        return self.cols // 2, self.rows // 2

    @property
    def spawn_point(self) -> Tuple[float, float]:
        """Pixel centre of the spawn tile."""
        c, r = self.spawn_tile
        return (c + 0.5) * self.tile_size, (r + 0.5) * self.tile_size

    def is_wall(self, col: int, row: int) -> bool:
        # Anything off the map counts as solid
        if col < 0 or row < 0 or col >= self.cols or row >= self.rows:
            return True
        return bool(self.tiles[row, col] == WALL)

    def blocked(self, x: float, y: float, w: float, h: float) -> bool:
        """True if the pixel rect (x, y, w, h) overlaps any wall tile."""
        ts = self.tile_size
        c0, c1 = int(x // ts), int((x + w - 1e-6) // ts)
        r0, r1 = int(y // ts), int((y + h - 1e-6) // ts)
        for row in range(r0, r1 + 1):
            for col in range(c0, c1 + 1):
                if self.is_wall(col, row):
                    return True
        return False

    def visible_tiles(
        self, scroll_x: float, scroll_y: float, width: float, height: float
    ) -> Iterator[Tuple[int, int, int]]:
        """Yield (col, row, kind) for tiles overlapping the view rect."""
        ts = self.tile_size
        c0 = max(0, int(scroll_x // ts))
        r0 = max(0, int(scroll_y // ts))
        c1 = min(self.cols - 1, int((scroll_x + width) // ts))
        r1 = min(self.rows - 1, int((scroll_y + height) // ts))
        for row in range(r0, r1 + 1):
            for col in range(c0, c1 + 1):
                yield col, row, int(self.tiles[row, col])

    def draw(self, scroll_x: float, scroll_y: float, width: float, height: float):  # pragma: no cover - visual
        from OpenGL.GL import glBegin, glEnd, glColor3f, glVertex2f, GL_QUADS

        ts = self.tile_size
        glBegin(GL_QUADS)
        for col, row, kind in self.visible_tiles(scroll_x, scroll_y, width, height):
            base = WALL_COLOR if kind == WALL else FLOOR_COLOR
            s = float(self._shade[row, col])
            glColor3f(base[0] * s, base[1] * s, base[2] * s)
            x = col * ts - scroll_x
            y = row * ts - scroll_y
            glVertex2f(x, y)
            glVertex2f(x + ts, y)
            glVertex2f(x + ts, y + ts)
            glVertex2f(x, y + ts)
        glEnd()
