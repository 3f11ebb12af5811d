"""Top-down tile dungeon with a darkness overlay that follows the player.

The scene owns the map, the player, the scrolling viewport and the darkness
controller. It hands the controller its providers up front, attaches the
overlay once, and ticks it every frame after the player has moved so the
light never lags a frame behind.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Optional, Tuple

import pygame

from config import BACKGROUND, HEIGHT, WIDTH
from core.scene import Scene
from lighting.commands import CommandError, dispatch, nudge
from lighting.darkness import DarknessConfig, DarknessController
from render.gl_overlay import GLMaskOverlay
from world.dungeon_hud import DungeonHUD
from world.player import Player
from world.tile_map import TileMap
from world.viewport import SubjectOnScreen, Viewport

logger = logging.getLogger(__name__)

# key -> (command, step); a step of None means toggle
KEY_BINDINGS: Dict[int, Tuple[str, Optional[float]]] = {
    pygame.K_f: ("toggleDarkness", None),
    pygame.K_EQUALS: ("setLightRadius", 10.0),
    pygame.K_PLUS: ("setLightRadius", 10.0),
    pygame.K_KP_PLUS: ("setLightRadius", 10.0),
    pygame.K_MINUS: ("setLightRadius", -10.0),
    pygame.K_KP_MINUS: ("setLightRadius", -10.0),
    pygame.K_RIGHTBRACKET: ("setGradientSize", 5.0),
    pygame.K_LEFTBRACKET: ("setGradientSize", -5.0),
    pygame.K_PAGEUP: ("setDarknessLevel", 15.0),
    pygame.K_PAGEDOWN: ("setDarknessLevel", -15.0),
}


class DungeonScene(Scene):
    def __init__(
        self,
        tile_map: Optional[TileMap] = None,
        *,
        darkness_config: Optional[DarknessConfig] = None,
        width: int = WIDTH,
        height: int = HEIGHT,
        keys_fn: Callable[[], object] = pygame.key.get_pressed,
    ) -> None:
        super().__init__()
        self.tile_map = tile_map or TileMap.generate()
        self.player = Player(self.tile_map)
        self.viewport = Viewport(width, height)
        self.keys_fn = keys_fn
        self._follow_player()

        self.darkness = DarknessController(
            darkness_config,
            position_provider=SubjectOnScreen(self.player, self.viewport),
            viewport_provider=self.viewport,
        )
        self.overlay: Optional[GLMaskOverlay] = None
        self._hud: Optional[DungeonHUD] = None

    def _follow_player(self) -> None:
        world_w, world_h = self.tile_map.pixel_size
        self.viewport.follow(self.player.position.x, self.player.position.y, world_w, world_h)

    # ------------------------------------------------------------------
    def attach(self) -> None:
        if self.attached:
            return
        super().attach()
        self.overlay = GLMaskOverlay(width=self.viewport.width, height=self.viewport.height)
        self.overlays.append(self.overlay)
        self.darkness.attach(self.overlay.batch)
        logger.info(
            "Dungeon scene attached (%dx%d tiles)", self.tile_map.cols, self.tile_map.rows
        )

    def update(self, dt: float):
        self.player.update(self.keys_fn(), dt)
        self._follow_player()
        super().update(dt)
        self.darkness.tick()

    def run_command(self, name: str, args=None) -> None:
        try:
            dispatch(self.darkness, name, args)
        except CommandError:
            logger.exception("Darkness command failed")

    def handle_event(self, event) -> None:
        if event.type != pygame.KEYDOWN:
            return
        binding = KEY_BINDINGS.get(event.key)
        if binding is None:
            return
        name, step = binding
        try:
            if step is None:
                dispatch(self.darkness, name, {"enabled": not self.darkness.enabled})
            else:
                nudge(self.darkness, name, step)
        except CommandError:
            logger.exception("Key binding %s failed", name)

    # ------------------------------------------------------------------
    def render(self, show_hud: bool = True, text=None, fps: float = 0.0):  # pragma: no cover - visual
        from OpenGL.GL import glClear, glClearColor, GL_COLOR_BUFFER_BIT

        glClearColor(*BACKGROUND)
        glClear(GL_COLOR_BUFFER_BIT)
        sx, sy = self.viewport.scroll_x, self.viewport.scroll_y
        self.tile_map.draw(sx, sy, self.viewport.width, self.viewport.height)
        self.player.draw(sx, sy)
        self.draw()

        if show_hud and text is not None:
            if self._hud is None:
                self._hud = DungeonHUD(self, text)
            self._hud.draw(fps)
