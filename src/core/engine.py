"""Core engine loop & orchestration.

- Engine: sets up the window, 2D GL state and the main loop.
- Scene: owns world state, per-frame updates and drawing (see core.scene).

The loop is single threaded: events, then update (which ticks the darkness
overlay), then render, then flip.
"""

from __future__ import annotations

import logging

import pygame
from OpenGL.GL import (
    glDisable,
    glLoadIdentity,
    glMatrixMode,
    glOrtho,
    glViewport,
    GL_CULL_FACE,
    GL_DEPTH_TEST,
    GL_MODELVIEW,
    GL_PROJECTION,
)

from config import *
from core.log import configure_logging
from ui.text_renderer import TextRenderer
from world.dungeon_scene import DungeonScene

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------
class Engine:
    def __init__(self):
        configure_logging("DEBUG" if DARKNESS_DEBUG else LOG_LEVEL)
        pygame.init()
        # The darkness overlay cuts its hole with the stencil buffer
        pygame.display.gl_set_attribute(pygame.GL_STENCIL_SIZE, 8)
        pygame.display.gl_set_attribute(pygame.GL_MULTISAMPLEBUFFERS, 1)
        pygame.display.gl_set_attribute(pygame.GL_MULTISAMPLESAMPLES, 4)
        pygame.display.set_caption("Dungeon Darkness")
        flags = pygame.DOUBLEBUF | pygame.OPENGL
        if FULLSCREEN:
            flags |= pygame.FULLSCREEN
        try:
            # vsync: 1 to enable, 0 to disable
            pygame.display.set_mode((WIDTH, HEIGHT), flags, vsync=(1 if VSYNC else 0))
        except (TypeError, pygame.error):
            # Older pygame builds reject the vsync kwarg, or the driver refused it
            pygame.display.set_mode((WIDTH, HEIGHT), flags)
        self.clock = pygame.time.Clock()

        # 2D GL state: pixel coordinates, origin top-left
        glViewport(0, 0, WIDTH, HEIGHT)
        glDisable(GL_DEPTH_TEST)
        glDisable(GL_CULL_FACE)
        glMatrixMode(GL_PROJECTION)
        glLoadIdentity()
        glOrtho(0, WIDTH, HEIGHT, 0, -1, 1)
        glMatrixMode(GL_MODELVIEW)
        glLoadIdentity()

        self.scene = DungeonScene()
        self.scene.attach()

        self.text = TextRenderer()
        logger.info("Engine ready (%dx%d)", WIDTH, HEIGHT)

    # ------------------------------------------------------------------
    def handle_events(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False
            self.scene.handle_event(event)
        return True

    # ------------------------------------------------------------------
    def update(self, dt: float):
        self.scene.update(dt)

    # ------------------------------------------------------------------
    def render(self):  # pragma: no cover - visual
        self.scene.render(show_hud=True, text=self.text, fps=self.clock.get_fps())
        pygame.display.flip()

    # ------------------------------------------------------------------
    def run(self):  # pragma: no cover - visual
        running = True
        while running:
            # Without vsync, tick() just measures; with vsync keep FPS as a cap
            if not VSYNC:
                dt = self.clock.tick() / 1000.0
            else:
                dt = self.clock.tick(FPS) / 1000.0
            running = self.handle_events()
            if not running:
                break
            self.update(dt)
            self.render()
        pygame.quit()
