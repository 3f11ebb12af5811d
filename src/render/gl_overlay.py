"""Screen-space replay of a DrawBatch with OpenGL.

Drawn after the tile world and before the HUD. Holes are written to the
stencil buffer first, then every fill is blended in order wherever the
stencil is still clear, so a hole removes the disc from all layers at once.
"""

from __future__ import annotations

import numpy as np

from config import CIRCLE_SEGMENTS, WIDTH, HEIGHT
from render.draw_batch import CircleFill, CircleHole, DrawBatch, RectFill


def circle_fan(x: float, y: float, radius: float, segments: int = CIRCLE_SEGMENTS) -> np.ndarray:
    """Vertices of a triangle fan: centre first, then the closed rim."""
    angles = np.linspace(0.0, 2.0 * np.pi, segments + 1)
    rim = np.empty((segments + 1, 2), dtype=np.float32)
    rim[:, 0] = x + np.cos(angles) * radius
    rim[:, 1] = y + np.sin(angles) * radius
    return np.vstack((np.array([[x, y]], dtype=np.float32), rim))


class GLMaskOverlay:
    """Owns the DrawBatch the darkness controller writes into each frame."""

    def __init__(
        self,
        batch: DrawBatch | None = None,
        *,
        width: int = WIDTH,
        height: int = HEIGHT,
        segments: int = CIRCLE_SEGMENTS,
    ):
        self.batch = batch if batch is not None else DrawBatch()
        self.width = width
        self.height = height
        self.segments = max(8, int(segments))

    def draw(self):  # pragma: no cover - visual
        if self.batch.is_empty():
            return

        # Local imports to avoid polluting module scope
        from OpenGL.GL import (
            glPushMatrix,
            glPopMatrix,
            glBegin,
            glEnd,
            glOrtho,
            glLoadIdentity,
            glMatrixMode,
            glDisable,
            glEnable,
            glBlendFunc,
            glColor4f,
            glColorMask,
            glVertex2f,
            glClear,
            glStencilFunc,
            glStencilOp,
            GL_PROJECTION,
            GL_MODELVIEW,
            GL_BLEND,
            GL_SRC_ALPHA,
            GL_ONE_MINUS_SRC_ALPHA,
            GL_TEXTURE_2D,
            GL_QUADS,
            GL_TRIANGLE_FAN,
            GL_STENCIL_TEST,
            GL_STENCIL_BUFFER_BIT,
            GL_ALWAYS,
            GL_NOTEQUAL,
            GL_KEEP,
            GL_REPLACE,
            GL_FALSE,
            GL_TRUE,
        )

        def emit_fan(op):
            glBegin(GL_TRIANGLE_FAN)
            for vx, vy in circle_fan(op.x, op.y, op.radius, self.segments):
                glVertex2f(float(vx), float(vy))
            glEnd()

        glMatrixMode(GL_PROJECTION)
        glPushMatrix()
        glLoadIdentity()
        glOrtho(0, self.width, self.height, 0, -1, 1)
        glMatrixMode(GL_MODELVIEW)
        glPushMatrix()
        glLoadIdentity()
        glDisable(GL_TEXTURE_2D)

        # Pass 1: holes into the stencil only
        glClear(GL_STENCIL_BUFFER_BIT)
        glEnable(GL_STENCIL_TEST)
        glColorMask(GL_FALSE, GL_FALSE, GL_FALSE, GL_FALSE)
        glStencilFunc(GL_ALWAYS, 1, 0xFF)
        glStencilOp(GL_KEEP, GL_KEEP, GL_REPLACE)
        for op in self.batch.holes:
            if op.radius > 0:
                emit_fan(op)
        glColorMask(GL_TRUE, GL_TRUE, GL_TRUE, GL_TRUE)

        # Pass 2: fills in draw order outside the holes
        glStencilFunc(GL_NOTEQUAL, 1, 0xFF)
        glStencilOp(GL_KEEP, GL_KEEP, GL_KEEP)
        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)
        for op in self.batch.ops:
            if isinstance(op, RectFill):
                r, g, b = op.color
                glColor4f(r, g, b, op.alpha)
                glBegin(GL_QUADS)
                glVertex2f(op.x, op.y)
                glVertex2f(op.x + op.w, op.y)
                glVertex2f(op.x + op.w, op.y + op.h)
                glVertex2f(op.x, op.y + op.h)
                glEnd()
            elif isinstance(op, CircleFill) and op.radius > 0 and op.alpha > 0:
                r, g, b = op.color
                glColor4f(r, g, b, op.alpha)
                emit_fan(op)
            elif isinstance(op, CircleHole):
                continue

        # Restore state
        glDisable(GL_BLEND)
        glDisable(GL_STENCIL_TEST)
        glPopMatrix()
        glMatrixMode(GL_PROJECTION)
        glPopMatrix()
        glMatrixMode(GL_MODELVIEW)
