"""HUD labels drawn as textured quads from pygame font surfaces.

Each label has a key; its texture is re-uploaded only when the text changes,
so per-frame readouts (FPS, settings) stay cheap.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import pygame

Color = Tuple[int, int, int, int]


@dataclass
class _Label:
    tex_id: int
    size: Tuple[int, int] = (0, 0)
    text: Optional[str] = None
    color: Optional[Color] = None


class TextRenderer:
    def __init__(self, font: Optional[pygame.font.Font] = None, size: int = 22) -> None:
        if font is None:
            pygame.font.init()
            font = pygame.font.Font(None, size)
        self.font = font
        self._labels: Dict[str, _Label] = {}

    def _label(self, key: str) -> _Label:  # pragma: no cover - visual
        from OpenGL.GL import glGenTextures

        label = self._labels.get(key)
        if label is None:
            label = _Label(tex_id=glGenTextures(1))
            self._labels[key] = label
        return label

    def _upload(self, label: _Label, text: str, color: Color) -> None:  # pragma: no cover - visual
        from OpenGL.GL import (
            glBindTexture,
            glTexImage2D,
            glTexParameteri,
            GL_TEXTURE_2D,
            GL_TEXTURE_MIN_FILTER,
            GL_TEXTURE_MAG_FILTER,
            GL_LINEAR,
            GL_RGBA,
            GL_UNSIGNED_BYTE,
        )

        surf = self.font.render(text, True, color)
        data = pygame.image.tostring(surf, "RGBA", False)
        w, h = surf.get_size()
        glBindTexture(GL_TEXTURE_2D, label.tex_id)
        glTexImage2D(GL_TEXTURE_2D, 0, GL_RGBA, w, h, 0, GL_RGBA, GL_UNSIGNED_BYTE, data)
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MIN_FILTER, GL_LINEAR)
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MAG_FILTER, GL_LINEAR)
        label.size = (w, h)
        label.text = text
        label.color = color

    def draw_label(
        self,
        key: str,
        text: str,
        x: float,
        y: float,
        color: Color = (255, 255, 255, 255),
    ) -> Tuple[int, int]:  # pragma: no cover - visual
        """Draw ``text`` with its top-left corner at (x, y); returns (w, h)."""
        from OpenGL.GL import (
            glBindTexture,
            glBegin,
            glEnd,
            glEnable,
            glDisable,
            glBlendFunc,
            glColor4f,
            glTexCoord2f,
            glVertex2f,
            GL_TEXTURE_2D,
            GL_BLEND,
            GL_QUADS,
            GL_SRC_ALPHA,
            GL_ONE_MINUS_SRC_ALPHA,
        )

        label = self._label(key)
        if label.text != text or label.color != color:
            self._upload(label, text, color)
        w, h = label.size

        glEnable(GL_TEXTURE_2D)
        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)
        glBindTexture(GL_TEXTURE_2D, label.tex_id)
        glColor4f(1.0, 1.0, 1.0, 1.0)
        # Surface rows were uploaded top-first, so v=0 is the top edge
        glBegin(GL_QUADS)
        glTexCoord2f(0.0, 0.0)
        glVertex2f(x, y)
        glTexCoord2f(1.0, 0.0)
        glVertex2f(x + w, y)
        glTexCoord2f(1.0, 1.0)
        glVertex2f(x + w, y + h)
        glTexCoord2f(0.0, 1.0)
        glVertex2f(x, y + h)
        glEnd()
        glDisable(GL_BLEND)
        glDisable(GL_TEXTURE_2D)
        return w, h
