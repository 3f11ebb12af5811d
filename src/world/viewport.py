"""Screen viewport that scrolls to keep the player in view.

Also provides the two per-frame providers the darkness controller reads:
the viewport size and the player's position in screen pixels.
"""

from __future__ import annotations

from typing import Tuple

from config import HEIGHT, WIDTH


class Viewport:
    def __init__(self, width: int = WIDTH, height: int = HEIGHT):
        self.width = width
        self.height = height
        self.scroll_x = 0.0
        self.scroll_y = 0.0

    def current_size(self) -> Tuple[int, int]:
        return self.width, self.height

    def follow(self, x: float, y: float, world_w: float, world_h: float) -> None:
        """Centre on (x, y), clamped so the view never leaves the world.

        A world smaller than the screen is centred instead.
        """
        if world_w <= self.width:
            self.scroll_x = (world_w - self.width) / 2.0
        else:
            self.scroll_x = min(max(0.0, x - self.width / 2.0), world_w - self.width)
        if world_h <= self.height:
            self.scroll_y = (world_h - self.height) / 2.0
        else:
            self.scroll_y = min(max(0.0, y - self.height / 2.0), world_h - self.height)

    def to_screen(self, x: float, y: float) -> Tuple[float, float]:
        return x - self.scroll_x, y - self.scroll_y


class SubjectOnScreen:
    """Screen position of a subject with a ``position`` (world pixels)."""

    def __init__(self, subject, viewport: Viewport):
        self.subject = subject
        self.viewport = viewport

    def current_screen_position(self) -> Tuple[float, float]:
        p = self.subject.position
        return self.viewport.to_screen(p[0], p[1])


__all__ = ["Viewport", "SubjectOnScreen"]
