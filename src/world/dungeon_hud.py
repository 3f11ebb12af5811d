"""Dungeon HUD: FPS and the live darkness settings, drawn above the overlay."""

from __future__ import annotations

from typing import List

from lighting.darkness import DarknessController

HELP_TEXT = "F toggle  +/- radius  [/] gradient  PgUp/PgDn darkness"


def settings_lines(controller: DarknessController) -> List[str]:
    cfg = controller.config
    state = "ON" if cfg.enabled else "OFF"
    return [
        f"Darkness {state}",
        f"radius {cfg.light_radius:.0f}px  gradient {cfg.gradient_width:.0f}px  "
        f"opacity {cfg.darkness_opacity:.0f}/255",
    ]


class DungeonHUD:
    def __init__(self, scene, text) -> None:
        self.scene = scene
        self.text = text

    def draw(self, fps: float = 0.0) -> None:  # pragma: no cover - visual
        y = 8
        _, h = self.text.draw_label("fps", f"FPS {fps:.0f}", 8, y)
        y += h + 2
        for i, line in enumerate(settings_lines(self.scene.darkness)):
            _, h = self.text.draw_label(f"darkness{i}", line, 8, y, (230, 210, 160, 255))
            y += h + 2
        self.text.draw_label("help", HELP_TEXT, 8, y, (160, 160, 160, 255))
