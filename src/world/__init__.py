"""World package: re-export common symbols for simpler imports.

Callers can import public types from `world` directly, e.g.:

    from world import DungeonScene, TileMap, Player
"""

from .dungeon_scene import DungeonScene, KEY_BINDINGS
from .dungeon_hud import DungeonHUD, settings_lines
from .player import Player
from .tile_map import TileMap, FLOOR, WALL
from .viewport import Viewport, SubjectOnScreen

__all__ = [
    "DungeonScene",
    "KEY_BINDINGS",
    "DungeonHUD",
    "settings_lines",
    "Player",
    "TileMap",
    "FLOOR",
    "WALL",
    "Viewport",
    "SubjectOnScreen",
]
